"""Service layer for the application."""

from ssa_exporter.services.collector import ControllerInventory, Inventory, InventoryCollector
from ssa_exporter.services.ssacli_client import SsacliClient, SsacliError

__all__ = [
    "ControllerInventory",
    "Inventory",
    "InventoryCollector",
    "SsacliClient",
    "SsacliError",
]
