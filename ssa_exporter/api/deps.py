"""Common dependency functions for API routes."""

from functools import lru_cache

from fastapi import Depends

from ssa_exporter.core.config import Settings, get_settings
from ssa_exporter.services.collector import InventoryCollector
from ssa_exporter.services.ssacli_client import SsacliClient


@lru_cache
def get_ssacli_client() -> SsacliClient:
    settings = get_settings()
    return SsacliClient(binary=settings.ssacli_path, timeout=settings.command_timeout)


def get_inventory_collector(
    client: SsacliClient = Depends(get_ssacli_client),
) -> InventoryCollector:
    return InventoryCollector(client)


def get_app_settings() -> Settings:
    return get_settings()
