"""Service that gathers controllers, arrays and drives from ssacli."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from ssa_exporter.services.ssacli_client import (
    ARRAY_HEADER_LINES,
    CONTROLLER_HEADER_LINES,
    PHYSICAL_DRIVE_HEADER_LINES,
    SsacliClient,
)
from ssa_exporter.text_models import GroupedResult, Record, RecordSet
from ssa_exporter.text_parser import parse_grouped, parse_text

logger = logging.getLogger(__name__)


@dataclass
class ControllerInventory:
    """Everything known about one controller."""

    controller: Record
    arrays: RecordSet
    physical_drives: GroupedResult


@dataclass
class Inventory:
    """Parsed state of every controller on the host."""

    controllers: list[ControllerInventory] = field(default_factory=list)


class InventoryCollector:
    """Run the ssacli listings and parse them into an :class:`Inventory`."""

    def __init__(self, client: SsacliClient) -> None:
        self._client = client

    async def controllers(self) -> RecordSet:
        stdout = await self._client.controllers_detail()
        return parse_text(stdout, CONTROLLER_HEADER_LINES)

    async def arrays(self, slot) -> RecordSet:
        stdout = await self._client.arrays_detail(slot)
        return parse_text(stdout, ARRAY_HEADER_LINES)

    async def physical_drives(self, slot) -> GroupedResult:
        stdout = await self._client.physical_drives_detail(slot)
        return GroupedResult(
            controller_slot=slot,
            groups=parse_grouped(stdout, PHYSICAL_DRIVE_HEADER_LINES),
        )

    async def collect(self) -> Inventory:
        """Collect controllers first, then every controller's details concurrently."""

        controllers = await self.controllers()
        logger.debug("Found %d controller(s)", len(controllers))
        details = await asyncio.gather(*(self._collect_controller(item) for item in controllers))
        return Inventory(controllers=list(details))

    async def _collect_controller(self, controller: Record) -> ControllerInventory:
        slot = controller.get("Slot")
        if slot is None:
            logger.warning("Controller %r reports no slot, skipping its arrays and drives", controller.name)
            return ControllerInventory(
                controller=controller,
                arrays=[],
                physical_drives=GroupedResult(controller_slot=""),
            )
        arrays, drives = await asyncio.gather(self.arrays(slot), self.physical_drives(slot))
        logger.debug(
            "Slot %s: %d array(s), %d drive group(s)", slot, len(arrays), len(drives.groups)
        )
        return ControllerInventory(controller=controller, arrays=arrays, physical_drives=drives)
