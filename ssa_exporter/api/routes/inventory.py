"""Endpoints that expose the parsed ssacli inventory."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ssa_exporter.api.deps import get_app_settings, get_inventory_collector
from ssa_exporter.core.config import Settings
from ssa_exporter.schemas import (
    ControllerModel,
    InventoryResponse,
    PhysicalDrivesModel,
    RecordModel,
)
from ssa_exporter.services.collector import InventoryCollector
from ssa_exporter.services.ssacli_client import SsacliError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["inventory"])


@router.get("/inventory", response_model=InventoryResponse)
async def inventory(
    collector: InventoryCollector = Depends(get_inventory_collector),
    settings: Settings = Depends(get_app_settings),
) -> InventoryResponse:
    try:
        result = await collector.collect()
    except SsacliError as exc:
        logger.error("Failed to collect inventory: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    controllers = [
        ControllerModel(
            controller=RecordModel.from_record(item.controller),
            arrays=[RecordModel.from_record(array) for array in item.arrays],
            physical_drives=PhysicalDrivesModel.from_grouped(item.physical_drives),
        )
        for item in result.controllers
    ]
    return InventoryResponse(hostname=settings.hostname, controllers=controllers)
