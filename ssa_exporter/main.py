from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse, Response

from .api.deps import get_app_settings, get_inventory_collector
from .api.routes import health, inventory
from .core.config import Settings, get_settings
from .metrics import CONTENT_TYPE, render_metrics
from .services.collector import InventoryCollector
from .services.ssacli_client import SsacliError

logger = logging.getLogger("ssa_exporter")
logging.basicConfig(level=get_settings().log_level.upper(), format="%(levelname)s %(name)s %(message)s")

app = FastAPI(title=get_settings().app_name)
app.include_router(health.router, prefix="/api")
app.include_router(inventory.router, prefix="/api")

_INDEX_PAGE = (
    "<html><head><title>SSA Exporter</title></head><body><h1>SSA Exporter</h1>"
    '<p><a href="/metrics">Metrics</a></p></body></html>'
)


@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    return _INDEX_PAGE


@app.get("/metrics")
async def metrics(
    collector: InventoryCollector = Depends(get_inventory_collector),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    try:
        result = await collector.collect()
    except SsacliError as exc:
        logger.error("Failed to collect metrics: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return Response(content=render_metrics(result, settings.hostname), media_type=CONTENT_TYPE)


__all__ = ["app"]
