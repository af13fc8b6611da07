"""Async wrapper around the ``ssacli`` command line tool."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from ssa_exporter.text_models import Value

logger = logging.getLogger(__name__)

# Preamble lines printed before the first entity of each listing.
CONTROLLER_HEADER_LINES = 0
ARRAY_HEADER_LINES = 1
PHYSICAL_DRIVE_HEADER_LINES = 1


class SsacliError(RuntimeError):
    """Raised when ssacli cannot be run or exits unsuccessfully."""


class SsacliClient:
    """Runs ssacli detail listings and returns their raw standard output."""

    def __init__(self, binary: str = "ssacli", timeout: float = 30.0) -> None:
        self.binary = binary
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def controllers_detail(self) -> str:
        """Return the output of ``ctrl all show detail``."""

        return await self._run(["ctrl", "all", "show", "detail"])

    async def arrays_detail(self, slot: Value) -> str:
        """Return the output of ``ctrl slot=<slot> array all show detail``."""

        return await self._run(["ctrl", f"slot={slot}", "array", "all", "show", "detail"])

    async def physical_drives_detail(self, slot: Value) -> str:
        """Return the output of ``ctrl slot=<slot> pd all show detail``."""

        return await self._run(["ctrl", f"slot={slot}", "pd", "all", "show", "detail"])

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    async def _run(self, args: Sequence[str]) -> str:
        argv = [self.binary, *args]
        command = " ".join(argv)
        logger.debug("Running %s", command)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise SsacliError(f"Failed to start {self.binary}: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            process.kill()
            await process.wait()
            raise SsacliError(f"'{command}' timed out after {self.timeout:g}s") from exc

        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise SsacliError(f"'{command}' exited with status {process.returncode}: {message}")
        return stdout.decode("utf-8", errors="replace")
