"""Shared ssacli output samples and test doubles."""

from __future__ import annotations

import pytest

CONTROLLERS_OUTPUT = """
Smart Array P408i-a in Slot 0 (Embedded)
   Bus Interface: PCI
   Slot: 0
   Serial Number: PEYHB0ARH9O0BZ
   RAID 6 (ADG) Status: Enabled
   Controller Status: OK
   Hardware Revision: B
   Firmware Version: 2.65
   Cache Ratio: 10% Read / 90% Write
   Total Cache Size: 2.0
   Controller Temperature (C): 36
   Cache Module Temperature (C): 29
   PCI Address (Domain:Bus:Device.Function): 0000:5C:00.0
   Negotiated PCIe Data Rate: PCIe 3.0 x8 (7880 MB/s)

"""

ARRAYS_OUTPUT = """
Smart Array P408i-a in Slot 0 (Embedded)

   Array: A
      Interface Type: SAS
      Unused Space: 0  MB (0.00%)
      Used Space: 1.64 TB (100.00%)
      Status: OK
      MultiDomain Status: OK
      Array Type: Data
      Smart Path: disable

   Array: B
      Interface Type: SAS
      Status: Failed Physical Drive
      MultiDomain Status: OK
      Array Type: Data

"""

PHYSICAL_DRIVES_OUTPUT = """
Smart Array P408i-a in Slot 0 (Embedded)

   Array A

      physicaldrive 1I:1:1
         Port: 1I
         Box: 1
         Bay: 1
         Status: OK
         Drive Type: Data Drive
         Size: 600 GB
         Current Temperature (C): 30
         Maximum Temperature (C): 37

      physicaldrive 1I:1:2
         Port: 1I
         Box: 1
         Bay: 2
         Status: Predictive Failure
         Current Temperature (C): 31

   Unassigned

      physicaldrive 2I:1:5
         Port: 2I
         Box: 1
         Bay: 5
         Status: OK
         Drive Type: Unassigned Drive

"""


class DummyClient:
    """ssacli stand-in serving canned output per slot."""

    def __init__(
        self,
        controllers: str = CONTROLLERS_OUTPUT,
        arrays: str = ARRAYS_OUTPUT,
        drives: str = PHYSICAL_DRIVES_OUTPUT,
    ) -> None:
        self._controllers = controllers
        self._arrays = arrays
        self._drives = drives
        self.calls: list[tuple[str, object]] = []

    async def controllers_detail(self) -> str:
        self.calls.append(("controllers", None))
        return self._controllers

    async def arrays_detail(self, slot) -> str:
        self.calls.append(("arrays", slot))
        return self._arrays

    async def physical_drives_detail(self, slot) -> str:
        self.calls.append(("drives", slot))
        return self._drives


@pytest.fixture
def dummy_client() -> DummyClient:
    return DummyClient()
