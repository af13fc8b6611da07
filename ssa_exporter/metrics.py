"""Render a collected inventory in the Prometheus text exposition format."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .services.collector import ControllerInventory, Inventory
from .text_models import Record, Value
from .text_parser import group_label

CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

Labels = dict[str, Value]


@dataclass(slots=True)
class MetricFamily:
    """A gauge with its help text and collected samples."""

    name: str
    description: str
    samples: list[tuple[Labels, float | int]] = field(default_factory=list)

    def add(self, labels: Labels, value: float | int | None) -> None:
        if value is None:
            return
        self.samples.append((labels, value))

    def render(self) -> list[str]:
        lines = [f"# HELP {self.name} {self.description}", f"# TYPE {self.name} gauge"]
        for labels, value in self.samples:
            lines.append(f"{self.name}{{{_format_labels(labels)}}} {_format_value(value)}")
        return lines


def escape_label_value(value: Value) -> str:
    """Escape a label value for the exposition format."""

    text = str(value)
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _format_labels(labels: Labels) -> str:
    return ",".join(f'{key}="{escape_label_value(value)}"' for key, value in labels.items())


def _format_value(value: float | int) -> str:
    if isinstance(value, bool):
        return str(int(value))
    return repr(value)


def status_to_int(value: Value | None) -> int:
    """1 for an ``OK`` status, 0 for anything else."""

    return 1 if isinstance(value, str) and value.strip() == "OK" else 0


def _numeric(value: Value | None) -> float | int | None:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return None


def _label(record: Record, key: str) -> Value:
    value = record.get(key)
    return "" if value is None else value


def _controller_labels(hostname: str, controller: Record) -> Labels:
    return {
        "hostname": hostname,
        "slot": _label(controller, "Slot"),
        "serial": _label(controller, "Serial Number"),
    }


def _controller_families(hostname: str, items: Iterable[ControllerInventory]) -> list[MetricFamily]:
    status = MetricFamily("ssa_controller_status", "Controller status (OK = 1)")
    temperature = MetricFamily("ssa_controller_temperature", "Controller temperature")
    cache_temperature = MetricFamily(
        "ssa_controller_cacheModule_temperature", "Controller cache module temperature"
    )
    for item in items:
        controller = item.controller
        labels = _controller_labels(hostname, controller)
        status.add(labels, status_to_int(controller.get("Controller Status")))
        temperature.add(labels, _numeric(controller.get("Controller Temperature (C)")))
        cache_temperature.add(labels, _numeric(controller.get("Cache Module Temperature (C)")))
    return [status, temperature, cache_temperature]


def _array_families(hostname: str, items: Iterable[ControllerInventory]) -> list[MetricFamily]:
    status = MetricFamily("ssa_array_status", "Array status (OK = 1)")
    multi_domain = MetricFamily("ssa_array_multiDomain_status", "Array multi domain status (OK = 1)")
    for item in items:
        base = _controller_labels(hostname, item.controller)
        for array in item.arrays:
            labels = {**base, "array": group_label(array.name)}
            status.add(labels, status_to_int(array.get("Status")))
            multi_domain.add(labels, status_to_int(array.get("MultiDomain Status")))
    return [status, multi_domain]


def _drive_families(hostname: str, items: Iterable[ControllerInventory]) -> list[MetricFamily]:
    status = MetricFamily("ssa_physicalDrive_status", "Physical drive status (OK = 1)")
    temperature = MetricFamily("ssa_physicalDrive_temperature", "Physical drive temperature")
    for item in items:
        base = _controller_labels(hostname, item.controller)
        for array_label, drives in item.physical_drives.groups.items():
            for drive in drives:
                labels = {
                    **base,
                    "array": array_label,
                    "drivePort": _label(drive, "Port"),
                    "driveBox": _label(drive, "Box"),
                    "driveBay": _label(drive, "Bay"),
                }
                status.add(labels, status_to_int(drive.get("Status")))
                temperature.add(labels, _numeric(drive.get("Current Temperature (C)")))
    return [status, temperature]


def build_families(inventory: Inventory, hostname: str) -> list[MetricFamily]:
    """Return every metric family for ``inventory`` in output order."""

    items = inventory.controllers
    return [
        *_controller_families(hostname, items),
        *_array_families(hostname, items),
        *_drive_families(hostname, items),
    ]


def render_metrics(inventory: Inventory, hostname: str) -> str:
    """Return the newline-terminated exposition text for ``inventory``."""

    lines: list[str] = []
    for family in build_families(inventory, hostname):
        lines.extend(family.render())
    return "\n".join(lines) + "\n"


__all__ = [
    "CONTENT_TYPE",
    "MetricFamily",
    "build_families",
    "escape_label_value",
    "render_metrics",
    "status_to_int",
]
