"""Data model shared by the ssacli text parser and its consumers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

Value = Union[str, int, float]


@dataclass(slots=True)
class Block:
    """Non-blank lines re-based so that the first line starts at column zero.

    Parameters
    ----------
    lines:
        Re-based lines in their original order.
    base_indent:
        Leading whitespace width of the first surviving line, removed from
        every line of the block.
    """

    lines: list[str] = field(default_factory=list)
    base_indent: int = 0

    def __bool__(self) -> bool:
        return bool(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(slots=True)
class Record:
    """One logical entity (controller, array, drive) and its attributes."""

    name: str
    attributes: dict[str, Value] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Value:
        if key == "name":
            return self.name
        return self.attributes[key]

    def __contains__(self, key: object) -> bool:
        return key == "name" or key in self.attributes

    def get(self, key: str, default: Value | None = None) -> Value | None:
        if key == "name":
            return self.name
        return self.attributes.get(key, default)

    def as_dict(self) -> dict[str, Value]:
        return {**self.attributes, "name": self.name}


RecordSet = list[Record]


@dataclass(slots=True)
class GroupedResult:
    """Records grouped by label, tagged with the controller they came from."""

    controller_slot: Value
    groups: dict[str, RecordSet] = field(default_factory=dict)


__all__ = ["Block", "GroupedResult", "Record", "RecordSet", "Value"]
