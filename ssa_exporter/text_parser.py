"""Parse the indentation-formatted detail output of ``ssacli``.

The tool prints entities as an unindented header followed by indented
``Key: Value`` lines::

    Smart Array P408i-a in Slot 0
       Controller Status: OK
       Controller Temperature (C): 36

Structure is inferred from leading whitespace only. The parser degrades
instead of failing: malformed lines become odd attributes, orphaned lines are
dropped and nothing here raises on bad input.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable

from .text_models import Block, Record, RecordSet, Value

logger = logging.getLogger(__name__)

KEY_VALUE_SEPARATOR = ": "

_number_re = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_integer_re = re.compile(r"[+-]?[0-9]+")


def _split_lines(raw_text: str | Iterable[str]) -> list[str]:
    if isinstance(raw_text, str):
        return raw_text.splitlines()
    lines: list[str] = []
    for chunk in raw_text:
        lines.extend(chunk.splitlines() or [""])
    return lines


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_entity_line(line: str) -> bool:
    return not line[:1].isspace()


def segment(raw_text: str | Iterable[str], header_lines_to_skip: int = 0) -> Block:
    """Drop blank and header lines, then re-base on the first line's indent.

    Lines indented less than the first one are sliced all the same; no
    validation is done on them.
    """

    lines = [line for line in _split_lines(raw_text) if line.strip()]
    lines = lines[header_lines_to_skip:]
    if not lines:
        return Block()

    base_indent = _indent_width(lines[0])
    return Block(lines=[line[base_indent:] for line in lines], base_indent=base_indent)


def coerce_value(raw: str) -> Value:
    """Return ``raw`` as ``int``/``float`` when it is a plain base-10 number."""

    candidate = raw.strip()
    if not _number_re.fullmatch(candidate):
        return raw
    if _integer_re.fullmatch(candidate):
        return int(candidate)
    return float(candidate)


def _split_attribute(line: str) -> tuple[str, Value]:
    key, _, value = line.partition(KEY_VALUE_SEPARATOR)
    return key.strip(), coerce_value(value)


def parse_records(block: Block | Iterable[str]) -> RecordSet:
    """Turn a re-based block into records, one per unindented line."""

    records: RecordSet = []
    current: Record | None = None

    for line in block:
        if not line:
            continue
        if _is_entity_line(line):
            current = Record(name=line)
            records.append(current)
            continue
        if current is None:
            logger.debug("Dropping attribute line before any entity: %r", line)
            continue
        key, value = _split_attribute(line)
        if key in current.attributes:
            logger.debug("Duplicate attribute %r in %r, keeping the last value", key, current.name)
        current.attributes[key] = value

    return records


def parse_text(raw_text: str | Iterable[str], header_lines_to_skip: int = 0) -> RecordSet:
    """Shortcut for ``parse_records(segment(raw_text, header_lines_to_skip))``."""

    return parse_records(segment(raw_text, header_lines_to_skip))


def group_label(header: str) -> str:
    """Label of a group header: ``"Array A"`` -> ``"A"``, ``"Unassigned"`` -> itself."""

    tokens = header.split()
    if len(tokens) > 1:
        return tokens[1]
    if tokens:
        return tokens[0]
    return header


def _partition_groups(block: Block) -> list[tuple[str, list[str]]]:
    groups: list[tuple[str, list[str]]] = []
    for line in block:
        if _is_entity_line(line):
            groups.append((line, []))
        elif groups:
            groups[-1][1].append(line)
        else:
            logger.debug("Dropping line before any group header: %r", line)
    return groups


def parse_grouped(
    raw_text: str | Iterable[str], header_lines_to_skip: int = 0
) -> dict[str, RecordSet]:
    """Parse output with an extra nesting level, e.g. drives under arrays.

    Every unindented line opens a group. Its sub-lines are re-based on the
    first sub-line's indentation and parsed with :func:`parse_records`.
    """

    block = segment(raw_text, header_lines_to_skip)
    result: dict[str, RecordSet] = {}

    for header, sub_lines in _partition_groups(block):
        label = group_label(header)
        if label in result:
            logger.warning("Duplicate group label %r, keeping the last group", label)
        result[label] = parse_records(segment(sub_lines))

    return result


__all__ = [
    "KEY_VALUE_SEPARATOR",
    "coerce_value",
    "group_label",
    "parse_grouped",
    "parse_records",
    "parse_text",
    "segment",
]
