"""Prometheus exporter for HPE Smart Array controllers driven by ssacli."""

from ssa_exporter.text_models import Block, GroupedResult, Record, RecordSet, Value
from ssa_exporter.text_parser import (
    coerce_value,
    group_label,
    parse_grouped,
    parse_records,
    parse_text,
    segment,
)

__version__ = "0.1.0"

__all__ = [
    "Block",
    "GroupedResult",
    "Record",
    "RecordSet",
    "Value",
    "coerce_value",
    "group_label",
    "parse_grouped",
    "parse_records",
    "parse_text",
    "segment",
]
