from __future__ import annotations

from pydantic import BaseModel, Field

from .text_models import GroupedResult, Record, Value


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API state")
    hostname: str = Field(..., description="Hostname label attached to every sample")
    ssacli: str = Field(..., description="ssacli executable the exporter invokes")


class RecordModel(BaseModel):
    name: str = Field(..., description="Header line of the entity, verbatim")
    attributes: dict[str, Value] = Field(
        default_factory=dict,
        description="Attributes in output order; numeric values are already coerced",
    )

    @classmethod
    def from_record(cls, record: Record) -> "RecordModel":
        return cls(name=record.name, attributes=dict(record.attributes))


class PhysicalDrivesModel(BaseModel):
    controller_slot: Value = Field(..., description="Slot the drives were listed for")
    groups: dict[str, list[RecordModel]] = Field(
        default_factory=dict,
        description="Drives keyed by array label (or 'Unassigned')",
    )

    @classmethod
    def from_grouped(cls, grouped: GroupedResult) -> "PhysicalDrivesModel":
        return cls(
            controller_slot=grouped.controller_slot,
            groups={
                label: [RecordModel.from_record(record) for record in records]
                for label, records in grouped.groups.items()
            },
        )


class ControllerModel(BaseModel):
    controller: RecordModel = Field(..., description="Controller detail record")
    arrays: list[RecordModel] = Field(default_factory=list, description="Array detail records")
    physical_drives: PhysicalDrivesModel = Field(..., description="Physical drives grouped by array")


class InventoryResponse(BaseModel):
    hostname: str = Field(..., description="Host the inventory was collected on")
    controllers: list[ControllerModel] = Field(default_factory=list, description="Controllers found")
