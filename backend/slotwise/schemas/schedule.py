from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from slotwise.engine.structure import Day, Section


class CellAssignment(BaseModel):
    day: str
    period: int = Field(ge=0, le=30)
    section: str
    code: str = Field(min_length=1, max_length=50)

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        return Day.parse(value).value

    @field_validator("section")
    @classmethod
    def validate_section(cls, value: str) -> str:
        return Section.parse(value).label


class SchedulePayload(BaseModel):
    cells: list[CellAssignment] = Field(default_factory=list)


class ScheduleOut(SchedulePayload):
    version: int


class CellUpdate(BaseModel):
    code: str | None = Field(default=None, max_length=50)


class CellOut(BaseModel):
    day: str
    period: int
    section: str
    code: str | None
    schedule_version: int
