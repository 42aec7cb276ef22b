from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from slotwise.engine.structure import Day


class UnavailabilityPayload(BaseModel):
    days_by_code: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("days_by_code")
    @classmethod
    def validate_days(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return {code: [Day.parse(day).value for day in days] for code, days in value.items()}


class ToggleUnavailabilityRequest(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    day: str

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        return Day.parse(value).value


class ToggleUnavailabilityResponse(BaseModel):
    code: str
    day: str
    unavailable: bool
    days: list[str]
