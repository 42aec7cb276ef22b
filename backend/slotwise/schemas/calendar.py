from __future__ import annotations

from datetime import date as date_type

from pydantic import BaseModel, Field, model_validator


class CalendarEventPayload(BaseModel):
    id: str = Field(min_length=1, max_length=36)
    date: date_type
    description: str = Field(min_length=1, max_length=300)


class CalendarPayload(BaseModel):
    events: list[CalendarEventPayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "CalendarPayload":
        ids = [event.id for event in self.events]
        if len(ids) != len(set(ids)):
            raise ValueError("Calendar event ids must be unique")
        return self
