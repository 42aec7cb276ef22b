from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from slotwise.engine.structure import Section


class AssignmentRecordPayload(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    teacher_name: str = Field(min_length=1, max_length=200)
    subject: str = Field(min_length=1, max_length=200)
    quotas: dict[str, int] = Field(default_factory=dict)

    @field_validator("code", "teacher_name", "subject")
    @classmethod
    def strip_text(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Value cannot be blank")
        return cleaned

    @field_validator("quotas")
    @classmethod
    def validate_quotas(cls, value: dict[str, int]) -> dict[str, int]:
        normalized: dict[str, int] = {}
        for raw_section, hours in value.items():
            section = Section.parse(raw_section)
            if hours < 0:
                raise ValueError(f"Quota for {section.label} must be non-negative")
            normalized[section.label] = hours
        return normalized


class RosterPayload(BaseModel):
    records: list[AssignmentRecordPayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_codes(self) -> "RosterPayload":
        seen: set[str] = set()
        duplicates: set[str] = set()
        for record in self.records:
            if record.code in seen:
                duplicates.add(record.code)
            seen.add(record.code)
        if duplicates:
            raise ValueError(f"Duplicate assignment code(s): {', '.join(sorted(duplicates))}")
        return self
