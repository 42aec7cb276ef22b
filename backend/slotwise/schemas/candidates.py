from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

CandidateReasonValue = Literal["exhausted", "unavailable_day", "different_subject_conflict"]


class CandidateOut(BaseModel):
    code: str
    teacher_name: str
    subject: str
    remaining: int
    is_current: bool
    disabled: bool
    reason: CandidateReasonValue | None = None
    conflicting_codes: list[str] = Field(default_factory=list)
    label: str


class CandidateListOut(BaseModel):
    day: str
    period: int
    section: str
    current_code: str | None
    offered: list[CandidateOut]
    hidden: list[CandidateOut]
    schedule_version: int
