from __future__ import annotations

from datetime import date as date_type

from pydantic import BaseModel, Field


class PeriodOut(BaseModel):
    period: int | None
    time_range: str
    activity: str | None = None


class DayStructureOut(BaseModel):
    day: str
    periods: list[PeriodOut]


class TimetableStructureOut(BaseModel):
    days: list[DayStructureOut]
    sections: list[str]


class SectionRowOut(PeriodOut):
    code: str | None = None
    subject: str | None = None
    teacher_name: str | None = None


class SectionDayOut(BaseModel):
    day: str
    rows: list[SectionRowOut]


class SectionTimetableOut(BaseModel):
    section: str
    days: list[SectionDayOut]


class TeacherSlotOut(BaseModel):
    day: str
    period: int
    time_range: str
    section: str
    code: str
    subject: str


class TeacherScheduleOut(BaseModel):
    teacher_name: str
    codes: list[str]
    slots: list[TeacherSlotOut]


class TeacherDayOut(BaseModel):
    teacher_name: str
    date: date_type
    day: str | None
    holiday: str | None = None
    slots: list[TeacherSlotOut] = Field(default_factory=list)


class TeacherWorkloadOut(BaseModel):
    teacher_name: str
    codes: list[str]
    quota_hours: int
    scheduled_hours: int
    unscheduled_hours: int
