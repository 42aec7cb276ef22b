from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from slotwise.engine.roster import Roster
from slotwise.engine.schedule_map import ScheduleMap
from slotwise.engine.structure import Day, Section, TimetableStructure


@dataclass(frozen=True)
class SectionRow:
    period: int | None
    time_range: str
    activity: str | None = None
    code: str | None = None
    subject: str | None = None
    teacher_name: str | None = None


@dataclass(frozen=True)
class TeacherSlot:
    day: Day
    period: int
    time_range: str
    section: Section
    code: str
    subject: str


@dataclass(frozen=True)
class TeacherWorkload:
    teacher_name: str
    codes: tuple[str, ...]
    quota_hours: int
    scheduled_hours: int

    @property
    def unscheduled_hours(self) -> int:
        return self.quota_hours - self.scheduled_hours


def section_timetable(
    structure: TimetableStructure,
    roster: Roster,
    schedule: ScheduleMap,
    section: Section,
) -> dict[Day, list[SectionRow]]:
    section = structure.section(section)
    result: dict[Day, list[SectionRow]] = {}
    for day_schedule in structure:
        rows: list[SectionRow] = []
        for period in day_schedule.periods:
            if not period.is_teaching:
                rows.append(SectionRow(period=None, time_range=period.time_range, activity=period.activity))
                continue
            code = schedule.get(day_schedule.day, period.number, section)
            if code is None:
                rows.append(SectionRow(period=period.number, time_range=period.time_range))
                continue
            record = roster.record(code)
            rows.append(
                SectionRow(
                    period=period.number,
                    time_range=period.time_range,
                    code=code,
                    subject=record.subject,
                    teacher_name=record.teacher_name,
                )
            )
        result[day_schedule.day] = rows
    return result


def teacher_slots(
    structure: TimetableStructure,
    roster: Roster,
    schedule: ScheduleMap,
    teacher_name: str,
    day: Day | None = None,
) -> list[TeacherSlot]:
    codes = set(roster.codes_for_teacher(teacher_name))
    slots: list[TeacherSlot] = []
    if not codes:
        return slots
    for day_schedule in structure:
        if day is not None and day_schedule.day != day:
            continue
        for period in day_schedule.teaching_periods():
            for section in structure.sections:
                code = schedule.get(day_schedule.day, period.number, section)
                if code in codes:
                    slots.append(
                        TeacherSlot(
                            day=day_schedule.day,
                            period=period.number,
                            time_range=period.time_range,
                            section=section,
                            code=code,
                            subject=roster.subject_of(code),
                        )
                    )
    return slots


def workload_summary(roster: Roster, schedule: ScheduleMap) -> list[TeacherWorkload]:
    scheduled = Counter(code for _, code in schedule)
    summary = []
    for teacher_name in roster.teacher_names:
        codes = roster.codes_for_teacher(teacher_name)
        summary.append(
            TeacherWorkload(
                teacher_name=teacher_name,
                codes=tuple(codes),
                quota_hours=sum(roster.record(code).total_quota for code in codes),
                scheduled_hours=sum(scheduled.get(code, 0) for code in codes),
            )
        )
    summary.sort(key=lambda entry: (-entry.quota_hours, entry.teacher_name))
    return summary
