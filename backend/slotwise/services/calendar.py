from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable

from slotwise.engine.roster import Roster
from slotwise.engine.schedule_map import ScheduleMap
from slotwise.engine.structure import Day, TimetableStructure
from slotwise.engine.views import TeacherSlot, teacher_slots
from slotwise.schemas.calendar import CalendarEventPayload

HolidayLookup = Callable[[date], str | None]

_WEEKDAYS = {index: day for index, day in enumerate(Day)}


def holiday_lookup(events: Iterable[CalendarEventPayload]) -> HolidayLookup:
    by_date = {event.date: event.description for event in events}
    return by_date.get


def weekday_of(value: date) -> Day | None:
    return _WEEKDAYS.get(value.weekday())


@dataclass
class TeacherDay:
    teacher_name: str
    date: date
    day: Day | None
    holiday: str | None = None
    slots: list[TeacherSlot] = field(default_factory=list)


def teacher_day(
    structure: TimetableStructure,
    roster: Roster,
    schedule: ScheduleMap,
    teacher_name: str,
    on_date: date,
    lookup: HolidayLookup,
) -> TeacherDay:
    """Slots a teacher has on a calendar date; none on holidays or days off the timetable."""
    day = weekday_of(on_date)
    result = TeacherDay(teacher_name=teacher_name, date=on_date, day=day)
    holiday = lookup(on_date)
    if holiday:
        result.holiday = holiday
        return result
    if day is None or day not in structure.days:
        return result
    result.slots = teacher_slots(structure, roster, schedule, teacher_name, day=day)
    return result
