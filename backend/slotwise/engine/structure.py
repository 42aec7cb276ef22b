from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from slotwise.core.exceptions import UnknownSectionError, UnknownSlotError


class Day(str, Enum):
    monday = "Monday"
    tuesday = "Tuesday"
    wednesday = "Wednesday"
    thursday = "Thursday"
    friday = "Friday"
    saturday = "Saturday"

    @classmethod
    def parse(cls, value: str | Day) -> Day:
        if isinstance(value, Day):
            return value
        normalized = value.strip().lower()
        for day in cls:
            if day.value.lower() == normalized or day.value[:3].lower() == normalized:
                return day
        raise ValueError(f"Invalid day value: {value!r}")


@dataclass(frozen=True, order=True)
class Section:
    grade: str
    letter: str

    @classmethod
    def parse(cls, value: str | Section) -> Section:
        if isinstance(value, Section):
            return value
        parts = value.split()
        if len(parts) != 2:
            # Allow the compact "VIIA" form.
            raw = value.strip()
            if len(raw) < 2 or not raw[-1].isalpha():
                raise ValueError(f"Invalid section value: {value!r}")
            parts = [raw[:-1], raw[-1]]
        return cls(grade=parts[0].upper(), letter=parts[1].upper())

    @property
    def label(self) -> str:
        return f"{self.grade} {self.letter}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Period:
    """One row of a day. Teaching periods carry a number; activities never do."""

    number: int | None
    start_time: str
    end_time: str
    activity: str | None = None

    @property
    def is_teaching(self) -> bool:
        return self.activity is None and self.number is not None

    @property
    def time_range(self) -> str:
        return f"{self.start_time}-{self.end_time}"


@dataclass(frozen=True)
class DaySchedule:
    day: Day
    periods: tuple[Period, ...]

    def teaching_periods(self) -> tuple[Period, ...]:
        return tuple(period for period in self.periods if period.is_teaching)

    def teaching_numbers(self) -> tuple[int, ...]:
        return tuple(period.number for period in self.teaching_periods())


class TimetableStructure:
    """The fixed shape of the week: days, their period rows, and the sections taught."""

    def __init__(self, days: list[DaySchedule], sections: list[Section]) -> None:
        seen_days: set[Day] = set()
        for entry in days:
            if entry.day in seen_days:
                raise ValueError(f"Day {entry.day.value} is defined more than once")
            seen_days.add(entry.day)
            numbers = entry.teaching_numbers()
            if len(numbers) != len(set(numbers)):
                raise ValueError(f"Duplicate teaching period numbers on {entry.day.value}")
        if len(sections) != len(set(sections)):
            raise ValueError("Duplicate sections in timetable structure")

        self._days: tuple[DaySchedule, ...] = tuple(days)
        self._by_day = {entry.day: entry for entry in self._days}
        self._sections: tuple[Section, ...] = tuple(sections)

    @property
    def days(self) -> tuple[Day, ...]:
        return tuple(entry.day for entry in self._days)

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    def __iter__(self) -> Iterator[DaySchedule]:
        return iter(self._days)

    def day_schedule(self, day: Day | str) -> DaySchedule:
        try:
            resolved = Day.parse(day)
        except ValueError:
            raise UnknownSlotError(str(day), None) from None
        entry = self._by_day.get(resolved)
        if entry is None:
            raise UnknownSlotError(resolved.value, None)
        return entry

    def teaching_periods(self, day: Day | str) -> tuple[Period, ...]:
        return self.day_schedule(day).teaching_periods()

    def teaching_period(self, day: Day | str, number: int) -> Period:
        schedule = self.day_schedule(day)
        for period in schedule.teaching_periods():
            if period.number == number:
                return period
        raise UnknownSlotError(schedule.day.value, number)

    def is_teaching_slot(self, day: Day | str, number: int) -> bool:
        try:
            self.teaching_period(day, number)
        except UnknownSlotError:
            return False
        return True

    def section(self, value: str | Section) -> Section:
        try:
            resolved = Section.parse(value)
        except ValueError:
            raise UnknownSectionError(str(value)) from None
        if resolved not in self._sections:
            raise UnknownSectionError(resolved.label)
        return resolved


def _teaching(number: int, start: str, end: str) -> Period:
    return Period(number=number, start_time=start, end_time=end)


def _activity(name: str, start: str, end: str) -> Period:
    return Period(number=None, start_time=start, end_time=end, activity=name)


_REGULAR_DAY = (
    _teaching(1, "07:00", "07:40"),
    _teaching(2, "07:40", "08:20"),
    _teaching(3, "08:20", "09:00"),
    _activity("Break", "09:00", "09:15"),
    _teaching(4, "09:15", "09:55"),
    _teaching(5, "09:55", "10:35"),
    _teaching(6, "10:35", "11:15"),
    _activity("Prayer break", "11:15", "11:45"),
    _teaching(7, "11:45", "12:25"),
    _teaching(8, "12:25", "13:05"),
)

_MONDAY = (
    _activity("Flag ceremony", "07:00", "07:40"),
    _teaching(1, "07:40", "08:20"),
    _teaching(2, "08:20", "09:00"),
    _activity("Break", "09:00", "09:15"),
    _teaching(3, "09:15", "09:55"),
    _teaching(4, "09:55", "10:35"),
    _teaching(5, "10:35", "11:15"),
    _activity("Prayer break", "11:15", "11:45"),
    _teaching(6, "11:45", "12:25"),
    _teaching(7, "12:25", "13:05"),
)

_FRIDAY = (
    _activity("Morning devotion", "07:00", "07:30"),
    _teaching(1, "07:30", "08:10"),
    _teaching(2, "08:10", "08:50"),
    _teaching(3, "08:50", "09:30"),
    _activity("Break", "09:30", "09:45"),
    _teaching(4, "09:45", "10:25"),
    _teaching(5, "10:25", "11:05"),
)


def default_structure(sections: list[str]) -> TimetableStructure:
    days = [
        DaySchedule(Day.monday, _MONDAY),
        DaySchedule(Day.tuesday, _REGULAR_DAY),
        DaySchedule(Day.wednesday, _REGULAR_DAY),
        DaySchedule(Day.thursday, _REGULAR_DAY),
        DaySchedule(Day.friday, _FRIDAY),
        DaySchedule(Day.saturday, _REGULAR_DAY[:6]),
    ]
    return TimetableStructure(days, [Section.parse(value) for value in sections])
