from __future__ import annotations

from typing import Iterable, Mapping

from slotwise.engine.structure import Day


class UnavailabilityConstraintSet:
    """Days on which a code must not be newly scheduled."""

    def __init__(self, days_by_code: Mapping[str, Iterable[Day | str]] | None = None) -> None:
        self._days: dict[str, set[Day]] = {}
        for code, days in (days_by_code or {}).items():
            parsed = {Day.parse(day) for day in days}
            if parsed:
                self._days[code] = parsed

    def is_unavailable(self, code: str, day: Day) -> bool:
        return day in self._days.get(code, ())

    def days_for(self, code: str) -> list[Day]:
        ordering = list(Day)
        return sorted(self._days.get(code, ()), key=ordering.index)

    def toggle(self, code: str, day: Day) -> bool:
        """Flip ``day`` for ``code``; returns True when the day is now unavailable."""
        days = self._days.setdefault(code, set())
        if day in days:
            days.discard(day)
            if not days:
                del self._days[code]
            return False
        days.add(day)
        return True

    def as_dict(self) -> dict[str, list[str]]:
        return {code: [day.value for day in self.days_for(code)] for code in sorted(self._days)}
