from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

from slotwise.engine.structure import Day, Section


class CellKey(NamedTuple):
    day: Day
    period: int
    section: Section


class ScheduleMap:
    """Sparse (day, period, section) -> code assignment state.

    Writes are not validated here; callers only write values taken from the
    candidate resolver. Every write bumps ``version`` so derived views can tell
    whether a cached computation is still current. A map loaded from storage
    starts at the stored revision.
    """

    def __init__(self, entries: Iterable[tuple[CellKey, str]] = (), version: int = 0) -> None:
        self._cells: dict[CellKey, str] = {}
        for key, code in entries:
            if code:
                self._cells[CellKey(*key)] = code
        self._version = version

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[tuple[CellKey, str]]:
        return iter(list(self._cells.items()))

    def get(self, day: Day, period: int, section: Section) -> str | None:
        return self._cells.get(CellKey(day, period, section))

    def set(self, day: Day, period: int, section: Section, code: str | None) -> None:
        key = CellKey(day, period, section)
        if code:
            self._cells[key] = code
        else:
            self._cells.pop(key, None)
        self._version += 1

    def cells_on(self, day: Day) -> dict[CellKey, str]:
        return {key: code for key, code in self._cells.items() if key.day == day}

    def snapshot(self) -> ScheduleMap:
        copy = ScheduleMap()
        copy._cells = dict(self._cells)
        copy._version = self._version
        return copy
