from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Iterable

from slotwise.engine.roster import Roster
from slotwise.engine.schedule_map import CellKey, ScheduleMap
from slotwise.engine.structure import Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuotaStatus:
    code: str
    section: Section
    target: int
    used: int
    remaining: int

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    @property
    def over_quota(self) -> bool:
        return self.remaining < 0


class UsageCounter:
    """Point-in-time usage of each (code, section) pair over a schedule.

    Built from a full scan; ``excluding`` drops one cell from the count, which
    is how the candidate resolver asks "what if this cell were empty".
    """

    def __init__(self, roster: Roster, schedule: ScheduleMap, *, excluding: CellKey | None = None) -> None:
        self.roster = roster
        self.schedule = schedule
        self.version = schedule.version
        self._used: Counter[tuple[str, Section]] = Counter()
        for key, code in schedule:
            if excluding is not None and key == excluding:
                continue
            self._used[(code, key.section)] += 1

    def used(self, code: str, section: Section) -> int:
        return self._used.get((code, section), 0)

    def remaining(self, code: str, section: Section) -> int:
        return self.roster.quota(code, section) - self.used(code, section)

    def status(self, code: str, section: Section) -> QuotaStatus:
        target = self.roster.quota(code, section)
        used = self.used(code, section)
        return QuotaStatus(code=code, section=section, target=target, used=used, remaining=target - used)

    def unknown_codes(self) -> list[str]:
        return sorted({code for code, _ in self._used if code not in self.roster})

    def table(self, sections: Iterable[Section]) -> list[list[QuotaStatus]]:
        """One row per roster record with the status of every section that is owed or used."""
        sections = list(sections)
        rows: list[list[QuotaStatus]] = []
        for record in self.roster.records:
            row = [
                self.status(record.code, section)
                for section in sections
                if record.quota(section) > 0 or self.used(record.code, section) > 0
            ]
            rows.append(row)
        return rows

    def anomalies(self, sections: Iterable[Section]) -> list[QuotaStatus]:
        over = [status for row in self.table(sections) for status in row if status.over_quota]
        for status in over:
            logger.warning(
                "Code %s is over quota in %s: target=%d used=%d",
                status.code,
                status.section,
                status.target,
                status.used,
            )
        return over
