from __future__ import annotations

import logging

from slotwise.engine.candidates import CandidateResolution, resolve_candidates
from slotwise.engine.conflicts import DayConflictReport, detect_conflicts, detect_week
from slotwise.engine.constraints import UnavailabilityConstraintSet
from slotwise.engine.roster import Roster
from slotwise.engine.schedule_map import ScheduleMap
from slotwise.engine.structure import Day, Section, TimetableStructure
from slotwise.engine.usage import QuotaStatus, UsageCounter

logger = logging.getLogger(__name__)


class ScheduleWorkspace:
    """Bundles the inputs of one editing session and answers read queries over them.

    The usage counter is memoised per schedule map object, its version and the
    roster object; replacing either input or writing a cell invalidates it.
    """

    def __init__(
        self,
        structure: TimetableStructure,
        roster: Roster,
        schedule: ScheduleMap | None = None,
        constraints: UnavailabilityConstraintSet | None = None,
    ) -> None:
        self.structure = structure
        self.constraints = constraints if constraints is not None else UnavailabilityConstraintSet()
        self._schedule = schedule if schedule is not None else ScheduleMap()
        self._roster = roster
        self._usage: UsageCounter | None = None

    @property
    def schedule(self) -> ScheduleMap:
        return self._schedule

    @schedule.setter
    def schedule(self, value: ScheduleMap) -> None:
        self._schedule = value
        self._usage = None

    @property
    def roster(self) -> Roster:
        return self._roster

    @roster.setter
    def roster(self, value: Roster) -> None:
        self._roster = value
        self._usage = None

    def usage(self) -> UsageCounter:
        cached = self._usage
        if (
            cached is not None
            and cached.schedule is self._schedule
            and cached.version == self._schedule.version
            and cached.roster is self._roster
        ):
            return cached
        logger.debug("Recomputing usage for schedule v%d", self._schedule.version)
        self._usage = UsageCounter(self._roster, self._schedule)
        return self._usage

    def remaining(self, code: str, section: Section) -> int:
        return self.usage().remaining(code, section)

    def assign(self, day: Day, period: int, section: Section, code: str | None) -> None:
        self.schedule.set(day, period, section, code)

    def candidates(self, day: Day, period: int, section: Section) -> CandidateResolution:
        return resolve_candidates(self.structure, self._roster, self.schedule, self.constraints, day, period, section)

    def conflicts(self, day: Day) -> DayConflictReport:
        return detect_conflicts(self.structure, self._roster, self.schedule, day, self.constraints)

    def week_conflicts(self) -> list[DayConflictReport]:
        return detect_week(self.structure, self._roster, self.schedule, self.constraints)

    def monitoring(self) -> list[list[QuotaStatus]]:
        return self.usage().table(self.structure.sections)

    def quota_anomalies(self) -> list[QuotaStatus]:
        return self.usage().anomalies(self.structure.sections)
