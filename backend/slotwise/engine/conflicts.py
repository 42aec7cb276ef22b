from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
import logging

from slotwise.engine.constraints import UnavailabilityConstraintSet
from slotwise.engine.roster import Roster
from slotwise.engine.schedule_map import CellKey, ScheduleMap
from slotwise.engine.structure import Day, Section, TimetableStructure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellConflict:
    cell: CellKey
    code: str
    teacher_name: str
    clashes_with: tuple[Section, ...] = ()
    deviates_from: str | None = None

    @property
    def message(self) -> str:
        parts = []
        if self.clashes_with:
            parts.append("clashes with " + ", ".join(section.label for section in self.clashes_with))
        if self.deviates_from:
            parts.append(f"teacher already teaches {self.deviates_from} in this section today")
        return "; ".join(parts)


@dataclass
class DayConflictReport:
    day: Day
    cross_section_conflicts: int = 0
    same_section_multi_subject_conflicts: int = 0
    cells: list[CellConflict] = field(default_factory=list)
    unavailable_cells: list[CellKey] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.cross_section_conflicts or self.same_section_multi_subject_conflicts)


def detect_conflicts(
    structure: TimetableStructure,
    roster: Roster,
    schedule: ScheduleMap,
    day: Day,
    constraints: UnavailabilityConstraintSet | None = None,
) -> DayConflictReport:
    """Scan one day of the grid.

    Cross-section conflicts are counted per offending cell. Same-section
    conflicts are counted once per distinct code that deviates from the first
    code a teacher was seen with in that section on that day: A,B,B counts 1
    and A,B,C counts 2. Every deviating cell is still listed in ``cells``, so
    a display that wants one mark per later cell can count those instead.
    """
    periods = structure.teaching_periods(day)
    sections = structure.sections
    report = DayConflictReport(day=day)
    assigned = schedule.cells_on(day)

    clashes: dict[CellKey, tuple[Section, ...]] = {}
    for period in periods:
        by_teacher: dict[str, list[Section]] = defaultdict(list)
        for section in sections:
            code = assigned.get(CellKey(day, period.number, section))
            if code:
                by_teacher[roster.teacher_of(code)].append(section)
        for occupied in by_teacher.values():
            if len(occupied) < 2:
                continue
            for section in occupied:
                others = tuple(other for other in occupied if other != section)
                clashes[CellKey(day, period.number, section)] = others
                report.cross_section_conflicts += 1

    deviations: dict[CellKey, str] = {}
    for section in sections:
        canonical: dict[str, str] = {}
        counted: dict[str, set[str]] = defaultdict(set)
        for period in periods:
            code = assigned.get(CellKey(day, period.number, section))
            if not code:
                continue
            teacher = roster.teacher_of(code)
            first = canonical.setdefault(teacher, code)
            if first == code:
                continue
            deviations[CellKey(day, period.number, section)] = first
            if code not in counted[teacher]:
                counted[teacher].add(code)
                report.same_section_multi_subject_conflicts += 1

    for period in periods:
        for section in sections:
            key = CellKey(day, period.number, section)
            code = assigned.get(key)
            if not code:
                continue
            if constraints is not None and constraints.is_unavailable(code, day):
                report.unavailable_cells.append(key)
            if key in clashes or key in deviations:
                report.cells.append(
                    CellConflict(
                        cell=key,
                        code=code,
                        teacher_name=roster.teacher_of(code),
                        clashes_with=clashes.get(key, ()),
                        deviates_from=deviations.get(key),
                    )
                )

    if report.unavailable_cells:
        logger.warning(
            "%d cell(s) on %s hold a code that is unavailable that day",
            len(report.unavailable_cells),
            day.value,
        )
    logger.debug(
        "Conflicts on %s (schedule v%d): cross=%d same_section=%d",
        day.value,
        schedule.version,
        report.cross_section_conflicts,
        report.same_section_multi_subject_conflicts,
    )
    return report


def detect_week(
    structure: TimetableStructure,
    roster: Roster,
    schedule: ScheduleMap,
    constraints: UnavailabilityConstraintSet | None = None,
) -> list[DayConflictReport]:
    return [detect_conflicts(structure, roster, schedule, day, constraints) for day in structure.days]
