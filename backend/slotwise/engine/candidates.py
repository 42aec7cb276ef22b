from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging

from slotwise.core.exceptions import DataIntegrityError
from slotwise.engine.constraints import UnavailabilityConstraintSet
from slotwise.engine.roster import AssignmentRecord, Roster
from slotwise.engine.schedule_map import CellKey, ScheduleMap
from slotwise.engine.structure import Day, Section, TimetableStructure
from slotwise.engine.usage import UsageCounter

logger = logging.getLogger(__name__)


class CandidateReason(str, Enum):
    exhausted = "exhausted"
    unavailable_day = "unavailable_day"
    different_subject_conflict = "different_subject_conflict"


@dataclass(frozen=True)
class Candidate:
    code: str
    teacher_name: str
    subject: str
    remaining: int
    is_current: bool = False
    disabled: bool = False
    reason: CandidateReason | None = None
    conflicting_codes: tuple[str, ...] = ()

    @property
    def selectable(self) -> bool:
        return not self.disabled

    @property
    def label(self) -> str:
        if self.reason is CandidateReason.different_subject_conflict:
            status = "teacher already assigned another subject in this section"
        elif self.reason is CandidateReason.unavailable_day:
            status = "unavailable today"
        elif self.remaining <= 0:
            status = "exhausted"
        else:
            status = f"remaining: {self.remaining}"
        return f"{self.code} ({status}) - {self.teacher_name}"


@dataclass
class CandidateResolution:
    cell: CellKey
    current_code: str | None
    offered: list[Candidate] = field(default_factory=list)
    hidden: list[Candidate] = field(default_factory=list)

    @property
    def selectable_codes(self) -> list[str]:
        return [candidate.code for candidate in self.offered if candidate.selectable]

    def find(self, code: str) -> Candidate | None:
        for candidate in self.offered:
            if candidate.code == code:
                return candidate
        return None


def _teacher_codes_elsewhere(
    structure: TimetableStructure,
    roster: Roster,
    schedule: ScheduleMap,
    day: Day,
    period: int,
    section: Section,
) -> dict[str, set[str]]:
    occupied: dict[str, set[str]] = {}
    for other in structure.teaching_periods(day):
        if other.number == period:
            continue
        code = schedule.get(day, other.number, section)
        if not code:
            continue
        occupied.setdefault(roster.teacher_of(code), set()).add(code)
    return occupied


def resolve_candidates(
    structure: TimetableStructure,
    roster: Roster,
    schedule: ScheduleMap,
    constraints: UnavailabilityConstraintSet,
    day: Day,
    period: int,
    section: Section,
) -> CandidateResolution:
    """List the codes that may be offered for one cell.

    Exhausted and unavailable codes are hidden, a code whose teacher already
    holds a different code in this section today is offered but disabled. The
    cell's own occupant is always offered.
    """
    structure.teaching_period(day, period)
    section = structure.section(section)
    key = CellKey(day, period, section)

    current = schedule.get(day, period, section)
    if current is not None and current not in roster:
        raise DataIntegrityError(current, details={"day": day.value, "period": period, "section": section.label})

    usage = UsageCounter(roster, schedule, excluding=key)
    elsewhere = _teacher_codes_elsewhere(structure, roster, schedule, day, period, section)

    records: list[AssignmentRecord] = roster.eligible_codes(section)
    if current is not None and all(record.code != current for record in records):
        records = sorted([*records, roster.record(current)], key=lambda record: record.code)

    resolution = CandidateResolution(cell=key, current_code=current)
    for record in records:
        remaining = usage.remaining(record.code, section)
        is_current = record.code == current
        exhausted = remaining <= 0
        unavailable = constraints.is_unavailable(record.code, day)

        if not is_current and (exhausted or unavailable):
            reason = CandidateReason.exhausted if exhausted else CandidateReason.unavailable_day
            resolution.hidden.append(
                Candidate(
                    code=record.code,
                    teacher_name=record.teacher_name,
                    subject=record.subject,
                    remaining=remaining,
                    reason=reason,
                )
            )
            continue

        clashing = sorted(elsewhere.get(record.teacher_name, set()) - {record.code})
        if clashing:
            reason = CandidateReason.different_subject_conflict
        elif unavailable:
            reason = CandidateReason.unavailable_day
        elif exhausted:
            reason = CandidateReason.exhausted
        else:
            reason = None

        resolution.offered.append(
            Candidate(
                code=record.code,
                teacher_name=record.teacher_name,
                subject=record.subject,
                remaining=remaining,
                is_current=is_current,
                disabled=bool(clashing),
                reason=reason,
                conflicting_codes=tuple(clashing),
            )
        )

    logger.debug(
        "Resolved %d offered / %d hidden candidates for %s period %d %s (schedule v%d)",
        len(resolution.offered),
        len(resolution.hidden),
        day.value,
        period,
        section,
        schedule.version,
    )
    return resolution
