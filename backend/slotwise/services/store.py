from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from slotwise.engine.constraints import UnavailabilityConstraintSet
from slotwise.engine.roster import AssignmentRecord, Roster
from slotwise.engine.schedule_map import CellKey, ScheduleMap
from slotwise.engine.structure import Day, Section, TimetableStructure
from slotwise.engine.workspace import ScheduleWorkspace
from slotwise.models.schedule_document import DocumentKind, ScheduleDocument
from slotwise.schemas.calendar import CalendarEventPayload, CalendarPayload
from slotwise.schemas.constraints import UnavailabilityPayload
from slotwise.schemas.roster import AssignmentRecordPayload, RosterPayload
from slotwise.schemas.schedule import CellAssignment, SchedulePayload

logger = logging.getLogger(__name__)


def roster_from_payload(payload: RosterPayload) -> Roster:
    return Roster(
        AssignmentRecord(
            code=item.code,
            teacher_name=item.teacher_name,
            subject=item.subject,
            quotas={Section.parse(label): hours for label, hours in item.quotas.items()},
        )
        for item in payload.records
    )


def roster_to_payload(roster: Roster) -> RosterPayload:
    return RosterPayload(
        records=[
            AssignmentRecordPayload(
                code=record.code,
                teacher_name=record.teacher_name,
                subject=record.subject,
                quotas={section.label: hours for section, hours in record.quotas.items()},
            )
            for record in roster.records
        ]
    )


def schedule_from_payload(payload: SchedulePayload, structure: TimetableStructure, version: int = 0) -> ScheduleMap:
    entries: list[tuple[CellKey, str]] = []
    for cell in payload.cells:
        day = Day.parse(cell.day)
        section = Section.parse(cell.section)
        if section not in structure.sections or not structure.is_teaching_slot(day, cell.period):
            logger.warning(
                "Dropping stored cell %s period %d %s: not an assignable slot",
                day.value,
                cell.period,
                section,
            )
            continue
        entries.append((CellKey(day, cell.period, section), cell.code))
    return ScheduleMap(entries, version=version)


def schedule_to_payload(schedule: ScheduleMap, structure: TimetableStructure) -> SchedulePayload:
    day_order = list(structure.days)
    section_order = list(structure.sections)
    cells = sorted(
        schedule,
        key=lambda item: (day_order.index(item[0].day), item[0].period, section_order.index(item[0].section)),
    )
    return SchedulePayload(
        cells=[
            CellAssignment(day=key.day.value, period=key.period, section=key.section.label, code=code)
            for key, code in cells
        ]
    )


class DocumentStore:
    """Loads and saves the editing documents of one namespace as JSON rows."""

    def __init__(self, db: Session, namespace: str = "default") -> None:
        self.db = db
        self.namespace = namespace

    def _record(self, kind: DocumentKind) -> ScheduleDocument | None:
        return self.db.get(ScheduleDocument, (self.namespace, kind.value))

    def load(self, kind: DocumentKind) -> dict | None:
        record = self._record(kind)
        if record is None:
            return None
        return record.payload

    def save(self, kind: DocumentKind, payload: dict) -> int:
        record = self._record(kind)
        if record is None:
            record = ScheduleDocument(namespace=self.namespace, kind=kind.value, payload=payload, revision=1)
            self.db.add(record)
        else:
            record.payload = payload
            record.revision = (record.revision or 0) + 1
        self.db.commit()
        logger.info("Saved %s document for %s (revision %d)", kind.value, self.namespace, record.revision)
        return record.revision

    def load_roster(self) -> Roster:
        raw = self.load(DocumentKind.roster)
        if raw is None:
            return Roster([])
        return roster_from_payload(RosterPayload.model_validate(raw))

    def save_roster(self, roster: Roster) -> None:
        self.save(DocumentKind.roster, roster_to_payload(roster).model_dump())

    def load_schedule(self, structure: TimetableStructure) -> ScheduleMap:
        record = self._record(DocumentKind.schedule)
        if record is None:
            return ScheduleMap()
        return schedule_from_payload(
            SchedulePayload.model_validate(record.payload), structure, version=record.revision or 0
        )

    def save_schedule(self, schedule: ScheduleMap, structure: TimetableStructure) -> int:
        return self.save(DocumentKind.schedule, schedule_to_payload(schedule, structure).model_dump())

    def load_constraints(self) -> UnavailabilityConstraintSet:
        raw = self.load(DocumentKind.unavailability)
        if raw is None:
            return UnavailabilityConstraintSet()
        return UnavailabilityConstraintSet(UnavailabilityPayload.model_validate(raw).days_by_code)

    def save_constraints(self, constraints: UnavailabilityConstraintSet) -> None:
        self.save(DocumentKind.unavailability, {"days_by_code": constraints.as_dict()})

    def load_calendar(self) -> list[CalendarEventPayload]:
        raw = self.load(DocumentKind.calendar)
        if raw is None:
            return []
        return CalendarPayload.model_validate(raw).events

    def save_calendar(self, events: list[CalendarEventPayload]) -> None:
        self.save(DocumentKind.calendar, CalendarPayload(events=events).model_dump(mode="json"))

    def load_workspace(self, structure: TimetableStructure) -> ScheduleWorkspace:
        return ScheduleWorkspace(
            structure=structure,
            roster=self.load_roster(),
            schedule=self.load_schedule(structure),
            constraints=self.load_constraints(),
        )
