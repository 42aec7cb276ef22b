import logging

from fastapi import APIRouter, Depends

from slotwise.api.deps import get_store, get_structure
from slotwise.core.exceptions import ResourceNotFoundError, RosterValidationError
from slotwise.engine.structure import TimetableStructure
from slotwise.schemas.roster import AssignmentRecordPayload, RosterPayload
from slotwise.services.store import DocumentStore, roster_from_payload, roster_to_payload

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=RosterPayload)
def read_roster(store: DocumentStore = Depends(get_store)):
    return roster_to_payload(store.load_roster())


@router.put("", response_model=RosterPayload)
def replace_roster(
    payload: RosterPayload,
    store: DocumentStore = Depends(get_store),
    structure: TimetableStructure = Depends(get_structure),
):
    roster = roster_from_payload(payload)
    unknown = sorted(section.label for section in roster.quota_sections - set(structure.sections))
    if unknown:
        raise RosterValidationError(
            "Quotas reference sections that are not part of the timetable",
            details={"sections": unknown},
        )
    store.save_roster(roster)
    logger.info("Roster replaced with %d record(s)", len(roster))
    return roster_to_payload(roster)


@router.get("/{code}", response_model=AssignmentRecordPayload)
def read_record(code: str, store: DocumentStore = Depends(get_store)):
    roster = store.load_roster()
    if code not in roster:
        raise ResourceNotFoundError("Assignment record", code)
    record = roster.record(code)
    return AssignmentRecordPayload(
        code=record.code,
        teacher_name=record.teacher_name,
        subject=record.subject,
        quotas={section.label: hours for section, hours in record.quotas.items()},
    )
