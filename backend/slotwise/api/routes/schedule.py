from fastapi import APIRouter, Depends

from slotwise.api.deps import get_store, get_structure, get_workspace
from slotwise.engine.candidates import Candidate
from slotwise.engine.structure import TimetableStructure
from slotwise.engine.workspace import ScheduleWorkspace
from slotwise.schemas.candidates import CandidateListOut, CandidateOut
from slotwise.schemas.schedule import CellOut, CellUpdate, SchedulePayload, ScheduleOut
from slotwise.services.editing import apply_selection
from slotwise.services.store import DocumentStore, schedule_from_payload, schedule_to_payload

router = APIRouter()


def _candidate_out(candidate: Candidate) -> CandidateOut:
    return CandidateOut(
        code=candidate.code,
        teacher_name=candidate.teacher_name,
        subject=candidate.subject,
        remaining=candidate.remaining,
        is_current=candidate.is_current,
        disabled=candidate.disabled,
        reason=candidate.reason.value if candidate.reason else None,
        conflicting_codes=list(candidate.conflicting_codes),
        label=candidate.label,
    )


@router.get("", response_model=ScheduleOut)
def read_schedule(
    workspace: ScheduleWorkspace = Depends(get_workspace),
    structure: TimetableStructure = Depends(get_structure),
):
    payload = schedule_to_payload(workspace.schedule, structure)
    return ScheduleOut(cells=payload.cells, version=workspace.schedule.version)


@router.put("", response_model=ScheduleOut)
def replace_schedule(
    payload: SchedulePayload,
    store: DocumentStore = Depends(get_store),
    structure: TimetableStructure = Depends(get_structure),
):
    # Bulk import from a storage or spreadsheet collaborator; stored verbatim.
    schedule = schedule_from_payload(payload, structure)
    revision = store.save_schedule(schedule, structure)
    return ScheduleOut(cells=schedule_to_payload(schedule, structure).cells, version=revision)


@router.get("/{day}", response_model=ScheduleOut)
def read_day(
    day: str,
    workspace: ScheduleWorkspace = Depends(get_workspace),
    structure: TimetableStructure = Depends(get_structure),
):
    resolved = structure.day_schedule(day).day
    payload = schedule_to_payload(workspace.schedule, structure)
    cells = [cell for cell in payload.cells if cell.day == resolved.value]
    return ScheduleOut(cells=cells, version=workspace.schedule.version)


@router.get("/{day}/{period}/{section}/candidates", response_model=CandidateListOut)
def read_candidates(
    day: str,
    period: int,
    section: str,
    workspace: ScheduleWorkspace = Depends(get_workspace),
    structure: TimetableStructure = Depends(get_structure),
):
    resolved_day = structure.day_schedule(day).day
    resolution = workspace.candidates(resolved_day, period, structure.section(section))
    return CandidateListOut(
        day=resolved_day.value,
        period=period,
        section=resolution.cell.section.label,
        current_code=resolution.current_code,
        offered=[_candidate_out(item) for item in resolution.offered],
        hidden=[_candidate_out(item) for item in resolution.hidden],
        schedule_version=workspace.schedule.version,
    )


@router.put("/{day}/{period}/{section}", response_model=CellOut)
def update_cell(
    day: str,
    period: int,
    section: str,
    payload: CellUpdate,
    workspace: ScheduleWorkspace = Depends(get_workspace),
    store: DocumentStore = Depends(get_store),
    structure: TimetableStructure = Depends(get_structure),
):
    resolved_day = structure.day_schedule(day).day
    resolved_section = structure.section(section)
    code = payload.code.strip() if payload.code else None
    apply_selection(workspace, resolved_day, period, resolved_section, code or None)
    revision = store.save_schedule(workspace.schedule, structure)
    return CellOut(
        day=resolved_day.value,
        period=period,
        section=resolved_section.label,
        code=workspace.schedule.get(resolved_day, period, resolved_section),
        schedule_version=revision,
    )
