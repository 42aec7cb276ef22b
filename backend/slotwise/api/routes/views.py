from datetime import date

from fastapi import APIRouter, Depends

from slotwise.api.deps import get_store, get_structure, get_workspace
from slotwise.engine.structure import TimetableStructure
from slotwise.engine.views import TeacherSlot, section_timetable, teacher_slots, workload_summary
from slotwise.engine.workspace import ScheduleWorkspace
from slotwise.schemas.views import (
    SectionDayOut,
    SectionRowOut,
    SectionTimetableOut,
    TeacherDayOut,
    TeacherScheduleOut,
    TeacherSlotOut,
    TeacherWorkloadOut,
)
from slotwise.services.calendar import holiday_lookup, teacher_day
from slotwise.services.store import DocumentStore

router = APIRouter()


def _slot_out(slot: TeacherSlot) -> TeacherSlotOut:
    return TeacherSlotOut(
        day=slot.day.value,
        period=slot.period,
        time_range=slot.time_range,
        section=slot.section.label,
        code=slot.code,
        subject=slot.subject,
    )


@router.get("/sections/{section}", response_model=SectionTimetableOut)
def read_section_timetable(
    section: str,
    workspace: ScheduleWorkspace = Depends(get_workspace),
    structure: TimetableStructure = Depends(get_structure),
):
    resolved = structure.section(section)
    days = section_timetable(structure, workspace.roster, workspace.schedule, resolved)
    return SectionTimetableOut(
        section=resolved.label,
        days=[
            SectionDayOut(
                day=day.value,
                rows=[
                    SectionRowOut(
                        period=row.period,
                        time_range=row.time_range,
                        activity=row.activity,
                        code=row.code,
                        subject=row.subject,
                        teacher_name=row.teacher_name,
                    )
                    for row in rows
                ],
            )
            for day, rows in days.items()
        ],
    )


@router.get("/teachers/{teacher_name}", response_model=TeacherScheduleOut)
def read_teacher_schedule(
    teacher_name: str,
    workspace: ScheduleWorkspace = Depends(get_workspace),
    structure: TimetableStructure = Depends(get_structure),
):
    slots = teacher_slots(structure, workspace.roster, workspace.schedule, teacher_name)
    return TeacherScheduleOut(
        teacher_name=teacher_name,
        codes=workspace.roster.codes_for_teacher(teacher_name),
        slots=[_slot_out(slot) for slot in slots],
    )


@router.get("/teachers/{teacher_name}/on/{on_date}", response_model=TeacherDayOut)
def read_teacher_day(
    teacher_name: str,
    on_date: date,
    workspace: ScheduleWorkspace = Depends(get_workspace),
    store: DocumentStore = Depends(get_store),
    structure: TimetableStructure = Depends(get_structure),
):
    lookup = holiday_lookup(store.load_calendar())
    result = teacher_day(structure, workspace.roster, workspace.schedule, teacher_name, on_date, lookup)
    return TeacherDayOut(
        teacher_name=teacher_name,
        date=result.date,
        day=result.day.value if result.day else None,
        holiday=result.holiday,
        slots=[_slot_out(slot) for slot in result.slots],
    )


@router.get("/workload", response_model=list[TeacherWorkloadOut])
def read_workload(workspace: ScheduleWorkspace = Depends(get_workspace)):
    return [
        TeacherWorkloadOut(
            teacher_name=entry.teacher_name,
            codes=list(entry.codes),
            quota_hours=entry.quota_hours,
            scheduled_hours=entry.scheduled_hours,
            unscheduled_hours=entry.unscheduled_hours,
        )
        for entry in workload_summary(workspace.roster, workspace.schedule)
    ]
