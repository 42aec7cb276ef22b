from fastapi import APIRouter, Depends

from slotwise.api.deps import get_structure, get_workspace
from slotwise.engine.conflicts import DayConflictReport
from slotwise.engine.structure import TimetableStructure
from slotwise.engine.workspace import ScheduleWorkspace
from slotwise.schemas.conflict import (
    CellConflictOut,
    DayConflictReportOut,
    UnavailableCellOut,
    WeekConflictSummaryOut,
)

router = APIRouter()


def _report_out(report: DayConflictReport, workspace: ScheduleWorkspace) -> DayConflictReportOut:
    return DayConflictReportOut(
        day=report.day.value,
        cross_section_conflicts=report.cross_section_conflicts,
        same_section_multi_subject_conflicts=report.same_section_multi_subject_conflicts,
        cells=[
            CellConflictOut(
                period=item.cell.period,
                section=item.cell.section.label,
                code=item.code,
                teacher_name=item.teacher_name,
                clashes_with=[section.label for section in item.clashes_with],
                deviates_from=item.deviates_from,
                message=item.message,
            )
            for item in report.cells
        ],
        unavailable_cells=[
            UnavailableCellOut(
                period=key.period,
                section=key.section.label,
                code=workspace.schedule.get(key.day, key.period, key.section),
            )
            for key in report.unavailable_cells
        ],
        schedule_version=workspace.schedule.version,
    )


@router.get("", response_model=WeekConflictSummaryOut)
def week_conflicts(workspace: ScheduleWorkspace = Depends(get_workspace)):
    reports = [_report_out(report, workspace) for report in workspace.week_conflicts()]
    return WeekConflictSummaryOut(
        days=reports,
        total_cross_section_conflicts=sum(item.cross_section_conflicts for item in reports),
        total_same_section_multi_subject_conflicts=sum(item.same_section_multi_subject_conflicts for item in reports),
    )


@router.get("/{day}", response_model=DayConflictReportOut)
def day_conflicts(
    day: str,
    workspace: ScheduleWorkspace = Depends(get_workspace),
    structure: TimetableStructure = Depends(get_structure),
):
    return _report_out(workspace.conflicts(structure.day_schedule(day).day), workspace)
