from fastapi import APIRouter, Depends

from slotwise.api.deps import get_workspace
from slotwise.engine.workspace import ScheduleWorkspace
from slotwise.schemas.usage import MonitoringOut, MonitoringRowOut, QuotaAnomalyOut, QuotaStatusOut

router = APIRouter()


@router.get("", response_model=MonitoringOut)
def read_usage(workspace: ScheduleWorkspace = Depends(get_workspace)):
    rows = []
    for record, statuses in zip(workspace.roster.records, workspace.monitoring()):
        rows.append(
            MonitoringRowOut(
                code=record.code,
                teacher_name=record.teacher_name,
                subject=record.subject,
                sections=[
                    QuotaStatusOut(
                        section=status.section.label,
                        target=status.target,
                        used=status.used,
                        remaining=status.remaining,
                    )
                    for status in statuses
                ],
            )
        )
    anomalies = [
        QuotaAnomalyOut(
            code=status.code,
            section=status.section.label,
            target=status.target,
            used=status.used,
            remaining=status.remaining,
        )
        for status in workspace.quota_anomalies()
    ]
    return MonitoringOut(
        rows=rows,
        anomalies=anomalies,
        unknown_codes=workspace.usage().unknown_codes(),
        schedule_version=workspace.schedule.version,
    )
