from __future__ import annotations

from pydantic import BaseModel, Field


class QuotaStatusOut(BaseModel):
    section: str
    target: int
    used: int
    remaining: int


class MonitoringRowOut(BaseModel):
    code: str
    teacher_name: str
    subject: str
    sections: list[QuotaStatusOut] = Field(default_factory=list)


class QuotaAnomalyOut(QuotaStatusOut):
    code: str


class MonitoringOut(BaseModel):
    rows: list[MonitoringRowOut]
    anomalies: list[QuotaAnomalyOut]
    unknown_codes: list[str]
    schedule_version: int
