from pydantic import BaseModel
from typing import List, Optional

class CellConflictOut(BaseModel):
    period: int
    section: str
    code: str
    teacher_name: str
    clashes_with: List[str]
    deviates_from: Optional[str] = None
    message: str

class UnavailableCellOut(BaseModel):
    period: int
    section: str
    code: str

class DayConflictReportOut(BaseModel):
    day: str
    cross_section_conflicts: int
    same_section_multi_subject_conflicts: int
    cells: List[CellConflictOut]
    unavailable_cells: List[UnavailableCellOut]
    schedule_version: int

class WeekConflictSummaryOut(BaseModel):
    days: List[DayConflictReportOut]
    total_cross_section_conflicts: int
    total_same_section_multi_subject_conflicts: int
