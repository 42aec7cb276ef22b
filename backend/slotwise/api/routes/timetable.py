from fastapi import APIRouter, Depends

from slotwise.api.deps import get_structure
from slotwise.engine.structure import TimetableStructure
from slotwise.schemas.views import DayStructureOut, PeriodOut, TimetableStructureOut

router = APIRouter()


@router.get("/structure", response_model=TimetableStructureOut)
def read_structure(structure: TimetableStructure = Depends(get_structure)):
    return TimetableStructureOut(
        days=[
            DayStructureOut(
                day=entry.day.value,
                periods=[
                    PeriodOut(period=period.number, time_range=period.time_range, activity=period.activity)
                    for period in entry.periods
                ],
            )
            for entry in structure
        ],
        sections=[section.label for section in structure.sections],
    )
