from slotwise.engine.candidates import Candidate, CandidateReason, CandidateResolution, resolve_candidates  # noqa: F401
from slotwise.engine.conflicts import CellConflict, DayConflictReport, detect_conflicts, detect_week  # noqa: F401
from slotwise.engine.constraints import UnavailabilityConstraintSet  # noqa: F401
from slotwise.engine.roster import AssignmentRecord, Roster  # noqa: F401
from slotwise.engine.schedule_map import CellKey, ScheduleMap  # noqa: F401
from slotwise.engine.structure import (  # noqa: F401
    Day,
    DaySchedule,
    Period,
    Section,
    TimetableStructure,
    default_structure,
)
from slotwise.engine.usage import QuotaStatus, UsageCounter  # noqa: F401
from slotwise.engine.workspace import ScheduleWorkspace  # noqa: F401
