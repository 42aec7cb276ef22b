from __future__ import annotations

import logging

from slotwise.core.exceptions import SelectionRejectedError
from slotwise.engine.structure import Day, Section
from slotwise.engine.workspace import ScheduleWorkspace

logger = logging.getLogger(__name__)


def apply_selection(workspace: ScheduleWorkspace, day: Day, period: int, section: Section, code: str | None) -> None:
    """Write a cell, accepting only values the resolver offers as selectable."""
    resolution = workspace.candidates(day, period, section)
    if code is None:
        workspace.assign(day, period, resolution.cell.section, None)
        logger.info("Cleared %s period %d %s", day.value, period, resolution.cell.section)
        return

    candidate = resolution.find(code)
    if candidate is None:
        hidden = next((item for item in resolution.hidden if item.code == code), None)
        raise SelectionRejectedError(
            f"Code {code!r} is not offered for {day.value} period {period} {resolution.cell.section}",
            details={
                "code": code,
                "reason": hidden.reason.value if hidden and hidden.reason else "not_eligible",
            },
        )
    if not candidate.selectable and not candidate.is_current:
        raise SelectionRejectedError(
            f"Code {code!r} is disabled for {day.value} period {period} {resolution.cell.section}",
            details={
                "code": code,
                "reason": candidate.reason.value if candidate.reason else None,
                "conflicting_codes": list(candidate.conflicting_codes),
            },
        )

    workspace.assign(day, period, resolution.cell.section, code)
    logger.info("Assigned %s to %s period %d %s", code, day.value, period, resolution.cell.section)
