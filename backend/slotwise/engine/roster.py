from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from slotwise.core.exceptions import DataIntegrityError, RosterValidationError
from slotwise.engine.structure import Section


@dataclass(frozen=True)
class AssignmentRecord:
    code: str
    teacher_name: str
    subject: str
    quotas: Mapping[Section, int] = field(default_factory=dict)

    def quota(self, section: Section) -> int:
        return self.quotas.get(section, 0)

    @property
    def total_quota(self) -> int:
        return sum(self.quotas.values())


class Roster:
    """Read-only view over the teacher/subject records and their section quotas."""

    def __init__(self, records: Iterable[AssignmentRecord]) -> None:
        by_code: dict[str, AssignmentRecord] = {}
        duplicates: list[str] = []
        for record in records:
            if record.code in by_code:
                duplicates.append(record.code)
                continue
            negative = sorted(str(section) for section, hours in record.quotas.items() if hours < 0)
            if negative:
                raise RosterValidationError(
                    f"Quota for code {record.code!r} must be non-negative",
                    details={"code": record.code, "sections": negative},
                )
            by_code[record.code] = record
        if duplicates:
            raise RosterValidationError(
                "Assignment codes must be unique",
                details={"duplicates": sorted(set(duplicates))},
            )

        self._by_code = dict(sorted(by_code.items()))
        self._codes_by_teacher: dict[str, list[str]] = defaultdict(list)
        for code, record in self._by_code.items():
            self._codes_by_teacher[record.teacher_name].append(code)

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    @property
    def records(self) -> tuple[AssignmentRecord, ...]:
        return tuple(self._by_code.values())

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._by_code)

    @property
    def teacher_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._codes_by_teacher))

    def record(self, code: str) -> AssignmentRecord:
        record = self._by_code.get(code)
        if record is None:
            raise DataIntegrityError(code)
        return record

    def teacher_of(self, code: str) -> str:
        return self.record(code).teacher_name

    def subject_of(self, code: str) -> str:
        return self.record(code).subject

    def quota(self, code: str, section: Section) -> int:
        return self.record(code).quota(section)

    def eligible_codes(self, section: Section) -> list[AssignmentRecord]:
        return [record for record in self._by_code.values() if record.quota(section) > 0]

    def codes_for_teacher(self, teacher_name: str) -> list[str]:
        return list(self._codes_by_teacher.get(teacher_name, []))

    @property
    def quota_sections(self) -> set[Section]:
        return {section for record in self._by_code.values() for section in record.quotas}
