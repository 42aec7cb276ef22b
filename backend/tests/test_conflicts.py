import pytest

from slotwise.core.exceptions import DataIntegrityError
from slotwise.engine import AssignmentRecord, Day, Roster, ScheduleWorkspace, Section, default_structure

VII_A = Section("VII", "A")
VII_B = Section("VII", "B")
VIII_A = Section("VIII", "A")


def test_empty_day_has_no_conflicts(workspace):
    report = workspace.conflicts(Day.monday)
    assert report.cross_section_conflicts == 0
    assert report.same_section_multi_subject_conflicts == 0
    assert report.cells == []
    assert not report.has_conflicts


def test_cross_section_counts_each_offending_cell(workspace):
    workspace.assign(Day.monday, 1, VII_A, "E1")
    workspace.assign(Day.monday, 1, VII_B, "E1")

    report = workspace.conflicts(Day.monday)
    assert report.cross_section_conflicts == 2
    flagged = {item.cell.section: item.clashes_with for item in report.cells}
    assert flagged == {VII_A: (VII_B,), VII_B: (VII_A,)}


def test_cross_section_with_three_sections_counts_three(workspace):
    for section in (VII_A, VII_B, VIII_A):
        workspace.assign(Day.tuesday, 2, section, "E1")
    report = workspace.conflicts(Day.tuesday)
    assert report.cross_section_conflicts == 3
    assert report.cells[0].message == "clashes with VII B, VIII A"


def test_cross_section_detects_same_teacher_under_different_codes(workspace):
    workspace.assign(Day.monday, 4, VII_A, "S1")
    workspace.assign(Day.monday, 4, VII_B, "M1")
    assert workspace.conflicts(Day.monday).cross_section_conflicts == 2


def test_different_periods_do_not_clash(workspace):
    workspace.assign(Day.monday, 1, VII_A, "E1")
    workspace.assign(Day.monday, 2, VII_B, "E1")
    assert workspace.conflicts(Day.monday).cross_section_conflicts == 0


def test_same_section_deviation_counted_once(workspace):
    workspace.assign(Day.wednesday, 1, VII_A, "M1")
    workspace.assign(Day.wednesday, 3, VII_A, "S1")
    report = workspace.conflicts(Day.wednesday)
    assert report.same_section_multi_subject_conflicts == 1
    assert [(item.cell.period, item.deviates_from) for item in report.cells] == [(3, "M1")]


def test_repeated_deviating_code_is_not_counted_again(workspace):
    workspace.assign(Day.wednesday, 1, VII_A, "M1")
    workspace.assign(Day.wednesday, 2, VII_A, "S1")
    workspace.assign(Day.wednesday, 3, VII_A, "S1")
    report = workspace.conflicts(Day.wednesday)
    assert report.same_section_multi_subject_conflicts == 1
    assert [item.cell.period for item in report.cells] == [2, 3]


def test_each_distinct_deviating_code_counts():
    structure = default_structure(["VII A"])
    roster = Roster(
        [
            AssignmentRecord("M1", "Teacher X", "Math", {VII_A: 4}),
            AssignmentRecord("S1", "Teacher X", "Science", {VII_A: 4}),
            AssignmentRecord("B1", "Teacher X", "Biology", {VII_A: 4}),
        ]
    )
    workspace = ScheduleWorkspace(structure, roster)
    workspace.assign(Day.thursday, 1, VII_A, "M1")
    workspace.assign(Day.thursday, 2, VII_A, "S1")
    workspace.assign(Day.thursday, 3, VII_A, "B1")
    assert workspace.conflicts(Day.thursday).same_section_multi_subject_conflicts == 2


def test_conflicts_are_scoped_to_one_day(workspace):
    workspace.assign(Day.monday, 1, VII_A, "M1")
    workspace.assign(Day.tuesday, 1, VII_A, "S1")
    assert workspace.conflicts(Day.monday).same_section_multi_subject_conflicts == 0
    assert workspace.conflicts(Day.tuesday).same_section_multi_subject_conflicts == 0


def test_detector_is_idempotent(workspace):
    workspace.assign(Day.monday, 1, VII_A, "E1")
    workspace.assign(Day.monday, 1, VII_B, "E1")
    workspace.assign(Day.monday, 2, VII_A, "M1")
    workspace.assign(Day.monday, 3, VII_A, "S1")
    first = workspace.conflicts(Day.monday)
    second = workspace.conflicts(Day.monday)
    assert first == second


def test_unavailable_cells_are_flagged_not_cleared(workspace):
    workspace.assign(Day.friday, 1, VIII_A, "A1")
    workspace.constraints.toggle("A1", Day.friday)
    report = workspace.conflicts(Day.friday)
    assert [(key.period, key.section) for key in report.unavailable_cells] == [(1, VIII_A)]
    assert workspace.schedule.get(Day.friday, 1, VIII_A) == "A1"


def test_week_summary_covers_every_day(workspace):
    workspace.assign(Day.saturday, 1, VII_A, "E1")
    workspace.assign(Day.saturday, 1, VIII_A, "E1")
    reports = workspace.week_conflicts()
    assert [report.day for report in reports] == list(Day)
    assert reports[-1].cross_section_conflicts == 2


def test_unknown_code_in_grid_raises(workspace):
    workspace.assign(Day.monday, 1, VII_A, "GHOST")
    with pytest.raises(DataIntegrityError):
        workspace.conflicts(Day.monday)
