from datetime import date

from slotwise.engine import Day, Section
from slotwise.engine.views import section_timetable, teacher_slots, workload_summary
from slotwise.schemas.calendar import CalendarEventPayload
from slotwise.services.calendar import holiday_lookup, teacher_day, weekday_of

VII_A = Section("VII", "A")
VII_B = Section("VII", "B")


def test_section_timetable_includes_activities(workspace, structure):
    workspace.assign(Day.monday, 1, VII_A, "M1")
    days = section_timetable(structure, workspace.roster, workspace.schedule, VII_A)

    monday = days[Day.monday]
    assert monday[0].activity == "Flag ceremony"
    assert monday[0].period is None
    assert (monday[1].period, monday[1].code, monday[1].subject, monday[1].teacher_name) == (
        1,
        "M1",
        "Math",
        "Teacher X",
    )
    assert monday[2].code is None


def test_teacher_slots_cover_all_codes(workspace, structure):
    workspace.assign(Day.monday, 1, VII_A, "M1")
    workspace.assign(Day.tuesday, 2, VII_A, "S1")
    workspace.assign(Day.tuesday, 3, VII_B, "E1")

    slots = teacher_slots(structure, workspace.roster, workspace.schedule, "Teacher X")
    assert [(slot.day, slot.period, slot.code, slot.subject) for slot in slots] == [
        (Day.monday, 1, "M1", "Math"),
        (Day.tuesday, 2, "S1", "Science"),
    ]
    assert teacher_slots(structure, workspace.roster, workspace.schedule, "Nobody") == []


def test_workload_summary(workspace):
    workspace.assign(Day.monday, 1, VII_A, "M1")
    workspace.assign(Day.monday, 2, VII_B, "M1")
    summary = {entry.teacher_name: entry for entry in workload_summary(workspace.roster, workspace.schedule)}
    assert summary["Teacher X"].quota_hours == 7
    assert summary["Teacher X"].scheduled_hours == 2
    assert summary["Teacher X"].unscheduled_hours == 5
    assert summary["Teacher Y"].quota_hours == 12


def test_teacher_day_uses_weekday_and_holidays(workspace, structure):
    workspace.assign(Day.monday, 1, VII_A, "M1")
    lookup = holiday_lookup(
        [CalendarEventPayload(id="h1", date=date(2026, 10, 26), description="School anniversary")]
    )

    regular = teacher_day(structure, workspace.roster, workspace.schedule, "Teacher X", date(2026, 10, 19), lookup)
    assert regular.day is Day.monday
    assert [slot.code for slot in regular.slots] == ["M1"]

    holiday = teacher_day(structure, workspace.roster, workspace.schedule, "Teacher X", date(2026, 10, 26), lookup)
    assert holiday.holiday == "School anniversary"
    assert holiday.slots == []

    sunday = teacher_day(structure, workspace.roster, workspace.schedule, "Teacher X", date(2026, 10, 18), lookup)
    assert sunday.day is None
    assert sunday.slots == []


def test_weekday_mapping():
    assert weekday_of(date(2026, 10, 24)) is Day.saturday
    assert weekday_of(date(2026, 10, 25)) is None
