from slotwise.engine import (
    AssignmentRecord,
    CellKey,
    Day,
    Roster,
    ScheduleMap,
    ScheduleWorkspace,
    Section,
    UsageCounter,
)

VII_A = Section("VII", "A")
VII_B = Section("VII", "B")


def test_set_replaces_and_clears():
    schedule = ScheduleMap()
    schedule.set(Day.monday, 1, VII_A, "M1")
    schedule.set(Day.monday, 1, VII_A, "E1")
    assert schedule.get(Day.monday, 1, VII_A) == "E1"
    assert len(schedule) == 1

    schedule.set(Day.monday, 1, VII_A, None)
    assert schedule.get(Day.monday, 1, VII_A) is None
    assert len(schedule) == 0
    assert schedule.version == 3


def test_snapshot_is_isolated_from_later_writes():
    schedule = ScheduleMap()
    schedule.set(Day.monday, 1, VII_A, "M1")
    snapshot = schedule.snapshot()
    schedule.set(Day.monday, 2, VII_A, "M1")
    assert len(snapshot) == 1
    assert snapshot.version == 1


def test_used_matches_number_of_cells(roster):
    schedule = ScheduleMap()
    for period in (1, 2, 3):
        schedule.set(Day.tuesday, period, VII_B, "E1")
    schedule.set(Day.wednesday, 1, VII_B, "E1")
    schedule.set(Day.wednesday, 2, VII_A, "E1")

    usage = UsageCounter(roster, schedule)
    assert usage.used("E1", VII_B) == 4
    assert usage.used("E1", VII_A) == 1
    assert usage.remaining("E1", VII_B) == 0
    assert usage.remaining("E1", VII_A) == 3


def test_excluding_a_cell_drops_it_from_the_count(roster):
    schedule = ScheduleMap()
    schedule.set(Day.monday, 1, VII_A, "M1")
    schedule.set(Day.monday, 2, VII_A, "M1")
    usage = UsageCounter(roster, schedule, excluding=CellKey(Day.monday, 2, VII_A))
    assert usage.used("M1", VII_A) == 1
    assert usage.remaining("M1", VII_A) == 1


def test_negative_remaining_after_quota_reduction(structure):
    schedule = ScheduleMap()
    for period in (1, 2, 3):
        schedule.set(Day.thursday, period, VII_A, "M1")
    reduced = Roster([AssignmentRecord("M1", "Teacher X", "Math", {VII_A: 1})])
    workspace = ScheduleWorkspace(structure, reduced, schedule)

    assert workspace.remaining("M1", VII_A) == -2
    anomalies = workspace.quota_anomalies()
    assert [(item.code, item.section, item.remaining) for item in anomalies] == [("M1", VII_A, -2)]


def test_usage_cache_follows_schedule_version(workspace):
    first = workspace.usage()
    assert workspace.usage() is first
    workspace.assign(Day.monday, 1, VII_A, "M1")
    second = workspace.usage()
    assert second is not first
    assert second.used("M1", VII_A) == 1


def test_replacing_roster_invalidates_usage(workspace):
    workspace.assign(Day.monday, 1, VII_A, "M1")
    assert workspace.remaining("M1", VII_A) == 1
    workspace.roster = Roster([AssignmentRecord("M1", "Teacher X", "Math", {VII_A: 5})])
    assert workspace.remaining("M1", VII_A) == 4


def test_monitoring_table_lists_owed_and_used_sections(workspace):
    workspace.assign(Day.monday, 1, VII_B, "S1")
    rows = {statuses[0].code: statuses for statuses in workspace.monitoring() if statuses}
    assert [(item.section, item.target, item.used) for item in rows["S1"]] == [(VII_A, 2, 0), (VII_B, 0, 1)]
    assert rows["S1"][1].remaining == -1


def test_unknown_codes_are_reported(workspace):
    workspace.assign(Day.monday, 1, VII_A, "GHOST")
    assert workspace.usage().unknown_codes() == ["GHOST"]


def test_workspace_tracks_the_schedule_it_was_given(structure, roster):
    schedule = ScheduleMap()
    workspace = ScheduleWorkspace(structure, roster, schedule)
    assert workspace.schedule is schedule

    schedule.set(Day.monday, 1, VII_A, "M1")
    assert workspace.remaining("M1", VII_A) == 1


def test_replacing_schedule_invalidates_usage(workspace):
    assert workspace.remaining("M1", VII_A) == 2
    workspace.schedule = ScheduleMap(
        [
            (CellKey(Day.monday, 1, VII_A), "M1"),
            (CellKey(Day.monday, 2, VII_A), "M1"),
        ]
    )

    assert workspace.remaining("M1", VII_A) == 0
    resolution = workspace.candidates(Day.monday, 3, VII_A)
    assert "M1" in [item.code for item in resolution.hidden]


def test_swapping_in_a_snapshot_with_same_version_recomputes(workspace):
    workspace.assign(Day.monday, 1, VII_A, "M1")
    older = workspace.schedule.snapshot()
    workspace.assign(Day.monday, 1, VII_A, None)
    workspace.assign(Day.monday, 2, VII_A, "S1")
    assert workspace.remaining("M1", VII_A) == 2

    # Same version number as the live map had before the two writes above.
    older.set(Day.monday, 3, VII_A, "M1")
    older.set(Day.monday, 4, VII_A, "M1")
    assert older.version == workspace.schedule.version
    workspace.schedule = older
    assert workspace.remaining("M1", VII_A) == -1


def test_loaded_schedule_starts_at_the_given_version():
    schedule = ScheduleMap([(CellKey(Day.monday, 1, VII_A), "M1")], version=7)
    schedule.set(Day.monday, 2, VII_A, "M1")
    assert schedule.version == 8
