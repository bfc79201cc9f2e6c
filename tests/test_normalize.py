"""Tests for repairing stored plan records on load."""

import pytest

from scheduler.normalize import raw_to_book, raw_to_plan

ROSTER = [{"id": "p1", "name": "Alice"}, {"id": "p2", "name": "Bea"}]


def empty_quarter():
    return [[], [], [], [], []]


def codes(outcome):
    return {d.code for d in outcome.diagnostics}


def test_well_formed_record_is_kept_without_diagnostics():
    raw = {
        "id": "plan-1",
        "name": "Opener",
        "players": [{"id": "p1", "name": "Alice", "jerseyNumber": "7", "position": "G"}],
        "schedule": {
            "Q1": [[{"id": "s1", "playerId": "p1", "minutes": 8}], [], [], [], []],
            "Q2": empty_quarter(),
            "Q3": empty_quarter(),
            "Q4": empty_quarter(),
        },
    }
    outcome = raw_to_plan(raw)
    assert outcome.diagnostics == []
    assert outcome.value.to_dict() == raw


@pytest.mark.parametrize("raw", [None, "plan", 42, ["a"]])
def test_non_record_becomes_empty_plan(raw):
    outcome = raw_to_plan(raw)
    assert outcome.value.players == []
    assert list(outcome.value.schedule.segments()) == []
    assert "plan_malformed" in codes(outcome)


def test_missing_fields_are_defaulted():
    outcome = raw_to_plan({})
    plan = outcome.value
    assert plan.id
    assert plan.name == "Untitled Plan"
    assert plan.players == []
    assert all(len(plan.schedule.positions(q)) == 5 for q in ("Q1", "Q2", "Q3", "Q4"))
    assert {"plan_id_generated", "plan_name_defaulted", "players_missing", "schedule_missing"} <= codes(outcome)


def test_oldest_format_bare_player_ids():
    raw = {
        "id": "x",
        "name": "Old",
        "players": ROSTER,
        "schedule": {q: ["p1", None, "p2", None, None] for q in ("Q1", "Q2", "Q3", "Q4")},
    }
    plan = raw_to_plan(raw).value
    q1 = plan.schedule.positions("Q1")
    assert q1[0][0].playerId == "p1"
    assert q1[0][0].minutes == 10
    assert q1[1] == []
    assert q1[2][0].playerId == "p2"
    ids = [s.id for _, _, s in plan.schedule.segments()]
    assert len(ids) == len(set(ids)) == 8


def test_single_slot_object_format():
    slots = [
        {"playerId": "p1", "minutes": 7},
        {"playerId": None, "minutes": 0},
        {"playerId": "p2"},
        {"playerId": "p2", "minutes": "lots"},
        None,
    ]
    raw = {"id": "x", "name": "Mid", "players": ROSTER, "schedule": {"Q1": slots}}
    outcome = raw_to_plan(raw)
    q1 = outcome.value.schedule.positions("Q1")
    assert [s.minutes for s in q1[0]] == [7]
    assert q1[1] == []
    assert [s.minutes for s in q1[2]] == [10]
    assert [s.minutes for s in q1[3]] == [10]
    assert q1[4] == []
    assert {"segment_minutes_defaulted", "segment_unassigned_dropped", "quarter_missing"} <= codes(outcome)


def test_segments_are_repaired():
    raw = {
        "id": "x",
        "name": "Repairs",
        "players": ROSTER,
        "schedule": {
            "Q1": [
                [
                    {"id": "s1", "playerId": "p1", "minutes": 30},
                    {"id": "s1", "playerId": "p2", "minutes": -2},
                    {"playerId": "p2", "minutes": 3},
                    {"id": "s9", "playerId": "ghost", "minutes": 5},
                    17,
                ],
                [],
                [],
                [],
                [],
            ],
        },
    }
    outcome = raw_to_plan(raw)
    segments = outcome.value.schedule.position("Q1", 0)
    assert [s.playerId for s in segments] == ["p1", "p2", "p2"]
    assert [s.minutes for s in segments] == [10, 0, 3]
    assert segments[0].id == "s1"
    assert len({s.id for s in segments}) == 3
    assert {
        "segment_minutes_clamped",
        "segment_id_duplicate",
        "segment_id_generated",
        "segment_orphan_dropped",
        "segment_malformed_dropped",
    } <= codes(outcome)


def test_quarter_with_wrong_position_count_is_resized():
    raw = {
        "id": "x",
        "name": "Resize",
        "players": ROSTER,
        "schedule": {"Q1": [[{"id": "a", "playerId": "p1", "minutes": 5}]], "Q2": [[]] * 7},
    }
    outcome = raw_to_plan(raw)
    assert len(outcome.value.schedule.positions("Q1")) == 5
    assert len(outcome.value.schedule.positions("Q2")) == 5
    assert outcome.value.schedule.position("Q1", 0)[0].id == "a"
    assert "quarter_resized" in codes(outcome)


def test_players_are_repaired():
    raw = {
        "id": "x",
        "name": "Roster",
        "players": [
            {"id": "p1", "name": "Alice", "jerseyNumber": 7},
            {"id": "p1", "name": "Alice again"},
            {"name": "No Id"},
            {"id": "p3"},
            "junk",
        ],
        "schedule": {},
    }
    outcome = raw_to_plan(raw)
    players = outcome.value.players
    assert [p.name for p in players] == ["Alice", "No Id", "Unnamed Player"]
    assert players[0].jerseyNumber == "7"
    assert players[1].id
    assert {
        "player_id_duplicate",
        "player_id_generated",
        "player_name_defaulted",
        "player_malformed_dropped",
    } <= codes(outcome)


def test_raw_to_book_keeps_stored_current_plan():
    raw = [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}]
    book = raw_to_book(raw, "b").value
    assert [p.id for p in book.plans] == ["a", "b"]
    assert book.current_id == "b"


def test_raw_to_book_falls_back_to_first_plan():
    outcome = raw_to_book([{"id": "a", "name": "A"}], "gone")
    assert outcome.value.current_id == "a"
    assert "current_plan_missing" in codes(outcome)


@pytest.mark.parametrize("raw", [None, [], "nonsense", [1, "x", None]])
def test_raw_to_book_never_ends_empty(raw):
    book = raw_to_book(raw).value
    assert len(book.plans) == 1
    assert book.current.name == "Default Plan"


def test_raw_to_book_regenerates_duplicate_plan_ids():
    outcome = raw_to_book([{"id": "a", "name": "A"}, {"id": "a", "name": "B"}])
    ids = [p.id for p in outcome.value.plans]
    assert ids[0] == "a"
    assert ids[1] != "a"
    assert "plan_id_duplicate" in codes(outcome)
