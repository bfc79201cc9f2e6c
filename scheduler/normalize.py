from collections import Counter
from collections.abc import Mapping
import math
from typing import Any, List, Optional, Set
from core.state import (
    GamePlan,
    Player,
    PlayerTimeSegment,
    Schedule,
    CourtPosition,
    empty_quarter,
    new_game_plan,
    new_id,
)
from core.diagnostics import Diagnostic, Outcome, warning
from scheduler.assignment import clamp_minutes
from scheduler.plans import PlanBook, new_book
from utils.constants import (
    QUARTERS,
    PLAYERS_ON_COURT,
    QUARTER_DURATION_MINUTES,
    DEFAULT_PLAN_NAME,
    UNTITLED_PLAN_NAME,
    UNNAMED_PLAYER_NAME,
)
from utils.logger import get_logger

logger = get_logger(__name__)

# Summary messages for repairs that can happen many times in one plan
COUNTED_REPAIRS = {
    "segment_id_generated": "{n} segment(s) had no id; new ids were generated.",
    "segment_id_duplicate": "{n} segment(s) had a duplicate id; new ids were generated.",
    "segment_unassigned_dropped": "{n} empty slot(s) were dropped.",
    "segment_orphan_dropped": "{n} segment(s) referenced players not on the roster and were dropped.",
    "segment_malformed_dropped": "{n} malformed segment(s) were dropped.",
    "segment_minutes_defaulted": "{n} segment(s) had invalid minutes; defaulted to the full quarter.",
    "segment_minutes_clamped": "{n} segment(s) had minutes outside the quarter; clamped.",
    "player_malformed_dropped": "{n} malformed roster entries were dropped.",
    "player_id_generated": "{n} player(s) had no id; new ids were generated.",
    "player_id_duplicate": "{n} duplicate player(s) were dropped.",
    "player_name_defaulted": "{n} player(s) had no name.",
}


def _text(value: Any) -> Optional[str]:
    """Non-empty string form of an id/name field, or None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class _Repairs:
    """Collects repair diagnostics for one record and logs them."""

    def __init__(self, label: str):
        self.label = label
        self.diagnostics: List[Diagnostic] = []
        self.counts: Counter = Counter()

    def report(self, code: str, message: str):
        logger.warning("%s: %s", self.label, message)
        self.diagnostics.append(warning(code, message))

    def count(self, code: str):
        self.counts[code] += 1

    def flush(self) -> List[Diagnostic]:
        for code, n in self.counts.items():
            self.report(code, COUNTED_REPAIRS[code].format(n=n))
        self.counts.clear()
        return self.diagnostics


def _normalize_players(raw_players: Any, repairs: _Repairs) -> List[Player]:
    if not isinstance(raw_players, list):
        repairs.report("players_missing", "Roster was missing or malformed; starting with an empty roster.")
        return []

    players, seen = [], set()
    for raw in raw_players:
        if not isinstance(raw, Mapping):
            repairs.count("player_malformed_dropped")
            continue
        player_id = _text(raw.get("id"))
        if player_id is None:
            player_id = new_id()
            repairs.count("player_id_generated")
        elif player_id in seen:
            repairs.count("player_id_duplicate")
            continue
        name = _text(raw.get("name"))
        if name is None:
            name = UNNAMED_PLAYER_NAME
            repairs.count("player_name_defaulted")
        seen.add(player_id)
        players.append(
            Player(
                id=player_id,
                name=name,
                jerseyNumber=_text(raw.get("jerseyNumber")),
                position=_text(raw.get("position")),
            )
        )
    return players


def _segment_minutes(raw_minutes: Any, quarter_minutes: int, repairs: _Repairs) -> int:
    if not _is_number(raw_minutes):
        repairs.count("segment_minutes_defaulted")
        return quarter_minutes
    minutes = clamp_minutes(raw_minutes, quarter_minutes)
    if minutes != raw_minutes:
        repairs.count("segment_minutes_clamped")
    return minutes


def _legacy_slot(raw: Any, quarter_minutes: int, repairs: _Repairs) -> List[dict]:
    """
    Older stores kept one occupant per position: either a bare player id (or
    null), or a {playerId, minutes} object without a segment id.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        return [{"playerId": raw, "minutes": quarter_minutes}]
    if isinstance(raw, Mapping):
        return [dict(raw)]
    repairs.count("segment_malformed_dropped")
    return []


def _normalize_position(
    raw: Any,
    roster_ids: Set[str],
    seen_ids: Set[str],
    quarter_minutes: int,
    repairs: _Repairs,
) -> CourtPosition:
    items = raw if isinstance(raw, list) else _legacy_slot(raw, quarter_minutes, repairs)

    segments = []
    for item in items:
        if isinstance(item, str):
            item = {"playerId": item, "minutes": quarter_minutes}
        if not isinstance(item, Mapping):
            repairs.count("segment_malformed_dropped")
            continue

        player_id = _text(item.get("playerId"))
        if player_id is None:
            repairs.count("segment_unassigned_dropped")
            continue
        if player_id not in roster_ids:
            repairs.count("segment_orphan_dropped")
            continue

        segment_id = _text(item.get("id"))
        if segment_id is None:
            segment_id = new_id()
            repairs.count("segment_id_generated")
        elif segment_id in seen_ids:
            segment_id = new_id()
            repairs.count("segment_id_duplicate")
        seen_ids.add(segment_id)

        segments.append(
            PlayerTimeSegment(
                id=segment_id,
                playerId=player_id,
                minutes=_segment_minutes(item.get("minutes"), quarter_minutes, repairs),
            )
        )
    return segments


def _normalize_schedule(
    raw_schedule: Any,
    roster_ids: Set[str],
    quarter_minutes: int,
    repairs: _Repairs,
) -> Schedule:
    if not isinstance(raw_schedule, Mapping):
        repairs.report("schedule_missing", "Schedule was missing or malformed; starting with an empty schedule.")
        return Schedule()

    schedule = Schedule()
    seen_ids: Set[str] = set()
    for quarter in QUARTERS:
        raw_quarter = raw_schedule.get(quarter)
        if not isinstance(raw_quarter, list):
            repairs.report("quarter_missing", f"{quarter} was missing or malformed; reset to empty positions.")
            schedule.quarters[quarter] = empty_quarter()
            continue
        if len(raw_quarter) != PLAYERS_ON_COURT:
            repairs.report(
                "quarter_resized",
                f"{quarter} had {len(raw_quarter)} positions; resized to {PLAYERS_ON_COURT}.",
            )
            raw_quarter = (list(raw_quarter) + [[]] * PLAYERS_ON_COURT)[:PLAYERS_ON_COURT]
        schedule.quarters[quarter] = [
            _normalize_position(raw, roster_ids, seen_ids, quarter_minutes, repairs)
            for raw in raw_quarter
        ]
    return schedule


def raw_to_plan(raw: Any, quarter_minutes: int = QUARTER_DURATION_MINUTES) -> Outcome[GamePlan]:
    """
    Map an untyped, possibly partial or legacy plan record onto a well-formed GamePlan.

    Loading never fails. Every field is repaired on its own: missing ids are
    generated, missing arrays default to empty, legacy one-occupant slots are
    turned into segments, and segments for players that are not on the roster
    are dropped. Each repair is logged and returned as a warning diagnostic.

    Args:
        raw (Any): A stored plan record, usually a dict decoded from JSON.
        quarter_minutes (int): Quarter duration used to clamp and default minutes.

    Returns:
        Outcome[GamePlan]: The repaired plan and the repairs made.
    """
    if not isinstance(raw, Mapping):
        repairs = _Repairs("plan")
        repairs.report("plan_malformed", "Stored plan was not a record; created an empty plan.")
        return Outcome(new_game_plan(DEFAULT_PLAN_NAME), repairs.flush())

    plan_id = _text(raw.get("id"))
    repairs = _Repairs(f"plan {plan_id or '<no id>'}")
    if plan_id is None:
        plan_id = new_id()
        repairs.report("plan_id_generated", f"Plan had no id; assigned {plan_id}.")

    name = _text(raw.get("name"))
    if name is None:
        name = UNTITLED_PLAN_NAME
        repairs.report("plan_name_defaulted", f'Plan had no name; named it "{name}".')

    players = _normalize_players(raw.get("players"), repairs)
    schedule = _normalize_schedule(
        raw.get("schedule"), {p.id for p in players}, quarter_minutes, repairs
    )
    plan = GamePlan(id=plan_id, name=name, players=players, schedule=schedule)
    return Outcome(plan, repairs.flush())


def raw_to_book(
    raw_plans: Any,
    current_id: Any = None,
    quarter_minutes: int = QUARTER_DURATION_MINUTES,
) -> Outcome[PlanBook]:
    """
    Rebuild the plan book from stored records. Entries that are not records are
    dropped; an empty result falls back to a single default plan. The stored
    current id is kept when it still exists, otherwise the first plan is current.
    """
    repairs = _Repairs("plan book")
    if raw_plans is None:
        raw_plans = []
    elif not isinstance(raw_plans, list):
        repairs.report("plans_malformed", "Stored plans were malformed; starting fresh.")
        raw_plans = []

    plans: List[GamePlan] = []
    diagnostics: List[Diagnostic] = []
    for raw in raw_plans:
        if not isinstance(raw, Mapping):
            repairs.report("plan_malformed", "Dropped a stored plan that was not a record.")
            continue
        outcome = raw_to_plan(raw, quarter_minutes)
        plan = outcome.value
        if any(p.id == plan.id for p in plans):
            plan.id = new_id()
            repairs.report("plan_id_duplicate", f'Plan "{plan.name}" had a duplicate id; assigned {plan.id}.')
        plans.append(plan)
        diagnostics.extend(outcome.diagnostics)

    if not plans:
        logger.info("No stored plans; starting with %r", DEFAULT_PLAN_NAME)
        book = new_book(DEFAULT_PLAN_NAME)
        return Outcome(book, repairs.flush() + diagnostics)

    book = PlanBook(plans=plans)
    current = _text(current_id)
    if current is not None and book.find(current) is not None:
        book.current_id = current
    else:
        if current is not None:
            repairs.report("current_plan_missing", f"Stored current plan {current} not found; loaded the first plan.")
        book.current_id = plans[0].id
    return Outcome(book, repairs.flush() + diagnostics)
