from typing import Iterable, Optional, Set
import pandas as pd
from core.state import GamePlan, Schedule
from scheduler.assignment import position_minutes
from utils.constants import QUARTERS


def total_playing_time(schedule: Schedule, player_id: str) -> int:
    """Sum of minutes over every segment of the player, in every quarter and position."""
    return sum(s.minutes for _, _, s in schedule.segments() if s.playerId == player_id)


def currently_on_court(
    schedule: Schedule, quarters: Optional[Iterable[str]] = None
) -> Set[str]:
    """
    Players who are the last occupant of at least one position in the given
    quarters (every quarter by default).
    """
    on_court = set()
    for quarter in quarters or QUARTERS:
        for segments in schedule.positions(quarter):
            if segments:
                on_court.add(segments[-1].playerId)
    return on_court


def quarter_minutes_by_player(schedule: Schedule, quarter: str) -> dict:
    minutes = {}
    for segments in schedule.positions(quarter):
        for s in segments:
            minutes[s.playerId] = minutes.get(s.playerId, 0) + s.minutes
    return minutes


def playing_time_summary(plan: GamePlan) -> pd.DataFrame:
    """
    Build a playing time table for the roster.

    One row per roster player with their minutes in each quarter, the total,
    and whether they end at least one quarter on court. Rows are sorted by
    total minutes, most first; ties keep roster order.

    Args:
        plan (GamePlan): Plan whose roster and schedule are summarised.

    Returns:
        pd.DataFrame: Columns id, name, jerseyNumber, Q1..Q4, total, onCourt.
    """
    columns = ["id", "name", "jerseyNumber", *QUARTERS, "total", "onCourt"]
    if not plan.players:
        return pd.DataFrame(columns=columns)

    per_quarter = {q: quarter_minutes_by_player(plan.schedule, q) for q in QUARTERS}
    on_court = currently_on_court(plan.schedule)
    rows = []
    for p in plan.players:
        row = {"id": p.id, "name": p.name, "jerseyNumber": p.jerseyNumber}
        for q in QUARTERS:
            row[q] = per_quarter[q].get(p.id, 0)
        row["total"] = total_playing_time(plan.schedule, p.id)
        row["onCourt"] = p.id in on_court
        rows.append(row)

    df = pd.DataFrame(rows, columns=columns)
    # Missing jersey numbers stay None, not NaN, so records serialise to JSON
    jersey = df["jerseyNumber"].astype(object)
    df["jerseyNumber"] = jersey.where(jersey.notna(), None)
    return df.sort_values(by="total", ascending=False, kind="stable").reset_index(drop=True)


__all__ = [
    "total_playing_time",
    "currently_on_court",
    "position_minutes",
    "quarter_minutes_by_player",
    "playing_time_summary",
]
