import math
from dataclasses import dataclass
from typing import Optional
from utils.logger import get_logger
from core.state import Schedule, PlayerTimeSegment, new_id
from core.diagnostics import Outcome, Diagnostic, warning
from utils.constants import QUARTER_DURATION_MINUTES, DEFAULT_SUBSTITUTE_MINUTES

logger = get_logger(__name__)

SOURCE_LIST = "list"
SOURCE_TIMELINE = "timeline"


@dataclass
class DragSource:
    """Where an assignment comes from: the roster list, or an existing timeline segment."""

    source_type: str = SOURCE_LIST
    source_quarter: Optional[str] = None
    source_position: Optional[int] = None
    source_segment_id: Optional[str] = None

    @property
    def is_timeline(self) -> bool:
        return (
            self.source_type == SOURCE_TIMELINE
            and self.source_quarter is not None
            and self.source_position is not None
            and self.source_segment_id is not None
        )


def clamp_minutes(minutes, quarter_minutes: int = QUARTER_DURATION_MINUTES) -> int:
    """Clamp to [0, quarter_minutes]. NaN counts as 0."""
    if isinstance(minutes, float) and math.isnan(minutes):
        return 0
    return int(max(0, min(minutes, quarter_minutes)))


def position_minutes(schedule: Schedule, quarter: str, position: int) -> int:
    """Sum of planned minutes over the segments of one court position."""
    return sum(s.minutes for s in schedule.position(quarter, position))


def position_overflow(
    schedule: Schedule,
    quarter: str,
    position: int,
    quarter_minutes: int = QUARTER_DURATION_MINUTES,
) -> Optional[Diagnostic]:
    """Warning when a position's segments add up to more than the quarter lasts."""
    total = position_minutes(schedule, quarter, position)
    if total <= quarter_minutes:
        return None
    return warning(
        "position_overflow",
        f"{quarter} position {position + 1} has {total} minutes planned, "
        f"more than the {quarter_minutes} minute quarter.",
    )


def _remove_segment(schedule: Schedule, quarter: str, position: int, segment_id: str) -> bool:
    segments = schedule.position(quarter, position)
    for idx, segment in enumerate(segments):
        if segment.id == segment_id:
            del segments[idx]
            return True
    return False


def assign_player_to_position(
    schedule: Schedule,
    player_id: str,
    target_quarter: str,
    target_position: int,
    source: Optional[DragSource] = None,
    quarter_minutes: int = QUARTER_DURATION_MINUTES,
    substitute_minutes: int = DEFAULT_SUBSTITUTE_MINUTES,
) -> Outcome[Schedule]:
    """
    Assign a player to a court position in a quarter, moving them if needed.

    Works on a copy of the schedule:

    1. A timeline source segment is removed from its quarter/position.
    2. Unless the segment is dropped back onto its own position, the player is
       removed from every other position of the target quarter.
    3. A new segment is appended to the target position. The first occupant of
       a position gets the whole quarter, later occupants get
       `substitute_minutes` for the user to retime.

    Args:
        schedule (Schedule): Current schedule. Never modified.
        player_id (str): Roster player being assigned.
        target_quarter (str): Quarter key, e.g. "Q1".
        target_position (int): Court position index (0-4).
        source (Optional[DragSource]): Origin of the assignment. None means the roster list.
        quarter_minutes (int): Quarter duration in minutes.
        substitute_minutes (int): Default minutes for a position that already has an occupant.

    Returns:
        Outcome[Schedule]: The new schedule, with a warning when the target
        position now holds more minutes than the quarter lasts.

    Raises:
        InvalidSlotError: If a quarter key or position index is out of range.
    """
    new_schedule = schedule.copy()
    # Validate the target before touching anything
    new_schedule.position(target_quarter, target_position)
    source = source or DragSource()

    same_slot = False
    if source.is_timeline:
        removed = _remove_segment(
            new_schedule,
            source.source_quarter,
            source.source_position,
            source.source_segment_id,
        )
        if not removed:
            logger.info(
                "Source segment %s not found in %s position %s",
                source.source_segment_id,
                source.source_quarter,
                source.source_position,
            )
        same_slot = (
            source.source_quarter == target_quarter
            and source.source_position == target_position
        )

    if not same_slot:
        for idx, segments in enumerate(new_schedule.positions(target_quarter)):
            if idx == target_position:
                continue
            segments[:] = [s for s in segments if s.playerId != player_id]

    target = new_schedule.position(target_quarter, target_position)
    minutes = quarter_minutes if not target else substitute_minutes
    segment = PlayerTimeSegment(
        id=new_id(),
        playerId=player_id,
        minutes=clamp_minutes(minutes, quarter_minutes),
    )
    target.append(segment)
    logger.info(
        "Assigned %s to %s position %d for %d min",
        player_id,
        target_quarter,
        target_position,
        segment.minutes,
    )

    diagnostics = []
    overflow = position_overflow(new_schedule, target_quarter, target_position, quarter_minutes)
    if overflow:
        diagnostics.append(overflow)
    return Outcome(new_schedule, diagnostics)


def unassign_segment(
    schedule: Schedule, quarter: str, position: int, segment_id: str
) -> Outcome[Schedule]:
    """Remove one segment from a position. Unknown segment ids are a no-op."""
    new_schedule = schedule.copy()
    if _remove_segment(new_schedule, quarter, position, segment_id):
        logger.info("Unassigned segment %s from %s position %d", segment_id, quarter, position)
    return Outcome(new_schedule)


def update_segment_minutes(
    schedule: Schedule,
    quarter: str,
    position: int,
    segment_id: str,
    minutes,
    quarter_minutes: int = QUARTER_DURATION_MINUTES,
) -> Outcome[Schedule]:
    """
    Retime a segment. Minutes are clamped to [0, quarter_minutes]; going over
    the quarter across a position is reported, not rejected. Unknown segment
    ids are a no-op.
    """
    new_schedule = schedule.copy()
    segment = next(
        (s for s in new_schedule.position(quarter, position) if s.id == segment_id),
        None,
    )
    if segment is None:
        return Outcome(new_schedule)

    segment.minutes = clamp_minutes(minutes, quarter_minutes)
    diagnostics = []
    overflow = position_overflow(new_schedule, quarter, position, quarter_minutes)
    if overflow:
        logger.warning(overflow.message)
        diagnostics.append(overflow)
    return Outcome(new_schedule, diagnostics)


def remove_player_segments(schedule: Schedule, player_id: str) -> Schedule:
    """Copy of the schedule without any segment of the given player."""
    new_schedule = schedule.copy()
    for positions in new_schedule.quarters.values():
        for segments in positions:
            segments[:] = [s for s in segments if s.playerId != player_id]
    return new_schedule
