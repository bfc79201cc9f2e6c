import threading
from typing import Iterable, List, Optional, Set
import pandas as pd
from core.state import GamePlan, Player, Schedule
from core.diagnostics import Outcome
from exceptions.custom_errors import PlayerNotFoundError
from scheduler import aggregation, assignment, plans, roster
from scheduler.assignment import DragSource
from scheduler.normalize import raw_to_book
from scheduler.plans import PlanBook
from utils.constants import QUARTER_DURATION_MINUTES, DEFAULT_SUBSTITUTE_MINUTES
from utils.logger import get_logger

logger = get_logger(__name__)


class CourtPlanService:
    """
    Owns the plan book for one session and exposes the query and command
    operations over the current plan.

    Every command works on a copy, swaps the new state in and writes the whole
    book to the store. Commands are serialised with a lock; the store itself is
    last-write-wins.
    """

    def __init__(
        self,
        store,
        quarter_minutes: int = QUARTER_DURATION_MINUTES,
        substitute_minutes: int = DEFAULT_SUBSTITUTE_MINUTES,
    ):
        self.store = store
        self.quarter_minutes = quarter_minutes
        self.substitute_minutes = substitute_minutes
        self._lock = threading.Lock()
        self.book: PlanBook = plans.new_book()
        self.load_diagnostics = []

    def load(self) -> Outcome[PlanBook]:
        """Read the stored plans, repairing malformed records."""
        raw_plans, current_id = self.store.load()
        outcome = raw_to_book(raw_plans, current_id, self.quarter_minutes)
        with self._lock:
            self._swap(outcome.value)
            self.load_diagnostics = outcome.diagnostics
        logger.info(
            "Loaded %d plan(s); current plan is %s", len(self.book.plans), self.book.current_id
        )
        return outcome

    def _swap(self, book: PlanBook):
        # Persist first so a failed write leaves the in-memory state untouched
        self.store.save(book.to_dict())
        self.book = book

    def _commit_book(self, outcome: Outcome[PlanBook]) -> Outcome[PlanBook]:
        self._swap(outcome.value)
        return outcome

    def _commit_plan(self, outcome: Outcome[GamePlan]) -> Outcome[GamePlan]:
        self._swap(plans.replace_plan(self.book, outcome.value))
        return outcome

    def _commit_schedule(self, outcome: Outcome[Schedule]) -> Outcome[GamePlan]:
        plan = self.book.current.copy()
        plan.schedule = outcome.value
        return self._commit_plan(Outcome(plan, outcome.diagnostics))

    # == Queries ==
    def get_current_plan(self) -> GamePlan:
        return self.book.current.copy()

    def list_plans(self) -> List[GamePlan]:
        return [p.copy() for p in self.book.plans]

    def get_roster(self) -> List[Player]:
        return self.get_current_plan().players

    def get_schedule(self) -> Schedule:
        return self.get_current_plan().schedule

    def total_playing_time(self, player_id: str) -> int:
        return aggregation.total_playing_time(self.book.current.schedule, player_id)

    def currently_on_court(self, quarters: Optional[Iterable[str]] = None) -> Set[str]:
        return aggregation.currently_on_court(self.book.current.schedule, quarters)

    def playing_time_summary(self) -> pd.DataFrame:
        return aggregation.playing_time_summary(self.book.current)

    # == Roster commands ==
    def add_player(self, player: Player) -> Outcome[GamePlan]:
        with self._lock:
            return self._commit_plan(roster.add_player(self.book.current, player))

    def edit_player(self, player: Player) -> Outcome[GamePlan]:
        with self._lock:
            return self._commit_plan(roster.edit_player(self.book.current, player))

    def delete_player(self, player_id: str) -> Outcome[GamePlan]:
        with self._lock:
            return self._commit_plan(roster.delete_player(self.book.current, player_id))

    # == Schedule commands ==
    def assign_player_to_position(
        self,
        player_id: str,
        target_quarter: str,
        target_position: int,
        source: Optional[DragSource] = None,
    ) -> Outcome[GamePlan]:
        """
        Assign a roster player to a court position of the current plan.

        Raises:
            PlayerNotFoundError: If the player is not on the current roster.
            InvalidSlotError: If the quarter or position is out of range.
        """
        with self._lock:
            if self.book.current.player(player_id) is None:
                raise PlayerNotFoundError(f"Player {player_id!r} is not on the roster.")
            outcome = assignment.assign_player_to_position(
                self.book.current.schedule,
                player_id,
                target_quarter,
                target_position,
                source,
                quarter_minutes=self.quarter_minutes,
                substitute_minutes=self.substitute_minutes,
            )
            return self._commit_schedule(outcome)

    def unassign_segment(self, quarter: str, position: int, segment_id: str) -> Outcome[GamePlan]:
        with self._lock:
            outcome = assignment.unassign_segment(
                self.book.current.schedule, quarter, position, segment_id
            )
            return self._commit_schedule(outcome)

    def update_segment_minutes(
        self, quarter: str, position: int, segment_id: str, minutes: int
    ) -> Outcome[GamePlan]:
        with self._lock:
            outcome = assignment.update_segment_minutes(
                self.book.current.schedule,
                quarter,
                position,
                segment_id,
                minutes,
                quarter_minutes=self.quarter_minutes,
            )
            return self._commit_schedule(outcome)

    # == Plan commands ==
    def create_plan(self, name: Optional[str] = None) -> Outcome[PlanBook]:
        with self._lock:
            return self._commit_book(plans.create_plan(self.book, name))

    def save_plan_as(self, name: str) -> Outcome[PlanBook]:
        with self._lock:
            return self._commit_book(plans.save_plan_as(self.book, name))

    def rename_plan(self, plan_id: str, name: str) -> Outcome[PlanBook]:
        with self._lock:
            return self._commit_book(plans.rename_plan(self.book, plan_id, name))

    def load_plan(self, plan_id: str) -> Outcome[PlanBook]:
        with self._lock:
            return self._commit_book(plans.load_plan(self.book, plan_id))

    def delete_plan(self, plan_id: str) -> Outcome[PlanBook]:
        with self._lock:
            return self._commit_book(plans.delete_plan(self.book, plan_id))
