import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from core.state import GamePlan, new_game_plan, new_id
from core.diagnostics import Outcome, info
from exceptions.custom_errors import PlanNotFoundError, LastPlanDeletionError
from utils.constants import DEFAULT_PLAN_NAME
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class PlanBook:
    """The stored set of game plans and which one is being edited."""

    plans: List[GamePlan] = field(default_factory=list)
    """All stored plans, in creation order. Never empty once initialised."""
    current_id: Optional[str] = None
    """Id of the current plan."""

    @property
    def current(self) -> GamePlan:
        plan = self.find(self.current_id)
        if plan is None:
            raise PlanNotFoundError(f"Current plan {self.current_id!r} not found.")
        return plan

    def find(self, plan_id: Optional[str]) -> Optional[GamePlan]:
        return next((p for p in self.plans if p.id == plan_id), None)

    def get(self, plan_id: str) -> GamePlan:
        plan = self.find(plan_id)
        if plan is None:
            raise PlanNotFoundError(f"Could not find game plan {plan_id!r}.")
        return plan

    def copy(self) -> "PlanBook":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plans": [p.to_dict() for p in self.plans],
            "currentPlanId": self.current_id,
        }


def new_book(name: str = DEFAULT_PLAN_NAME) -> PlanBook:
    plan = new_game_plan(name)
    return PlanBook(plans=[plan], current_id=plan.id)


def replace_plan(book: PlanBook, plan: GamePlan) -> PlanBook:
    """Write an updated plan back into the book, keyed by id."""
    new = book.copy()
    new.get(plan.id)
    new.plans = [plan.copy() if p.id == plan.id else p for p in new.plans]
    return new


def create_plan(book: PlanBook, name: Optional[str] = None) -> Outcome[PlanBook]:
    """Add an empty plan and make it current. Name defaults to "Game Plan <n+1>"."""
    name = name or f"Game Plan {len(book.plans) + 1}"
    plan = new_game_plan(name)
    new = book.copy()
    new.plans.append(plan)
    new.current_id = plan.id
    logger.info("Created plan %s (%s)", name, plan.id)
    return Outcome(new, [info("plan_created", f'"{name}" is ready.')])


def save_plan_as(book: PlanBook, name: str) -> Outcome[PlanBook]:
    """Clone the current plan under a new id and name; the clone becomes current."""
    clone = book.current.copy()
    clone.id = new_id()
    clone.name = name
    new = book.copy()
    new.plans.append(clone)
    new.current_id = clone.id
    logger.info("Saved plan %s as %s (%s)", book.current_id, name, clone.id)
    return Outcome(new, [info("plan_saved", f'"{name}" has been saved.')])


def rename_plan(book: PlanBook, plan_id: str, name: str) -> Outcome[PlanBook]:
    new = book.copy()
    new.get(plan_id).name = name
    return Outcome(new, [info("plan_renamed", f'Plan renamed to "{name}".')])


def load_plan(book: PlanBook, plan_id: str) -> Outcome[PlanBook]:
    plan = book.get(plan_id)
    new = book.copy()
    new.current_id = plan.id
    logger.info("Loaded plan %s (%s)", plan.name, plan.id)
    return Outcome(new, [info("plan_loaded", f'"{plan.name}" has been loaded.')])


def delete_plan(book: PlanBook, plan_id: str) -> Outcome[PlanBook]:
    """
    Delete a plan. The last remaining plan cannot be deleted. When the current
    plan is deleted the first remaining plan becomes current.

    Raises:
        LastPlanDeletionError: If it is the only plan left.
        PlanNotFoundError: If no plan has the given id.
    """
    if len(book.plans) <= 1:
        raise LastPlanDeletionError("You must have at least one game plan.")
    plan = book.get(plan_id)

    new = book.copy()
    new.plans = [p for p in new.plans if p.id != plan_id]
    if new.current_id == plan_id:
        new.current_id = new.plans[0].id
    logger.info("Deleted plan %s (%s)", plan.name, plan.id)
    return Outcome(new, [info("plan_deleted", f'"{plan.name}" deleted.')])
