from core.state import GamePlan, Player
from core.diagnostics import Outcome, info
from scheduler.assignment import remove_player_segments
from utils.logger import get_logger

logger = get_logger(__name__)


def add_player(plan: GamePlan, player: Player) -> Outcome[GamePlan]:
    """Append a player to the roster. The caller owns id uniqueness."""
    new_plan = plan.copy()
    new_plan.players.append(Player(**player.to_dict()))
    logger.info("Added player %s (%s) to plan %s", player.name, player.id, plan.id)
    return Outcome(new_plan, [info("player_added", f"{player.name} has been added.")])


def edit_player(plan: GamePlan, player: Player) -> Outcome[GamePlan]:
    """Replace the roster entry with the same id. Unknown ids leave the plan unchanged."""
    new_plan = plan.copy()
    for idx, existing in enumerate(new_plan.players):
        if existing.id == player.id:
            new_plan.players[idx] = Player(**player.to_dict())
            return Outcome(
                new_plan,
                [info("player_updated", f"{player.name}'s details have been updated.")],
            )
    return Outcome(new_plan)


def delete_player(plan: GamePlan, player_id: str) -> Outcome[GamePlan]:
    """
    Remove a player from the roster and every segment they hold in any
    quarter or position.
    """
    removed = plan.player(player_id)
    new_plan = plan.copy()
    new_plan.players = [p for p in new_plan.players if p.id != player_id]
    new_plan.schedule = remove_player_segments(new_plan.schedule, player_id)
    name = removed.name if removed else "Player"
    logger.info("Deleted player %s from plan %s", player_id, plan.id)
    return Outcome(new_plan, [info("player_deleted", f"{name} has been removed.")])
