class PlanNotFoundError(Exception):
    """Raised when a game plan id does not exist in the plan book."""

    pass


class PlayerNotFoundError(Exception):
    """Raised when a player id is not on the current plan's roster."""

    pass


class LastPlanDeletionError(Exception):
    """Raised when deleting the only remaining game plan. A plan book must never be empty."""

    pass


class InvalidSlotError(Exception):
    """Raised when a quarter key or court position index is outside the schedule."""

    pass


class PlanStoreError(Exception):
    """Raised when the plan store cannot be written."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    PlanNotFoundError: 404,
    PlayerNotFoundError: 404,
    LastPlanDeletionError: 409,
    InvalidSlotError: 400,
    PlanStoreError: 500,
}
