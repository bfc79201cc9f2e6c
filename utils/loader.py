import contextlib
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
from config.paths import PLAN_STORE_PATH
from exceptions.custom_errors import PlanStoreError
from utils.logger import get_logger

logger = get_logger(__name__)

PLANS_KEY = "plans"
CURRENT_PLAN_KEY = "currentPlanId"


def coerce_index_maps(value: Any) -> Any:
    """
    Recursively turn map-like arrays back into lists.

    Some key/value stores write arrays as objects keyed by position
    ({"0": ..., "1": ...}) and drop empty ones. A mapping whose keys are all
    non-negative integers becomes a list ordered by key, with gaps filled by
    empty lists.
    """
    if isinstance(value, list):
        return [coerce_index_maps(v) for v in value]
    if isinstance(value, dict):
        keys = list(value.keys())
        if keys and all(str(k).isdigit() for k in keys):
            indexed = {int(k): coerce_index_maps(v) for k, v in value.items()}
            return [indexed.get(i, []) for i in range(max(indexed) + 1)]
        return {k: coerce_index_maps(v) for k, v in value.items()}
    return value


class InMemoryPlanStore:
    """Plan store kept in memory. Used by tests and as a scratch store."""

    def __init__(self, plans: Optional[list] = None, current_id: Optional[str] = None):
        self._data: Dict[str, Any] = {PLANS_KEY: plans or [], CURRENT_PLAN_KEY: current_id}

    def load(self) -> Tuple[Any, Any]:
        data = copy.deepcopy(self._data)
        return coerce_index_maps(data.get(PLANS_KEY)), data.get(CURRENT_PLAN_KEY)

    def save(self, payload: Dict[str, Any]) -> None:
        self._data = copy.deepcopy(payload)


class JsonPlanStore:
    """
    Plan store backed by a single JSON file of the form
    {"plans": [...], "currentPlanId": "..."}.

    Reads are forgiving: a missing or unreadable file is an empty store.
    Writes go through a temp file and a rename.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else PLAN_STORE_PATH

    def load(self) -> Tuple[Any, Any]:
        if not self.path.exists():
            logger.info("No plan store at %s; starting fresh.", self.path)
            return [], None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers invalid JSON and invalid UTF-8
            logger.error("Could not read plan store %s: %s. Starting fresh.", self.path, e)
            return [], None

        if isinstance(data, list):
            # Bare list of plans, without a current plan id
            return coerce_index_maps(data), None
        if not isinstance(data, dict):
            logger.error("Plan store %s has unexpected content; starting fresh.", self.path)
            return [], None
        return coerce_index_maps(data.get(PLANS_KEY)), data.get(CURRENT_PLAN_KEY)

    def save(self, payload: Dict[str, Any]) -> None:
        tmp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise PlanStoreError(f"Could not save game plans to {self.path}: {e}")
