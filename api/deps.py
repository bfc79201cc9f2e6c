import threading
from typing import Optional
from config.settings import get_settings
from core.diagnostics import Outcome
from scheduler.service import CourtPlanService
from utils.loader import JsonPlanStore

_service: Optional[CourtPlanService] = None
_service_lock = threading.Lock()


def get_service() -> CourtPlanService:
    """Session service, created and loaded from the plan store on first use."""
    global _service
    with _service_lock:
        if _service is None:
            store = JsonPlanStore(get_settings().plan_store_path)
            service = CourtPlanService(store)
            service.load()
            _service = service
    return _service


def plan_response(outcome: Outcome) -> dict:
    return {
        "plan": outcome.value.to_dict(),
        "diagnostics": [d.to_dict() for d in outcome.diagnostics],
    }


def book_response(outcome: Outcome) -> dict:
    return {
        "book": outcome.value.to_dict(),
        "diagnostics": [d.to_dict() for d in outcome.diagnostics],
    }
