from fastapi import APIRouter, Depends, HTTPException
from api.deps import book_response, get_service
from docs.plans.plans import plans_description
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.service import CourtPlanService
from schemas.plans.plan import CreatePlanRequest, PlanNameRequest

router = APIRouter(prefix="/plans", tags=["Game Plans"])


@router.get("", summary="List Game Plans", description=plans_description)
def list_plans(service: CourtPlanService = Depends(get_service)):
    return {
        "plans": [{"id": p.id, "name": p.name} for p in service.list_plans()],
        "currentPlanId": service.book.current_id,
    }


@router.get("/current", summary="Current Game Plan")
def current_plan(service: CourtPlanService = Depends(get_service)):
    return service.get_current_plan().to_dict()


@router.post("", summary="Create Game Plan")
def create_plan(data: CreatePlanRequest, service: CourtPlanService = Depends(get_service)):
    try:
        return book_response(service.create_plan(data.name))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.post("/save-as", summary="Save Game Plan As")
def save_plan_as(data: PlanNameRequest, service: CourtPlanService = Depends(get_service)):
    try:
        return book_response(service.save_plan_as(data.name))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.patch("/{plan_id}", summary="Rename Game Plan")
def rename_plan(
    plan_id: str, data: PlanNameRequest, service: CourtPlanService = Depends(get_service)
):
    try:
        return book_response(service.rename_plan(plan_id, data.name))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.post("/{plan_id}/load", summary="Load Game Plan")
def load_plan(plan_id: str, service: CourtPlanService = Depends(get_service)):
    try:
        return book_response(service.load_plan(plan_id))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.delete("/{plan_id}", summary="Delete Game Plan")
def delete_plan(plan_id: str, service: CourtPlanService = Depends(get_service)):
    try:
        return book_response(service.delete_plan(plan_id))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
