from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from api.deps import get_service, plan_response
from docs.schedule.assign import (
    assign_player_description,
    update_minutes_description,
    unassign_segment_description,
)
from docs.schedule.playing_time import playing_time_description
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.assignment import DragSource
from scheduler.service import CourtPlanService
from schemas.schedule.assign import AssignRequest, MinutesRequest

router = APIRouter(prefix="/schedule", tags=["Schedule"])


@router.get("", summary="Get Schedule")
def get_schedule(service: CourtPlanService = Depends(get_service)):
    return service.get_schedule().to_dict()


# assign / move
@router.post(
    "/assign",
    summary="Assign Player",
    description=assign_player_description,
)
def assign_player(data: AssignRequest, service: CourtPlanService = Depends(get_service)):
    dragged = data.dragged
    source = DragSource(
        source_type=dragged.sourceType,
        source_quarter=dragged.sourceQuarter,
        source_position=dragged.sourcePositionIndex,
        source_segment_id=dragged.sourceSegmentId,
    )
    try:
        outcome = service.assign_player_to_position(
            dragged.playerId, data.targetQuarter, data.targetPositionIndex, source
        )
        return plan_response(outcome)
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.delete(
    "/{quarter}/{position}/{segment_id}",
    summary="Unassign Segment",
    description=unassign_segment_description,
)
def unassign_segment(
    quarter: str,
    position: int,
    segment_id: str,
    service: CourtPlanService = Depends(get_service),
):
    try:
        return plan_response(service.unassign_segment(quarter, position, segment_id))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.patch(
    "/{quarter}/{position}/{segment_id}",
    summary="Update Segment Minutes",
    description=update_minutes_description,
)
def update_segment_minutes(
    quarter: str,
    position: int,
    segment_id: str,
    data: MinutesRequest,
    service: CourtPlanService = Depends(get_service),
):
    try:
        outcome = service.update_segment_minutes(quarter, position, segment_id, data.minutes)
        return plan_response(outcome)
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.get(
    "/playing-time",
    summary="Playing Time Summary",
    description=playing_time_description,
)
def playing_time(service: CourtPlanService = Depends(get_service)):
    return service.playing_time_summary().to_dict(orient="records")


@router.get("/playing-time/{player_id}", summary="Player Playing Time")
def player_playing_time(player_id: str, service: CourtPlanService = Depends(get_service)):
    return {"playerId": player_id, "minutes": service.total_playing_time(player_id)}


@router.get("/on-court", summary="Currently On Court")
def on_court(
    quarter: Optional[List[str]] = Query(default=None),
    service: CourtPlanService = Depends(get_service),
):
    try:
        return {"playerIds": sorted(service.currently_on_court(quarter))}
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
