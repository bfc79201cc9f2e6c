from fastapi import APIRouter, Depends, HTTPException
from api.deps import get_service, plan_response
from core.state import Player, new_id
from docs.roster.players import add_player_description, delete_player_description
from exceptions.custom_errors import CUSTOM_ERRORS
from scheduler.service import CourtPlanService
from schemas.roster.player import PlayerRequest

router = APIRouter(prefix="/roster", tags=["Roster"])


@router.get("", summary="List Players")
def list_players(service: CourtPlanService = Depends(get_service)):
    return [p.to_dict() for p in service.get_roster()]


@router.post(
    "",
    summary="Add Player",
    description=add_player_description,
)
def add_player(data: PlayerRequest, service: CourtPlanService = Depends(get_service)):
    player = Player(
        id=data.id or new_id(),
        name=data.name,
        jerseyNumber=data.jerseyNumber,
        position=data.position,
    )
    try:
        return plan_response(service.add_player(player))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.put("/{player_id}", summary="Edit Player")
def edit_player(
    player_id: str, data: PlayerRequest, service: CourtPlanService = Depends(get_service)
):
    player = Player(
        id=player_id,
        name=data.name,
        jerseyNumber=data.jerseyNumber,
        position=data.position,
    )
    try:
        return plan_response(service.edit_player(player))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.delete(
    "/{player_id}",
    summary="Delete Player",
    description=delete_player_description,
)
def delete_player(player_id: str, service: CourtPlanService = Depends(get_service)):
    try:
        return plan_response(service.delete_player(player_id))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
