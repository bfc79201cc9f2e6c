from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional


class DraggedPlayerInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    playerId: str
    sourceType: Literal["list", "timeline"] = "list"
    sourceQuarter: Optional[str] = None
    sourcePositionIndex: Optional[int] = None
    sourceSegmentId: Optional[str] = None


class AssignRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    targetQuarter: str
    targetPositionIndex: int = Field(..., ge=0)
    dragged: DraggedPlayerInfo


class MinutesRequest(BaseModel):
    minutes: int
