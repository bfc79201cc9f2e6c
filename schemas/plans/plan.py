from pydantic import BaseModel, Field
from typing import Optional


class CreatePlanRequest(BaseModel):
    name: Optional[str] = None  # "Game Plan <n+1>" when omitted


class PlanNameRequest(BaseModel):
    name: str = Field(..., min_length=1)
