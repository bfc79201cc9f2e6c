from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Optional


class PlayerRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None  # generated when omitted
    name: str = Field(..., min_length=1)
    jerseyNumber: Optional[str] = None
    position: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def extract_jerseyNumber(cls, values: Any) -> Any:
        """
        Model validator to accept the jersey number under other keys, e.g. "jersey", "number" or "Jersey #".

        If "jerseyNumber" is missing, the first key containing "jersey" or equal to "number" is moved
        to "jerseyNumber". Numeric jersey numbers are kept as text so leading zeros survive.
        """
        if not isinstance(values, dict):
            return values
        if "jerseyNumber" not in values:
            for key in list(values.keys()):
                lowered = key.lower().strip()
                if "jersey" in lowered or lowered == "number":
                    values["jerseyNumber"] = values.pop(key)
                    break
        if isinstance(values.get("jerseyNumber"), int):
            values["jerseyNumber"] = str(values["jerseyNumber"])
        return values
