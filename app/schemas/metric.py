from pydantic import BaseModel, Field
from typing import Optional


class MetricCreate(BaseModel):
    key: str = Field(..., min_length=1, max_length=64, pattern="^[a-z0-9_]+$")
    display_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    unit: str = "count"


class MetricUpdate(BaseModel):
    # The key is referenced by stored counters and targets, so only display metadata changes
    display_name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    unit: Optional[str] = None
    is_active: Optional[bool] = None


class MetricResponse(BaseModel):
    id: int
    key: str
    display_name: str
    description: Optional[str]
    unit: str
    is_active: bool

    model_config = {"from_attributes": True}
