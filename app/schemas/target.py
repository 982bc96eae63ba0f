from pydantic import BaseModel, Field
from typing import Optional


class TargetUpsert(BaseModel):
    metric_key: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    monthly_target: int = Field(..., ge=0)
    # Left out -> monthly × ANNUAL_PERIODS on create, unchanged on update
    annual_target: Optional[int] = Field(None, ge=0)


class TargetResponse(BaseModel):
    id: int
    metric_key: str
    role: str
    monthly_target: int
    annual_target: int

    model_config = {"from_attributes": True}
