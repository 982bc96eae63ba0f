from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Dict, List, Optional


class PerformanceRecordUpsert(BaseModel):
    member_id: int
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=2100)
    metrics: Dict[str, int] = Field(default_factory=dict)

    @field_validator("metrics")
    @classmethod
    def counters_not_negative(cls, value: Dict[str, int]) -> Dict[str, int]:
        negative = [key for key, count in value.items() if count < 0]
        if negative:
            raise ValueError(f"Counters must be >= 0: {', '.join(sorted(negative))}")
        return value


class PerformanceRecordResponse(BaseModel):
    id: int
    member_id: int
    member_name: str = "Unknown"
    month: int
    year: int
    metrics: Dict[str, int]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class YearlyPerformanceResponse(BaseModel):
    member_id: int
    year: int
    records: List[PerformanceRecordResponse]
