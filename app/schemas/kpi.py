from pydantic import BaseModel
from typing import List, Optional


class PerformanceCategory(BaseModel):
    name: str   # Critical, Bad, Target, Good
    color: str
    range: str

    model_config = {"frozen": True}


class Trend(BaseModel):
    metric_key: str
    current: int
    previous: int
    direction: str  # improving, declining, stable
    change_percentage: int


class Recommendation(BaseModel):
    title: str
    recommendations: List[str]


class ActionItem(BaseModel):
    id: str
    metric_key: str
    severity: str  # critical, warning, info, success
    title: str
    description: str
    recommendations: List[str]
    priority: int  # 1 = most urgent


class ActionItemGroups(BaseModel):
    critical: List[ActionItem] = []
    warning: List[ActionItem] = []
    info: List[ActionItem] = []
    success: List[ActionItem] = []


class ActionItemsResponse(BaseModel):
    record_id: int
    member_id: int
    member_name: str
    month: int
    year: int
    items: List[ActionItem]
    by_severity: ActionItemGroups
    trends: Optional[List[Trend]] = None
