from pydantic import BaseModel
from typing import Dict, List, Optional
from .member import MemberResponse
from .performance import PerformanceRecordResponse


class CategoryStats(BaseModel):
    critical: int = 0
    bad: int = 0
    target: int = 0
    good: int = 0
    total: int = 0


class MetricAchievement(BaseModel):
    metric_key: str
    actual: int
    target: int
    achievement: int


class MemberSummary(BaseModel):
    member_id: int
    member_name: str
    total_records: int = 0
    average_performance: int = 0
    critical_kpis: int = 0
    good_kpis: int = 0
    latest_month: Optional[int] = None
    latest_year: Optional[int] = None


class TeamInsights(BaseModel):
    total_members: int
    total_critical_kpis: int
    total_good_kpis: int
    average_team_performance: int


class DashboardResponse(BaseModel):
    insights: TeamInsights
    top_performers: List[MemberSummary]
    members: List[MemberSummary]
    category_stats: CategoryStats


class AnnualReport(BaseModel):
    member: MemberResponse
    year: int
    monthly_records: List[PerformanceRecordResponse]
    total_performance: Dict[str, int]
    metric_achievements: List[MetricAchievement]
    average_performance: int
    performance_grade: str
    strengths: List[str]
    improvements: List[str]
    recommendations: List[str]
