from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.database import get_db
from app.core.auth import get_current_user
from app.schemas.report import DashboardResponse
from app.services import reports
from app.services.performance import (
    get_member_map, get_metric_catalog, list_performance_records, list_targets
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    year: Optional[int] = None,
    month: Optional[int] = Query(None, ge=1, le=12),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    records = await list_performance_records(db, year=year, month=month)
    members = await get_member_map(db)
    targets = await list_targets(db)
    metric_keys = [m.key for m in await get_metric_catalog(db)] or None

    # 1. Per-member roll-up
    summaries = reports.member_summaries(
        records, members, targets, metric_keys=metric_keys, lookup=settings.TARGET_LOOKUP
    )

    # 2. Band counts for the category chart
    stats = reports.category_stats(
        records, targets,
        member_roles={member_id: m.role for member_id, m in members.items()},
        metric_keys=metric_keys,
        lookup=settings.TARGET_LOOKUP,
    )

    return DashboardResponse(
        insights=reports.team_insights(summaries),
        top_performers=reports.top_performers(summaries),
        members=summaries,
        category_stats=stats,
    )
