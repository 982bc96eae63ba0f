from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.config import settings
from app.database import get_db
from app.core.auth import get_current_user
from app.models.member import Member
from app.schemas.kpi import PerformanceCategory
from app.schemas.report import AnnualReport, CategoryStats
from app.services import reports
from app.services.categories import PERFORMANCE_CATEGORIES
from app.services.performance import (
    get_member_map, get_metric_catalog, get_yearly_performance, list_performance_records, list_targets
)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/categories", response_model=List[PerformanceCategory])
async def get_categories(current_user = Depends(get_current_user)):
    """Band names, ranges and legend colors."""
    return PERFORMANCE_CATEGORIES


@router.get("/category-stats", response_model=CategoryStats)
async def get_category_stats(
    year: Optional[int] = None,
    month: Optional[int] = Query(None, ge=1, le=12),
    member_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    records = await list_performance_records(db, member_id=member_id, year=year, month=month)
    members = await get_member_map(db)
    targets = await list_targets(db)
    metric_keys = [m.key for m in await get_metric_catalog(db)]

    return reports.category_stats(
        records, targets,
        member_roles={member_id: m.role for member_id, m in members.items()},
        metric_keys=metric_keys or None,
        lookup=settings.TARGET_LOOKUP,
    )


@router.get("/annual/{member_id}/{year}", response_model=AnnualReport)
async def get_annual_report(
    member_id: int,
    year: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    result = await db.execute(select(Member).where(Member.id == member_id))
    member = result.scalar_one_or_none()
    if not member:
        raise HTTPException(404, "Member not found")

    records = await get_yearly_performance(db, member_id, year)
    if not records:
        raise HTTPException(404, "No performance data found for the selected member and year")

    targets = await list_targets(db)
    metrics = await get_metric_catalog(db)

    return reports.annual_report(
        member, records, targets, year,
        metric_keys=[m.key for m in metrics] or None,
        display_names={m.key: m.display_name for m in metrics},
        lookup=settings.TARGET_LOOKUP,
    )


@router.get("/export.csv")
async def export_performance_csv(
    year: Optional[int] = None,
    month: Optional[int] = Query(None, ge=1, le=12),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    records = await list_performance_records(db, year=year, month=month)
    members = await get_member_map(db)
    metrics = await get_metric_catalog(db)

    content = reports.export_csv(
        records,
        member_names={member_id: m.name for member_id, m in members.items()},
        metric_keys=[m.key for m in metrics] or None,
        display_names={m.key: m.display_name for m in metrics},
    )
    filename = f"performance_report_{year}.csv" if year else "performance_report.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
