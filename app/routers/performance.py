from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.config import settings
from app.database import get_db
from app.core.auth import get_current_user
from app.models.member import Member
from app.models.performance import PerformanceRecord
from app.schemas.kpi import ActionItemsResponse
from app.schemas.performance import (
    PerformanceRecordUpsert, PerformanceRecordResponse, YearlyPerformanceResponse
)
from app.services.action_items import generate_action_items, group_by_severity
from app.services.performance import (
    get_member_map, get_metric_catalog, get_yearly_performance, list_performance_records,
    list_targets, to_record_response, upsert_performance_record
)
from app.services.trends import analyze_trend

router = APIRouter(prefix="/performance", tags=["performance"])


@router.get("", response_model=List[PerformanceRecordResponse])
async def get_performance_records(
    member_id: Optional[int] = None,
    year: Optional[int] = None,
    month: Optional[int] = Query(None, ge=1, le=12),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    records = await list_performance_records(db, member_id=member_id, year=year, month=month)
    members = await get_member_map(db)
    return [
        to_record_response(r, members[r.member_id].name if r.member_id in members else None)
        for r in records
    ]


@router.put("", response_model=PerformanceRecordResponse)
async def save_performance_record(
    record_in: PerformanceRecordUpsert,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    result = await db.execute(select(Member).where(Member.id == record_in.member_id))
    member = result.scalar_one_or_none()
    if not member:
        raise HTTPException(404, "Member not found")

    record = await upsert_performance_record(db, record_in)
    return to_record_response(record, member.name)


@router.get("/records/{record_id}/action-items", response_model=ActionItemsResponse)
async def get_action_items(
    record_id: int,
    include_trends: bool = False,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    result = await db.execute(select(PerformanceRecord).where(PerformanceRecord.id == record_id))
    record = result.scalar_one_or_none()
    if not record:
        raise HTTPException(404, "Performance record not found")

    member_result = await db.execute(select(Member).where(Member.id == record.member_id))
    member = member_result.scalar_one_or_none()

    history = await list_performance_records(db, member_id=record.member_id)
    targets = await list_targets(db)
    metric_keys = [m.key for m in await get_metric_catalog(db)]

    items = generate_action_items(
        record, history, targets,
        role=member.role if member else None,
        lookup=settings.TARGET_LOOKUP,
        metric_keys=metric_keys or None,
    )

    trends = None
    if include_trends:
        trends = [analyze_trend(item.metric_key, record, history) for item in items]

    return ActionItemsResponse(
        record_id=record.id,
        member_id=record.member_id,
        member_name=member.name if member else "Unknown",
        month=record.month,
        year=record.year,
        items=items,
        by_severity=group_by_severity(items),
        trends=trends,
    )


@router.get("/{member_id}/{year}", response_model=YearlyPerformanceResponse)
async def get_member_yearly_performance(
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
    return YearlyPerformanceResponse(
        member_id=member_id,
        year=year,
        records=[to_record_response(r, member.name) for r in records],
    )
