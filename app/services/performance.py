import logging
from typing import Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from app.config import settings
from app.models.member import Member
from app.models.metric import MetricDefinition
from app.models.performance import PerformanceRecord
from app.models.target import KPITarget
from app.schemas.performance import PerformanceRecordResponse, PerformanceRecordUpsert
from app.schemas.target import TargetUpsert

logger = logging.getLogger(__name__)

UNKNOWN_MEMBER = "Unknown"


def to_record_response(record: PerformanceRecord, member_name: Optional[str]) -> PerformanceRecordResponse:
    return PerformanceRecordResponse(
        id=record.id,
        member_id=record.member_id,
        member_name=member_name or UNKNOWN_MEMBER,
        month=record.month,
        year=record.year,
        metrics=dict(record.metrics or {}),
        created_at=getattr(record, "created_at", None),
        updated_at=getattr(record, "updated_at", None),
    )


async def get_member_map(db: AsyncSession) -> Dict[int, Member]:
    result = await db.execute(select(Member))
    return {m.id: m for m in result.scalars().all()}


async def list_performance_records(
    db: AsyncSession,
    member_id: Optional[int] = None,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> List[PerformanceRecord]:
    """Newest period first."""
    query = select(PerformanceRecord)
    if member_id is not None:
        query = query.where(PerformanceRecord.member_id == member_id)
    if year is not None:
        query = query.where(PerformanceRecord.year == year)
    if month is not None:
        query = query.where(PerformanceRecord.month == month)
    query = query.order_by(PerformanceRecord.year.desc(), PerformanceRecord.month.desc(), PerformanceRecord.id)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_yearly_performance(db: AsyncSession, member_id: int, year: int) -> List[PerformanceRecord]:
    result = await db.execute(
        select(PerformanceRecord)
        .where(PerformanceRecord.member_id == member_id)
        .where(PerformanceRecord.year == year)
        .order_by(PerformanceRecord.month)
    )
    return list(result.scalars().all())


async def _find_record(db: AsyncSession, member_id: int, month: int, year: int) -> Optional[PerformanceRecord]:
    result = await db.execute(
        select(PerformanceRecord)
        .where(PerformanceRecord.member_id == member_id)
        .where(PerformanceRecord.month == month)
        .where(PerformanceRecord.year == year)
    )
    return result.scalar_one_or_none()


async def upsert_performance_record(db: AsyncSession, data: PerformanceRecordUpsert) -> PerformanceRecord:
    """Create or replace the record for (member, month, year)."""
    record = await _find_record(db, data.member_id, data.month, data.year)

    if record is None:
        record = PerformanceRecord(
            member_id=data.member_id,
            month=data.month,
            year=data.year,
            metrics=dict(data.metrics),
        )
        db.add(record)
        try:
            await db.commit()
        except IntegrityError:
            # A concurrent request created the period first; replace its counters instead
            await db.rollback()
            record = await _find_record(db, data.member_id, data.month, data.year)
            if record is None:
                raise
        else:
            logger.info("Created performance record for member %s (%02d/%s)", data.member_id, data.month, data.year)
            await db.refresh(record)
            return record

    # Replace counters, don't merge
    record.metrics = dict(data.metrics)
    await db.commit()
    await db.refresh(record)
    logger.info("Updated performance record %s for member %s (%02d/%s)", record.id, data.member_id, data.month, data.year)
    return record


async def list_targets(db: AsyncSession, role: Optional[str] = None) -> List[KPITarget]:
    query = select(KPITarget)
    if role is not None:
        query = query.where(KPITarget.role == role)
    query = query.order_by(KPITarget.role, KPITarget.metric_key)
    result = await db.execute(query)
    return list(result.scalars().all())


def default_annual_target(monthly_target: int, periods: Optional[int] = None) -> int:
    return monthly_target * (periods or settings.ANNUAL_PERIODS)


async def _find_target(db: AsyncSession, metric_key: str, role: str) -> Optional[KPITarget]:
    result = await db.execute(
        select(KPITarget)
        .where(KPITarget.metric_key == metric_key)
        .where(KPITarget.role == role)
    )
    return result.scalar_one_or_none()


async def upsert_target(db: AsyncSession, data: TargetUpsert) -> KPITarget:
    """Create or replace the target for (metric_key, role).

    An annual target is only derived when the target is new and the caller gave
    none; a stored annual target is never recomputed.
    """
    target = await _find_target(db, data.metric_key, data.role)

    if target is None:
        annual = data.annual_target
        if annual is None:
            annual = default_annual_target(data.monthly_target)
        target = KPITarget(
            metric_key=data.metric_key,
            role=data.role,
            monthly_target=data.monthly_target,
            annual_target=annual,
        )
        db.add(target)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            target = await _find_target(db, data.metric_key, data.role)
            if target is None:
                raise
        else:
            await db.refresh(target)
            return target

    target.monthly_target = data.monthly_target
    if data.annual_target is not None:
        target.annual_target = data.annual_target
    await db.commit()
    await db.refresh(target)
    return target


async def get_metric_catalog(db: AsyncSession, active_only: bool = False) -> List[MetricDefinition]:
    """Metric definitions in creation order.

    Classification of stored records uses all of them; deactivated metrics are
    only hidden from data entry.
    """
    query = select(MetricDefinition)
    if active_only:
        query = query.where(MetricDefinition.is_active.is_(True))
    result = await db.execute(query.order_by(MetricDefinition.id))
    return list(result.scalars().all())
