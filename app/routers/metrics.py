from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.database import get_db
from app.core.auth import get_current_user
from app.models.metric import MetricDefinition
from app.schemas.metric import MetricCreate, MetricUpdate, MetricResponse
from app.services.performance import get_metric_catalog
from app.services.recommendations import default_catalog

router = APIRouter(prefix="/metrics", tags=["metrics"])


async def _get_metric_or_404(db: AsyncSession, metric_id: int) -> MetricDefinition:
    result = await db.execute(select(MetricDefinition).where(MetricDefinition.id == metric_id))
    metric = result.scalar_one_or_none()
    if not metric:
        raise HTTPException(404, "Metric not found")
    return metric


@router.get("", response_model=List[MetricResponse])
async def list_metrics(
    include_inactive: bool = False,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await get_metric_catalog(db, active_only=not include_inactive)


@router.post("", response_model=MetricResponse, status_code=201)
async def create_metric(
    metric_in: MetricCreate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    existing = await db.execute(select(MetricDefinition).where(MetricDefinition.key == metric_in.key))
    if existing.scalar_one_or_none():
        raise HTTPException(400, "Metric key already exists")

    metric = MetricDefinition(**metric_in.model_dump())
    db.add(metric)
    await db.commit()
    await db.refresh(metric)

    # New metrics usually have no recommendation text yet
    default_catalog.validate([metric.key])
    return metric


@router.patch("/{metric_id}", response_model=MetricResponse)
async def update_metric(
    metric_id: int,
    metric_in: MetricUpdate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    metric = await _get_metric_or_404(db, metric_id)
    for field, value in metric_in.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(metric, field, value)
    await db.commit()
    await db.refresh(metric)
    return metric


@router.delete("/{metric_id}", response_model=MetricResponse)
async def deactivate_metric(
    metric_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    metric = await _get_metric_or_404(db, metric_id)
    metric.is_active = False
    await db.commit()
    await db.refresh(metric)
    return metric
