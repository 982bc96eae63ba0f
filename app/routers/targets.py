from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.database import get_db
from app.core.auth import get_current_user
from app.models.target import KPITarget
from app.schemas.target import TargetUpsert, TargetResponse
from app.services.performance import list_targets, upsert_target

router = APIRouter(prefix="/targets", tags=["targets"])


@router.get("", response_model=List[TargetResponse])
async def get_targets(
    role: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await list_targets(db, role=role)


@router.put("", response_model=TargetResponse)
async def save_target(
    target_in: TargetUpsert,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await upsert_target(db, target_in)


@router.delete("/{target_id}", status_code=204)
async def delete_target(
    target_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    result = await db.execute(select(KPITarget).where(KPITarget.id == target_id))
    target = result.scalar_one_or_none()
    if not target:
        raise HTTPException(404, "Target not found")
    await db.delete(target)
    await db.commit()
