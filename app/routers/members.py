import logging
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from app.database import get_db
from app.core.auth import get_current_user
from app.models.member import Member
from app.models.performance import PerformanceRecord
from app.schemas.member import MemberCreate, MemberUpdate, MemberResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/members", tags=["members"])


async def _get_member_or_404(db: AsyncSession, member_id: int) -> Member:
    result = await db.execute(select(Member).where(Member.id == member_id))
    member = result.scalar_one_or_none()
    if not member:
        raise HTTPException(404, "Member not found")
    return member


async def _ensure_email_free(db: AsyncSession, email: str, exclude_id: Optional[int] = None):
    query = select(Member).where(Member.email == email)
    if exclude_id is not None:
        query = query.where(Member.id != exclude_id)
    result = await db.execute(query)
    if result.scalar_one_or_none():
        raise HTTPException(400, "Email already registered")


@router.get("", response_model=List[MemberResponse])
async def list_members(
    status: Optional[str] = Query(None, pattern="^(active|inactive)$"),
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    query = select(Member)
    if status:
        query = query.where(Member.status == status)
    result = await db.execute(query.order_by(Member.name))
    return result.scalars().all()


@router.post("", response_model=MemberResponse, status_code=201)
async def create_member(
    member_in: MemberCreate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    await _ensure_email_free(db, member_in.email)

    member = Member(
        name=member_in.name,
        email=member_in.email,
        hire_date=member_in.hire_date or date.today(),
        role=member_in.role,
        status=member_in.status
    )
    db.add(member)
    await db.commit()
    await db.refresh(member)
    logger.info("Created member %s (%s)", member.id, member.role)
    return member


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await _get_member_or_404(db, member_id)


@router.patch("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: int,
    member_in: MemberUpdate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    member = await _get_member_or_404(db, member_id)
    changes = member_in.model_dump(exclude_unset=True)
    if changes.get("email") and changes["email"] != member.email:
        await _ensure_email_free(db, changes["email"], exclude_id=member_id)

    for field, value in changes.items():
        if value is not None:
            setattr(member, field, value)
    await db.commit()
    await db.refresh(member)
    return member


@router.delete("/{member_id}", status_code=204)
async def delete_member(
    member_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    member = await _get_member_or_404(db, member_id)

    # Cascade to performance records
    await db.execute(delete(PerformanceRecord).where(PerformanceRecord.member_id == member_id))
    await db.delete(member)
    await db.commit()
    logger.info("Deleted member %s and their performance records", member_id)
