import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from app.database import get_db
from app.core.auth import get_current_user
from app.models.member import Member
from app.models.role import Role
from app.models.target import KPITarget
from app.schemas.role import RoleCreate, RoleUpdate, RoleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roles", tags=["roles"])


async def _get_role_or_404(db: AsyncSession, role_id: int) -> Role:
    result = await db.execute(select(Role).where(Role.id == role_id))
    role = result.scalar_one_or_none()
    if not role:
        raise HTTPException(404, "Role not found")
    return role


@router.get("", response_model=List[RoleResponse])
async def list_roles(
    include_inactive: bool = False,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    query = select(Role)
    if not include_inactive:
        query = query.where(Role.is_active.is_(True))
    result = await db.execute(query.order_by(Role.name))
    return result.scalars().all()


@router.post("", response_model=RoleResponse, status_code=201)
async def create_role(
    role_in: RoleCreate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    existing = await db.execute(select(Role).where(Role.name == role_in.name))
    if existing.scalar_one_or_none():
        raise HTTPException(400, "Role already exists")

    role = Role(name=role_in.name, description=role_in.description)
    db.add(role)
    await db.commit()
    await db.refresh(role)
    return role


@router.patch("/{role_id}", response_model=RoleResponse)
async def update_role(
    role_id: int,
    role_in: RoleUpdate,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    role = await _get_role_or_404(db, role_id)
    changes = {k: v for k, v in role_in.model_dump(exclude_unset=True).items() if v is not None}

    new_name = changes.get("name")
    if new_name and new_name != role.name:
        existing = await db.execute(select(Role).where(Role.name == new_name, Role.id != role_id))
        if existing.scalar_one_or_none():
            raise HTTPException(400, "Role already exists")

        # Members and targets refer to the role by name
        old_name = role.name
        await db.execute(update(Member).where(Member.role == old_name).values(role=new_name))
        await db.execute(update(KPITarget).where(KPITarget.role == old_name).values(role=new_name))
        logger.info("Renamed role %r to %r", old_name, new_name)

    for field, value in changes.items():
        setattr(role, field, value)
    await db.commit()
    await db.refresh(role)
    return role


@router.delete("/{role_id}", response_model=RoleResponse)
async def deactivate_role(
    role_id: int,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    # Members and targets keep referring to the name, so the row stays
    role = await _get_role_or_404(db, role_id)
    role.is_active = False
    await db.commit()
    await db.refresh(role)
    return role
