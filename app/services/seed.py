import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from app.config import settings
from app.data.defaults import default_metrics, default_roles, default_targets
from app.models.metric import MetricDefinition
from app.models.role import Role
from app.models.target import KPITarget
from app.models.user import AdminUser
from app.services.performance import get_metric_catalog
from app.services.recommendations import default_catalog
from app.utils.password import hash_password

logger = logging.getLogger(__name__)


async def _is_empty(db: AsyncSession, model) -> bool:
    result = await db.execute(select(func.count(model.id)))
    return result.scalar_one() == 0


async def seed_defaults(db: AsyncSession) -> None:
    """Fill empty configuration tables and create the first admin."""
    if await _is_empty(db, Role):
        db.add_all([Role(**role) for role in default_roles])
        logger.info("Seeded %d default roles", len(default_roles))

    if await _is_empty(db, MetricDefinition):
        db.add_all([MetricDefinition(**metric) for metric in default_metrics])
        logger.info("Seeded %d default metrics", len(default_metrics))

    if await _is_empty(db, KPITarget):
        db.add_all([
            KPITarget(metric_key=key, role=role, monthly_target=monthly, annual_target=annual)
            for key, role, monthly, annual in default_targets
        ])
        logger.info("Seeded %d default targets", len(default_targets))

    if await _is_empty(db, AdminUser):
        db.add(AdminUser(
            email=settings.DEFAULT_ADMIN_EMAIL,
            name=settings.DEFAULT_ADMIN_NAME,
            hashed_password=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
        ))
        logger.info("Seeded default admin %s", settings.DEFAULT_ADMIN_EMAIL)

    await db.commit()


async def check_recommendation_catalog(db: AsyncSession) -> None:
    metrics = await get_metric_catalog(db, active_only=True)
    missing = default_catalog.validate([m.key for m in metrics])
    if missing:
        logger.warning("%d recommendation cells missing; action items for them will be skipped", len(missing))
