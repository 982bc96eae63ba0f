# app/main.py
from fastapi import FastAPI
from app.config import settings
from app.database import engine, Base, AsyncSessionLocal
from app.models.user import AdminUser
from app.models.member import Member
from app.models.performance import PerformanceRecord
from app.models.target import KPITarget
from app.models.metric import MetricDefinition
from app.models.role import Role
from app.routers import auth, members, performance, targets, metrics, roles, reports, dashboard
from app.services.seed import seed_defaults, check_recommendation_catalog
import logging
from sqlalchemy import exc as sa_exc

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="KPI Dashboard - Team Performance Tracking", version="1.0")

# Include Routers
app.include_router(auth.router)
app.include_router(members.router)
app.include_router(performance.router)
app.include_router(targets.router)
app.include_router(metrics.router)
app.include_router(roles.router)
app.include_router(reports.router)
app.include_router(dashboard.router)

# Create DB tables on startup (use Alembic for real deployments)
@app.on_event("startup")
async def startup_event():
    # create tables (async). ignore duplicate-object errors from previous partial runs.
    async with engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except sa_exc.IntegrityError as e:
            msg = str(getattr(e, "orig", e))
            if "duplicate key value violates unique constraint" in msg or "already exists" in msg:
                logger.warning("Ignored duplicate DDL error during create_all: %s", msg)
            else:
                raise

    async with AsyncSessionLocal() as session:
        await seed_defaults(session)
        await check_recommendation_catalog(session)

@app.get("/")
def read_root():
    return {"message": "Welcome to the KPI Dashboard backend"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
