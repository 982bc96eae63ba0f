# app/models/target.py
from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint, func
from app.database import Base

class KPITarget(Base):
    __tablename__ = "kpi_targets"

    id = Column(Integer, primary_key=True, index=True)
    metric_key = Column(String, nullable=False)
    role = Column(String, nullable=False, index=True)
    monthly_target = Column(Integer, nullable=False, default=0)
    annual_target = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("metric_key", "role", name="uq_metric_role"),
    )
