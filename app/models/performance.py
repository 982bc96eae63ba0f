# app/models/performance.py
from sqlalchemy import Column, Integer, JSON, DateTime, ForeignKey, UniqueConstraint, func
from app.database import Base

class PerformanceRecord(Base):
    __tablename__ = "performance_records"

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)

    # metric key -> counter; a key that is absent reads as 0
    metrics = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("member_id", "month", "year", name="uq_member_month_year"),
    )
