# app/models/member.py
from sqlalchemy import Column, Integer, String, Date, DateTime, func
from app.database import Base

class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    hire_date = Column(Date, nullable=False, server_default=func.current_date())
    role = Column(String, nullable=False, default="SEO Analyst")  # matches a Role name
    status = Column(String, nullable=False, default="active", index=True)  # active, inactive
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
