from pydantic import BaseModel, EmailStr, Field
from datetime import date, datetime
from typing import Optional


class MemberCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    hire_date: Optional[date] = None
    role: str = Field("SEO Analyst", min_length=1)
    status: str = Field("active", pattern="^(active|inactive)$")


class MemberUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    hire_date: Optional[date] = None
    role: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = Field(None, pattern="^(active|inactive)$")


class MemberResponse(BaseModel):
    id: int
    name: str
    email: str
    hire_date: date
    role: str
    status: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
