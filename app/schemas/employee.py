"""
Employee schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_serializer
from app.utils.datetime_utils import iso_utc


class EmployeeOut(BaseModel):
    """Employee record as returned to clients (never includes the password hash)"""
    id: int
    company_id: str
    emp_code: str
    full_name: str
    email: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    national_address: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    phone_number: Optional[str] = None
    avatar_url: Optional[str] = None
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at", when_used="always")
    @classmethod
    def _ser_datetime(cls, dt: Optional[datetime]) -> Optional[str]:
        return iso_utc(dt)


class ProfileUpdateResponse(BaseModel):
    """Envelope returned by PUT /auth/me/update"""
    success: bool
    message: str
    data: EmployeeOut
