"""
Service request schemas
"""
from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, ConfigDict, field_serializer
from app.utils.datetime_utils import iso_utc


class RequestCreate(BaseModel):
    """Body of POST /requests. details is checked per type by the service."""
    user_id: int = Field(..., alias="userId", description="Submitting employee ID")
    type: str = Field(..., min_length=1, description="Request type, e.g. LEAVE or ASSET")
    details: Optional[Dict[str, Any]] = Field(None, description="Type-specific payload")

    model_config = ConfigDict(populate_by_name=True)


class RequestStatusUpdate(BaseModel):
    """Body of PATCH /requests/{id}/status"""
    status: str = Field(..., min_length=1, description="New status, e.g. APPROVED or REJECTED")
    approver_id: Optional[int] = Field(None, alias="approverId", description="Deciding employee ID")

    model_config = ConfigDict(populate_by_name=True)


class RequestOut(BaseModel):
    """A stored request row"""
    id: int
    company_id: str
    user_id: int
    type: str
    status: str
    details: Dict[str, Any]
    approver_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at", when_used="always")
    @classmethod
    def _ser_datetime(cls, dt: Optional[datetime]) -> Optional[str]:
        return iso_utc(dt)


class RequestListItemOut(RequestOut):
    """Request row joined with the submitter's name and avatar"""
    user_name: Optional[str] = None
    avatar_url: Optional[str] = None
