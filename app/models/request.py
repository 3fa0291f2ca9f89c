"""
Service request models
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import text
import enum
from app.db.base import Base


class RequestType(str, enum.Enum):
    LEAVE = "LEAVE"
    ASSET = "ASSET"
    PUNCH_CORRECTION = "PUNCH_CORRECTION"
    RESIGNATION = "RESIGNATION"
    LETTER = "LETTER_REQUEST"
    LOAN = "LOAN"


class RequestStatus(str, enum.Enum):
    PENDING_MANAGER = "PENDING_MANAGER"
    PENDING_HR = "PENDING_HR"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class ServiceRequest(Base):
    """
    One employee request (leave, asset, letter, ...).

    type and status are plain strings: unknown types are stored as given and
    an approver may set any status from any status.
    """
    __tablename__ = "requests"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(String, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    type = Column(String, nullable=False)
    status = Column(String, nullable=False, server_default=text("'PENDING_MANAGER'"))
    details = Column(JSON, nullable=False)
    approver_id = Column(Integer, ForeignKey("employees.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"), nullable=False)

    # Relationships
    user = relationship("Employee", foreign_keys=[user_id], back_populates="requests")
    approver = relationship("Employee", foreign_keys=[approver_id], back_populates="decided_requests")

    __table_args__ = (
        Index("ix_requests_company_created", "company_id", "created_at"),
    )
