"""
Database models
"""
from app.models.employee import Employee
from app.models.request import ServiceRequest, RequestType, RequestStatus

__all__ = [
    "Employee",
    "ServiceRequest",
    "RequestType",
    "RequestStatus",
]
