"""
Request service - business logic for the request/approval workflow
"""
import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from fastapi import HTTPException, status
from app.models.employee import Employee
from app.models.request import ServiceRequest, RequestType, RequestStatus
from app.schemas.request import RequestListItemOut
from app.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)

# Fields that must be present (and non-empty) in details, per request type.
# Types not listed here are accepted without further checks.
REQUIRED_DETAIL_FIELDS = {
    RequestType.LEAVE.value: (("startDate", "endDate"), "Dates required"),
    RequestType.ASSET.value: (("itemName",), "Item name required"),
}


def _to_list_item(request: ServiceRequest, user_name: Optional[str], avatar_url: Optional[str]) -> RequestListItemOut:
    item = RequestListItemOut.model_validate(request)
    return item.model_copy(update={"user_name": user_name, "avatar_url": avatar_url})


def _joined_query(db: Session, company_id: str):
    return (
        db.query(
            ServiceRequest,
            Employee.full_name.label("user_name"),
            Employee.avatar_url.label("avatar_url"),
        )
        .join(Employee, ServiceRequest.user_id == Employee.id)
        .filter(ServiceRequest.company_id == company_id)
    )


def list_requests(
    db: Session,
    company_id: str,
    request_type: Optional[str] = None,
    request_status: Optional[str] = None,
) -> List[RequestListItemOut]:
    """
    List a tenant's requests joined with submitter name and avatar

    Filters are exact matches and combine with AND; empty values are ignored.
    Newest first, ties broken by id.

    Args:
        db: Database session
        company_id: Tenant (from configuration, never from the caller)
        request_type: Optional type filter
        request_status: Optional status filter

    Raises:
        HTTPException: 500 if the store fails
    """
    try:
        query = _joined_query(db, company_id)
        if request_type:
            query = query.filter(ServiceRequest.type == request_type)
        if request_status:
            query = query.filter(ServiceRequest.status == request_status)
        rows = query.order_by(ServiceRequest.created_at.desc(), ServiceRequest.id.desc()).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch requests")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch requests"
        )

    return [_to_list_item(req, user_name, avatar_url) for req, user_name, avatar_url in rows]


def get_request(db: Session, company_id: str, request_id: int) -> RequestListItemOut:
    """Fetch one of the tenant's requests with submitter info, 404 if absent"""
    try:
        row = _joined_query(db, company_id).filter(ServiceRequest.id == request_id).first()
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch request {request_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch request"
        )

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    req, user_name, avatar_url = row
    return _to_list_item(req, user_name, avatar_url)


def validate_request_details(request_type: str, details: Optional[Dict[str, Any]]) -> None:
    """
    Check the details payload for a request type

    Raises:
        HTTPException: 400 if details is missing or a required field is empty
    """
    if details is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Details are required")

    required = REQUIRED_DETAIL_FIELDS.get(request_type)
    if required is None:
        return
    fields, message = required
    if any(not details.get(field) for field in fields):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def create_request(
    db: Session,
    company_id: str,
    user_id: int,
    request_type: str,
    details: Optional[Dict[str, Any]],
) -> ServiceRequest:
    """
    Validate and insert a new request in PENDING_MANAGER

    Returns:
        The stored request, including its generated id and timestamps

    Raises:
        HTTPException: 400 on invalid details, 500 if the insert fails
    """
    validate_request_details(request_type, details)

    request = ServiceRequest(
        company_id=company_id,
        user_id=user_id,
        type=request_type,
        status=RequestStatus.PENDING_MANAGER.value,
        details=details,
    )
    try:
        db.add(request)
        db.commit()
        db.refresh(request)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to create {request_type} request for user {user_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create request"
        )

    logger.info(f"Created {request_type} request {request.id} for user {user_id}")
    return request


def update_request_status(
    db: Session,
    company_id: str,
    request_id: int,
    new_status: str,
    approver_id: Optional[int],
) -> ServiceRequest:
    """
    Record an approver's decision on a request

    The status is overwritten as given: any status may follow any other and
    the approver is not checked against the request.

    Raises:
        HTTPException: 404 if no such request, 500 if the update fails
    """
    try:
        request = db.query(ServiceRequest).filter(
            ServiceRequest.id == request_id,
            ServiceRequest.company_id == company_id,
        ).first()
        if request is not None:
            previous_status = request.status
            request.status = new_status
            request.approver_id = approver_id
            request.updated_at = now_utc()
            db.commit()
            db.refresh(request)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update status of request {request_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update status"
        )

    if request is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")

    logger.info(f"Request {request_id}: {previous_status} -> {new_status} (approver {approver_id})")
    return request
