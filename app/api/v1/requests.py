"""
Request workflow endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.core.deps import get_db, get_company_id
from app.schemas.request import (
    RequestCreate,
    RequestStatusUpdate,
    RequestOut,
    RequestListItemOut,
)
from app.services.request_service import (
    list_requests,
    get_request,
    create_request,
    update_request_status,
)

router = APIRouter()


@router.get("", response_model=List[RequestListItemOut])
async def list_requests_endpoint(
    type: Optional[str] = Query(None, description="Exact request type, e.g. LEAVE"),
    status: Optional[str] = Query(None, description="Exact status, e.g. PENDING_MANAGER"),
    db: Session = Depends(get_db),
    company_id: str = Depends(get_company_id),
):
    """
    List the company's requests, newest first

    Each row carries the submitter's user_name and avatar_url.
    """
    return list_requests(db, company_id, request_type=type, request_status=status)


@router.post("", response_model=RequestOut, status_code=201)
async def create_request_endpoint(
    request_data: RequestCreate,
    db: Session = Depends(get_db),
    company_id: str = Depends(get_company_id),
):
    """
    Submit a new request (created in PENDING_MANAGER)

    Validations:
    - details is required
    - LEAVE needs details.startDate and details.endDate
    - ASSET needs details.itemName
    """
    return create_request(
        db,
        company_id,
        user_id=request_data.user_id,
        request_type=request_data.type,
        details=request_data.details,
    )


@router.get("/{request_id}", response_model=RequestListItemOut)
async def get_request_endpoint(
    request_id: int,
    db: Session = Depends(get_db),
    company_id: str = Depends(get_company_id),
):
    """Get a single request with submitter info"""
    return get_request(db, company_id, request_id)


@router.patch("/{request_id}/status", response_model=RequestOut)
async def update_request_status_endpoint(
    request_id: int,
    status_data: RequestStatusUpdate,
    db: Session = Depends(get_db),
    company_id: str = Depends(get_company_id),
):
    """
    Record an approval decision

    status and approver_id are overwritten as sent; there is no transition
    table, so any status may follow any other.
    """
    return update_request_status(
        db,
        company_id,
        request_id,
        new_status=status_data.status,
        approver_id=status_data.approver_id,
    )
