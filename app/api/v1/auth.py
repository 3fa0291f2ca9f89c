"""
Authentication and self-service profile endpoints
"""
import logging
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from sqlalchemy.orm import Session
from app.core.deps import get_db, get_current_employee_id, get_upload_root
from app.core.security import verify_password, create_access_token
from app.models.employee import Employee
from app.schemas.auth import LoginRequest, TokenResponse
from app.schemas.employee import EmployeeOut, ProfileUpdateResponse
from app.services.profile_service import get_profile, profile_fields_from_form, update_profile
from app.services.upload_service import get_upload_policy

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return JWT token

    Validates empCode and password, rejects inactive employees.
    """
    employee = db.query(Employee).filter(Employee.emp_code == login_data.emp_code).first()

    if not employee or employee.password_hash is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid employee code or password"
        )

    if not employee.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive"
        )

    if not verify_password(login_data.password, employee.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid employee code or password"
        )

    # JWT 'sub' claim must be a string
    access_token = create_access_token(data={
        "sub": str(employee.id),
        "emp_code": employee.emp_code,
        "company_id": employee.company_id,
    })
    logger.info(f"Employee {employee.emp_code} logged in")
    return TokenResponse(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=EmployeeOut)
async def get_me_endpoint(
    db: Session = Depends(get_db),
    employee_id: int = Depends(get_current_employee_id),
):
    """Current authenticated user's profile"""
    return get_profile(db, employee_id)


@router.put("/me/update", response_model=ProfileUpdateResponse)
async def update_me_endpoint(
    request: Request,
    avatar: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    employee_id: int = Depends(get_current_employee_id),
    upload_root: Path = Depends(get_upload_root),
):
    """
    Update the caller's own profile (multipart form)

    Accepted fields: nationalAddress, city, district, phoneNumber. A field
    that is present is written even when empty, so "" clears it; absent
    fields are left alone. An "avatar" file replaces the profile picture.
    Responds with {success, message, data}.
    """
    form = await request.form()
    fields = profile_fields_from_form(form)
    logger.debug(f"Profile update for employee {employee_id}: sent={sorted(fields)}")
    employee = await update_profile(
        db,
        employee_id,
        fields=fields,
        avatar=avatar,
        upload_root=upload_root,
        policy=get_upload_policy(),
    )
    return ProfileUpdateResponse(
        success=True,
        message="Profile updated successfully",
        data=EmployeeOut.model_validate(employee),
    )
