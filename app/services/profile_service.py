"""
Profile service - self-service partial updates of an employee record
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from fastapi import HTTPException, UploadFile, status
from app.constants import UPLOADS_URL_PREFIX
from app.models.employee import Employee
from app.services.upload_service import UploadPolicy, has_file, store_avatar
from app.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)

# (form field, column) in the order assignments are applied
PROFILE_FIELDS = (
    ("nationalAddress", "national_address"),
    ("city", "city"),
    ("district", "district"),
    ("phoneNumber", "phone_number"),
)


def _failure(status_code: int, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"success": False, "message": message})


def profile_fields_from_form(form: Mapping[str, Any]) -> Dict[str, str]:
    """
    Profile values present in a submitted form, keyed by form field name

    Presence is what counts: an empty string is kept so it can clear the column.
    """
    return {
        key: form[key]
        for key, _ in PROFILE_FIELDS
        if key in form and isinstance(form[key], str)
    }


def collect_profile_assignments(fields: Dict[str, Optional[str]]) -> List[Tuple[str, Any]]:
    """
    Ordered (column, value) pairs for the fields that were supplied

    A field whose value is None was not sent and is skipped, never nulled.
    """
    return [(column, fields[key]) for key, column in PROFILE_FIELDS if fields.get(key) is not None]


def get_profile(db: Session, employee_id: int) -> Employee:
    """Load an employee or fail with 404"""
    employee = db.query(Employee).filter(Employee.id == employee_id).first()
    if employee is None:
        raise _failure(status.HTTP_404_NOT_FOUND, "Employee not found")
    return employee


def _remove_stored_avatar(upload_root: Path, avatar_url: str) -> None:
    stored = upload_root / avatar_url[len(UPLOADS_URL_PREFIX) + 1:]
    stored.unlink(missing_ok=True)
    logger.info(f"Removed orphaned avatar {stored}")


async def update_profile(
    db: Session,
    employee_id: int,
    fields: Dict[str, Optional[str]],
    avatar: Optional[UploadFile],
    upload_root: Path,
    policy: UploadPolicy,
) -> Employee:
    """
    Apply a partial profile update

    Only supplied fields are written; a new avatar is stored first and its URL
    added to the update; updated_at is always refreshed.

    Args:
        db: Database session
        employee_id: Verified id of the caller
        fields: Form values keyed by client field name (None = not sent)
        avatar: Optional uploaded picture
        upload_root: Directory served under /uploads
        policy: Upload policy applied to the avatar

    Returns:
        The updated Employee

    Raises:
        HTTPException: 400 if nothing was supplied, 404 if the employee is gone,
            413 if the avatar is too large, 500 on store failure
    """
    assignments = collect_profile_assignments(fields)
    if not assignments and not has_file(avatar):
        raise _failure(status.HTTP_400_BAD_REQUEST, "No fields provided for update")

    try:
        employee = get_profile(db, employee_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Profile lookup failed for employee {employee_id}")
        raise _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update profile")

    avatar_url = None
    if has_file(avatar):
        avatar_url = await store_avatar(avatar, upload_root, employee_id, policy)
        assignments.append(("avatar_url", avatar_url))
    assignments.append(("updated_at", now_utc()))

    for column, value in assignments:
        setattr(employee, column, value)

    try:
        db.commit()
        db.refresh(employee)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Profile update failed for employee {employee_id}")
        if avatar_url is not None:
            _remove_stored_avatar(upload_root, avatar_url)
        raise _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update profile")

    logger.info(
        f"Employee {employee_id} updated profile columns: "
        f"{', '.join(column for column, _ in assignments)}"
    )
    return employee
