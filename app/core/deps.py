"""
Dependencies for FastAPI endpoints
"""
from pathlib import Path
from typing import Generator
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.config import settings
from app.db.session import SessionLocal
from app.core.security import decode_token


security = HTTPBearer()


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_company_id() -> str:
    """Tenant for the current call. Fixed by configuration, never read from the request."""
    return settings.COMPANY_ID


def get_upload_root() -> Path:
    """Directory uploaded files are written to"""
    return Path(settings.UPLOAD_DIR)


async def get_current_employee_id(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> int:
    """
    Verified employee id from the bearer token

    Only the token is checked here; whether the employee still exists is up
    to the handler.
    """
    try:
        payload = decode_token(credentials.credentials)
        sub_value = payload.get("sub")
        if sub_value is None:
            raise ValueError("Token has no subject")
        # JWT 'sub' is a string
        return int(sub_value)
    except (ValueError, TypeError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
