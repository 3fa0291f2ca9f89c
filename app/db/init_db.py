"""
Database initialization helper
Seeds the tenant's first administrator so someone can log in
"""
import logging
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.security import hash_password
from app.models.employee import Employee

logger = logging.getLogger(__name__)


def init_db(db: Session) -> Employee:
    """
    Create the initial admin for the configured tenant if it has no employees

    This is a helper function and should NOT be auto-run on startup.

    Returns:
        The existing or newly created admin employee
    """
    existing = db.query(Employee).filter(Employee.emp_code == settings.INITIAL_ADMIN_EMP_CODE).first()
    if existing:
        logger.info(f"Admin {existing.emp_code} already exists, skipping initialization")
        return existing

    admin = Employee(
        company_id=settings.COMPANY_ID,
        emp_code=settings.INITIAL_ADMIN_EMP_CODE,
        full_name="System Administrator",
        position="HR Administrator",
        department="Administration",
        password_hash=hash_password(settings.INITIAL_ADMIN_PASSWORD),
        active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Initial admin created: emp_code={admin.emp_code}, company={admin.company_id}")
    return admin
