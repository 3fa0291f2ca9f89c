"""
Tests for the initial admin seeding helper
"""
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.security import verify_password
from app.db.init_db import init_db
from app.models.employee import Employee


def test_init_db_creates_admin(db: Session):
    """An empty database gets one admin in the configured tenant"""
    admin = init_db(db)

    assert admin.emp_code == settings.INITIAL_ADMIN_EMP_CODE
    assert admin.company_id == settings.COMPANY_ID
    assert verify_password(settings.INITIAL_ADMIN_PASSWORD, admin.password_hash)
    assert db.query(Employee).count() == 1


def test_init_db_is_idempotent(db: Session):
    """Running twice keeps a single admin"""
    first = init_db(db)
    second = init_db(db)

    assert first.id == second.id
    assert db.query(Employee).count() == 1


def test_seeded_admin_can_log_in(client, db: Session):
    """The seeded credentials work against the login endpoint"""
    init_db(db)

    response = client.post(
        "/api/auth/login",
        json={"empCode": settings.INITIAL_ADMIN_EMP_CODE, "password": settings.INITIAL_ADMIN_PASSWORD},
    )

    assert response.status_code == 200
