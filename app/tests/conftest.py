"""
Pytest configuration and fixtures
"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.engine import Engine
from app.main import app
from app.db.base import Base
from app.core.deps import get_db, get_upload_root
from app.core.security import create_access_token, hash_password

# Import all models to ensure they're registered with Base.metadata
from app.models import Employee, ServiceRequest  # noqa


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign keys for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_COMPANY_ID = "COMP-001"
OLD_TIMESTAMP = datetime(2025, 1, 1, 8, 0, 0)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upload_dir(client, tmp_path, monkeypatch):
    """Point uploads and the /uploads static mount at a per-test temporary directory"""
    app.dependency_overrides[get_upload_root] = lambda: tmp_path
    static_files = next(route.app for route in app.routes if getattr(route, "name", None) == "uploads")
    monkeypatch.setattr(static_files, "directory", tmp_path)
    monkeypatch.setattr(static_files, "all_directories", [tmp_path])
    monkeypatch.setattr(static_files, "config_checked", False)
    return tmp_path


@pytest.fixture
def make_employee(db):
    """Factory creating employees in the test tenant"""
    counter = {"n": 0}

    def _make(**overrides) -> Employee:
        counter["n"] += 1
        values = {
            "company_id": TEST_COMPANY_ID,
            "emp_code": f"EMP{counter['n']:03d}",
            "full_name": f"Employee {counter['n']}",
            "email": f"employee{counter['n']}@example.com",
            "password_hash": hash_password("testpass123"),
            "active": True,
            "created_at": OLD_TIMESTAMP,
            "updated_at": OLD_TIMESTAMP,
        }
        values.update(overrides)
        employee = Employee(**values)
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    return _make


@pytest.fixture
def employee(make_employee):
    """A regular employee with a filled-in profile"""
    return make_employee(
        full_name="Sara Al-Harbi",
        avatar_url="/uploads/avatars/avatar-1-seed.png",
        national_address="RRRD2929",
        city="Jeddah",
        district="Al Rawdah",
        phone_number="+966500000001",
    )


@pytest.fixture
def approver(make_employee):
    """A manager who decides requests"""
    return make_employee(full_name="Khalid Manager", position="Manager")


@pytest.fixture
def auth_headers():
    """Build a bearer header for an employee id"""
    def _headers(employee_id: int) -> dict:
        token = create_access_token({"sub": str(employee_id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers
