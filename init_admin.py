"""
Quick script to create the tenant's initial admin user
Run this after `alembic upgrade head` if nobody can log in yet
"""
from app.core.logging import setup_logging
from app.db.session import SessionLocal
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logging()
    db = SessionLocal()
    try:
        admin = init_db(db)
        print(f"Login with employee code: {admin.emp_code}")
    finally:
        db.close()
