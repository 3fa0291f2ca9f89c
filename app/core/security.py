"""
Security utilities for authentication
"""
import logging
from datetime import datetime, timedelta
from typing import Dict, Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
import argon2
import bcrypt
from app.core.config import settings

logger = logging.getLogger(__name__)

# passlib is only used to recognise legacy hashes; argon2 is the primary scheme
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
_argon2_hasher = argon2.PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password (argon2 preferred, bcrypt fallback)"""
    try:
        return _argon2_hasher.hash(password)
    except argon2.exceptions.HashingError as e:
        logger.warning(f"Argon2 hashing failed, falling back to bcrypt: {e}")

    # Bcrypt has a 72-byte limit
    password_bytes = password.encode('utf-8')[:72]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    if hashed_password.startswith('$argon2'):
        try:
            return _argon2_hasher.verify(hashed_password, plain_password)
        except argon2.exceptions.VerificationError:
            return False
        except argon2.exceptions.InvalidHashError:
            pass

    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8')[:72],
            hashed_password.encode('utf-8')
        )
    except ValueError:
        pass

    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(data: Dict, expires_minutes: Optional[int] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()

    if expires_minutes is None:
        expires_minutes = settings.JWT_EXPIRE_MINUTES

    expire = datetime.utcnow() + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )


def decode_token(token: str) -> Dict:
    """Decode and verify a JWT token"""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        raise ValueError("Invalid token")
