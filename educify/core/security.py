"""
Authentication and security utilities
Handles password hashing, JWT token creation/verification
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from educify.config import settings

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Extracts the token from the Authorization: Bearer <token> header
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


# Password Hashing Functions

def hash_password(password: str) -> str:
    """Hash a plain password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


# JWT Token Functions

def _signing_secret() -> str:
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET is not configured")
    return settings.JWT_SECRET


def create_access_token(user_id: int, email: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed token carrying {id, email, role}

    Args:
        user_id: Primary key of the user
        email: User email
        role: "student" or "tutor"
        expires_delta: Lifetime override, defaults to ACCESS_TOKEN_EXPIRE_DAYS

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + (expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)),
    }
    return jwt.encode(payload, _signing_secret(), algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verify and decode a token

    Returns:
        Claim dictionary {id, email, role}

    Raises:
        HTTPException: 401 if the token is invalid, expired or tampered
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(token, _signing_secret(), algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"Rejected token: {e}")
        raise credentials_exception

    user_id = payload.get("id")
    email = payload.get("email")
    if user_id is None or email is None:
        raise credentials_exception

    return {"id": user_id, "email": email, "role": payload.get("role")}


# Authentication Dependencies

def get_current_user(token: str = Depends(oauth2_scheme)) -> Dict[str, Any]:
    """
    FastAPI dependency to get the caller's identity
    Use this with Depends() on protected routes
    """
    return verify_token(token)
