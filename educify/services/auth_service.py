"""
Credential store: registration and login
"""
import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from educify.core.errors import ConflictError, InvalidCredentialsError
from educify.core.security import hash_password, verify_password, create_access_token
from educify.models import User

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    return create_access_token(user_id=user.id, email=user.email, role=user.role)


def email_taken(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def register_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: Optional[str] = None,
    phone: Optional[str] = None,
) -> Tuple[User, str]:
    """
    Create a user and sign a session token for it

    Raises:
        ConflictError: If the email is already registered
    """
    if email_taken(db, email):
        raise ConflictError()

    user = User(
        name=name,
        email=email,
        password=hash_password(password),
        role=role or "student",
        phone=phone,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent registration won the unique email
        db.rollback()
        raise ConflictError()
    db.refresh(user)

    logger.info(f"New user registered: {user.email} ({user.role})")

    return user, issue_token(user)


def authenticate_user(db: Session, email: str, password: str) -> Tuple[User, str]:
    """
    Check credentials and sign a fresh token

    Raises:
        InvalidCredentialsError: Unknown email or wrong password (same error for both)
    """
    user = db.query(User).filter(User.email == email).first()

    if not user or not verify_password(password, user.password):
        logger.warning(f"Failed login attempt for {email}")
        raise InvalidCredentialsError()

    logger.info(f"User logged in: {user.email}")

    return user, issue_token(user)
