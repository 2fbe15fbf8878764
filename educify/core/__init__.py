"""Core functionality package"""
from .database import get_db, engine, Base, SessionLocal
from .security import (
    hash_password,
    verify_password,
    create_access_token,
    verify_token,
    get_current_user,
)

__all__ = [
    "get_db", "engine", "Base", "SessionLocal",
    "hash_password", "verify_password",
    "create_access_token", "verify_token",
    "get_current_user",
]
