from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from educify.core import get_db
from educify.schemas import UserRegister, UserLogin, AuthResponse
from educify.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account

    - Rejects an email that is already registered
    - Hashes the password before storing
    - Returns the user and a token valid for 7 days
    """
    user, token = auth_service.register_user(
        db,
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        role=user_data.role,
        phone=user_data.phone,
    )
    return {"user": user, "token": token}


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """
    Login with email and password

    Unknown email and wrong password produce the same error.
    """
    user, token = auth_service.authenticate_user(db, credentials.email, credentials.password)
    return {"user": user, "token": token}
