"""
Pydantic schemas for API request/response validation
These are NOT database models - they validate data coming from/to the API
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

# Request Schemas (data coming FROM the client)

class UserRegister(BaseModel):
    """
    Schema for registration request
    Role defaults to student when omitted
    """
    name: str = Field(..., min_length=1, description="Full name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="Plain password, hashed before storage")
    role: Optional[Literal["student", "tutor"]] = Field(default=None, description="student or tutor")
    phone: Optional[str] = Field(default=None, description="Contact phone number")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "password": "securePassword123",
                "role": "student",
                "phone": "+15550100",
            }
        }


class UserLogin(BaseModel):
    email: EmailStr = Field(..., description="User email")
    password: str = Field(..., description="User password")


# Response Schemas (data going TO the client)

class UserResponse(BaseModel):
    """
    Schema for user data in responses
    Never send the password hash to the client!
    """
    id: int
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class AuthResponse(BaseModel):
    """Returned by register and login: the user plus a fresh token"""
    user: UserResponse
    token: str
