"""
Booking and review schemas
"""
from datetime import date, datetime, time
from typing import Literal, Optional

from pydantic import BaseModel, Field


class BookingCreate(BaseModel):
    tutor_id: int
    subject: str = Field(..., min_length=1)
    booking_date: date
    booking_time: time
    duration: int = Field(..., description="Length of the session in minutes")
    location: Optional[str] = Field(default=None, description="Defaults to Online")
    amount: float

    class Config:
        json_schema_extra = {
            "example": {
                "tutor_id": 1,
                "subject": "Mathematics",
                "booking_date": "2026-11-02",
                "booking_time": "15:00",
                "duration": 60,
                "location": "Online",
                "amount": 40,
            }
        }


class BookingStatusUpdate(BaseModel):
    # any transition between known statuses is accepted
    status: Literal["pending", "confirmed", "completed", "cancelled"]


class BookingResponse(BaseModel):
    id: int
    student_id: int
    tutor_id: int
    subject: str
    booking_date: date
    booking_time: time
    duration: int
    location: str
    status: str
    amount: float
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StudentBooking(BookingResponse):
    """Booking row as listed for the student, with tutor details joined in"""
    tutor_subject: Optional[str] = None
    tutor_rate: Optional[float] = None
    tutor_name: Optional[str] = None


class ReviewCreate(BaseModel):
    # 1-5 expected; not enforced
    rating: int
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    id: int
    tutor_id: int
    student_id: int
    booking_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
