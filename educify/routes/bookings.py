from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from educify.core import get_db, get_current_user
from educify.schemas import (
    BookingCreate, BookingStatusUpdate, BookingResponse, StudentBooking,
    ReviewCreate, ReviewResponse,
)
from educify.services import booking_service

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


@router.get("", response_model=List[StudentBooking])
def list_bookings(
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The caller's bookings, latest session first"""
    return booking_service.list_student_bookings(db, current_user["id"])


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_data: BookingCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return booking_service.create_booking(db, current_user["id"], booking_data.model_dump())


@router.patch("/{booking_id}", response_model=BookingResponse)
def update_booking_status(
    booking_id: int,
    update: BookingStatusUpdate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return booking_service.set_booking_status(db, booking_id, update.status)


@router.post("/{booking_id}/review", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def add_review(
    booking_id: int,
    review: ReviewCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Review the booking's tutor; the tutor's rating and review count are recomputed"""
    return booking_service.add_review(
        db,
        booking_id=booking_id,
        student_id=current_user["id"],
        rating=review.rating,
        comment=review.comment,
    )
