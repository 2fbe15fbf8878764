from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from educify.core import get_db, get_current_user
from educify.schemas import PaymentCreate, PaymentResponse
from educify.services import payment_service

router = APIRouter(prefix="/api/payments", tags=["Payments"])


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(
    payment_data: PaymentCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Record a payment for a booking

    The booking is marked confirmed whatever its previous status.
    """
    return payment_service.create_payment(
        db,
        student_id=current_user["id"],
        booking_id=payment_data.booking_id,
        amount=payment_data.amount,
        payment_method=payment_data.payment_method,
    )


@router.get("/booking/{booking_id}", response_model=PaymentResponse)
def get_booking_payment(
    booking_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return payment_service.get_payment_for_booking(db, booking_id)
