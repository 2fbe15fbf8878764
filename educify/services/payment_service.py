"""
Payment records

A payment is a ledger entry only; no external processor is contacted.
"""
import logging
import secrets
import string
import time

from sqlalchemy.orm import Session

from educify.core.errors import NotFoundError
from educify.models import Booking, Payment

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def generate_transaction_id() -> str:
    """TXN-<epoch millis>-<9 random base36 chars>"""
    suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(9))
    return f"TXN-{int(time.time() * 1000)}-{suffix}"


def create_payment(db: Session, student_id: int, booking_id: int, amount: float, payment_method: str) -> Payment:
    """
    Record a completed payment and confirm its booking

    The amount is not compared with the booking amount, and a booking may
    receive more than one payment.

    Raises:
        NotFoundError: If the booking does not exist
    """
    if db.query(Booking.id).filter(Booking.id == booking_id).first() is None:
        raise NotFoundError("Booking not found")

    payment = Payment(
        booking_id=booking_id,
        student_id=student_id,
        amount=amount,
        payment_method=payment_method,
        transaction_id=generate_transaction_id(),
        status="completed",
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)

    # separate write: a failure here leaves the payment against a pending booking
    db.query(Booking).filter(Booking.id == booking_id).update(
        {Booking.status: "confirmed"}, synchronize_session=False
    )
    db.commit()
    db.refresh(payment)

    logger.info(f"Payment {payment.transaction_id} recorded for booking {booking_id}")
    return payment


def get_payment_for_booking(db: Session, booking_id: int) -> Payment:
    """
    Raises:
        NotFoundError: If no payment exists for the booking
    """
    payment = (
        db.query(Payment)
        .filter(Payment.booking_id == booking_id)
        .order_by(Payment.id)
        .first()
    )
    if payment is None:
        raise NotFoundError("Payment not found")
    return payment
