"""
Booking ledger and review aggregation

Writes commit one statement group at a time. The review insert and the
rating recompute are separate commits, so concurrent reviews for the same
tutor may leave the aggregate reflecting only one of them.
"""
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from educify.core.errors import NotFoundError
from educify.models import Booking, Review, Tutor

logger = logging.getLogger(__name__)


def list_student_bookings(db: Session, student_id: int) -> List[Booking]:
    """The student's bookings with tutor details, latest session first"""
    return (
        db.query(Booking)
        .options(joinedload(Booking.tutor).joinedload(Tutor.user))
        .filter(Booking.student_id == student_id)
        .order_by(Booking.booking_date.desc(), Booking.booking_time.desc(), Booking.id.desc())
        .all()
    )


def create_booking(db: Session, student_id: int, data: dict) -> Booking:
    """
    Record a pending booking. Overlapping bookings are not checked.

    Raises:
        NotFoundError: If the tutor does not exist
    """
    if db.query(Tutor.id).filter(Tutor.id == data["tutor_id"]).first() is None:
        raise NotFoundError("Tutor not found")

    booking = Booking(student_id=student_id, **{**data, "location": data.get("location") or "Online"})
    db.add(booking)
    db.commit()
    db.refresh(booking)

    logger.info(f"Booking {booking.id} created: student {student_id} -> tutor {booking.tutor_id}")
    return booking


def set_booking_status(db: Session, booking_id: int, status: str) -> Booking:
    """
    Overwrite the status. Transitions are not policed.

    Raises:
        NotFoundError: If the booking does not exist
    """
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if booking is None:
        raise NotFoundError("Booking not found")

    booking.status = status
    db.commit()
    db.refresh(booking)

    logger.info(f"Booking {booking_id} status set to {status}")
    return booking


def recompute_tutor_rating(db: Session, tutor_id: int) -> None:
    """Store mean(rating) and count(*) over the tutor's reviews on the tutor row"""
    avg_rating, count = (
        db.query(func.avg(Review.rating), func.count(Review.id))
        .filter(Review.tutor_id == tutor_id)
        .one()
    )
    db.query(Tutor).filter(Tutor.id == tutor_id).update(
        {Tutor.rating: float(avg_rating or 0), Tutor.reviews_count: count},
        synchronize_session=False,
    )
    db.commit()


def add_review(
    db: Session,
    booking_id: int,
    student_id: int,
    rating: int,
    comment: Optional[str] = None,
) -> Review:
    """
    Review the tutor of a booking and refresh the tutor's rating

    Raises:
        NotFoundError: If the booking does not exist
    """
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if booking is None:
        raise NotFoundError("Booking not found")

    review = Review(
        tutor_id=booking.tutor_id,
        student_id=student_id,
        booking_id=booking_id,
        rating=rating,
        comment=comment,
    )
    db.add(review)
    db.commit()
    db.refresh(review)

    recompute_tutor_rating(db, review.tutor_id)
    db.refresh(review)

    logger.info(f"Review {review.id} added for tutor {review.tutor_id} (rating {rating})")
    return review
