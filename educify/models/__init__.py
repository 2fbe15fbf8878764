"""Database models package"""
from .user import User
from .tutor import Tutor, Education, Availability
from .booking import Booking, Review
from .payment import Payment
from .promo_code import PromoCode

__all__ = [
    "User", "Tutor", "Education", "Availability",
    "Booking", "Review",
    "Payment", "PromoCode",
]
