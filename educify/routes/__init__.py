from . import auth, tutors, bookings, payments, promo, system

__all__ = ["auth", "tutors", "bookings", "payments", "promo", "system"]
