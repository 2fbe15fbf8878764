"""Pydantic schemas package"""
from .user import UserRegister, UserLogin, UserResponse, AuthResponse
from .tutor import (
    EducationCreate, EducationResponse,
    TutorCreate, TutorResponse, TutorListItem, TutorDetail, TutorReview,
    AvailabilityUpdate, AvailabilityResponse,
    NearbyTutor, NearbyResponse, GeoPoint,
)
from .booking import (
    BookingCreate, BookingStatusUpdate, BookingResponse, StudentBooking,
    ReviewCreate, ReviewResponse,
)
from .payment import PaymentCreate, PaymentResponse
from .promo import (
    PromoValidateRequest, PromoValidateResponse,
    PromoApplyRequest, PromoApplyResponse,
    PromoCreate, PromoCodeResponse,
)

__all__ = [
    "UserRegister", "UserLogin", "UserResponse", "AuthResponse",
    "EducationCreate", "EducationResponse",
    "TutorCreate", "TutorResponse", "TutorListItem", "TutorDetail", "TutorReview",
    "AvailabilityUpdate", "AvailabilityResponse",
    "NearbyTutor", "NearbyResponse", "GeoPoint",
    "BookingCreate", "BookingStatusUpdate", "BookingResponse", "StudentBooking",
    "ReviewCreate", "ReviewResponse",
    "PaymentCreate", "PaymentResponse",
    "PromoValidateRequest", "PromoValidateResponse",
    "PromoApplyRequest", "PromoApplyResponse",
    "PromoCreate", "PromoCodeResponse",
]
