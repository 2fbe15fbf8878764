"""
Tutor directory schemas
"""
from datetime import datetime, time
from typing import List, Optional

from pydantic import BaseModel, Field


class EducationCreate(BaseModel):
    degree: str
    institution: Optional[str] = None
    year: Optional[int] = None


class EducationResponse(EducationCreate):
    id: int
    tutor_id: int

    class Config:
        from_attributes = True


class TutorCreate(BaseModel):
    """
    Schema for creating a tutor profile
    The owner is taken from the caller's token
    """
    subject: str = Field(..., min_length=1)
    rate: float = Field(..., description="Hourly rate")
    experience: Optional[int] = Field(default=None, description="Years of experience")
    languages: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    location_address: Optional[str] = None
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    education: List[EducationCreate] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "subject": "Mathematics",
                "rate": 40,
                "experience": 5,
                "languages": ["English", "French"],
                "bio": "Calculus and algebra for high school students",
                "location_address": "12 Main St",
                "location_lat": 40.7128,
                "location_lng": -74.006,
                "education": [{"degree": "BSc Mathematics", "institution": "NYU", "year": 2015}],
            }
        }


class AvailabilityUpdate(BaseModel):
    day_of_week: int = Field(..., description="0 = Sunday ... 6 = Saturday")
    start_time: time
    end_time: time
    is_available: bool = True


class AvailabilityResponse(AvailabilityUpdate):
    id: int
    tutor_id: int

    class Config:
        from_attributes = True


class TutorResponse(BaseModel):
    id: int
    user_id: int
    subject: str
    rate: float
    experience: Optional[int] = None
    rating: float
    reviews_count: int
    languages: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    location_address: Optional[str] = None
    location_lat: Optional[float] = None
    location_lng: Optional[float] = None
    verified: bool
    created_at: Optional[datetime] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class TutorListItem(TutorResponse):
    """Tutor with its aggregated education and availability"""
    education: List[EducationResponse] = Field(default_factory=list)
    availability: List[AvailabilityResponse] = Field(default_factory=list)


class TutorReview(BaseModel):
    id: int
    tutor_id: int
    student_id: int
    booking_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    student_name: Optional[str] = None

    class Config:
        from_attributes = True


class TutorDetail(TutorListItem):
    reviews: List[TutorReview] = Field(default_factory=list)


class NearbyTutor(TutorResponse):
    distance: float = Field(..., description="Distance from the search center in km")


class GeoPoint(BaseModel):
    lat: float
    lng: float


class NearbyResponse(BaseModel):
    tutors: List[NearbyTutor]
    center: GeoPoint
    radius: float
