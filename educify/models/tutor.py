"""
Tutor directory tables: tutor profiles, education and weekly availability
"""
from sqlalchemy import Column, Integer, String, Float, Boolean, Text, Time, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from educify.core.database import Base


class Tutor(Base):
    __tablename__ = "tutors"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # no unique constraint: a user may own several tutor profiles
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    rate = Column(Float, nullable=False)
    experience = Column(Integer, nullable=True)  # years
    # running average of reviews.rating, maintained by the booking service
    rating = Column(Float, nullable=False, default=0.0)
    reviews_count = Column(Integer, nullable=False, default=0)
    languages = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=True)
    location_address = Column(String(500), nullable=True)
    location_lat = Column(Float, nullable=True)
    location_lng = Column(Float, nullable=True)
    verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="tutor_profiles")
    education = relationship("Education", back_populates="tutor", order_by="Education.id")
    availability = relationship("Availability", back_populates="tutor", order_by="Availability.id")
    reviews = relationship("Review", back_populates="tutor")

    # owner details flattened onto the profile for responses

    @property
    def name(self):
        return self.user.name if self.user else None

    @property
    def email(self):
        return self.user.email if self.user else None

    @property
    def phone(self):
        return self.user.phone if self.user else None

    def __repr__(self):
        return f"<Tutor(id={self.id}, user_id={self.user_id}, subject='{self.subject}')>"


class Education(Base):
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    tutor_id = Column(Integer, ForeignKey("tutors.id"), nullable=False, index=True)
    degree = Column(String(255), nullable=False)
    institution = Column(String(255), nullable=True)
    year = Column(Integer, nullable=True)

    tutor = relationship("Tutor", back_populates="education")


class Availability(Base):
    """One weekly slot. Rows are appended, never replaced, so duplicates are possible."""
    __tablename__ = "availability"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    tutor_id = Column(Integer, ForeignKey("tutors.id"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)  # 0 = Sunday
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)

    tutor = relationship("Tutor", back_populates="availability")
