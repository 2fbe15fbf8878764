"""
Booking ledger and reviews
"""
from sqlalchemy import Column, Integer, String, Float, Text, Date, Time, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from educify.core.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tutor_id = Column(Integer, ForeignKey("tutors.id"), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    booking_date = Column(Date, nullable=False)
    booking_time = Column(Time, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    location = Column(String(255), nullable=False, default="Online")
    status = Column(String(20), nullable=False, default="pending", server_default="pending")
    amount = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    tutor = relationship("Tutor")
    student = relationship("User")

    @property
    def tutor_subject(self):
        return self.tutor.subject if self.tutor else None

    @property
    def tutor_rate(self):
        return self.tutor.rate if self.tutor else None

    @property
    def tutor_name(self):
        return self.tutor.name if self.tutor else None

    def __repr__(self):
        return f"<Booking(id={self.id}, tutor_id={self.tutor_id}, status='{self.status}')>"


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    tutor_id = Column(Integer, ForeignKey("tutors.id"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    tutor = relationship("Tutor", back_populates="reviews")
    student = relationship("User")

    @property
    def student_name(self):
        return self.student.name if self.student else None
