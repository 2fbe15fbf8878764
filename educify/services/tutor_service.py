"""
Tutor directory: profiles, availability and search
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload, selectinload

from educify.core.errors import NotFoundError, ValidationError
from educify.core.geo import distance_km_expr
from educify.models import Tutor, Education, Availability, Review

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_RADIUS_KM = 10.0


@dataclass
class TutorFilters:
    """Optional search filters; only the fields that are set become predicates."""

    subject: Optional[str] = None
    min_rate: Optional[float] = None
    max_rate: Optional[float] = None

    def clauses(self) -> list:
        clauses = []
        if self.subject:
            clauses.append(Tutor.subject.ilike(f"%{self.subject}%"))
        if self.min_rate is not None:
            clauses.append(Tutor.rate >= self.min_rate)
        if self.max_rate is not None:
            clauses.append(Tutor.rate <= self.max_rate)
        return clauses


def _with_profile(query):
    return query.options(
        joinedload(Tutor.user),
        selectinload(Tutor.education),
        selectinload(Tutor.availability),
    )


def list_tutors(db: Session, filters: TutorFilters) -> List[Tutor]:
    """Tutors matching every supplied filter, best rated first"""
    query = _with_profile(db.query(Tutor)).filter(*filters.clauses())
    return query.order_by(Tutor.rating.desc(), Tutor.id).all()


def get_tutor(db: Session, tutor_id: int) -> Tuple[Tutor, List[Review]]:
    """
    Tutor profile plus its reviews, newest first

    Raises:
        NotFoundError: If the tutor does not exist
    """
    tutor = _with_profile(db.query(Tutor)).filter(Tutor.id == tutor_id).first()
    if tutor is None:
        raise NotFoundError("Tutor not found")

    reviews = (
        db.query(Review)
        .options(joinedload(Review.student))
        .filter(Review.tutor_id == tutor_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
    return tutor, reviews


def create_tutor(db: Session, user_id: int, data: dict) -> Tutor:
    """Create a tutor profile owned by user_id. A user may own several."""
    education = data.pop("education", None) or []
    tutor = Tutor(user_id=user_id, **data)
    tutor.education = [Education(**entry) for entry in education]

    db.add(tutor)
    db.commit()
    db.refresh(tutor)

    logger.info(f"Tutor profile {tutor.id} created for user {user_id}")
    return tutor


def add_availability(db: Session, tutor_id: int, data: dict) -> Availability:
    """
    Append an availability slot. Existing slots are never replaced.

    Raises:
        NotFoundError: If the tutor does not exist
    """
    if db.query(Tutor.id).filter(Tutor.id == tutor_id).first() is None:
        raise NotFoundError("Tutor not found")

    slot = Availability(tutor_id=tutor_id, **data)
    db.add(slot)
    db.commit()
    db.refresh(slot)
    return slot


def find_nearby(
    db: Session,
    lat: Optional[float],
    lng: Optional[float],
    radius: Optional[float] = None,
) -> Tuple[List[Tuple[Tutor, float]], float]:
    """
    Tutors within radius km of (lat, lng), nearest first

    Returns:
        ([(tutor, distance_km), ...], effective_radius)

    Raises:
        ValidationError: If lat or lng is missing
    """
    if lat is None or lng is None:
        raise ValidationError("Latitude and longitude required")

    radius_km = DEFAULT_SEARCH_RADIUS_KM if radius is None else radius
    distance = distance_km_expr(lat, lng, Tutor.location_lat, Tutor.location_lng).label("distance")

    rows = (
        db.query(Tutor, distance)
        .options(joinedload(Tutor.user))
        .filter(
            Tutor.location_lat.isnot(None),
            Tutor.location_lng.isnot(None),
            distance_km_expr(lat, lng, Tutor.location_lat, Tutor.location_lng) <= radius_km,
        )
        .order_by(distance)
        .all()
    )
    return [(tutor, dist) for tutor, dist in rows], radius_km
