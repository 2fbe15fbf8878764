from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from educify.core import get_db, get_current_user
from educify.schemas import (
    TutorCreate, TutorResponse, TutorListItem, TutorDetail, TutorReview,
    AvailabilityUpdate, AvailabilityResponse,
    NearbyTutor, NearbyResponse, GeoPoint,
)
from educify.services import tutor_service

router = APIRouter(prefix="/api/tutors", tags=["Tutors"])


@router.get("", response_model=List[TutorListItem])
def list_tutors(
    subject: Optional[str] = None,
    min_rate: Optional[float] = Query(default=None, alias="minRate"),
    max_rate: Optional[float] = Query(default=None, alias="maxRate"),
    db: Session = Depends(get_db),
):
    """
    Search tutors

    - subject: case-insensitive substring match
    - minRate / maxRate: inclusive bounds on the hourly rate
    """
    filters = tutor_service.TutorFilters(subject=subject, min_rate=min_rate, max_rate=max_rate)
    return tutor_service.list_tutors(db, filters)


# declared before /{tutor_id} so "nearby" is not read as an id
@router.get("/nearby", response_model=NearbyResponse)
def nearby_tutors(
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    radius: Optional[float] = None,
    db: Session = Depends(get_db),
):
    """Tutors within radius km (default 10) of lat/lng, nearest first"""
    rows, radius_km = tutor_service.find_nearby(db, lat, lng, radius)
    tutors = [
        NearbyTutor(**TutorResponse.model_validate(tutor).model_dump(), distance=distance)
        for tutor, distance in rows
    ]
    return NearbyResponse(tutors=tutors, center=GeoPoint(lat=lat, lng=lng), radius=radius_km)


@router.get("/{tutor_id}", response_model=TutorDetail)
def get_tutor(tutor_id: int, db: Session = Depends(get_db)):
    tutor, reviews = tutor_service.get_tutor(db, tutor_id)
    detail = TutorListItem.model_validate(tutor).model_dump()
    return TutorDetail(**detail, reviews=[TutorReview.model_validate(r) for r in reviews])


@router.post("", response_model=TutorResponse, status_code=status.HTTP_201_CREATED)
def create_tutor(
    tutor_data: TutorCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a tutor profile owned by the caller"""
    return tutor_service.create_tutor(db, current_user["id"], tutor_data.model_dump())


@router.put("/{tutor_id}/availability", response_model=AvailabilityResponse)
def update_availability(
    tutor_id: int,
    slot: AvailabilityUpdate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Append an availability slot; earlier slots are kept"""
    return tutor_service.add_availability(db, tutor_id, slot.model_dump())
