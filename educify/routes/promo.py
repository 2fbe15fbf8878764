from dataclasses import asdict
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from educify.core import get_db, get_current_user
from educify.schemas import (
    PromoValidateRequest, PromoValidateResponse,
    PromoApplyRequest, PromoApplyResponse,
    PromoCreate, PromoCodeResponse,
)
from educify.services import promo_service

router = APIRouter(prefix="/api/promo", tags=["Promo Codes"])


@router.post("/validate", response_model=PromoValidateResponse)
def validate_promo(
    payload: PromoValidateRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    promo = promo_service.validate_code(db, payload.code)
    return PromoValidateResponse(
        valid=True,
        code=promo.code,
        discount_type=promo.discount_type,
        discount_value=promo.discount_value,
        message=promo_service.format_discount(promo.discount_type, promo.discount_value),
    )


@router.post("/apply", response_model=PromoApplyResponse)
def apply_promo(
    payload: PromoApplyRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Apply a code to an amount

    Every call counts as one use, whether or not the booking goes ahead.
    """
    result = promo_service.apply_code(db, payload.code, payload.original_amount)
    return PromoApplyResponse(**asdict(result))


@router.post("/create", response_model=PromoCodeResponse, status_code=status.HTTP_201_CREATED)
def create_promo(
    payload: PromoCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return promo_service.create_code(db, payload.model_dump())
