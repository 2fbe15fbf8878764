"""
Promo engine: validation, application and creation of discount codes
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from educify.core.errors import ConflictError, NotFoundError, PromoLimitReachedError, ValidationError
from educify.models import PromoCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscountResult:
    original_amount: float
    discount: float
    final_amount: float
    promo_code: str


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _normalize(code: str) -> str:
    return code.strip().upper()


def find_active_code(db: Session, code: str, now: Optional[datetime] = None) -> Optional[PromoCode]:
    """Active code whose [valid_from, valid_until] window contains now"""
    now = _as_utc(now or datetime.now(timezone.utc))
    return (
        db.query(PromoCode)
        .filter(
            PromoCode.code == _normalize(code),
            PromoCode.is_active.is_(True),
            PromoCode.valid_from <= now,
            PromoCode.valid_until >= now,
        )
        .first()
    )


def format_discount(discount_type: str, value: float) -> str:
    amount = f"{value:g}"
    if discount_type == "percentage":
        return f"{amount}% discount applied!"
    return f"${amount} discount applied!"


def compute_discount(discount_type: str, value: float, original_amount: float) -> tuple:
    """
    Returns (discount, final_amount)

    percentage: original * value / 100; fixed: value.
    The final amount never drops below zero, but the reported discount is not clipped.
    """
    if discount_type == "percentage":
        discount = original_amount * value / 100
    else:
        discount = value
    return discount, max(0.0, original_amount - discount)


def validate_code(db: Session, code: Optional[str]) -> PromoCode:
    """
    Raises:
        ValidationError: If no code was given
        NotFoundError: If the code is unknown, inactive or outside its window
        PromoLimitReachedError: If used_count has reached max_uses
    """
    if not code:
        raise ValidationError("Promo code required")

    promo = find_active_code(db, code)
    if promo is None:
        raise NotFoundError("Invalid or expired promo code")

    if promo.max_uses and promo.used_count >= promo.max_uses:
        raise PromoLimitReachedError()

    return promo


def apply_code(db: Session, code: str, original_amount: float) -> DiscountResult:
    """
    Price original_amount with the code and count one use

    max_uses is not consulted here, so a code past its cap that
    validate_code rejects can still be applied.

    Raises:
        NotFoundError: If the code is unknown, inactive or outside its window
    """
    promo = find_active_code(db, code)
    if promo is None:
        raise NotFoundError("Invalid promo code")

    discount, final_amount = compute_discount(promo.discount_type, promo.discount_value, original_amount)

    db.query(PromoCode).filter(PromoCode.id == promo.id).update(
        {PromoCode.used_count: PromoCode.used_count + 1}, synchronize_session=False
    )
    db.commit()

    logger.info(f"Promo {promo.code} applied: {original_amount} -> {final_amount}")

    return DiscountResult(
        original_amount=original_amount,
        discount=discount,
        final_amount=final_amount,
        promo_code=promo.code,
    )


def code_taken(db: Session, code: str) -> bool:
    return db.query(PromoCode.id).filter(PromoCode.code == code).first() is not None


def create_code(db: Session, data: dict) -> PromoCode:
    """
    Store a new code, upper-cased. No role check is made on the caller.

    Raises:
        ConflictError: If the code already exists
    """
    code = _normalize(data["code"])
    if code_taken(db, code):
        raise ConflictError("Promo code already exists")

    promo = PromoCode(
        code=code,
        discount_type=data["discount_type"],
        discount_value=data["discount_value"],
        valid_from=_as_utc(data["valid_from"]),
        valid_until=_as_utc(data["valid_until"]),
        max_uses=data.get("max_uses"),
    )
    db.add(promo)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Promo code already exists")
    db.refresh(promo)

    logger.info(f"Promo code {promo.code} created")
    return promo
