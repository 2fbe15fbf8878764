"""
Promo code schemas
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class PromoValidateRequest(BaseModel):
    # optional here so a missing code gets the service's own message
    code: Optional[str] = None


class PromoValidateResponse(BaseModel):
    valid: bool = True
    code: str
    discount_type: str
    discount_value: float
    message: str


class PromoApplyRequest(BaseModel):
    code: str = Field(..., min_length=1)
    original_amount: float


class PromoApplyResponse(BaseModel):
    original_amount: float
    discount: float
    final_amount: float
    promo_code: str


class PromoCreate(BaseModel):
    code: str = Field(..., min_length=1)
    discount_type: Literal["percentage", "fixed"]
    discount_value: float
    valid_from: datetime
    valid_until: datetime
    max_uses: Optional[int] = None

    class Config:
        json_schema_extra = {
            "example": {
                "code": "welcome20",
                "discount_type": "percentage",
                "discount_value": 20,
                "valid_from": "2026-01-01T00:00:00Z",
                "valid_until": "2026-12-31T23:59:59Z",
                "max_uses": 100,
            }
        }


class PromoCodeResponse(BaseModel):
    id: int
    code: str
    discount_type: str
    discount_value: float
    valid_from: datetime
    valid_until: datetime
    max_uses: Optional[int] = None
    used_count: int
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
