from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    booking_id: int
    amount: float
    payment_method: str = Field(..., min_length=1, description="e.g. card, paypal")


class PaymentResponse(BaseModel):
    id: int
    booking_id: int
    student_id: int
    amount: float
    payment_method: str
    transaction_id: str
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
