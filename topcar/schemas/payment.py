# topcar/schemas/payment.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import FiniteFloat

from topcar.schemas.common import CamelModel


class PaymentCreate(CamelModel):
    appointment_id: str
    amount: FiniteFloat
    payment_method: Literal["online", "in-person"]
    customer_email: Optional[str] = None
    customer_id: Optional[str] = None


class PaymentResponse(CamelModel):
    payment_id: str
    appointment_id: str
    status: str   # success / failed
    transaction_id: str
    amount: float
    payment_method: str
    message: Optional[str] = None
    created_at: Optional[datetime] = None
