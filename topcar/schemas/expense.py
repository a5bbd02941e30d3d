# topcar/schemas/expense.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import FiniteFloat

from topcar.schemas.common import CamelModel

ExpenseType = Literal["fuel", "receipt", "payment", "other"]


class ExpenseCreate(CamelModel):
    worker_id: str
    worker_name: Optional[str] = None
    appointment_id: Optional[str] = None
    type: ExpenseType
    amount: FiniteFloat
    description: str
    receipt_image: Optional[str] = None   # url returned by /uploads
    date: Optional[datetime] = None


class ExpenseUpdate(CamelModel):
    appointment_id: Optional[str] = None
    type: Optional[ExpenseType] = None
    amount: Optional[FiniteFloat] = None
    description: Optional[str] = None
    receipt_image: Optional[str] = None
    date: Optional[datetime] = None


class ExpenseResponse(CamelModel):
    id: str
    worker_id: str
    worker_name: str
    appointment_id: Optional[str] = None
    type: str
    amount: float
    description: str
    receipt_image: Optional[str] = None
    date: datetime
    created_at: datetime
    updated_at: Optional[datetime] = None
