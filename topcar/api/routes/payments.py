# topcar/api/routes/payments.py
import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from topcar.core.errors import PaymentFailedError, ValidationError
from topcar.core.security import generate_id
from topcar.db.base import get_db
from topcar.db.models.payment import Payment
from topcar.integrations.payments import PaymentProcessor, get_payment_processor
from topcar.schemas.common import Envelope, ok
from topcar.schemas.payment import PaymentCreate, PaymentResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


def _to_response(p: Payment) -> PaymentResponse:
    return PaymentResponse(
        payment_id=p.id,
        appointment_id=p.appointment_id,
        status=p.status,
        transaction_id=p.transaction_id,
        amount=p.amount,
        payment_method=p.payment_method,
        message=p.message,
        created_at=p.created_at,
    )


@router.post("", response_model=Envelope[PaymentResponse])
def process_payment(
    data: PaymentCreate,
    db: Session = Depends(get_db),
    processor: PaymentProcessor = Depends(get_payment_processor),
):
    if not data.appointment_id.strip() or data.amount <= 0:
        raise ValidationError("Missing required payment fields")

    result = processor.charge(
        appointment_id=data.appointment_id,
        amount=data.amount,
        method=data.payment_method,
        customer_email=data.customer_email,
    )

    # every attempt is kept, failed ones included
    payment = Payment(
        id=generate_id(),
        appointment_id=data.appointment_id,
        customer_id=data.customer_id,
        customer_email=data.customer_email,
        amount=float(data.amount),
        payment_method=data.payment_method,
        status=result.status,
        transaction_id=result.transaction_id,
        message=result.message,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)

    if data.customer_email:
        log.info(f"[MAIL] Mock email to {data.customer_email}: Payment {result.status} - {result.message}")

    if not result.succeeded:
        raise PaymentFailedError("Payment failed", result.message)
    return ok(_to_response(payment), "Payment processed successfully")


@router.get("", response_model=Envelope[List[PaymentResponse]])
def payment_history(
    appointment_id: Optional[str] = Query(None, alias="appointmentId"),
    customer_id: Optional[str] = Query(None, alias="customerId"),
    db: Session = Depends(get_db),
):
    q = db.query(Payment)
    if appointment_id:
        q = q.filter(Payment.appointment_id == appointment_id)
    if customer_id:
        q = q.filter(Payment.customer_id == customer_id)
    payments = q.order_by(Payment.pk).all()
    return ok([_to_response(p) for p in payments], "Payment history retrieved")
