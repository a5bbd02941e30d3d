# topcar/api/routes/expenses.py
import logging
from datetime import date, datetime, time
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from topcar.core import clock
from topcar.core.errors import NotFoundError, ValidationError
from topcar.core.security import generate_id
from topcar.db.base import get_db
from topcar.db.models.expense import Expense
from topcar.schemas.common import Envelope, ok
from topcar.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate

log = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _get_expense(db: Session, expense_id: Optional[str]) -> Expense:
    if not expense_id:
        raise ValidationError("Expense ID is required")
    expense = db.query(Expense).filter(Expense.id == expense_id).first()
    if not expense:
        raise NotFoundError("Expense not found")
    return expense


@router.get("", response_model=Envelope[List[ExpenseResponse]])
def list_expenses(
    worker_id: Optional[str] = Query(None, alias="workerId"),
    appointment_id: Optional[str] = Query(None, alias="appointmentId"),
    type: Optional[str] = Query(None),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    q = db.query(Expense)
    if worker_id:
        q = q.filter(Expense.worker_id == worker_id)
    if appointment_id:
        q = q.filter(Expense.appointment_id == appointment_id)
    if type:
        q = q.filter(Expense.type == type)
    # range only applies when both ends are given; both ends inclusive
    if start_date and end_date:
        q = q.filter(
            Expense.date >= datetime.combine(start_date, time.min),
            Expense.date <= datetime.combine(end_date, time.max),
        )
    expenses = q.order_by(Expense.pk).all()
    return ok([ExpenseResponse.model_validate(e) for e in expenses])


# Worker logs an expense

@router.post("", response_model=Envelope[ExpenseResponse], status_code=201)
def create_expense(data: ExpenseCreate, db: Session = Depends(get_db)):
    if not data.worker_id.strip() or not data.description.strip():
        raise ValidationError("Missing required fields")
    if data.amount <= 0:
        raise ValidationError("Amount must be greater than 0")

    expense = Expense(
        id=generate_id(),
        worker_id=data.worker_id,
        worker_name=data.worker_name or "Unknown Worker",
        appointment_id=data.appointment_id,
        type=data.type,
        amount=float(data.amount),
        description=data.description.strip(),
        receipt_image=data.receipt_image,
        # undated expenses land on the business day they were logged
        date=data.date or clock.business_now(),
        created_at=datetime.utcnow(),
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)

    log.info(f"[EXPENSES] {expense.worker_name} ({expense.worker_id}) recorded {expense.type} ${expense.amount:.2f}: {expense.description}")
    return ok(ExpenseResponse.model_validate(expense), "Expense recorded successfully")


@router.put("", response_model=Envelope[ExpenseResponse])
def update_expense(
    changes: ExpenseUpdate,
    expense_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    expense = _get_expense(db, expense_id)
    fields = changes.dict(exclude_unset=True)
    if "amount" in fields and (fields["amount"] is None or fields["amount"] <= 0):
        raise ValidationError("Amount must be greater than 0")

    # only the optional links can be cleared with null
    for field, value in fields.items():
        if value is None and field not in ("appointment_id", "receipt_image"):
            continue
        setattr(expense, field, value)

    expense.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(expense)
    return ok(ExpenseResponse.model_validate(expense), "Expense updated successfully")


@router.delete("", response_model=Envelope[None])
def delete_expense(
    expense_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    expense = _get_expense(db, expense_id)
    summary = f"{expense.type} - ${expense.amount:.2f}"

    db.delete(expense)
    db.commit()

    log.info(f"[EXPENSES] Deleted {summary}")
    return ok(None, "Expense deleted successfully")
