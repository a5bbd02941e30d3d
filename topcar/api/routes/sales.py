# topcar/api/routes/sales.py
from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from topcar.core.clock import business_today
from topcar.db.base import get_db
from topcar.db.models.appointment import Appointment
from topcar.db.models.expense import Expense
from topcar.schemas.common import Envelope, ok
from topcar.schemas.sales import DailySales, SalesSummary
from topcar.services.sales import daily_sales, summarize_sales

router = APIRouter(prefix="/sales", tags=["sales"])


@router.get("/summary", response_model=Envelope[SalesSummary])
def sales_summary(
    db: Session = Depends(get_db),
    today: date = Depends(business_today),
):
    appointments = db.query(Appointment).all()
    return ok(summarize_sales(appointments, today))


@router.get("/daily", response_model=Envelope[DailySales])
def sales_for_day(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
    today: date = Depends(business_today),
):
    day = day or today
    appointments = db.query(Appointment).filter(Appointment.appointment_date == day).all()
    expenses = db.query(Expense).all()
    return ok(daily_sales(appointments, expenses, day))
