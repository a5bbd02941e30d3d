# topcar/services/sales.py
"""
Sales figures for the admin dashboard.

Both functions are pure: they take already-loaded rows plus the reference
date and never touch the session, so the route decides what "today" means.
"""
from datetime import date, timedelta
from typing import Iterable

from topcar.schemas.sales import DailySales, SalesSummary

WEEK_DAYS = 7
MONTH_DAYS = 30


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def summarize_sales(appointments: Iterable, today: date) -> SalesSummary:
    """
    Windowed revenue/appointment counts.

    - windows are inclusive ranges ending today: today only, last 7 days, last 30 days
    - revenue counts paid appointments only; counts include every appointment in the window
    - pending_payments and completed_jobs are all-time, not windowed
    """
    week_start = today - timedelta(days=WEEK_DAYS)
    month_start = today - timedelta(days=MONTH_DAYS)
    s = SalesSummary()

    for appt in appointments:
        d = appt.appointment_date
        paid = appt.payment_status == "paid"
        price = float(appt.total_price)

        if d == today:
            s.today_appointments += 1
            if paid:
                s.today_revenue += price
        if week_start <= d <= today:
            s.week_appointments += 1
            if paid:
                s.week_revenue += price
        if month_start <= d <= today:
            s.month_appointments += 1
            if paid:
                s.month_revenue += price

        if appt.payment_status == "pending":
            s.pending_payments += price
        if appt.status == "completed":
            s.completed_jobs += 1

    s.average_order_value = _ratio(s.month_revenue, s.month_appointments)
    s.completion_rate = _ratio(s.completed_jobs, s.month_appointments)
    s.payment_collection_rate = _ratio(s.month_revenue, s.month_revenue + s.pending_payments)
    return s


def daily_sales(appointments: Iterable, expenses: Iterable, day: date) -> DailySales:
    revenue = 0.0
    count = 0
    completed = 0
    pending = 0.0
    for appt in appointments:
        if appt.appointment_date != day:
            continue
        count += 1
        if appt.payment_status == "paid":
            revenue += float(appt.total_price)
        elif appt.payment_status == "pending":
            pending += float(appt.total_price)
        if appt.status == "completed":
            completed += 1

    spent = sum(float(e.amount) for e in expenses if e.date.date() == day)

    return DailySales(
        date=day,
        total_revenue=revenue,
        appointments_count=count,
        completed_jobs=completed,
        pending_payments=pending,
        expenses=spent,
        net_profit=revenue - spent,
    )
