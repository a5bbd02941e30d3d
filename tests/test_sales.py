from datetime import date, datetime, time, timedelta
from types import SimpleNamespace

import pytest

from topcar.api.routes.sales import business_today
from topcar.core.security import generate_id
from topcar.db.models.appointment import Appointment
from topcar.db.models.expense import Expense
from topcar.main import app
from topcar.services.sales import daily_sales, summarize_sales

TODAY = date(2026, 10, 19)


def appt(days_ago, price, payment_status="paid", status="confirmed"):
    return SimpleNamespace(
        appointment_date=TODAY - timedelta(days=days_ago),
        total_price=price,
        payment_status=payment_status,
        status=status,
    )


def test_empty_collection_is_all_zero():
    s = summarize_sales([], TODAY)
    assert s.today_revenue == 0
    assert s.month_appointments == 0
    assert s.average_order_value == 0
    assert s.completion_rate == 0
    assert s.payment_collection_rate == 0


def test_today_revenue_counts_only_paid_today():
    rows = [
        appt(0, 79),
        appt(0, 300),
        appt(0, 199, payment_status="pending"),
        appt(0, 129, payment_status="failed"),
        appt(1, 1000),
    ]
    s = summarize_sales(rows, TODAY)
    assert s.today_revenue == 379
    assert s.today_appointments == 4


def test_today_revenue_zero_when_nothing_paid():
    s = summarize_sales([appt(0, 79, payment_status="pending"), appt(0, 99, payment_status="failed")], TODAY)
    assert s.today_revenue == 0
    assert s.today_appointments == 2


def test_windows():
    rows = [
        appt(0, 100),
        appt(7, 200),                    # edge of week window
        appt(8, 400),                    # month only
        appt(30, 800),                   # edge of month window
        appt(31, 1600),                  # outside everything
        appt(-3, 3200),                  # future booking, not in a trailing window
    ]
    s = summarize_sales(rows, TODAY)
    assert (s.week_appointments, s.week_revenue) == (2, 300)
    assert (s.month_appointments, s.month_revenue) == (4, 1500)


def test_pending_and_completed_are_all_time():
    rows = [
        appt(0, 100, payment_status="pending", status="completed"),
        appt(90, 50, payment_status="pending", status="completed"),
        appt(-10, 25, payment_status="pending"),
        appt(2, 400, status="completed"),
    ]
    s = summarize_sales(rows, TODAY)
    assert s.pending_payments == 175
    assert s.completed_jobs == 3


def test_derived_ratios():
    rows = [
        appt(1, 200),
        appt(2, 100, status="completed"),
        appt(3, 300, payment_status="pending"),
        appt(4, 100, payment_status="pending"),
    ]
    s = summarize_sales(rows, TODAY)
    assert s.month_revenue == 300
    assert s.average_order_value == pytest.approx(300 / 4)
    assert s.completion_rate == pytest.approx(1 / 4)
    assert s.payment_collection_rate == pytest.approx(300 / 700)


def test_daily_sales_nets_expenses():
    rows = [appt(0, 200), appt(0, 100, payment_status="pending", status="completed"), appt(1, 500)]
    expenses = [
        SimpleNamespace(amount=40, date=datetime.combine(TODAY, time(8, 0))),
        SimpleNamespace(amount=15, date=datetime.combine(TODAY - timedelta(days=1), time(8, 0))),
    ]
    d = daily_sales(rows, expenses, TODAY)
    assert d.total_revenue == 200
    assert d.appointments_count == 2
    assert d.completed_jobs == 1
    assert d.pending_payments == 100
    assert d.expenses == 40
    assert d.net_profit == 160


def _store(db, days_ago, price, payment_status):
    db.add(Appointment(
        id=generate_id(),
        customer_id="C1",
        customer_name="Jane",
        customer_email="jane@example.com",
        customer_phone="0412 345 678",
        service_package_id="basic-detail",
        service_package_name="Basic Detail",
        vehicle_type="standard",
        appointment_date=TODAY - timedelta(days=days_ago),
        appointment_time=time(10, 0),
        address="1 George St",
        total_price=price,
        payment_method="online",
        payment_status=payment_status,
        status="confirmed",
    ))


def test_summary_endpoint(client, db):
    _store(db, 0, 79, "paid")
    _store(db, 0, 199, "pending")
    _store(db, 5, 300, "paid")
    db.commit()
    app.dependency_overrides[business_today] = lambda: TODAY

    res = client.get("/sales/summary")
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["todayRevenue"] == 79
    assert data["todayAppointments"] == 2
    assert data["weekRevenue"] == 379
    assert data["pendingPayments"] == 199
    assert data["paymentCollectionRate"] == pytest.approx(379 / 578)


def test_daily_endpoint(client, db):
    _store(db, 0, 79, "paid")
    db.add(Expense(id=generate_id(), worker_id="worker1", worker_name="John", type="fuel",
                   amount=30, description="Fuel", date=datetime.combine(TODAY, time(9, 0))))
    db.commit()
    app.dependency_overrides[business_today] = lambda: TODAY

    data = client.get("/sales/daily").json()["data"]
    assert data["date"] == TODAY.isoformat()
    assert data["totalRevenue"] == 79
    assert data["expenses"] == 30
    assert data["netProfit"] == 49

    other = client.get("/sales/daily", params={"date": "2026-10-01"}).json()["data"]
    assert other["appointmentsCount"] == 0
