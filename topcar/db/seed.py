# topcar/db/seed.py
"""
Schema creation and seed data.

``init_db`` runs at startup: it creates missing tables, loads the default
service catalog into an empty ``service_packages`` table and, when
SEED_DEMO_DATA is set, fills empty appointment/expense tables with demo rows.
"""
import logging
import random
from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from topcar.catalog import SERVICE_PACKAGES
from topcar.core.clock import business_now, business_today
from topcar.core.security import generate_id
from topcar.db.base import Base, SessionLocal, engine
from topcar.db.models.appointment import Appointment
from topcar.db.models.expense import Expense
from topcar.db.models.job_image import JobImage  # noqa: F401  (registers table)
from topcar.db.models.payment import Payment  # noqa: F401
from topcar.db.models.service_package import ServicePackage
from topcar.db.models.worker_location import WorkerLocation  # noqa: F401

log = logging.getLogger(__name__)

DEMO_WORKERS = [
    ("worker1", "John Smith"),
    ("worker2", "Sarah Johnson"),
    ("worker3", "Mike Wilson"),
]

EXPENSE_DESCRIPTIONS = {
    "fuel": "Fuel for service vehicle",
    "receipt": "Equipment and supplies",
    "payment": "Customer payment processing",
    "other": "Miscellaneous expense",
}


def seed_catalog(db: Session) -> int:
    if db.query(ServicePackage.pk).first() is not None:
        return 0
    for pkg in SERVICE_PACKAGES:
        db.add(ServicePackage(**{**pkg, "inclusions": list(pkg["inclusions"])}))
    db.commit()
    log.info("[SEED] Loaded %d default service packages", len(SERVICE_PACKAGES))
    return len(SERVICE_PACKAGES)


def generate_demo_appointments(count: int = 10, rng: Optional[random.Random] = None, today: Optional[date] = None) -> list[Appointment]:
    """Random appointments from 30 days back to 30 days ahead, priced from the default catalog."""
    rng = rng or random.Random()
    today = today or business_today()
    packages = SERVICE_PACKAGES[:4]
    appointments = []
    for i in range(count):
        pkg = rng.choice(packages)
        vehicle_type = rng.choice(["standard", "large"])
        status = rng.choice(["pending", "confirmed", "assigned", "in-progress", "completed"])
        worker_id, worker_name = rng.choice(DEMO_WORKERS)
        assigned = status in ("assigned", "in-progress", "completed")
        appointments.append(Appointment(
            id=generate_id(),
            customer_id=generate_id(),
            customer_name=f"Customer {i + 1}",
            customer_email=f"customer{i + 1}@example.com",
            customer_phone=f"0412 345 {i:03d}",
            service_package_id=pkg["id"],
            service_package_name=pkg["name"],
            vehicle_type=vehicle_type,
            appointment_date=today + timedelta(days=rng.randrange(-30, 30)),
            appointment_time=time(9 + rng.randrange(8), 0),
            address=f"{i + 1} Mock Street, Sydney NSW 2000",
            total_price=pkg["premium_price"] if vehicle_type == "large" else pkg["base_price"],
            payment_method=rng.choice(["online", "in-person"]),
            payment_status=rng.choice(["pending", "paid", "failed"]),
            status=status,
            assigned_worker_id=worker_id if assigned else None,
            assigned_worker_name=worker_name if assigned else None,
        ))
    return appointments


def generate_demo_expenses(count: int = 15, rng: Optional[random.Random] = None, now: Optional[datetime] = None) -> list[Expense]:
    """Random worker expenses over the past 30 days."""
    rng = rng or random.Random()
    now = now or business_now()
    expenses = []
    for _ in range(count):
        worker_id, worker_name = rng.choice(DEMO_WORKERS)
        expense_type = rng.choice(list(EXPENSE_DESCRIPTIONS))
        when = now - timedelta(days=rng.randrange(30))
        expenses.append(Expense(
            id=generate_id(),
            worker_id=worker_id,
            worker_name=worker_name,
            appointment_id=generate_id() if rng.random() > 0.3 else None,
            type=expense_type,
            amount=float(rng.randrange(10, 110)),
            description=EXPENSE_DESCRIPTIONS[expense_type],
            receipt_image=f"receipt_{generate_id()}.jpg" if rng.random() > 0.5 else None,
            date=when,
            created_at=when,
        ))
    return expenses


def seed_demo_data(db: Session, rng: Optional[random.Random] = None) -> None:
    if db.query(Appointment.pk).first() is None:
        db.add_all(generate_demo_appointments(rng=rng))
        log.info("[SEED] Generated demo appointments")
    if db.query(Expense.pk).first() is None:
        db.add_all(generate_demo_expenses(rng=rng))
        log.info("[SEED] Generated demo expenses")
    db.commit()


def init_db(demo: bool = False) -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_catalog(db)
        if demo:
            seed_demo_data(db)
    finally:
        db.close()
