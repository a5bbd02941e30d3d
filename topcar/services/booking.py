# topcar/services/booking.py
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from topcar.core.errors import NotFoundError, ValidationError
from topcar.core.security import generate_id
from topcar.db.models.appointment import Appointment
from topcar.db.models.service_package import ServicePackage
from topcar.schemas.appointment import AppointmentCreate, AppointmentUpdate
from topcar.services import lifecycle

log = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("customer_name", "customer_phone", "service_package_id", "address")

# optional in an update, but cannot be cleared
NON_NULLABLE_FIELDS = ("status", "payment_status", "appointment_date", "appointment_time", "address")


def quote_price(package: ServicePackage, vehicle_type: str) -> float:
    return float(package.premium_price if vehicle_type == "large" else package.base_price)


def get_appointment(db: Session, appointment_id: str) -> Appointment:
    appt = db.query(Appointment).filter(Appointment.id == appointment_id).first()
    if not appt:
        raise NotFoundError("Appointment not found")
    return appt


def list_appointments(
    db: Session,
    status: Optional[str] = None,
    worker_id: Optional[str] = None,
    customer_id: Optional[str] = None,
) -> list[Appointment]:
    q = db.query(Appointment)
    if status:
        q = q.filter(Appointment.status == status)
    if worker_id:
        q = q.filter(Appointment.assigned_worker_id == worker_id)
    if customer_id:
        q = q.filter(Appointment.customer_id == customer_id)
    return q.order_by(Appointment.pk).all()


def create_appointment(db: Session, booking: AppointmentCreate) -> Appointment:
    for field in REQUIRED_TEXT_FIELDS:
        if not getattr(booking, field).strip():
            raise ValidationError("Missing required fields", f"{field} cannot be empty")

    package = db.query(ServicePackage).filter(ServicePackage.id == booking.service_package_id).first()
    if not package:
        raise ValidationError("Invalid service package")

    now = datetime.utcnow()
    appt = Appointment(
        id=generate_id(),
        customer_id=booking.customer_id or generate_id(),
        customer_name=booking.customer_name.strip(),
        customer_email=str(booking.customer_email),
        customer_phone=booking.customer_phone.strip(),
        service_package_id=package.id,
        service_package_name=package.name,
        vehicle_type=booking.vehicle_type,
        appointment_date=booking.appointment_date,
        appointment_time=booking.appointment_time,
        address=booking.address.strip(),
        total_price=quote_price(package, booking.vehicle_type),
        payment_method=booking.payment_method,
        payment_status="pending",
        status=lifecycle.PENDING,
        notes=booking.notes,
        created_at=now,
        updated_at=now,
    )
    db.add(appt)
    db.commit()
    db.refresh(appt)

    log.info(f"[BOOKING] {appt.id} {package.id} ({appt.vehicle_type}) ${appt.total_price:.2f} for {appt.customer_email}")
    log.info(f"[MAIL] Mock email to {appt.customer_email}: appointment booked for {appt.appointment_date} at {appt.appointment_time:%H:%M}")
    return appt


def update_appointment(db: Session, appointment_id: str, changes: AppointmentUpdate) -> Appointment:
    appt = get_appointment(db, appointment_id)
    fields = changes.dict(exclude_unset=True)
    for field in NON_NULLABLE_FIELDS:
        if field in fields and fields[field] is None:
            raise ValidationError(f"{field} cannot be null")

    target = fields.get("status")
    if target is not None:
        lifecycle.check_transition(appt.status, target)
        # the worker the record will carry after the merge
        worker_id = fields["assigned_worker_id"] if "assigned_worker_id" in fields else appt.assigned_worker_id
        if target == lifecycle.ASSIGNED and not worker_id:
            raise ValidationError("assignedWorkerId is required to assign an appointment")

    for field, value in fields.items():
        setattr(appt, field, value)

    appt.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(appt)
    log.info(f"[BOOKING] {appt.id} updated: {', '.join(sorted(fields)) or 'no fields'}")
    return appt


def apply_action(
    db: Session,
    appointment_id: str,
    action: str,
    worker_id: Optional[str] = None,
    worker_name: Optional[str] = None,
) -> Appointment:
    appt = get_appointment(db, appointment_id)
    new_status = lifecycle.next_status(appt.status, action)

    if action == "assign":
        if not worker_id:
            raise ValidationError("workerId is required to assign an appointment")
        appt.assigned_worker_id = worker_id
        appt.assigned_worker_name = worker_name
    elif action == "reject":
        log.info(f"[BOOKING] {appt.id} rejected by {appt.assigned_worker_id}; back to pending for re-dispatch")
        appt.assigned_worker_id = None
        appt.assigned_worker_name = None

    previous = appt.status
    appt.status = new_status
    appt.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(appt)
    log.info(f"[BOOKING] {appt.id} {action}: {previous} -> {new_status}")
    return appt
