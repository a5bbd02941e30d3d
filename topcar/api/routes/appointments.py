# topcar/api/routes/appointments.py
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from topcar.core.errors import ValidationError
from topcar.db.base import get_db
from topcar.schemas.appointment import (
    AppointmentAction,
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
)
from topcar.schemas.common import Envelope, ok
from topcar.services import booking

router = APIRouter(prefix="/appointments", tags=["appointments"])


# Admin / worker / customer views (filters combine; absent filters are ignored)

@router.get("", response_model=Envelope[List[AppointmentResponse]])
def list_appointments(
    status: Optional[str] = Query(None),
    worker_id: Optional[str] = Query(None, alias="workerId"),
    customer_id: Optional[str] = Query(None, alias="customerId"),
    db: Session = Depends(get_db),
):
    appointments = booking.list_appointments(db, status=status, worker_id=worker_id, customer_id=customer_id)
    return ok([AppointmentResponse.model_validate(a) for a in appointments])


# Customer books

@router.post("", response_model=Envelope[AppointmentResponse], status_code=201)
def create_appointment(data: AppointmentCreate, db: Session = Depends(get_db)):
    appt = booking.create_appointment(db, data)
    return ok(AppointmentResponse.model_validate(appt), "Appointment created successfully")


# Admin / worker partial update

@router.put("", response_model=Envelope[AppointmentResponse])
def update_appointment(
    changes: AppointmentUpdate,
    appointment_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    if not appointment_id:
        raise ValidationError("Appointment ID is required")
    appt = booking.update_appointment(db, appointment_id, changes)
    return ok(AppointmentResponse.model_validate(appt), "Appointment updated successfully")


# Lifecycle actions: confirm, cancel, assign, accept, start, reject, complete

@router.post("/{appointment_id}/actions/{action}", response_model=Envelope[AppointmentResponse])
def appointment_action(
    appointment_id: str,
    action: str,
    payload: Optional[AppointmentAction] = Body(None),
    db: Session = Depends(get_db),
):
    payload = payload or AppointmentAction()
    appt = booking.apply_action(
        db,
        appointment_id,
        action,
        worker_id=payload.worker_id,
        worker_name=payload.worker_name,
    )
    return ok(AppointmentResponse.model_validate(appt), f"Appointment {appt.status}")
