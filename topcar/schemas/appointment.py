from pydantic import EmailStr, Field
from datetime import date, time, datetime
from typing import Literal, Optional

from topcar.schemas.common import CamelModel

VehicleType = Literal["standard", "large"]
PaymentMethod = Literal["online", "in-person"]
PaymentStatus = Literal["pending", "paid", "failed"]
AppointmentStatus = Literal["pending", "confirmed", "assigned", "in-progress", "completed", "cancelled"]


# --- CREATE (customer booking form) ---
class AppointmentCreate(CamelModel):
    customer_id: Optional[str] = None
    customer_name: str
    customer_email: EmailStr
    customer_phone: str
    service_package_id: str
    vehicle_type: VehicleType
    appointment_date: date
    appointment_time: time
    address: str
    payment_method: PaymentMethod
    notes: Optional[str] = None


# --- UPDATE (Admin or Worker) ---
# price, package, vehicle and customer fields are frozen once booked
class AppointmentUpdate(CamelModel):
    status: Optional[AppointmentStatus] = Field(
        default=None,
        description="Must be reachable from the current status in one lifecycle step",
    )
    payment_status: Optional[PaymentStatus] = None
    assigned_worker_id: Optional[str] = None
    assigned_worker_name: Optional[str] = None
    appointment_date: Optional[date] = None
    appointment_time: Optional[time] = None
    address: Optional[str] = None
    notes: Optional[str] = None


# --- ACTION (confirm / cancel / assign / accept / start / reject / complete) ---
class AppointmentAction(CamelModel):
    worker_id: Optional[str] = None     # required for "assign"
    worker_name: Optional[str] = None


# --- RESPONSE ---
class AppointmentResponse(CamelModel):
    id: str
    customer_id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    service_package_id: str
    service_package_name: str
    vehicle_type: str
    appointment_date: date
    appointment_time: time
    address: str
    total_price: float
    payment_method: str
    payment_status: str
    status: str
    assigned_worker_id: Optional[str] = None
    assigned_worker_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime]
