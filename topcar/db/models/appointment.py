from sqlalchemy import Column, Integer, String, Date, Time, Float, DateTime
from datetime import datetime
from topcar.db.base import Base


class Appointment(Base):
    __tablename__ = "appointments"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)

    # customer snapshot taken at booking time
    customer_id = Column(String, index=True, nullable=False)
    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)

    # soft reference: no foreign key, the package may be edited or removed later
    service_package_id = Column(String, index=True, nullable=False)
    service_package_name = Column(String, nullable=False)

    vehicle_type = Column(String, nullable=False, default="standard")

    appointment_date = Column(Date, nullable=False)
    appointment_time = Column(Time, nullable=False)

    address = Column(String, nullable=False)
    total_price = Column(Float, nullable=False)

    payment_method = Column(String, nullable=False)
    payment_status = Column(String, nullable=False, default="pending")

    status = Column(String, index=True, nullable=False, default="pending")

    assigned_worker_id = Column(String, index=True, nullable=True)
    assigned_worker_name = Column(String, nullable=True)

    notes = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)
