# topcar/db/models/payment.py
from sqlalchemy import Column, Integer, String, Float, DateTime
from datetime import datetime
from topcar.db.base import Base


class Payment(Base):
    __tablename__ = "payments"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)

    appointment_id = Column(String, index=True, nullable=False)
    customer_id = Column(String, index=True, nullable=True)
    customer_email = Column(String, nullable=True)

    amount = Column(Float, nullable=False)
    payment_method = Column(String, nullable=False)

    status = Column(String, nullable=False)   # success / failed
    transaction_id = Column(String, nullable=False)
    message = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
