# topcar/db/models/expense.py
from sqlalchemy import Column, Integer, String, Float, DateTime
from datetime import datetime
from topcar.core.clock import business_now
from topcar.db.base import Base


class Expense(Base):
    __tablename__ = "expenses"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)

    worker_id = Column(String, index=True, nullable=False)
    worker_name = Column(String, nullable=False, default="Unknown Worker")
    appointment_id = Column(String, index=True, nullable=True)

    type = Column(String, nullable=False)   # fuel / receipt / payment / other
    amount = Column(Float, nullable=False)
    description = Column(String, nullable=False)
    receipt_image = Column(String, nullable=True)

    date = Column(DateTime, nullable=False, default=business_now)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True)
