# topcar/db/models/service_package.py

from sqlalchemy import Column, DateTime, Integer, String, Float, JSON
from datetime import datetime
from topcar.db.base import Base


class ServicePackage(Base):
    __tablename__ = "service_packages"

    # surrogate key keeps catalog order stable (insertion order)
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)

    # Basic details
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    inclusions = Column(JSON, nullable=False, default=list)

    # Pricing: premium tier applies to large vehicles (SUV / 4WD / 7 seater)
    base_price = Column(Float, nullable=False)
    premium_price = Column(Float, nullable=False)

    # Duration (in minutes)
    duration = Column(Integer, nullable=False, default=120)

    category = Column(String, nullable=False, default="basic")

    created_at = Column(DateTime, default=datetime.utcnow)
