# topcar/db/models/worker_location.py
from sqlalchemy import Column, String, Float, DateTime
from datetime import datetime
from topcar.db.base import Base


class WorkerLocation(Base):
    """
    Last known position of a worker sharing their location.
    One row per worker; each update overwrites the previous fix.
    """
    __tablename__ = "worker_locations"

    worker_id = Column(String, primary_key=True)
    worker_name = Column(String, nullable=True)

    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    address = Column(String, nullable=True)

    updated_at = Column(DateTime, default=datetime.utcnow)
