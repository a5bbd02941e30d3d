# topcar/db/models/job_image.py
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from topcar.db.base import Base


class JobImage(Base):
    """Before/after photo uploaded by a worker for a job."""
    __tablename__ = "job_images"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)

    appointment_id = Column(String, index=True, nullable=True)
    worker_id = Column(String, index=True, nullable=True)

    type = Column(String, nullable=False, default="before")
    filename = Column(String, nullable=False)
    url = Column(String, nullable=False)
    content_type = Column(String, nullable=False)
    size = Column(Integer, nullable=False, default=0)

    uploaded_at = Column(DateTime, default=datetime.utcnow)
