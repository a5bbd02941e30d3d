# topcar/schemas/worker.py
from pydantic import Field
from datetime import datetime
from typing import Optional

from topcar.schemas.common import CamelModel


class LocationUpdate(CamelModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    worker_name: Optional[str] = None


class WorkerLocationResponse(CamelModel):
    worker_id: str
    worker_name: Optional[str] = None
    latitude: float
    longitude: float
    address: Optional[str] = None
    updated_at: datetime
