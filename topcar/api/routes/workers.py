# topcar/api/routes/workers.py
import logging
from datetime import datetime
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from topcar.db.base import get_db
from topcar.db.models.worker_location import WorkerLocation
from topcar.integrations.geocoding import Geocoder, get_geocoder
from topcar.schemas.common import Envelope, ok
from topcar.schemas.worker import LocationUpdate, WorkerLocationResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/workers", tags=["workers"])


# Worker shares live location

@router.put("/{worker_id}/location", response_model=Envelope[WorkerLocationResponse])
def update_location(
    worker_id: str,
    data: LocationUpdate,
    db: Session = Depends(get_db),
    geocoder: Geocoder = Depends(get_geocoder),
):
    address = geocoder.reverse(data.latitude, data.longitude)

    loc = db.query(WorkerLocation).filter(WorkerLocation.worker_id == worker_id).first()
    if not loc:
        loc = WorkerLocation(worker_id=worker_id)
        db.add(loc)

    loc.worker_name = data.worker_name or loc.worker_name
    loc.latitude = data.latitude
    loc.longitude = data.longitude
    loc.address = address
    loc.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(loc)

    log.info(f"[LOCATION] {worker_id} at {address} ({data.latitude:.4f}, {data.longitude:.4f})")
    return ok(WorkerLocationResponse.model_validate(loc), f"Location updated: {address}")


# Admin worker tracker

@router.get("/locations", response_model=Envelope[List[WorkerLocationResponse]])
def list_locations(db: Session = Depends(get_db)):
    locations = db.query(WorkerLocation).order_by(WorkerLocation.worker_id).all()
    return ok([WorkerLocationResponse.model_validate(l) for l in locations])
