# topcar/api/routes/services.py

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from topcar.core.errors import NotFoundError, ValidationError
from topcar.core.security import generate_id
from topcar.db.base import get_db
from topcar.db.models.service_package import ServicePackage
from topcar.schemas.common import Envelope, ok
from topcar.schemas.service_package import ServicePackageCreate, ServicePackageUpdate, ServicePackageResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/services", tags=["services"])

PREMIUM_MARKUP = 1.3
DEFAULT_DURATION = 120


def _get_package(db: Session, service_id: Optional[str]) -> ServicePackage:
    if not service_id:
        raise ValidationError("Service ID is required")
    package = db.query(ServicePackage).filter(ServicePackage.id == service_id).first()
    if not package:
        raise NotFoundError("Service not found")
    return package


# Public catalog

@router.get("", response_model=Envelope[List[ServicePackageResponse]])
def list_services(db: Session = Depends(get_db)):
    services = db.query(ServicePackage).order_by(ServicePackage.pk).all()
    return ok([ServicePackageResponse.model_validate(s) for s in services])


# Admin creates package

@router.post("", response_model=Envelope[ServicePackageResponse], status_code=201)
def create_service(service_data: ServicePackageCreate, db: Session = Depends(get_db)):
    if not service_data.name.strip() or not service_data.description.strip() or not service_data.base_price:
        raise ValidationError("Missing required fields")

    premium = service_data.premium_price or service_data.base_price * PREMIUM_MARKUP
    new_service = ServicePackage(
        id=generate_id(),
        name=service_data.name.strip(),
        description=service_data.description.strip(),
        inclusions=service_data.inclusions or [],
        base_price=float(service_data.base_price),
        premium_price=float(premium),
        duration=int(service_data.duration or DEFAULT_DURATION),
        category=service_data.category or "basic",
    )

    db.add(new_service)
    db.commit()
    db.refresh(new_service)

    log.info(f"[SERVICES] Created {new_service.name} - ${new_service.base_price:.2f}")
    return ok(ServicePackageResponse.model_validate(new_service), "Service package created successfully")


# Admin updates package

@router.put("", response_model=Envelope[ServicePackageResponse])
def update_service(
    update_data: ServicePackageUpdate,
    service_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    service = _get_package(db, service_id)

    # Update fields one-by-one; explicit nulls leave the field untouched
    for field, value in update_data.dict(exclude_unset=True).items():
        if value is not None:
            setattr(service, field, value)

    db.commit()
    db.refresh(service)

    log.info(f"[SERVICES] Updated {service.name} - ${service.base_price:.2f}")
    return ok(ServicePackageResponse.model_validate(service), "Service updated successfully")


# Admin deletes package (hard delete; bookings keep their snapshot)

@router.delete("", response_model=Envelope[None])
def delete_service(
    service_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    service = _get_package(db, service_id)
    name = service.name

    db.delete(service)
    db.commit()

    log.info(f"[SERVICES] Deleted {name}")
    return ok(None, "Service deleted successfully")
