# topcar/api/routes/uploads.py
import logging
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session
from typing import List, Literal, Optional

from topcar.core.errors import ValidationError
from topcar.core.security import generate_id
from topcar.db.base import get_db
from topcar.db.models.job_image import JobImage
from topcar.integrations.storage import BlobStore, get_blob_store
from topcar.schemas.common import Envelope, ok
from topcar.schemas.upload import UploadResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["uploads"])

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}


def _to_response(img: JobImage) -> UploadResponse:
    return UploadResponse(
        file_id=img.id,
        filename=img.filename,
        url=img.url,
        size=img.size,
        type=img.content_type,
        image_type=img.type,
        appointment_id=img.appointment_id,
        worker_id=img.worker_id,
        uploaded_at=img.uploaded_at,
    )


@router.post("", response_model=Envelope[UploadResponse], status_code=201)
def upload_image(
    file: Optional[UploadFile] = File(None),
    appointment_id: Optional[str] = Form(None, alias="appointmentId"),
    worker_id: Optional[str] = Form(None, alias="workerId"),
    image_type: Literal["before", "after"] = Form("before", alias="type"),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    if file is None:
        raise ValidationError("No file provided")
    if file.content_type not in ALLOWED_CONTENT_TYPES:
        raise ValidationError("Invalid file type. Only JPEG, PNG, and WebP are allowed")

    content = file.file.read()
    file_id = generate_id()
    upload_name = file.filename or ""
    ext = upload_name.rsplit(".", 1)[1] if "." in upload_name else "jpg"
    filename = f"{image_type}_{appointment_id or 'unlinked'}_{file_id}.{ext}"
    url = store.put(filename, content, file.content_type)

    image = JobImage(
        id=file_id,
        appointment_id=appointment_id,
        worker_id=worker_id,
        type=image_type,
        filename=filename,
        url=url,
        content_type=file.content_type,
        size=len(content),
    )
    db.add(image)
    db.commit()
    db.refresh(image)

    log.info(f"[UPLOADS] {filename} ({image_type}, {len(content) / 1024:.2f}KB)")
    return ok(_to_response(image), "File uploaded successfully")


# Photo log for a job or worker

@router.get("", response_model=Envelope[List[UploadResponse]])
def list_uploads(
    appointment_id: Optional[str] = Query(None, alias="appointmentId"),
    worker_id: Optional[str] = Query(None, alias="workerId"),
    db: Session = Depends(get_db),
):
    q = db.query(JobImage)
    if appointment_id:
        q = q.filter(JobImage.appointment_id == appointment_id)
    if worker_id:
        q = q.filter(JobImage.worker_id == worker_id)
    images = q.order_by(JobImage.pk).all()
    return ok([_to_response(i) for i in images], "Uploads retrieved successfully")
