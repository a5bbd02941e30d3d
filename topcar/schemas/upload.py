# topcar/schemas/upload.py
from datetime import datetime
from typing import Optional

from topcar.schemas.common import CamelModel


class UploadResponse(CamelModel):
    file_id: str
    filename: str
    url: str
    size: int
    type: str            # MIME type
    image_type: str      # before / after
    appointment_id: Optional[str] = None
    worker_id: Optional[str] = None
    uploaded_at: datetime
