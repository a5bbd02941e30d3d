# topcar/schemas/common.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Wire models: snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# --- RESPONSE ENVELOPE ---
class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None


def ok(data=None, message: Optional[str] = None) -> dict:
    return {"success": True, "data": data, "message": message}


def fail(error: str, message: Optional[str] = None) -> dict:
    return {"success": False, "error": error, "message": message}
