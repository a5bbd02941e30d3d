# topcar/schemas/auth.py
from typing import Optional

from topcar.schemas.common import CamelModel


# Shared by login and signup; which fields are required depends on the action
class AuthRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class AuthUser(CamelModel):
    id: str
    name: str
    email: str
    role: str


class AuthResponse(CamelModel):
    user: AuthUser
    token: str
