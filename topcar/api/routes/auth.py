# topcar/api/routes/auth.py
# Mock login/signup: credentials are not checked and nothing is stored.
import logging
from fastapi import APIRouter, Query, Response
from typing import Optional

from topcar.core.errors import ValidationError
from topcar.core.security import generate_id, issue_token, role_for_email
from topcar.schemas.auth import AuthRequest, AuthResponse, AuthUser
from topcar.schemas.common import Envelope, ok

log = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("", response_model=Envelope[AuthResponse])
def authenticate(data: AuthRequest, response: Response, action: Optional[str] = Query(None)):
    if action == "login":
        if not data.email or not data.password:
            raise ValidationError("Email and password are required")

        user = AuthUser(id=generate_id(), name="Mock User", email=data.email, role=role_for_email(data.email))
        log.info(f"[AUTH] Mock login: {user.email} ({user.role})")
        return ok(AuthResponse(user=user, token=issue_token()), "Login successful")

    if action == "signup":
        if not data.name or not data.email or not data.password:
            raise ValidationError("All fields are required")

        user = AuthUser(id=generate_id(), name=data.name, email=data.email, role="customer")
        log.info(f"[AUTH] New user registered: {user.email}")
        response.status_code = 201
        return ok(AuthResponse(user=user, token=issue_token()), "Account created successfully")

    raise ValidationError("Invalid action")
