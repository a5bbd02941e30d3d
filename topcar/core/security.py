# topcar/core/security.py
# Mock identity helpers. Any credentials are accepted; there is no password check.
import uuid


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


def issue_token() -> str:
    return uuid.uuid4().hex


def role_for_email(email: str) -> str:
    """Derive a role from the address: "admin" and "worker" substrings win, else customer."""
    lowered = (email or "").lower()
    if "admin" in lowered:
        return "admin"
    if "worker" in lowered:
        return "worker"
    return "customer"
