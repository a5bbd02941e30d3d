# topcar/services/lifecycle.py
"""
Appointment status lifecycle.

    pending ──confirm──> confirmed ──assign──> assigned ──accept/start──> in-progress ──complete──> completed
       │                                          │
       └──cancel──> cancelled          pending <──reject

``completed`` and ``cancelled`` are terminal. A rejected job goes back to
``pending`` with its assignment cleared; it is not re-dispatched
automatically, an admin has to confirm and assign it again.
"""

from topcar.core.errors import ValidationError

PENDING = "pending"
CONFIRMED = "confirmed"
ASSIGNED = "assigned"
IN_PROGRESS = "in-progress"
COMPLETED = "completed"
CANCELLED = "cancelled"

STATUSES = (PENDING, CONFIRMED, ASSIGNED, IN_PROGRESS, COMPLETED, CANCELLED)

# (current status, action) -> new status
TRANSITIONS = {
    (PENDING, "confirm"): CONFIRMED,
    (PENDING, "cancel"): CANCELLED,
    (CONFIRMED, "assign"): ASSIGNED,
    (ASSIGNED, "accept"): IN_PROGRESS,
    (ASSIGNED, "start"): IN_PROGRESS,
    (ASSIGNED, "reject"): PENDING,
    (IN_PROGRESS, "complete"): COMPLETED,
}

ACTIONS = frozenset(action for _, action in TRANSITIONS)


class InvalidTransitionError(ValidationError):
    pass


def next_status(current: str, action: str) -> str:
    if action not in ACTIONS:
        raise InvalidTransitionError(f"Unknown action: {action}")
    try:
        return TRANSITIONS[(current, action)]
    except KeyError:
        raise InvalidTransitionError(f"Cannot {action} an appointment that is {current}") from None


def allowed_targets(current: str) -> set[str]:
    return {target for (source, _), target in TRANSITIONS.items() if source == current}


def check_transition(current: str, target: str) -> None:
    """Raise unless ``target`` is a known status reachable from ``current`` in one step.

    Re-applying the current status is accepted as a no-op.
    """
    if target not in STATUSES:
        raise InvalidTransitionError(f"Unsupported status: {target}")
    if target == current:
        return
    if target not in allowed_targets(current):
        raise InvalidTransitionError(f"Cannot change status from {current} to {target}")
