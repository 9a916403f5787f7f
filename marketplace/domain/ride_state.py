"""Ride state machine.

States: pending → accepted → completed
"""

from marketplace.core.exceptions import ConflictError

RIDE_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"accepted"},
    "accepted": {"completed"},
    "completed": set(),  # Terminal state
}

# Status a ride must hold for the update to a target status to match
REQUIRED_PRIOR_STATUS: dict[str, str] = {
    target: current
    for current, targets in RIDE_TRANSITIONS.items()
    for target in targets
}


def assert_ride_transition(current: str, target: str) -> None:
    allowed = RIDE_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise ConflictError(f"Invalid ride transition: {current} → {target}")


def required_prior_status(target: str) -> str:
    """Return the only status from which ``target`` can be reached."""
    return REQUIRED_PRIOR_STATUS[target]
