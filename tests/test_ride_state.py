"""Ride transition table tests."""

import pytest

from marketplace.core.exceptions import ConflictError
from marketplace.domain.ride_state import assert_ride_transition, required_prior_status


@pytest.mark.parametrize("current,target", [("pending", "accepted"), ("accepted", "completed")])
def test_allowed(current, target):
    assert_ride_transition(current, target)


@pytest.mark.parametrize(
    "current,target",
    [
        ("pending", "completed"),
        ("accepted", "accepted"),
        ("accepted", "pending"),
        ("completed", "accepted"),
        ("completed", "completed"),
        ("completed", "pending"),
    ],
)
def test_rejected(current, target):
    with pytest.raises(ConflictError):
        assert_ride_transition(current, target)


def test_required_prior_status():
    assert required_prior_status("accepted") == "pending"
    assert required_prior_status("completed") == "accepted"
