"""Ride lifecycle: request, accept, complete."""

import logging

from marketplace.core.exceptions import ConflictError, NotFoundError, ValidationError
from marketplace.domain.ride_state import assert_ride_transition, required_prior_status
from marketplace.models.driver import Driver
from marketplace.models.ride import Ride, RideStatus
from marketplace.store import Store

logger = logging.getLogger(__name__)


class RideService:
    """Moves rides through pending → accepted → completed.

    Every transition is one conditional update keyed on the ride id and its
    expected prior status, so two callers racing for the same ride cannot
    both win. The loser re-reads the row to tell a missing ride from one
    that was already taken.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    async def create_ride(self, pickup: str | None, destination: str | None) -> Ride:
        """Create a pending ride with no driver."""
        if not pickup or not pickup.strip() or not destination or not destination.strip():
            raise ValidationError("Pickup and destination are required")

        ride = Ride(
            pickup=pickup,
            destination=destination,
            status=RideStatus.PENDING.value,
            driver_id=None,
        )
        ride = await self.store.insert(ride)
        logger.info(f"Ride {ride.id} requested")
        return ride

    async def get_ride(self, ride_id: int) -> Ride:
        ride = await self.store.get(Ride, ride_id)
        if not ride:
            raise NotFoundError("Ride", str(ride_id))
        return ride

    async def list_rides(self, status: str | None = None) -> list[Ride]:
        """List rides, newest first."""
        criteria = []
        if status:
            criteria.append(Ride.status == status)
        return await self.store.list(
            Ride, *criteria, order_by=(Ride.created_at.desc(), Ride.id.desc())
        )

    async def accept_ride(self, ride_id: int, driver_id: int | None) -> Ride:
        """Assign a driver to a pending ride.

        Raises:
            ValidationError: driver_id missing
            NotFoundError: ride or driver does not exist
            ConflictError: ride is no longer pending
        """
        if driver_id is None:
            raise ValidationError("Driver ID is required")

        if await self.store.get(Driver, driver_id) is None:
            raise NotFoundError("Driver", str(driver_id))

        target = RideStatus.ACCEPTED.value
        changed = await self.store.update_conditional(
            Ride,
            ride_id,
            expected=[Ride.status == required_prior_status(target)],
            values={"status": target, "driver_id": driver_id},
        )
        if not changed:
            await self._raise_transition_failure(ride_id, target)

        ride = await self.get_ride(ride_id)
        logger.info(f"Ride {ride_id} accepted by driver {driver_id}")
        return ride

    async def complete_ride(self, ride_id: int) -> Ride:
        """Mark an accepted ride as completed.

        Raises:
            NotFoundError: ride does not exist
            ConflictError: ride is not accepted (still pending or already completed)
        """
        target = RideStatus.COMPLETED.value
        changed = await self.store.update_conditional(
            Ride,
            ride_id,
            expected=[Ride.status == required_prior_status(target)],
            values={"status": target},
        )
        if not changed:
            await self._raise_transition_failure(ride_id, target)

        ride = await self.get_ride(ride_id)
        logger.info(f"Ride {ride_id} completed")
        return ride

    async def _raise_transition_failure(self, ride_id: int, target: str) -> None:
        ride = await self.store.get(Ride, ride_id)
        if ride is None:
            raise NotFoundError("Ride", str(ride_id))

        logger.warning(f"Ride {ride_id} is {ride.status}, cannot move to {target}")
        assert_ride_transition(ride.status, target)
        # Status matched on re-read but not at update time: lost a race
        raise ConflictError(f"Ride {ride_id} was modified concurrently")
