"""Ride lifecycle tests."""

import asyncio

import pytest

from marketplace.core.exceptions import ConflictError, NotFoundError, ValidationError
from marketplace.database import Database
from marketplace.models.ride import Ride, RideStatus
from marketplace.services.driver_service import DriverService
from marketplace.services.ride_service import RideService
from marketplace.store import Store


def assert_driver_invariant(ride: Ride) -> None:
    if ride.status == RideStatus.PENDING.value:
        assert ride.driver_id is None
    else:
        assert ride.driver_id is not None


class TestCreateRide:
    async def test_new_ride_is_pending_without_driver(self, ride_service: RideService):
        ride = await ride_service.create_ride("A", "B")

        assert ride.id is not None
        assert ride.status == "pending"
        assert ride.driver_id is None
        assert ride.driver_name is None
        assert ride.created_at is not None

    @pytest.mark.parametrize(
        "pickup,destination",
        [("", "X"), ("X", ""), ("   ", "X"), (None, "X"), ("X", None)],
    )
    async def test_missing_endpoints_rejected(
        self, ride_service: RideService, pickup, destination
    ):
        with pytest.raises(ValidationError):
            await ride_service.create_ride(pickup, destination)

    async def test_fetch_returns_created_fields(self, ride_service: RideService):
        created = await ride_service.create_ride("Airport", "Downtown")
        fetched = await ride_service.get_ride(created.id)

        for field in ("id", "pickup", "destination", "driver_id", "status", "created_at"):
            assert getattr(fetched, field) == getattr(created, field)


class TestAcceptRide:
    async def test_accept_assigns_driver(
        self, ride_service: RideService, driver_service: DriverService
    ):
        driver = await driver_service.register_driver("Budi")
        ride = await ride_service.create_ride("A", "B")

        accepted = await ride_service.accept_ride(ride.id, driver.id)

        assert accepted.status == "accepted"
        assert accepted.driver_id == driver.id
        assert accepted.driver_name == "Budi"
        assert_driver_invariant(accepted)

    async def test_driver_id_required(self, ride_service: RideService):
        ride = await ride_service.create_ride("A", "B")

        with pytest.raises(ValidationError):
            await ride_service.accept_ride(ride.id, None)

    async def test_missing_ride(self, ride_service: RideService, driver_service: DriverService):
        driver = await driver_service.register_driver("Budi")

        with pytest.raises(NotFoundError):
            await ride_service.accept_ride(9999, driver.id)

    async def test_missing_driver(self, ride_service: RideService):
        ride = await ride_service.create_ride("A", "B")

        with pytest.raises(NotFoundError) as exc_info:
            await ride_service.accept_ride(ride.id, 9999)
        assert exc_info.value.resource == "Driver"

        still_pending = await ride_service.get_ride(ride.id)
        assert still_pending.status == "pending"

    async def test_already_accepted_is_conflict(
        self, ride_service: RideService, driver_service: DriverService
    ):
        first = await driver_service.register_driver("Budi")
        second = await driver_service.register_driver("Sari")
        ride = await ride_service.create_ride("A", "B")
        await ride_service.accept_ride(ride.id, first.id)

        with pytest.raises(ConflictError):
            await ride_service.accept_ride(ride.id, second.id)

        ride = await ride_service.get_ride(ride.id)
        assert ride.driver_id == first.id

    async def test_completed_is_conflict(
        self, ride_service: RideService, driver_service: DriverService
    ):
        driver = await driver_service.register_driver("Budi")
        ride = await ride_service.create_ride("A", "B")
        await ride_service.accept_ride(ride.id, driver.id)
        await ride_service.complete_ride(ride.id)

        with pytest.raises(ConflictError):
            await ride_service.accept_ride(ride.id, driver.id)

    async def test_accept_leaves_driver_status_alone(
        self, ride_service: RideService, driver_service: DriverService
    ):
        driver = await driver_service.register_driver("Budi")
        ride = await ride_service.create_ride("A", "B")
        await ride_service.accept_ride(ride.id, driver.id)

        driver = await driver_service.get_driver(driver.id)
        assert driver.status == "available"


class TestCompleteRide:
    async def test_complete_accepted_ride(
        self, ride_service: RideService, driver_service: DriverService
    ):
        driver = await driver_service.register_driver("Budi")
        ride = await ride_service.create_ride("A", "B")
        await ride_service.accept_ride(ride.id, driver.id)

        completed = await ride_service.complete_ride(ride.id)

        assert completed.status == "completed"
        assert completed.driver_id == driver.id
        assert_driver_invariant(completed)

    async def test_missing_ride(self, ride_service: RideService):
        with pytest.raises(NotFoundError):
            await ride_service.complete_ride(12345)

    async def test_pending_ride_cannot_complete(self, ride_service: RideService):
        ride = await ride_service.create_ride("A", "B")

        with pytest.raises(ConflictError):
            await ride_service.complete_ride(ride.id)

        ride = await ride_service.get_ride(ride.id)
        assert ride.status == "pending"
        assert_driver_invariant(ride)

    async def test_completed_ride_cannot_complete_again(
        self, ride_service: RideService, driver_service: DriverService
    ):
        driver = await driver_service.register_driver("Budi")
        ride = await ride_service.create_ride("A", "B")
        await ride_service.accept_ride(ride.id, driver.id)
        await ride_service.complete_ride(ride.id)

        with pytest.raises(ConflictError):
            await ride_service.complete_ride(ride.id)


class TestListRides:
    async def test_newest_first_and_status_filter(
        self, ride_service: RideService, driver_service: DriverService
    ):
        driver = await driver_service.register_driver("Budi")
        first = await ride_service.create_ride("A", "B")
        second = await ride_service.create_ride("C", "D")
        await ride_service.accept_ride(first.id, driver.id)

        rides = await ride_service.list_rides()
        assert [r.id for r in rides] == [second.id, first.id]
        for ride in rides:
            assert_driver_invariant(ride)

        pending = await ride_service.list_rides(status="pending")
        assert [r.id for r in pending] == [second.id]


async def test_concurrent_accepts_have_one_winner(database: Database):
    async with database.session() as session:
        drivers = DriverService(Store(session))
        first = await drivers.register_driver("Budi")
        second = await drivers.register_driver("Sari")
        ride = await RideService(Store(session)).create_ride("A", "B")

    async def accept(driver_id: int):
        async with database.session() as session:
            return await RideService(Store(session)).accept_ride(ride.id, driver_id)

    results = await asyncio.gather(
        accept(first.id), accept(second.id), return_exceptions=True
    )

    winners = [r for r in results if isinstance(r, Ride)]
    losers = [r for r in results if isinstance(r, Exception)]
    assert len(winners) == 1
    assert len(losers) == 1
    assert isinstance(losers[0], ConflictError)

    async with database.session() as session:
        stored = await RideService(Store(session)).get_ride(ride.id)
    assert stored.status == "accepted"
    assert stored.driver_id == winners[0].driver_id
