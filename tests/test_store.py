"""Store contract tests."""

import pytest

from marketplace.core.exceptions import StorageError
from marketplace.database import Database
from marketplace.models.hotel import Hotel
from marketplace.models.ride import Ride
from marketplace.store import Store


async def test_insert_loads_identity_and_defaults(store: Store):
    ride = await store.insert(Ride(pickup="A", destination="B"))

    assert ride.id is not None
    assert ride.status == "pending"
    assert ride.created_at is not None


async def test_conditional_update_reports_rows(store: Store):
    hotel = await store.insert(
        Hotel(name="Grand", location="Jakarta", price_per_night=50, available_rooms=1)
    )

    first = await store.update_conditional(
        Hotel, hotel.id, [Hotel.available_rooms > 0], {"available_rooms": Hotel.available_rooms - 1}
    )
    second = await store.update_conditional(
        Hotel, hotel.id, [Hotel.available_rooms > 0], {"available_rooms": Hotel.available_rooms - 1}
    )

    assert (first, second) == (1, 0)
    assert (await store.get(Hotel, hotel.id)).available_rooms == 0


async def test_get_missing_returns_none(store: Store):
    assert await store.get(Ride, 1) is None


async def test_list_with_criteria(store: Store):
    await store.insert(Ride(pickup="A", destination="B"))
    other = await store.insert(Ride(pickup="C", destination="D"))

    rows = await store.list(Ride, Ride.pickup == "C")

    assert [r.id for r in rows] == [other.id]


async def test_delete_reports_rows(store: Store):
    hotel = await store.insert(Hotel(name="Grand", location="Jakarta", price_per_night=50))

    assert await store.delete(Hotel, hotel.id) == 1
    assert await store.delete(Hotel, hotel.id) == 0


async def test_database_errors_surface_as_storage_error(database: Database):
    with pytest.raises(StorageError):
        async with database.session() as session:
            await Store(session).insert(Ride(pickup=None, destination="B"))
