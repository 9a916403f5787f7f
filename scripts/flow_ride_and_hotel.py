#!/usr/bin/env python3
"""
Ride and hotel booking flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_ride_and_hotel.py
    python scripts/flow_ride_and_hotel.py --base-url http://localhost:8000 --nights 3

Flow:
    1. Register a driver
    2. Request a ride
    3. Accept the ride
    4. Accept it again (expect 409)
    5. Complete the ride
    6. Create a hotel with one room
    7. Book the room
    8. Book again (expect 409)
"""

import argparse
import json

import httpx

BASE_URL = "http://localhost:8000"


def api_request(client: httpx.Client, method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make an API request and return status and body."""
    response = client.request(method, f"/api/v1{endpoint}", json=data, follow_redirects=True)
    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict, expected_status: int | None = None) -> bool:
    """Print result; return False when the status is not what was expected."""
    ok = result["status"] == expected_status if expected_status else result["status"] < 400
    label = "Status" if ok else "UNEXPECTED"
    print(f"{label} ({result['status']}): {json.dumps(result['data'], indent=2)}")
    return ok


def main():
    parser = argparse.ArgumentParser(description="Ride and hotel booking flow")
    parser.add_argument("--base-url", default=BASE_URL, help="API base URL")
    parser.add_argument("--nights", type=int, default=2, help="Nights to book")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=10.0) as client:
        print_step(1, "Register a driver")
        driver = api_request(client, "POST", "/drivers/", {"name": "Demo Driver"})
        if not print_result(driver):
            return 1

        print_step(2, "Request a ride")
        ride = api_request(client, "POST", "/rides/", {"pickup": "Airport", "destination": "City Center"})
        if not print_result(ride):
            return 1
        ride_id = ride["data"]["id"]

        print_step(3, "Accept the ride")
        accepted = api_request(
            client, "POST", f"/rides/{ride_id}/accept", {"driver_id": driver["data"]["id"]}
        )
        if not print_result(accepted):
            return 1

        print_step(4, "Accept it again")
        again = api_request(
            client, "POST", f"/rides/{ride_id}/accept", {"driver_id": driver["data"]["id"]}
        )
        if not print_result(again, expected_status=409):
            return 1

        print_step(5, "Complete the ride")
        if not print_result(api_request(client, "POST", f"/rides/{ride_id}/complete")):
            return 1

        print_step(6, "Create a hotel with one room")
        hotel = api_request(client, "POST", "/hotels/", {
            "name": "Demo Hotel",
            "location": "City Center",
            "price_per_night": 100,
            "available_rooms": 1,
        })
        if not print_result(hotel):
            return 1
        hotel_id = hotel["data"]["id"]

        print_step(7, "Book the room")
        booking = api_request(client, "POST", f"/hotels/{hotel_id}/book", {"nights": args.nights})
        if not print_result(booking):
            return 1

        print_step(8, "Book again")
        if not print_result(
            api_request(client, "POST", f"/hotels/{hotel_id}/book", {"nights": 1}),
            expected_status=409,
        ):
            return 1

    print("\nFlow completed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
