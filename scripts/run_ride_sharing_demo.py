"""
Purpose: Program entry for the ride sharing walkthrough.
What it does:
Builds a fixed set of rides, prints them, attaches some to a driver and
some to a rider (one ride shared by both), and prints both summaries.

Usage:
    python scripts/run_ride_sharing_demo.py
    RIDESHARE_LOG_LEVEL=DEBUG python scripts/run_ride_sharing_demo.py
"""

import logging
from typing import Dict, List, Tuple

from rides.loader import rides_from_records
from rides.models import Ride
from rides.policy import LOG_LEVEL, default_fare_policy
from drivers.models import Driver
from riders.models import Rider

SEED_RIDES = [
    {"ride_id": 101, "pickup": "Mass Ave", "dropoff": "Broadway", "distance": 5.0, "ride_type": "standard"},
    {"ride_id": 102, "pickup": "Cambridge", "dropoff": "Somerville", "distance": 3.2, "ride_type": "standard"},
    {"ride_id": 201, "pickup": "Logan Airport", "dropoff": "Downtown", "distance": 12.0, "ride_type": "premium"},
    {"ride_id": 202, "pickup": "South Boston", "dropoff": "Boston University", "distance": 7.5, "ride_type": "premium"},
    {"ride_id": 301, "pickup": "Back Bay", "dropoff": "Seaport", "distance": 10.0, "ride_type": "base"},
]


def run_demo() -> Tuple[List[Ride], Driver, Rider]:
    print("****** Ride Sharing System   ********")
    print(" ")

    # 1. Build and show every ride
    rides = rides_from_records(SEED_RIDES, policy=default_fare_policy())
    by_id: Dict[int, Ride] = {ride.id: ride for ride in rides}

    for ride in rides:
        print(ride.describe())
        print()

    # 2. Driver with two completed rides
    print("-------------- Driver Info ---------------")
    driver = Driver(id=1, name="Priyanka", rating=5.0)
    driver.attach_ride(by_id[101])
    driver.attach_ride(by_id[201])
    print(driver.summary())
    print()

    # 3. Rider requesting three rides, two of them shared with the driver
    print("--------------- Rides Requested ---------------")
    rider = Rider(id=1, name="Nick")
    rider.request_ride(by_id[101])
    rider.request_ride(by_id[201])
    rider.request_ride(by_id[202])
    print()
    print(rider.summary())

    return rides, driver, rider


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_demo()


if __name__ == "__main__":
    main()
