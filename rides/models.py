"""
Purpose: Core data model for a single ride.
What it does:
Defines a Ride (id, pickup, dropoff, distance, variant) whose fare is always
derived from distance and the per-mile rate of its variant, and renders the
ride as a block of console text.

Rule: No driver/rider bookkeeping here. Rides never know who references them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .enums import RideType
from .policy import FarePolicy, default_fare_policy

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Ride:
    """
    A trip record. Shared by reference between Driver and Rider collections,
    so equality is identity.
    """
    id: int
    pickup: str
    dropoff: str
    distance: float  # miles, trusted as given
    ride_type: RideType = RideType.BASE

    # last value returned by compute_fare(); 0.0 until first computed
    fare_amount: float = 0.0
    policy: FarePolicy = field(default_factory=default_fare_policy, repr=False)

    @classmethod
    def new(
        cls,
        ride_id: int,
        pickup: str,
        dropoff: str,
        distance: float,
        ride_type: str | RideType = RideType.BASE,
        policy: Optional[FarePolicy] = None,
    ) -> Ride:
        if isinstance(ride_type, str):
            ride_type = RideType(ride_type)

        return cls(
            id=ride_id,
            pickup=pickup,
            dropoff=dropoff,
            distance=distance,
            ride_type=ride_type,
            policy=policy or default_fare_policy(),
        )

    @property
    def label(self) -> str:
        return self.policy.label_for(self.ride_type)

    def compute_fare(self) -> float:
        """
        fare = distance * rate(variant). Negative distance gives a negative fare.
        """
        self.fare_amount = self.distance * self.policy.rate_for(self.ride_type)
        logger.debug("Ride %s (%s): %s miles -> $%.2f", self.id, self.ride_type.value, self.distance, self.fare_amount)
        return self.fare_amount

    def describe(self) -> str:
        lines = [
            f"[{self.label}]",
            f"Ride ID     : {self.id}",
            f"Pickup      : {self.pickup}",
            f"Dropoff     : {self.dropoff}",
            f"Distance    : {self.distance:g} miles",
            f"Fare        : ${self.compute_fare():.2f}",
        ]
        return "\n".join(lines)
