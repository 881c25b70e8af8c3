"""
Purpose: Core data model for the drivers domain.
What it does:
Defines a Driver and the ordered list of rides they have completed.
The driver holds references to Rides it does not own; the same Ride
may also sit in a Rider's history.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from rides.models import Ride

logger = logging.getLogger(__name__)


@dataclass
class Driver:
    id: int
    name: str
    rating: float  # 0 - 5, not enforced
    rides: List[Ride] = field(default_factory=list)

    def attach_ride(self, ride: Ride) -> None:
        """
        Appends to the completed rides. No dedup, no capacity limit.
        """
        self.rides.append(ride)
        logger.debug("Driver %s attached ride %s (%d total)", self.id, ride.id, len(self.rides))

    @property
    def total_rides(self) -> int:
        return len(self.rides)

    def summary(self) -> str:
        lines = [
            f"Driver ID   : {self.id}",
            f"Name        : {self.name}",
            f"Rating      : {self.rating} / 5.0",
            f"Total Rides : {self.total_rides}",
            "",
        ]
        if self.rides:
            lines.append("----------- Completed Rides ------------")
            for ride in self.rides:
                lines.append(ride.describe())
                lines.append("")
        return "\n".join(lines)
