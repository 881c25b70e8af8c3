"""
Purpose: Core data model for the riders domain.
What it does:
Defines a Rider and the ordered history of rides they have requested.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from rides.models import Ride

logger = logging.getLogger(__name__)


@dataclass
class Rider:
    id: int
    name: str
    rides: List[Ride] = field(default_factory=list)

    def request_ride(self, ride: Ride) -> str:
        """
        Adds the ride to the history and prints a confirmation notice.
        Returns the notice text.
        """
        self.rides.append(ride)
        notice = f"{self.name} requested ride #{ride.id}"
        logger.debug("Rider %s requested ride %s (%d total)", self.id, ride.id, len(self.rides))
        print(notice)
        return notice

    @property
    def total_rides(self) -> int:
        return len(self.rides)

    def summary(self) -> str:
        lines = [
            "---------- Rider Information ----------",
            f"Rider ID    : {self.id}",
            f"Name        : {self.name}",
            f"Total Rides : {self.total_rides}",
            "",
        ]
        if self.rides:
            lines.append("---------- Ride History -----------")
            for ride in self.rides:
                lines.append(ride.describe())
                lines.append("")
        return "\n".join(lines)
