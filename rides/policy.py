"""
Purpose: Central configuration for fare calculation (single source of truth).
What it does:

Stores the per-mile rate and display label for every ride variant:

BASE     = $5.00 / mile  ("Standard Ride")
STANDARD = $10.00 / mile ("Standard Ride")
PREMIUM  = $15.00 / mile ("Premium Ride")

Reads ambient settings (log level) from the environment / .env file.

Rule: No fare logic here, just parameters so rates can be tuned without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict

from dotenv import load_dotenv

from .enums import RideType

# Example in .env:
# RIDESHARE_LOG_LEVEL=DEBUG
load_dotenv()
LOG_LEVEL = os.getenv("RIDESHARE_LOG_LEVEL", "WARNING")


@dataclass(frozen=True)
class FarePolicy:
    """
    Rate table and display labels for the closed set of ride variants.
    """

    # --- Rates ($ per mile) ---
    rates: Dict[RideType, float] = field(default_factory=lambda: {
        RideType.BASE: 5.00,
        RideType.STANDARD: 10.00,
        RideType.PREMIUM: 15.00,
    })

    # --- Display labels ---
    # Base rides have no header of their own and reuse the standard one.
    labels: Dict[RideType, str] = field(default_factory=lambda: {
        RideType.BASE: "Standard Ride",
        RideType.STANDARD: "Standard Ride",
        RideType.PREMIUM: "Premium Ride",
    })

    def rate_for(self, ride_type: RideType) -> float:
        return self.rates[ride_type]

    def label_for(self, ride_type: RideType) -> str:
        return self.labels[ride_type]

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup.
        """
        for ride_type in RideType:
            if ride_type not in self.rates:
                raise ValueError(f"missing rate for {ride_type.value}")
            if ride_type not in self.labels:
                raise ValueError(f"missing label for {ride_type.value}")
            if self.rates[ride_type] < 0:
                raise ValueError(f"rate for {ride_type.value} must be >= 0")


def default_fare_policy() -> FarePolicy:
    """
    Convenience factory for the default policy.
    """
    p = FarePolicy()
    p.validate()
    return p
