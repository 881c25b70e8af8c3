"""Ride variants. The set is closed: every variant needs a rate and a label in FarePolicy."""

from enum import Enum


class RideType(str, Enum):
    BASE = "base"
    STANDARD = "standard"
    PREMIUM = "premium"
