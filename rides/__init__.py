"""
Rides domain package.

Public API:
- Domain models: Ride, RideType
- Fare configuration: FarePolicy, default_fare_policy
- Tabular construction: rides_from_frame, rides_from_records
"""
from .enums import RideType
from .policy import FarePolicy, default_fare_policy
from .models import Ride
from .loader import rides_from_frame, rides_from_records

__all__ = [
    "Ride",
    "RideType",
    "FarePolicy",
    "default_fare_policy",
    "rides_from_frame",
    "rides_from_records",
]
