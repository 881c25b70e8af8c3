"""
Purpose: Build Ride objects from tabular data.
What it does:
Turns a pandas DataFrame (or a list of plain dict records) with columns
ride_id, pickup, dropoff, distance, ride_type into Rides, preserving row order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from .models import Ride
from .policy import FarePolicy

RIDE_COLUMNS = ["ride_id", "pickup", "dropoff", "distance", "ride_type"]


def rides_from_frame(df: pd.DataFrame, policy: Optional[FarePolicy] = None) -> List[Ride]:
    missing = [column for column in RIDE_COLUMNS if column not in df.columns]
    if missing:
        raise KeyError(f"ride table is missing columns {missing}; expected {RIDE_COLUMNS}")

    rides = []
    for _, row in df.iterrows():
        # pandas hands back numpy scalars; Ride holds plain python numbers
        rides.append(
            Ride.new(
                ride_id=int(row["ride_id"]),
                pickup=str(row["pickup"]),
                dropoff=str(row["dropoff"]),
                distance=float(row["distance"]),
                ride_type=str(row["ride_type"]),
                policy=policy,
            )
        )
    return rides


def rides_from_records(records: List[Dict[str, Any]], policy: Optional[FarePolicy] = None) -> List[Ride]:
    """
    Convenience wrapper for in-code seed data.
    """
    if not records:
        return []
    return rides_from_frame(pd.DataFrame.from_records(records), policy=policy)
