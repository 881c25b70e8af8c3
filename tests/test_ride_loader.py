import pandas as pd
import pytest

from rides.enums import RideType
from rides.loader import rides_from_frame, rides_from_records


@pytest.fixture
def ride_frame():
    return pd.DataFrame(
        {
            "ride_id": [102, 202, 301],
            "pickup": ["Cambridge", "South Boston", "Back Bay"],
            "dropoff": ["Somerville", "Boston University", "Seaport"],
            "distance": [3.2, 7.5, 10.0],
            "ride_type": ["standard", "premium", "base"],
        }
    )


def test_rides_from_frame_keeps_row_order(ride_frame):
    rides = rides_from_frame(ride_frame)

    assert [ride.id for ride in rides] == [102, 202, 301]
    assert [ride.ride_type for ride in rides] == [RideType.STANDARD, RideType.PREMIUM, RideType.BASE]
    assert isinstance(rides[0].id, int)
    assert isinstance(rides[0].distance, float)
    assert rides[1].compute_fare() == 7.5 * 15.0


def test_rides_from_frame_reports_missing_columns(ride_frame):
    with pytest.raises(KeyError):
        rides_from_frame(ride_frame.drop(columns=["distance"]))


def test_rides_from_records():
    rides = rides_from_records(
        [{"ride_id": 101, "pickup": "Mass Ave", "dropoff": "Broadway", "distance": 5.0, "ride_type": "standard"}]
    )

    assert len(rides) == 1
    assert rides[0].pickup == "Mass Ave"
    assert rides[0].compute_fare() == 50.0


def test_rides_from_records_empty():
    assert rides_from_records([]) == []
