import pytest

from rides.models import Ride
from rides.enums import RideType


@pytest.fixture
def standard_ride():
    return Ride.new(101, "Mass Ave", "Broadway", 5.0, RideType.STANDARD)


@pytest.fixture
def premium_ride():
    return Ride.new(201, "Logan Airport", "Downtown", 12.0, RideType.PREMIUM)


@pytest.fixture
def base_ride():
    return Ride.new(301, "Back Bay", "Seaport", 10.0)
