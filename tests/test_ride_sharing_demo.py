from scripts.run_ride_sharing_demo import run_demo


def test_demo_builds_expected_graph(capsys):
    rides, driver, rider = run_demo()

    assert [ride.id for ride in rides] == [101, 102, 201, 202, 301]
    assert [ride.id for ride in driver.rides] == [101, 201]
    assert [ride.id for ride in rider.rides] == [101, 201, 202]

    # rides are shared, not copied
    assert driver.rides[0] is rider.rides[0]
    assert driver.rides[1] is rider.rides[1]

    out = capsys.readouterr().out
    assert out.startswith("****** Ride Sharing System   ********")
    assert "-------------- Driver Info ---------------" in out
    assert "Nick requested ride #101" in out
    assert "Nick requested ride #202" in out
    assert "Fare        : $180.00" in out


def test_demo_fares():
    rides, _, _ = run_demo()
    fares = {ride.id: ride.compute_fare() for ride in rides}

    assert fares[101] == 50.0
    assert fares[201] == 180.0
    assert fares[301] == 50.0
