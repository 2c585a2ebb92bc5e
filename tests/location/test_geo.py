import pytest

from src.attendance_tracker.attendance_tracker.location.geo import OfficeLocation, check_location, distance_meters

OFFICE = OfficeLocation()


def test_distance_to_self_is_zero():
    assert distance_meters(OFFICE.latitude, OFFICE.longitude, OFFICE.latitude, OFFICE.longitude) == 0


def test_one_thousandth_degree_of_latitude():
    assert distance_meters(0, 0, 0.001, 0) == pytest.approx(111.19, abs=0.01)


def test_inside_office_radius():
    verdict = check_location(OFFICE.latitude + 0.0005, OFFICE.longitude, accuracy=12.4)
    assert verdict.allowed
    assert verdict.distance == 56
    assert verdict.accuracy == 12
    assert verdict.message == "Within office range (56m from Main Office)"
    assert verdict.coordinates == "28.661606, 77.345794"


def test_outside_office_radius():
    verdict = check_location(OFFICE.latitude + 0.01, OFFICE.longitude)
    assert not verdict.allowed
    assert verdict.message.startswith("Outside office range (1112m from Main Office)")
    assert verdict.message.endswith("Must be within 100m")


def test_custom_office():
    office = OfficeLocation(latitude=0, longitude=0, name="Lab", allowed_radius=500)
    assert check_location(0.004, 0, office=office).allowed
