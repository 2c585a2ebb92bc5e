"""Office distance check.

Acquiring the device position is the caller's job; this module only turns a
position into the allow/deny verdict consumed before check-in and check-out.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    DEFAULT_OFFICE_LATITUDE,
    DEFAULT_OFFICE_LONGITUDE,
    DEFAULT_OFFICE_NAME,
    DEFAULT_OFFICE_RADIUS_METERS,
)

EARTH_RADIUS_METERS = 6371e3


@dataclass(frozen=True)
class OfficeLocation:
    latitude: float = DEFAULT_OFFICE_LATITUDE
    longitude: float = DEFAULT_OFFICE_LONGITUDE
    name: str = DEFAULT_OFFICE_NAME
    allowed_radius: float = DEFAULT_OFFICE_RADIUS_METERS


@dataclass(frozen=True)
class LocationCheck:
    allowed: bool
    distance: float
    accuracy: Optional[float] = None
    message: str = ""
    coordinates: Optional[str] = None


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle (haversine) distance in meters."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def check_location(
    latitude: float,
    longitude: float,
    *,
    accuracy: Optional[float] = None,
    office: Optional[OfficeLocation] = None,
) -> LocationCheck:
    office = office or OfficeLocation()
    distance = distance_meters(latitude, longitude, office.latitude, office.longitude)
    allowed = distance <= office.allowed_radius

    if allowed:
        message = f"Within office range ({round(distance)}m from {office.name})"
    else:
        message = (
            f"Outside office range ({round(distance)}m from {office.name}). "
            f"Must be within {office.allowed_radius:g}m"
        )

    return LocationCheck(
        allowed=allowed,
        distance=round(distance),
        accuracy=round(accuracy) if accuracy is not None else None,
        message=message,
        coordinates=f"{latitude:.6f}, {longitude:.6f}",
    )
