"""Common components for tests."""

import math

from proxihash import ProxihashConfig

__all__ = [
    "EQUATORIAL_MILES",
    "destination_point",
    "equatorial_miles_config",
    "radians_config",
]

# Equatorial Earth radius in miles, slightly larger than the mean radius preset.
EQUATORIAL_MILES = 3963.19


def equatorial_miles_config() -> ProxihashConfig:
    """Configuration with the equatorial radius in miles and degrees."""
    return ProxihashConfig(radius=EQUATORIAL_MILES)


def radians_config() -> ProxihashConfig:
    """Configuration with the mean radius in kilometers and radians."""
    return ProxihashConfig(radius="earth_in_kilometers", angular_units="radians")


def destination_point(
    lat: float, lng: float, bearing: float, distance: float, sphere_radius: float
) -> tuple[float, float]:
    """Point reached from (lat, lng) in degrees going `distance` along a great circle."""
    phi1 = math.radians(lat)
    lambda1 = math.radians(lng)
    theta = math.radians(bearing)
    delta = distance / sphere_radius

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    return math.degrees(phi2), math.degrees(lambda2)
