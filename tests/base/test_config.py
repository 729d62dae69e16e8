"""Tests for sphere and angular units configuration."""

import math

import pytest

from proxihash import (
    AngularUnits,
    InvalidArgument,
    ProxihashConfig,
    get_config,
    reset_config,
    set_angular_units,
    set_radius,
)
from proxihash._constants import EARTH_IN_KILOMETERS, EARTH_IN_MILES


def test_default_config() -> None:
    """Test if kilometers and degrees are used by default."""
    config = get_config()
    assert config.radius == EARTH_IN_KILOMETERS
    assert config.angular_units is AngularUnits.degrees
    assert config.bounds == (-90.0, 90.0, -180.0, 180.0)


@pytest.mark.parametrize(
    "radius,expected_radius",
    [
        ("earth_in_miles", 3958.761),
        ("earth_in_kilometers", 6371.009),
        (1, 1.0),
        (3963.19, 3963.19),
    ],
)  # type: ignore
def test_radius(radius: object, expected_radius: float) -> None:
    """Test if radius presets and numbers are accepted."""
    assert ProxihashConfig(radius=radius).radius == expected_radius  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "radius", ["earth_in_furlongs", 0, -1.5, math.inf, math.nan, None, True]
)  # type: ignore
def test_invalid_radius(radius: object) -> None:
    """Test if invalid radii are rejected."""
    with pytest.raises(InvalidArgument):
        ProxihashConfig(radius=radius)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "units,expected_units",
    [
        ("degrees", AngularUnits.degrees),
        ("RADIANS", AngularUnits.radians),
        (AngularUnits.radians, AngularUnits.radians),
    ],
)  # type: ignore
def test_angular_units(units: object, expected_units: AngularUnits) -> None:
    """Test if angular units are parsed case-insensitively."""
    config = ProxihashConfig(angular_units=units)  # type: ignore[arg-type]
    assert config.angular_units is expected_units


@pytest.mark.parametrize("units", ["gradians", 1, None])  # type: ignore
def test_invalid_angular_units(units: object) -> None:
    """Test if unknown angular units are rejected."""
    with pytest.raises(InvalidArgument):
        ProxihashConfig(angular_units=units)  # type: ignore[arg-type]


def test_radians_bounds() -> None:
    """Test if radians bounds are used."""
    config = ProxihashConfig(angular_units="radians")
    assert config.bounds == (-math.pi / 2, math.pi / 2, -math.pi, math.pi)
    assert config.to_radians(1.5) == 1.5
    assert ProxihashConfig().to_radians(180) == pytest.approx(math.pi)


def test_config_is_immutable() -> None:
    """Test if configuration can't be changed in place."""
    config = ProxihashConfig()
    with pytest.raises(AttributeError):
        config.radius = 1.0  # type: ignore[misc]

    changed = config.replace(radius="earth_in_miles")
    assert changed.radius == EARTH_IN_MILES
    assert config.radius == EARTH_IN_KILOMETERS


def test_global_setters() -> None:
    """Test if global setters change only the default configuration."""
    explicit = ProxihashConfig()

    set_radius("earth_in_miles")
    set_angular_units("radians")
    assert get_config() == ProxihashConfig(radius=EARTH_IN_MILES, angular_units="radians")
    assert explicit.radius == EARTH_IN_KILOMETERS

    # Setters are idempotent.
    assert set_radius("earth_in_miles") == get_config()

    reset_config()
    assert get_config() == ProxihashConfig()


def test_global_setter_validation() -> None:
    """Test if invalid values leave the default configuration intact."""
    with pytest.raises(InvalidArgument):
        set_angular_units("gradians")
    with pytest.raises(InvalidArgument):
        set_radius(-1)
    assert get_config() == ProxihashConfig()
