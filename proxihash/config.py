"""
Sphere and angular units configuration.

Every operation accepts an explicit `ProxihashConfig`. When none is passed, the process-wide
default returned by `get_config()` is used. The default can be changed with `set_radius()` and
`set_angular_units()`; callers are expected to do that once, before the library is used from
multiple threads, since the default is swapped without any locking.
"""

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Optional, Union

from proxihash._constants import EARTH_IN_KILOMETERS, RADIUS_PRESETS
from proxihash._exceptions import InvalidArgument

__all__ = [
    "AngularUnits",
    "ProxihashConfig",
    "get_config",
    "reset_config",
    "set_angular_units",
    "set_radius",
]


class AngularUnits(str, Enum):
    """Enum of supported angular units."""

    degrees = "degrees"
    radians = "radians"

    @classmethod
    def _missing_(cls, value):  # type: ignore
        if isinstance(value, str):
            value = value.lower()
            for member in cls:
                if member.value == value:
                    return member
        return None


def _resolve_radius(radius: Union[str, float]) -> float:
    if isinstance(radius, str):
        try:
            return RADIUS_PRESETS[radius]
        except KeyError:
            raise InvalidArgument(
                f"Unknown radius preset: {radius!r}."
                f" Available presets: {', '.join(RADIUS_PRESETS)}."
            ) from None

    if isinstance(radius, bool) or not isinstance(radius, Real):
        raise InvalidArgument(f"Radius must be a number or a preset name ({radius!r} given).")

    radius = float(radius)
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidArgument(f"Radius must be a positive finite number ({radius!r} given).")
    return radius


def _resolve_angular_units(units: Union[str, AngularUnits]) -> AngularUnits:
    try:
        return AngularUnits(units)
    except ValueError:
        raise InvalidArgument(
            f"Angular units must be 'radians' or 'degrees' ({units!r} given)."
        ) from None


@dataclass(frozen=True)
class ProxihashConfig:
    """
    Sphere radius and angular units used by the codec and the search planner.

    Attributes:
        radius (float): Sphere radius in the linear unit used for search radii.
            Accepts a preset name (`earth_in_miles`, `earth_in_kilometers`) on construction.
            Defaults to `earth_in_kilometers`.
        angular_units (AngularUnits): Units of latitudes and longitudes. Defaults to degrees.
    """

    radius: float = EARTH_IN_KILOMETERS
    angular_units: AngularUnits = AngularUnits.degrees

    def __post_init__(self) -> None:
        """Normalize preset names and unit strings."""
        object.__setattr__(self, "radius", _resolve_radius(self.radius))
        object.__setattr__(self, "angular_units", _resolve_angular_units(self.angular_units))

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Root rectangle as `(min_lat, max_lat, min_lng, max_lng)`."""
        if self.angular_units is AngularUnits.radians:
            return (-math.pi / 2, math.pi / 2, -math.pi, math.pi)
        return (-90.0, 90.0, -180.0, 180.0)

    def to_radians(self, angle: float) -> float:
        """Convert an angle expressed in configured units to radians."""
        if self.angular_units is AngularUnits.degrees:
            return math.radians(angle)
        return angle

    def replace(self, **changes: Any) -> "ProxihashConfig":
        """Return a copy of the config with given fields changed."""
        return dataclasses.replace(self, **changes)


_default_config = ProxihashConfig()


def get_config() -> ProxihashConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_radius(radius: Union[str, float]) -> ProxihashConfig:
    """
    Change the sphere radius of the process-wide default configuration.

    Args:
        radius (Union[str, float]): Preset name (`earth_in_miles`, `earth_in_kilometers`)
            or a positive number.

    Returns:
        ProxihashConfig: New default configuration.
    """
    global _default_config
    _default_config = _default_config.replace(radius=radius)
    return _default_config


def set_angular_units(units: Union[str, AngularUnits]) -> ProxihashConfig:
    """
    Change the angular units of the process-wide default configuration.

    Args:
        units (Union[str, AngularUnits]): `degrees` or `radians`.

    Returns:
        ProxihashConfig: New default configuration.
    """
    global _default_config
    _default_config = _default_config.replace(angular_units=units)
    return _default_config


def reset_config() -> ProxihashConfig:
    """Restore the default configuration (kilometers, degrees)."""
    global _default_config
    _default_config = ProxihashConfig()
    return _default_config


def _resolve_config(config: Optional[ProxihashConfig]) -> ProxihashConfig:
    return _default_config if config is None else config
