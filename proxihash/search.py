"""
Search planning.

Picks the proxihash precision for a search radius and returns the four tiles covering the circle
around the searched point: the tile containing the point and its three neighbours toward the
quadrant of the tile that the point lies in.
"""

import math
import sys
from typing import Optional

from proxihash._deprecate import accepts_distance_keyword, deprecated_search_alias
from proxihash._exceptions import InvalidArgument, PoleWrapError
from proxihash.chars import decode as decode_chars
from proxihash.chars import encode as encode_chars
from proxihash.chars import neighbor as neighbor_chars
from proxihash.config import ProxihashConfig, _resolve_config
from proxihash.proxihash import Proxihash

__all__ = [
    "SearchPlanner",
    "bits_for_search",
    "chars_for_search",
    "search_chars",
    "search_tiles",
    "tiles_for_search",
]

# Every character holds 3 longitude splits.
_LNG_BITS_PER_CHAR = 3


class SearchPlanner:
    """
    Search planner bound to a single configuration.

    Examples:
        >>> from proxihash import ProxihashConfig, SearchPlanner
        >>> planner = SearchPlanner(ProxihashConfig(radius="earth_in_kilometers"))
        >>> planner.bits_for_search(0, 100)
        15
        >>> len(planner.search_tiles(52.23, 21.01, 100))
        4
    """

    def __init__(self, config: Optional[ProxihashConfig] = None):
        """
        Initialize SearchPlanner.

        Args:
            config (Optional[ProxihashConfig]): Sphere radius and angular units.
                Defaults to the process-wide configuration at the time of construction.
        """
        self.config = _resolve_config(config)

    def longitude_bits(self, lat: float, radius: float) -> int:
        """
        Number of longitude splits of a tile at least as wide as the search circle.

        Args:
            lat (float): Latitude of the circle center.
            radius (float): Radius of the circle in the unit of the sphere radius.

        Raises:
            InvalidArgument: If the radius is smaller than machine epsilon or the latitude
                isn't a valid one.
            PoleWrapError: If the circle overlaps a pole.

        Returns:
            int: Number of longitude bits.
        """
        lat = self.config.to_radians(float(lat))
        radius = float(radius)
        sphere_radius = self.config.radius

        if not radius >= sys.float_info.epsilon:
            raise InvalidArgument("distance too small")
        if not abs(lat) <= 0.5 * math.pi:
            raise InvalidArgument(f"latitude out of range ({lat} radians given)")
        if radius > sphere_radius * (0.5 * math.pi - abs(lat)):
            raise PoleWrapError("cannot search across pole")

        # Half of the longitude span of the circle.
        dlng = math.asin(math.sin(0.5 * radius / sphere_radius) / math.cos(lat))
        return math.ceil(math.log2(math.pi / abs(dlng))) - 1

    def bits_for_search(self, lat: float, radius: float) -> int:
        """Odd number of bits of an integer proxihash used to search the circle."""
        return 2 * self.longitude_bits(lat, radius) - 1

    def chars_for_search(self, lat: float, radius: float) -> int:
        """
        Number of characters of a proxihash string used to search the circle.

        Rounded up to whole characters, each of them carrying 3 longitude bits.
        """
        return -(-self.longitude_bits(lat, radius) // _LNG_BITS_PER_CHAR)

    def search_tiles(
        self, lat: float, lng: float, radius: float, min_bits: Optional[int] = None
    ) -> Optional[list[Proxihash]]:
        """
        Find integer proxihashes covering a circle.

        Args:
            lat (float): Latitude of the circle center.
            lng (float): Longitude of the circle center.
            radius (float): Radius of the circle in the unit of the sphere radius.
            min_bits (Optional[int]): Minimal precision of returned proxihashes.
                Defaults to `None`.

        Raises:
            InvalidArgument: If the radius is smaller than machine epsilon.
            PoleWrapError: If the circle overlaps a pole.

        Returns:
            Optional[list[Proxihash]]: Center tile followed by its neighbours in longitude,
                in both directions and in latitude. `None` if the precision required for
                the radius is lower than `min_bits`.
        """
        lat = float(lat)
        lng = float(lng)
        num_bits = self.bits_for_search(lat, radius)
        if min_bits is not None and num_bits < min_bits:
            return None

        center = Proxihash.encode(lat, lng, num_bits, self.config)
        dlat, dlng = self._quadrant(lat, lng, center.decode(self.config))
        return [
            center,
            center.neighbor(0, dlng),
            center.neighbor(dlat, dlng),
            center.neighbor(dlat, 0),
        ]

    def search_chars(
        self, lat: float, lng: float, radius: float, min_chars: Optional[int] = None
    ) -> Optional[list[str]]:
        """
        Find proxihash strings covering a circle.

        Args:
            lat (float): Latitude of the circle center.
            lng (float): Longitude of the circle center.
            radius (float): Radius of the circle in the unit of the sphere radius.
            min_chars (Optional[int]): Minimal length of returned proxihashes.
                Defaults to `None`.

        Raises:
            InvalidArgument: If the radius is smaller than machine epsilon.
            PoleWrapError: If the circle overlaps a pole.

        Returns:
            Optional[list[str]]: Center tile followed by its neighbours in longitude,
                in both directions and in latitude. `None` if the precision is lower than
                `min_chars`.
        """
        lat = float(lat)
        lng = float(lng)
        num_chars = self.chars_for_search(lat, radius)
        if min_chars is not None and num_chars < min_chars:
            return None

        center = encode_chars(lat, lng, num_chars, self.config)
        dlat, dlng = self._quadrant(lat, lng, decode_chars(center, self.config))
        return [
            center,
            neighbor_chars(center, 0, dlng),
            neighbor_chars(center, dlat, dlng),
            neighbor_chars(center, dlat, 0),
        ]

    @staticmethod
    def _quadrant(lat: float, lng: float, tile_center: tuple[float, float]) -> tuple[int, int]:
        tile_lat, tile_lng = tile_center
        dlat = -1 if lat < tile_lat else 1
        dlng = -1 if lng < tile_lng else 1
        return dlat, dlng


def bits_for_search(lat: float, radius: float, config: Optional[ProxihashConfig] = None) -> int:
    """Odd number of bits of an integer proxihash used to search the circle."""
    return SearchPlanner(config).bits_for_search(lat, radius)


def chars_for_search(lat: float, radius: float, config: Optional[ProxihashConfig] = None) -> int:
    """Number of characters of a proxihash string used to search the circle."""
    return SearchPlanner(config).chars_for_search(lat, radius)


@accepts_distance_keyword
def search_tiles(
    lat: float,
    lng: float,
    radius: float,
    min_bits: Optional[int] = None,
    config: Optional[ProxihashConfig] = None,
) -> Optional[list[Proxihash]]:
    """
    Find integer proxihashes covering a circle around a point.

    Args:
        lat (float): Latitude of the circle center.
        lng (float): Longitude of the circle center.
        radius (float): Radius of the circle in the unit of the sphere radius.
        min_bits (Optional[int]): Minimal precision of returned proxihashes.
            Defaults to `None`.
        config (Optional[ProxihashConfig]): Sphere radius and angular units.
            Defaults to the process-wide configuration.

    Returns:
        Optional[list[Proxihash]]: Four proxihashes or `None` if the required precision
            is lower than `min_bits`.
    """
    return SearchPlanner(config).search_tiles(lat, lng, radius, min_bits=min_bits)


@accepts_distance_keyword
def search_chars(
    lat: float,
    lng: float,
    radius: float,
    min_chars: Optional[int] = None,
    config: Optional[ProxihashConfig] = None,
) -> Optional[list[str]]:
    """
    Find proxihash strings covering a circle around a point.

    Args:
        lat (float): Latitude of the circle center.
        lng (float): Longitude of the circle center.
        radius (float): Radius of the circle in the unit of the sphere radius.
        min_chars (Optional[int]): Minimal length of returned proxihashes.
            Defaults to `None`.
        config (Optional[ProxihashConfig]): Sphere radius and angular units.
            Defaults to the process-wide configuration.

    Returns:
        Optional[list[str]]: Four proxihash strings or `None` if the required precision
            is lower than `min_chars`.
    """
    return SearchPlanner(config).search_chars(lat, lng, radius, min_chars=min_chars)


tiles_for_search = deprecated_search_alias("tiles_for_search", search_chars, version="0.1.0")
