"""
Integer proxihash.

A proxihash is an odd number of bits produced by bisecting the longitude and latitude ranges in
turns, starting with longitude at the most significant bit. Longitude owns even bit positions and
latitude owns odd ones, so longitude always gets one split more than latitude and a tile spans
the same angle in both directions.
"""

from typing import Optional

from proxihash._bits import LAT_OFFSET, LNG_OFFSET, bump, check_steps
from proxihash._constants import DEFAULT_NUM_BITS
from proxihash._exceptions import InvalidArgument, InvalidPrecision
from proxihash.config import ProxihashConfig, _resolve_config

__all__ = ["Proxihash"]


class Proxihash:
    """
    Immutable integer proxihash.

    Two proxihashes are equal only if both the value and the number of bits match.

    Examples:
        >>> from proxihash import Proxihash
        >>> Proxihash.encode(0, 0, 3)
        Proxihash[001]
        >>> Proxihash.encode(0, 0, 3).north()
        Proxihash[011]
        >>> Proxihash(4, 2)
        Traceback (most recent call last):
        ...
        proxihash._exceptions.InvalidPrecision: bitlength must be odd (2 given)
    """

    __slots__ = ("_value", "_num_bits")

    def __init__(self, value: int, num_bits: int):
        """
        Create a proxihash from raw bits.

        Args:
            value (int): Bits of the proxihash, most significant bit is the first longitude split.
            num_bits (int): Number of bits. Must be positive and odd.

        Raises:
            InvalidPrecision: If `num_bits` isn't a positive odd number or the value doesn't fit.
            InvalidArgument: If the value is negative.
        """
        if num_bits < 1 or num_bits % 2 == 0:
            raise InvalidPrecision(f"bitlength must be odd ({num_bits} given)")
        if value < 0:
            raise InvalidArgument(f"value must not be negative ({value} given)")
        if value >> num_bits:
            raise InvalidPrecision(f"value too large for {num_bits} bits")
        self._value = value
        self._num_bits = num_bits

    @property
    def value(self) -> int:
        """Bits of the proxihash."""
        return self._value

    @property
    def num_bits(self) -> int:
        """Number of bits of the proxihash."""
        return self._num_bits

    @classmethod
    def encode(
        cls,
        lat: float,
        lng: float,
        num_bits: int = DEFAULT_NUM_BITS,
        config: Optional[ProxihashConfig] = None,
    ) -> "Proxihash":
        """
        Encode a point to a proxihash of given precision.

        Coordinates outside of the configured bounds aren't rejected,
        they end up in the outermost tile.

        Args:
            lat (float): Latitude of the point.
            lng (float): Longitude of the point.
            num_bits (int): Precision of the proxihash. Must be odd. Defaults to 31.
            config (Optional[ProxihashConfig]): Configuration with angular units.
                Defaults to the process-wide configuration.

        Returns:
            Proxihash: Proxihash of the tile containing the point.
        """
        lat = float(lat)
        lng = float(lng)
        lat0, lat1, lng0, lng1 = _resolve_config(config).bounds

        value = 0
        for i in range(num_bits - 1, -1, -1):
            if i % 2:
                mid = 0.5 * (lat0 + lat1)
                if lat > mid:
                    value |= 1 << i
                    lat0 = mid
                else:
                    lat1 = mid
            else:
                mid = 0.5 * (lng0 + lng1)
                if lng > mid:
                    value |= 1 << i
                    lng0 = mid
                else:
                    lng1 = mid

        return cls(value, num_bits)

    def tile(self, config: Optional[ProxihashConfig] = None) -> tuple[float, float, float, float]:
        """
        Get bounds of the proxihash tile.

        Args:
            config (Optional[ProxihashConfig]): Configuration with angular units.
                Defaults to the process-wide configuration.

        Returns:
            tuple[float, float, float, float]: `(lat_min, lat_max, lng_min, lng_max)`.
        """
        lat0, lat1, lng0, lng1 = _resolve_config(config).bounds

        for i in range(self._num_bits - 1, -1, -1):
            bit = (self._value >> i) & 1
            if i % 2:
                mid = 0.5 * (lat0 + lat1)
                if bit:
                    lat0 = mid
                else:
                    lat1 = mid
            else:
                mid = 0.5 * (lng0 + lng1)
                if bit:
                    lng0 = mid
                else:
                    lng1 = mid

        return lat0, lat1, lng0, lng1

    def decode(self, config: Optional[ProxihashConfig] = None) -> tuple[float, float]:
        """Get `(lat, lng)` of the proxihash tile center."""
        lat0, lat1, lng0, lng1 = self.tile(config)
        return 0.5 * (lat0 + lat1), 0.5 * (lng0 + lng1)

    def neighbor(self, dlat: int, dlng: int) -> "Proxihash":
        """
        Get an adjacent proxihash of the same precision.

        Args:
            dlat (int): Step in latitude: -1 (south), 0 or 1 (north).
            dlng (int): Step in longitude: -1 (west), 0 or 1 (east).
                Longitude wraps around the antimeridian.

        Raises:
            InvalidArgument: If any step is not -1, 0 or 1.
            PoleWrapError: If the step in latitude would cross a pole.

        Returns:
            Proxihash: Neighbouring proxihash.
        """
        check_steps(dlat, dlng)

        value = self._value
        if dlat:
            value = bump(value, self._num_bits, LAT_OFFSET, dlat, wrap=False)
        if dlng:
            value = bump(value, self._num_bits, LNG_OFFSET, dlng, wrap=True)
        return Proxihash(value, self._num_bits)

    def north(self) -> "Proxihash":
        return self.neighbor(1, 0)

    def south(self) -> "Proxihash":
        return self.neighbor(-1, 0)

    def east(self) -> "Proxihash":
        return self.neighbor(0, 1)

    def west(self) -> "Proxihash":
        return self.neighbor(0, -1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Proxihash):
            return NotImplemented
        return self._value == other._value and self._num_bits == other._num_bits

    def __hash__(self) -> int:
        return hash((self._value, self._num_bits))

    def __repr__(self) -> str:
        return f"Proxihash[{self._value:0{self._num_bits}b}]"
