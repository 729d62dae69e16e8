"""
Proxihash strings.

String form of a proxihash. Every symbol of the 64-symbol alphabet holds 6 bits, alternating
latitude and longitude splits, starting with latitude:

    lat lng lat lng lat lng

Precision is expressed in characters, so a string always holds the same number of latitude and
longitude splits.

Examples:
    >>> from proxihash import chars
    >>> chars.encode(0, 0, 2)
    'f_'
    >>> chars.tile("pf")
    (-36.5625, -33.75, 61.875, 67.5)
    >>> chars.neighbor("lll", 0, 1)
    '000'
"""

from typing import Optional

from proxihash._alphabet import from_indexes, indexes
from proxihash._alphabet import int_to_string as from_int
from proxihash._alphabet import string_to_int as to_int
from proxihash._bits import check_steps
from proxihash._constants import BITS_PER_CHAR, DEFAULT_NUM_CHARS, LAT_CHAR_MASK, LNG_CHAR_MASK
from proxihash._exceptions import InvalidPrecision, PoleWrapError
from proxihash.config import ProxihashConfig, _resolve_config

__all__ = ["decode", "encode", "from_int", "neighbor", "tile", "to_int"]


def _build_step_tables(mask: int) -> tuple[dict[int, int], dict[int, int]]:
    # Masked sub-values sort the same way as the axis splits they encode.
    sub_values = sorted({index & mask for index in range(1 << BITS_PER_CHAR)})
    increments = dict(zip(sub_values, sub_values[1:]))
    decrements = dict(zip(sub_values[1:], sub_values))
    return increments, decrements


_LAT_INCREMENTS, _LAT_DECREMENTS = _build_step_tables(LAT_CHAR_MASK)
_LNG_INCREMENTS, _LNG_DECREMENTS = _build_step_tables(LNG_CHAR_MASK)
_STEP_TABLES = {
    (LAT_CHAR_MASK, 1): _LAT_INCREMENTS,
    (LAT_CHAR_MASK, -1): _LAT_DECREMENTS,
    (LNG_CHAR_MASK, 1): _LNG_INCREMENTS,
    (LNG_CHAR_MASK, -1): _LNG_DECREMENTS,
}


def encode(
    lat: float,
    lng: float,
    num_chars: int = DEFAULT_NUM_CHARS,
    config: Optional[ProxihashConfig] = None,
) -> str:
    """
    Encode a point to a proxihash string.

    Args:
        lat (float): Latitude of the point.
        lng (float): Longitude of the point.
        num_chars (int): Number of characters of the proxihash. Defaults to 5.
        config (Optional[ProxihashConfig]): Configuration with angular units.
            Defaults to the process-wide configuration.

    Raises:
        InvalidPrecision: If the number of characters is negative.

    Returns:
        str: Proxihash of the tile containing the point.
    """
    if num_chars < 0:
        raise InvalidPrecision(f"number of characters must not be negative ({num_chars} given)")

    lat = float(lat)
    lng = float(lng)
    lat0, lat1, lng0, lng1 = _resolve_config(config).bounds

    result = []
    for _ in range(num_chars):
        index = 0
        for bit in range(BITS_PER_CHAR - 1, -1, -1):
            if bit % 2:
                mid = 0.5 * (lat0 + lat1)
                if lat > mid:
                    index |= 1 << bit
                    lat0 = mid
                else:
                    lat1 = mid
            else:
                mid = 0.5 * (lng0 + lng1)
                if lng > mid:
                    index |= 1 << bit
                    lng0 = mid
                else:
                    lng1 = mid
        result.append(index)

    return from_indexes(result)


def tile(
    proxihash: str, config: Optional[ProxihashConfig] = None
) -> tuple[float, float, float, float]:
    """
    Get bounds of the proxihash tile.

    Args:
        proxihash (str): Proxihash string.
        config (Optional[ProxihashConfig]): Configuration with angular units.
            Defaults to the process-wide configuration.

    Raises:
        InvalidArgument: If the proxihash contains a symbol outside of the alphabet.

    Returns:
        tuple[float, float, float, float]: `(lat_min, lat_max, lng_min, lng_max)`.
    """
    lat0, lat1, lng0, lng1 = _resolve_config(config).bounds

    for index in indexes(proxihash):
        for bit in range(BITS_PER_CHAR - 1, -1, -1):
            if bit % 2:
                mid = 0.5 * (lat0 + lat1)
                if (index >> bit) & 1:
                    lat0 = mid
                else:
                    lat1 = mid
            else:
                mid = 0.5 * (lng0 + lng1)
                if (index >> bit) & 1:
                    lng0 = mid
                else:
                    lng1 = mid

    return lat0, lat1, lng0, lng1


def decode(proxihash: str, config: Optional[ProxihashConfig] = None) -> tuple[float, float]:
    """Get `(lat, lng)` of the proxihash tile center."""
    lat0, lat1, lng0, lng1 = tile(proxihash, config)
    return 0.5 * (lat0 + lat1), 0.5 * (lng0 + lng1)


def _step_axis(symbols: list[int], mask: int, direction: int, wrap: bool) -> None:
    table = _STEP_TABLES[mask, direction]
    reset = 0 if direction > 0 else mask

    carry = True
    position = len(symbols) - 1
    while carry and position >= 0:
        symbol = symbols[position]
        rest = symbol & ~mask
        following = table.get(symbol & mask)
        if following is None:
            symbols[position] = rest | reset
        else:
            symbols[position] = rest | following
            carry = False
        position -= 1

    if carry and not wrap:
        raise PoleWrapError("can't wrap around pole")


def neighbor(proxihash: str, dlat: int, dlng: int) -> str:
    """
    Get an adjacent proxihash string of the same length.

    Args:
        proxihash (str): Proxihash string.
        dlat (int): Step in latitude: -1 (south), 0 or 1 (north).
        dlng (int): Step in longitude: -1 (west), 0 or 1 (east).
            Longitude wraps around the antimeridian.

    Raises:
        InvalidArgument: If any step is not -1, 0 or 1 or the proxihash contains a symbol
            outside of the alphabet.
        PoleWrapError: If the step in latitude would cross a pole.

    Returns:
        str: Neighbouring proxihash.
    """
    check_steps(dlat, dlng)

    symbols = list(indexes(proxihash))
    if dlat:
        _step_axis(symbols, LAT_CHAR_MASK, dlat, wrap=False)
    if dlng:
        _step_axis(symbols, LNG_CHAR_MASK, dlng, wrap=True)
    return from_indexes(symbols)
