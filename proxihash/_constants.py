"""Constants used across the project."""

EARTH_IN_MILES = 3958.761
EARTH_IN_KILOMETERS = 6371.009

RADIUS_PRESETS = {
    "earth_in_miles": EARTH_IN_MILES,
    "earth_in_kilometers": EARTH_IN_KILOMETERS,
}

DEFAULT_NUM_BITS = 31
DEFAULT_NUM_CHARS = 5

# 25 lowercase letters, `z` is not used, so that `A` is symbol 35.
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyABCDEFGHIJKLMNOPQRSTUVWXYZ.-_"
BITS_PER_CHAR = 6

# Within a single character the bits go lat, lng, lat, lng, lat, lng (MSB first).
LAT_CHAR_MASK = 0b101010
LNG_CHAR_MASK = 0b010101

WGS84_CRS = "EPSG:4326"

__all__ = [
    "ALPHABET",
    "BITS_PER_CHAR",
    "DEFAULT_NUM_BITS",
    "DEFAULT_NUM_CHARS",
    "EARTH_IN_KILOMETERS",
    "EARTH_IN_MILES",
    "LAT_CHAR_MASK",
    "LNG_CHAR_MASK",
    "RADIUS_PRESETS",
    "WGS84_CRS",
]
