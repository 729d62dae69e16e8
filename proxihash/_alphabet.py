"""Conversion between proxihash strings and 6-bit symbol indexes."""

from collections.abc import Generator, Iterable

from proxihash._constants import ALPHABET, BITS_PER_CHAR
from proxihash._exceptions import InvalidArgument

_DECODE_MAP = {char: index for index, char in enumerate(ALPHABET)}


def indexes(proxihash: str) -> Generator[int, None, None]:
    """Yield 6-bit indexes of consecutive symbols."""
    for char in proxihash:
        try:
            yield _DECODE_MAP[char]
        except KeyError:
            raise InvalidArgument(f"Invalid proxihash symbol: {char!r}") from None


def from_indexes(indexes: Iterable[int]) -> str:
    return "".join(ALPHABET[index] for index in indexes)


def string_to_int(proxihash: str) -> int:
    """
    Convert a proxihash string to its bits.

    The result has `6 * len(proxihash)` significant bits, first symbol being the most significant.
    """
    value = 0
    for index in indexes(proxihash):
        value = (value << BITS_PER_CHAR) | index
    return value


def int_to_string(value: int, num_chars: int) -> str:
    """Convert bits back to a proxihash string of a given length."""
    if num_chars < 0:
        raise InvalidArgument(f"number of characters must not be negative ({num_chars} given)")
    if value < 0 or value >> (BITS_PER_CHAR * num_chars):
        raise InvalidArgument(f"value doesn't fit in {num_chars} characters")
    mask = (1 << BITS_PER_CHAR) - 1
    return from_indexes(
        (value >> (BITS_PER_CHAR * shift)) & mask for shift in range(num_chars - 1, -1, -1)
    )
