"""Ripple carry arithmetic over one interleaved axis of an integer proxihash, and step checks."""

from proxihash._exceptions import InvalidArgument, PoleWrapError

LAT_OFFSET = 1
LNG_OFFSET = 0


def bump(value: int, num_bits: int, offset: int, direction: int, wrap: bool) -> int:
    """
    Move the value one tile along a single axis.

    Walks bits `offset, offset + 2, ...` from the least significant upwards. Incrementing clears
    ones until the first zero is set, decrementing sets zeros until the first one is cleared.

    Args:
        value (int): Bits of the proxihash.
        num_bits (int): Bit length of the proxihash.
        offset (int): Position of the least significant bit of the axis.
        direction (int): Positive to increment, negative to decrement.
        wrap (bool): Whether running past the most significant axis bit wraps around.
            Longitude wraps at the antimeridian, latitude can't cross a pole.

    Raises:
        PoleWrapError: If the walk runs past the top bit and `wrap` is `False`.

    Returns:
        int: Bits of the neighbouring proxihash.
    """
    # Every visited bit flips, the walk ends on the first one that flips to `stop_bit`.
    stop_bit = 1 if direction > 0 else 0
    for bit in range(offset, num_bits, 2):
        mask = 1 << bit
        value ^= mask
        if (value >> bit) & 1 == stop_bit:
            return value

    if wrap:
        return value
    raise PoleWrapError("can't wrap around pole")


def check_steps(dlat: int, dlng: int) -> None:
    """Reject neighbour steps other than -1, 0 and 1."""
    for step in (dlat, dlng):
        if isinstance(step, bool) or step not in (-1, 0, 1):
            raise InvalidArgument(f"steps must be -1, 0 or 1 ({dlat!r}, {dlng!r} given)")
