"""32-bit wrapping sequence numbers and conversion to and from 64-bit absolute indices."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MOD64 = 1 << 64
_HALF32 = 1 << 31


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer expressed relative to an arbitrary initial sequence number."""

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int) or isinstance(self.raw_value, bool):
            raise TypeError("raw_value must be an int")
        if not 0 <= self.raw_value < _MOD32:
            raise ValueError(f"raw_value {self.raw_value} is outside the 32-bit unsigned range")

    def __add__(self, other: object) -> WrappingInt32:
        """Step `other` places past this point, wrapping at 2**32."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) % _MOD32)

    def __sub__(self, other: object) -> int | WrappingInt32:
        """Signed offset from another WrappingInt32, or a step back by an int.

        Between two WrappingInt32 values the result is the 32-bit signed
        difference: negative when the number of decrements needed is no
        larger than the number of increments.
        """
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) % _MOD32
            return diff - _MOD32 if diff >= _HALF32 else diff
        if isinstance(other, int) and not isinstance(other, bool):
            return WrappingInt32((self.raw_value - other) % _MOD32)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute zero-indexed 64-bit sequence number into a WrappingInt32."""
    if n < 0 or n >= _MOD64:
        raise ValueError(f"absolute sequence number {n} is outside the 64-bit unsigned range")
    return isn + n % _MOD32


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and lies closest to `checkpoint`."""
    if checkpoint < 0 or checkpoint >= _MOD64:
        raise ValueError(f"checkpoint {checkpoint} is outside the 64-bit unsigned range")
    offset = (n.raw_value - wrap(checkpoint, isn).raw_value) % _MOD32
    result = (checkpoint + offset) % _MOD64
    if offset > _HALF32 and result >= _MOD32:
        result -= _MOD32
    return result