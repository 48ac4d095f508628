"""Scalars modulo a curve's order: a general scalar and a non-zero one."""

from __future__ import annotations

import re
import secrets
from functools import total_ordering
from typing import Any

from eccore.curve import Curve, CurveError, IsHigh

__all__ = ["ScalarCore", "NonZeroScalar"]

_LOWER_HEX = re.compile(r"[0-9a-f]*")
_MIXED_HEX = re.compile(r"[0-9a-fA-F]*")


def _check_bytes(curve: Curve, data: bytes) -> bytes:
    data = bytes(data)
    if len(data) != curve.field_size:
        raise CurveError(f"expected {curve.field_size} bytes, got {len(data)}")
    return data


def _decode_hex(curve: Curve, text: str, pattern: re.Pattern[str]) -> bytes:
    if not pattern.fullmatch(text):
        raise CurveError("invalid hexadecimal scalar encoding")
    if len(text) != curve.field_size * 2:
        raise CurveError(
            f"expected {curve.field_size * 2} hex digits, got {len(text)}"
        )
    return bytes.fromhex(text)


def _format_hex(data: bytes, spec: str) -> str:
    if spec in ("", "X"):
        return data.hex().upper()
    if spec == "x":
        return data.hex()
    raise ValueError(f"unsupported format specifier {spec!r} for a scalar")


def _default_rng(rng: Any) -> Any:
    return secrets.SystemRandom() if rng is None else rng


@total_ordering
class ScalarCore(IsHigh):
    """An integer in ``0 .. order - 1`` with arithmetic modulo the curve order."""

    __slots__ = ("_curve", "_value")

    def __init__(self, curve: Curve, value: int) -> None:
        if not 0 <= value < curve.order:
            raise CurveError("scalar out of range")
        self._curve = curve
        self._value = value

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def zero(cls, curve: Curve) -> ScalarCore:
        """The additive identity."""
        return cls(curve, 0)

    @classmethod
    def one(cls, curve: Curve) -> ScalarCore:
        """The multiplicative identity."""
        return cls(curve, 1)

    @classmethod
    def random(cls, curve: Curve, rng: Any = None) -> ScalarCore:
        """Draw a uniformly random scalar using ``rng.randrange``."""
        return cls(curve, _default_rng(rng).randrange(curve.order))

    @classmethod
    def from_be_bytes(cls, curve: Curve, data: bytes) -> ScalarCore:
        """Decode a fixed-width big-endian encoding."""
        return cls(curve, int.from_bytes(_check_bytes(curve, data), "big"))

    @classmethod
    def from_le_bytes(cls, curve: Curve, data: bytes) -> ScalarCore:
        """Decode a fixed-width little-endian encoding."""
        return cls(curve, int.from_bytes(_check_bytes(curve, data), "little"))

    @classmethod
    def from_hex(cls, curve: Curve, text: str) -> ScalarCore:
        """Decode lower-case big-endian hexadecimal."""
        return cls.from_be_bytes(curve, _decode_hex(curve, text, _LOWER_HEX))

    def to_be_bytes(self) -> bytes:
        return self._value.to_bytes(self._curve.field_size, "big")

    def to_le_bytes(self) -> bytes:
        return self._value.to_bytes(self._curve.field_size, "little")

    def is_zero(self) -> bool:
        return self._value == 0

    def is_even(self) -> bool:
        return self._value % 2 == 0

    def is_odd(self) -> bool:
        return self._value % 2 == 1

    def is_high(self) -> bool:
        return self._value > self._curve.order >> 1

    def _same_curve(self, other: ScalarCore) -> None:
        if other._curve != self._curve:
            raise CurveError("scalars belong to different curves")

    def __add__(self, other: object) -> ScalarCore:
        if not isinstance(other, ScalarCore):
            return NotImplemented
        self._same_curve(other)
        return ScalarCore(self._curve, (self._value + other._value) % self._curve.order)

    def __sub__(self, other: object) -> ScalarCore:
        if not isinstance(other, ScalarCore):
            return NotImplemented
        self._same_curve(other)
        return ScalarCore(self._curve, (self._value - other._value) % self._curve.order)

    def __neg__(self) -> ScalarCore:
        return ScalarCore(self._curve, -self._value % self._curve.order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarCore):
            return NotImplemented
        return self._curve == other._curve and self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ScalarCore):
            return NotImplemented
        self._same_curve(other)
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((self._curve, self._value))

    def __int__(self) -> int:
        return self._value

    def __format__(self, spec: str) -> str:
        return _format_hex(self.to_be_bytes(), spec)

    def __str__(self) -> str:
        return format(self, "X")

    def __repr__(self) -> str:
        return f"ScalarCore(curve={self._curve.name!r}, value=0x{self:x})"


class NonZeroScalar(IsHigh):
    """A scalar guaranteed to lie in ``1 .. order - 1``."""

    __slots__ = ("_curve", "_value")

    def __init__(self, curve: Curve, value: int) -> None:
        if not 0 < value < curve.order:
            raise CurveError("non-zero scalar out of range")
        self._curve = curve
        self._value = value

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def random(cls, curve: Curve, rng: Any = None) -> NonZeroScalar:
        """Draw a random non-zero scalar by rejection sampling."""
        rng = _default_rng(rng)
        while True:
            candidate = rng.randrange(curve.order)
            if candidate != 0:
                return cls(curve, candidate)

    @classmethod
    def from_repr(cls, curve: Curve, data: bytes) -> NonZeroScalar:
        """Decode a fixed-width big-endian encoding."""
        return cls(curve, int.from_bytes(_check_bytes(curve, data), "big"))

    @classmethod
    def from_uint(cls, curve: Curve, value: int) -> NonZeroScalar:
        """Build from an integer that must already be in range and non-zero."""
        return cls(curve, value)

    @classmethod
    def from_hex(cls, curve: Curve, text: str) -> NonZeroScalar:
        """Decode big-endian hexadecimal of either case."""
        return cls.from_repr(curve, _decode_hex(curve, text, _MIXED_HEX))

    @classmethod
    def from_uint_reduced(cls, curve: Curve, value: int) -> NonZeroScalar:
        """Reduce an integer into the non-zero range of the curve."""
        return cls(curve, curve.reduce_nonzero(value))

    def to_repr(self) -> bytes:
        return self._value.to_bytes(self._curve.field_size, "big")

    def to_scalar_core(self) -> ScalarCore:
        return ScalarCore(self._curve, self._value)

    def invert(self) -> NonZeroScalar:
        """Return the multiplicative inverse modulo the curve order."""
        try:
            inverse = pow(self._value, -1, self._curve.order)
        except ValueError as exc:
            raise CurveError("scalar has no inverse modulo the curve order") from exc
        return NonZeroScalar(self._curve, inverse)

    def is_high(self) -> bool:
        return self._value > self._curve.order >> 1

    def zeroize(self) -> None:
        """Clear the value, leaving one so the non-zero invariant holds."""
        self._value = 0
        self._value = 1

    def __neg__(self) -> NonZeroScalar:
        return NonZeroScalar(self._curve, self._curve.order - self._value)

    def __mul__(self, other: object) -> NonZeroScalar:
        if not isinstance(other, NonZeroScalar):
            return NotImplemented
        if other._curve != self._curve:
            raise CurveError("scalars belong to different curves")
        product = self._value * other._value % self._curve.order
        if product == 0:
            raise CurveError("product of scalars is zero; the curve order is not prime")
        return NonZeroScalar(self._curve, product)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonZeroScalar):
            return NotImplemented
        return self._curve == other._curve and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __int__(self) -> int:
        return self._value

    def __format__(self, spec: str) -> str:
        return _format_hex(self.to_repr(), spec)

    def __str__(self) -> str:
        return format(self, "X")

    def __repr__(self) -> str:
        return f"NonZeroScalar(curve={self._curve.name!r}, value=0x{self:x})"