"""Elliptic curve descriptions and the traits shared by curve implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, runtime_checkable

__all__ = [
    "CurveError",
    "Curve",
    "AffineXCoordinate",
    "DecompressPoint",
    "DecompactPoint",
    "IsHigh",
    "lincomb",
]


class CurveError(ValueError):
    """Raised when an elliptic curve operation receives invalid input."""


@runtime_checkable
class _Digest(Protocol):
    def digest(self) -> bytes: ...


@dataclass(frozen=True)
class Curve:
    """An elliptic curve described by the order of its scalar field.

    ``field_size`` is the byte length of serialized field elements; when
    omitted it is the smallest number of bytes that holds ``order``.
    ``crv`` is the JSON Web Key curve name, if the curve has one.
    """

    name: str
    order: int
    field_size: int = 0
    crv: str | None = None
    compress_points: bool = False
    compact_points: bool = False
    _minimum_size: int = field(init=False, repr=False, compare=False, default=0)

    def __post_init__(self) -> None:
        if self.order < 2:
            raise CurveError("curve order must be at least 2")
        minimum = (self.order.bit_length() + 7) // 8
        object.__setattr__(self, "_minimum_size", minimum)
        if self.field_size == 0:
            object.__setattr__(self, "field_size", minimum)
        elif self.field_size < minimum:
            raise CurveError(
                f"field size of {self.field_size} bytes cannot hold the curve order"
            )

    def reduce(self, n: int) -> int:
        """Reduce a non-negative integer modulo the curve order."""
        if n < 0:
            raise CurveError("cannot reduce a negative integer")
        if n.bit_length() > self.field_size * 8:
            raise CurveError("integer is wider than the curve's field size")
        return n % self.order

    def _check_width(self, data: bytes) -> bytes:
        data = bytes(data)
        if len(data) != self.field_size:
            raise CurveError(
                f"expected {self.field_size} bytes, got {len(data)}"
            )
        return data

    def from_be_bytes_reduced(self, data: bytes) -> int:
        """Interpret big-endian bytes as an integer and reduce it."""
        return self.reduce(int.from_bytes(self._check_width(data), "big"))

    def from_le_bytes_reduced(self, data: bytes) -> int:
        """Interpret little-endian bytes as an integer and reduce it."""
        return self.reduce(int.from_bytes(self._check_width(data), "little"))

    @staticmethod
    def _digest_bytes(digest: Any) -> bytes:
        if isinstance(digest, _Digest):
            return digest.digest()
        if isinstance(digest, (bytes, bytearray, memoryview)):
            return bytes(digest)
        raise CurveError("expected a hash object or its output bytes")

    def from_be_digest_reduced(self, digest: Any) -> int:
        """Reduce a digest whose output size matches the field size, read big-endian."""
        return self.from_be_bytes_reduced(self._digest_bytes(digest))

    def from_le_digest_reduced(self, digest: Any) -> int:
        """Reduce a digest whose output size matches the field size, read little-endian."""
        return self.from_le_bytes_reduced(self._digest_bytes(digest))

    def reduce_nonzero(self, n: int) -> int:
        """Reduce an integer into the non-zero range ``1 .. order - 1``."""
        if n < 0:
            raise CurveError("cannot reduce a negative integer")
        if n.bit_length() > self.field_size * 8:
            raise CurveError("integer is wider than the curve's field size")
        return n % (self.order - 1) + 1


class AffineXCoordinate(ABC):
    """A point whose affine x-coordinate can be serialized."""

    @abstractmethod
    def x(self) -> bytes:
        """Return the affine x-coordinate as a serialized field element."""


_P = TypeVar("_P")


class DecompressPoint(ABC):
    """A point type that can be recovered from an x-coordinate and y parity."""

    @classmethod
    @abstractmethod
    def decompress(cls: type[_P], x: bytes, y_is_odd: bool) -> _P | None:
        """Recover a point, or return None if ``x`` is not on the curve."""


class DecompactPoint(ABC):
    """A point type that can be recovered from its x-coordinate alone."""

    @classmethod
    @abstractmethod
    def decompact(cls: type[_P], x: bytes) -> _P | None:
        """Recover a point, or return None if ``x`` is not on the curve."""


class IsHigh(ABC):
    """A scalar that can report whether it exceeds half the curve order."""

    @abstractmethod
    def is_high(self) -> bool:
        """Return True for scalars greater than ``n // 2``."""


def lincomb(x: Any, k: Any, y: Any, l: Any) -> Any:  # noqa: E741
    """Compute the linear combination ``x * k + y * l``."""
    return (x * k) + (y * l)