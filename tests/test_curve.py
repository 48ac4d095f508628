import hashlib

import pytest

from eccore.curve import (
    AffineXCoordinate,
    Curve,
    CurveError,
    DecompactPoint,
    DecompressPoint,
    IsHigh,
    lincomb,
)

ORDER = 2**255 - 19
CURVE = Curve("test", ORDER, crv="TEST")


def test_field_size_derived_from_order():
    assert CURVE.field_size == 32


def test_explicit_field_size_kept():
    curve = Curve("wide", 1000, field_size=4)
    assert curve.field_size == 4


def test_field_size_too_small_rejected():
    with pytest.raises(CurveError):
        Curve("bad", 2**20, field_size=2)


def test_order_too_small_rejected():
    with pytest.raises(CurveError):
        Curve("bad", 1)


def test_reduce_wraps_at_order():
    assert CURVE.reduce(ORDER) == 0
    assert CURVE.reduce(ORDER + 5) == 5
    assert CURVE.reduce(7) == 7


def test_reduce_rejects_negative():
    with pytest.raises(CurveError):
        CURVE.reduce(-1)


def test_reduce_rejects_too_wide():
    with pytest.raises(CurveError):
        CURVE.reduce(1 << 256)


def test_be_and_le_agree_on_reversed_bytes():
    data = bytes(range(32))
    assert CURVE.from_be_bytes_reduced(data) == CURVE.from_le_bytes_reduced(data[::-1])


def test_be_bytes_of_all_ones_reduce_below_order():
    value = CURVE.from_be_bytes_reduced(b"\xff" * 32)
    assert 0 <= value < ORDER
    assert value == CURVE.reduce(2**256 - 1)


def test_wrong_width_rejected():
    with pytest.raises(CurveError):
        CURVE.from_be_bytes_reduced(b"\x01" * 31)
    with pytest.raises(CurveError):
        CURVE.from_le_bytes_reduced(b"\x01" * 33)


def test_digest_reduction_matches_bytes():
    h = hashlib.sha256(b"message")
    assert CURVE.from_be_digest_reduced(h) == CURVE.from_be_bytes_reduced(h.digest())
    assert CURVE.from_le_digest_reduced(h) == CURVE.from_le_bytes_reduced(h.digest())


def test_digest_size_mismatch_rejected():
    with pytest.raises(CurveError):
        CURVE.from_be_digest_reduced(hashlib.sha512(b"message"))


def test_digest_of_wrong_type_rejected():
    with pytest.raises(CurveError):
        CURVE.from_be_digest_reduced(12)


def test_reduce_nonzero_never_zero():
    small = Curve("small", 251)
    results = {small.reduce_nonzero(n) for n in range(256)}
    assert 0 not in results
    assert max(results) < 251
    assert min(results) >= 1


def test_reduce_nonzero_rejects_negative():
    with pytest.raises(CurveError):
        CURVE.reduce_nonzero(-3)


def test_curve_is_immutable():
    with pytest.raises(AttributeError):
        CURVE.order = 3  # type: ignore[misc]
    assert CURVE.order == ORDER
    assert CURVE.reduce(ORDER + 1) == 1


def test_lincomb_with_integers():
    assert lincomb(2, 3, 4, 5) == 2 * 3 + 4 * 5


def test_abstract_traits_cannot_be_instantiated():
    for cls in (AffineXCoordinate, DecompressPoint, DecompactPoint, IsHigh):
        with pytest.raises(TypeError):
            cls()


class _Point(AffineXCoordinate, DecompressPoint, DecompactPoint):
    def __init__(self, x: bytes, odd: bool) -> None:
        self._x = x
        self.odd = odd

    def x(self) -> bytes:
        return self._x

    @classmethod
    def decompress(cls, x, y_is_odd):
        if x == b"\x00":
            return None
        return cls(x, y_is_odd)

    @classmethod
    def decompact(cls, x):
        return cls.decompress(x, False)


def test_point_traits_implemented():
    point = _Point.decompress(b"\x07", True)
    assert point.x() == b"\x07"
    assert point.odd is True
    assert _Point.decompact(b"\x00") is None
    assert _Point.decompact(b"\x09").odd is False
    assert CURVE.from_be_bytes_reduced(point.x().rjust(32, b"\x00")) == 7


class _Scalar(IsHigh):
    def __init__(self, value: int) -> None:
        self.value = value

    def is_high(self) -> bool:
        return self.value > ORDER // 2


def test_is_high_implemented():
    assert _Scalar(ORDER - 1).is_high() is True
    assert _Scalar(1).is_high() is False