"""JSON Web Keys with a key type of ``EC`` (RFC 7518, section 6)."""

from __future__ import annotations

import base64
import hmac
import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

from eccore.curve import Curve, CurveError
from eccore.scalar import NonZeroScalar

__all__ = ["EC_KTY", "JwkEcKey", "decode_base64url_fe"]

EC_KTY = "EC"

_FIELDS = ("kty", "crv", "x", "y", "d")
_BASE64URL = re.compile(r"[A-Za-z0-9_-]*")
_UNCOMPRESSED_TAG = 0x04


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_base64url_fe(curve: Curve, text: str) -> bytes:
    """Decode an unpadded Base64url field element of the curve's field size."""
    if not isinstance(text, str) or not _BASE64URL.fullmatch(text) or len(text) % 4 == 1:
        raise CurveError("invalid Base64url encoding")
    decoded = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    if _b64url_encode(decoded) != text:
        raise CurveError("non-canonical Base64url encoding")
    if len(decoded) != curve.field_size:
        raise CurveError(
            f"expected a {curve.field_size}-byte field element, got {len(decoded)} bytes"
        )
    return decoded


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise CurveError(f"JWK field {name!r} must be a string")
    return value


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise CurveError(f"duplicate JWK field {key!r}")
        result[key] = value
    return result


class JwkEcKey:
    """An elliptic curve JWK: a public key, or a keypair when ``d`` is present."""

    __slots__ = ("_crv", "_x", "_y", "_d")

    def __init__(self, crv: str, x: str, y: str, d: str | None = None) -> None:
        self._crv = _require_str("crv", crv)
        self._x = _require_str("x", x)
        self._y = _require_str("y", y)
        self._d = None if d is None else _require_str("d", d)

    @property
    def crv(self) -> str:
        return self._crv

    @property
    def x(self) -> str:
        return self._x

    @property
    def y(self) -> str:
        return self._y

    @property
    def d(self) -> str | None:
        return self._d

    @classmethod
    def parse(cls, text: str) -> JwkEcKey:
        """Parse a JWK from its JSON text."""
        try:
            data = json.loads(text, object_pairs_hook=_reject_duplicates)
        except json.JSONDecodeError as exc:
            raise CurveError("invalid JWK JSON") from exc
        if isinstance(data, list):
            return cls._from_sequence(data)
        return cls.from_dict(data)

    @classmethod
    def _from_sequence(cls, items: Sequence[Any]) -> JwkEcKey:
        if not items:
            raise CurveError("JWK sequence is missing element 0")
        kty = _require_str("kty", items[0])
        if kty != EC_KTY:
            raise CurveError(f"unsupported JWK kty: {kty!r}")
        if len(items) != len(_FIELDS):
            raise CurveError(f"JWK sequence must have {len(_FIELDS)} elements")
        _, crv, x, y, d = items
        return cls(crv, x, y, d)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JwkEcKey:
        """Build a JWK from a mapping of its JSON members."""
        if not isinstance(data, Mapping):
            raise CurveError("a JWK must be a JSON object")
        unknown = [key for key in data if key not in _FIELDS]
        if unknown:
            raise CurveError(
                f"unknown JWK field {unknown[0]!r}, expected one of {', '.join(_FIELDS)}"
            )
        for name in ("kty", "crv", "x", "y"):
            if name not in data:
                raise CurveError(f"missing JWK field {name!r}")
        kty = _require_str("kty", data["kty"])
        if kty != EC_KTY:
            raise CurveError(f"unsupported JWK kty: {kty}")
        return cls(data["crv"], data["x"], data["y"], data.get("d"))

    def to_dict(self) -> dict[str, str]:
        """Return the JSON members in their canonical order."""
        members = {"kty": EC_KTY, "crv": self._crv, "x": self._x, "y": self._y}
        if self._d is not None:
            members["d"] = self._d
        return members

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def __repr__(self) -> str:
        d = "..." if self._d is not None else "None"
        return f"JwkEcKey(crv={self._crv!r}, x={self._x!r}, y={self._y!r}, d={d})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JwkEcKey):
            return NotImplemented
        if self._d is None or other._d is None:
            d_eq = self._d is None and other._d is None
        else:
            d_eq = hmac.compare_digest(self._d.encode(), other._d.encode())
        return (
            self._crv == other._crv
            and self._x == other._x
            and self._y == other._y
            and d_eq
        )

    __hash__ = None  # type: ignore[assignment]

    def is_keypair(self) -> bool:
        """True when the JWK carries a private key."""
        return self._d is not None

    def is_public_key(self) -> bool:
        """True when the JWK carries only a public key."""
        return self._d is None

    @classmethod
    def from_encoded_point(cls, curve: Curve, point: bytes) -> JwkEcKey | None:
        """Build a public JWK from an uncompressed SEC1 point.

        Returns None for compressed, compact or identity encodings.
        """
        if curve.crv is None:
            raise CurveError(f"curve {curve.name!r} has no JWK curve name")
        point = bytes(point)
        size = curve.field_size
        if len(point) != 1 + 2 * size or point[0] != _UNCOMPRESSED_TAG:
            return None
        return cls(
            curve.crv,
            _b64url_encode(point[1 : 1 + size]),
            _b64url_encode(point[1 + size :]),
        )

    def to_encoded_point(self, curve: Curve) -> bytes:
        """Return the public key as an uncompressed SEC1 point."""
        if curve.crv is None or self._crv != curve.crv:
            raise CurveError("JWK curve does not match")
        x = decode_base64url_fe(curve, self._x)
        y = decode_base64url_fe(curve, self._y)
        return bytes([_UNCOMPRESSED_TAG]) + x + y

    def secret_scalar(self, curve: Curve) -> NonZeroScalar:
        """Decode the private key ``d`` as a non-zero scalar."""
        if self._d is None:
            raise CurveError("JWK does not contain a private key")
        self.to_encoded_point(curve)
        d_bytes = bytearray(decode_base64url_fe(curve, self._d))
        try:
            return NonZeroScalar.from_repr(curve, bytes(d_bytes))
        finally:
            d_bytes[:] = bytes(len(d_bytes))

    def zeroize(self) -> None:
        """Clear the private key parameter."""
        if self._d is not None:
            self._d = ""