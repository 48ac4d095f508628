# eccore

Building blocks for elliptic curve code that works with any curve. eccore does not implement a particular curve. A curve is described by its order, and the package supplies the parts that code built on top of it needs.

## Modules

- `eccore.curve`
  - `Curve` is a frozen dataclass with the fields `name`, `order`, `field_size`, `crv`, `compress_points` and `compact_points`. If you leave `field_size` out, it becomes the smallest byte width that holds the order.
  - Reduction helpers: `reduce`, `from_be_bytes_reduced`, `from_le_bytes_reduced`, `from_be_digest_reduced`, `from_le_digest_reduced` and `reduce_nonzero`.
    - The digest variants accept either a hash object that has `digest()` or raw bytes. Either way the input must be exactly `field_size` bytes long.
    - `reduce_nonzero` maps into `1 .. order - 1`.
  - Abstract interfaces: `AffineXCoordinate`, `DecompressPoint`, `DecompactPoint` and `IsHigh`.
  - `lincomb(x, k, y, l)` computes `x * k + y * l`.
  - `CurveError` is a subclass of `ValueError`.
- `eccore.scalar`
  - `ScalarCore` is an integer in `0 .. order - 1`.
    - Arithmetic: `+`, `-` and unary `-`, all modulo the order.
    - Ordering and hashing.
    - Encodings: `to_be_bytes` / `to_le_bytes` and `from_be_bytes` / `from_le_bytes`. `from_hex` accepts lower-case hex only.
    - Predicates: `is_zero`, `is_even`, `is_odd` and `is_high`.
    - `random(curve, rng)` draws with `rng.randrange`. It defaults to `secrets.SystemRandom`.
  - `NonZeroScalar` is an integer in `1 .. order - 1`.
    - Constructors: `from_repr`, `from_uint`, `from_hex` (either case) and `from_uint_reduced`.
    - `random` uses rejection sampling.
    - Operations: `invert`, `*`, unary `-`, `is_high` and `to_scalar_core`.
    - `zeroize()` clears the value and leaves it at one.
  - Both scalar types format as fixed-width hex: upper case for `str` and for the `X` format spec, lower case for `x`.
- `eccore.jwk`
  - `JwkEcKey` is a JSON Web Key whose `kty` is `"EC"`.
    - `parse` reads JSON text, either an object or a five-element array. It rejects duplicate members, unknown members, missing members and any other `kty`.
    - `from_dict` and `to_dict` convert to and from a mapping.
    - `str(key)` gives compact JSON with the members in the order `kty`, `crv`, `x`, `y`, `d`.
    - `repr` hides `d`.
    - Equality compares `d` in constant time.
    - `is_keypair` and `is_public_key` report whether `d` is present.
    - `from_encoded_point` and `to_encoded_point` convert to and from uncompressed SEC1 points.
    - `secret_scalar` decodes `d` as a `NonZeroScalar`.
    - `zeroize` clears `d`.
  - `decode_base64url_fe` decodes one unpadded, canonical Base64url field element.
  - `EC_KTY` is the constant `"EC"`.
- `eccore.kem`
  - Abstract interfaces for key encapsulation mechanisms: `EncappedKey`, `Encapsulator`, `Decapsulator` and `AuthDecapsulator`.
  - `KemError` is an opaque error. It carries no detail.

## Installation

```
pip install eccore
```

The package has no runtime dependencies.

## Example

This example uses a made-up curve:

```python
from eccore.curve import Curve
from eccore.jwk import JwkEcKey
from eccore.scalar import NonZeroScalar

curve = Curve(name="demo", order=251, crv="demo")  # field_size becomes 1

jwk = JwkEcKey.from_encoded_point(curve, b"\x04\x01\x02")
print(jwk)                        # {"kty":"EC","crv":"demo","x":"AQ","y":"Ag"}
assert jwk.is_public_key()
assert jwk.to_encoded_point(curve) == b"\x04\x01\x02"

s = NonZeroScalar(curve, 5)
assert int(s.invert()) == 201     # 5 * 201 == 1 (mod 251)
print(format(s, "x"))             # 05
```

## Errors

Failures are reported as exceptions:

- `CurveError` covers invalid encodings, wrong byte widths, out-of-range scalars, mismatched curves and unsupported or malformed JWKs.
- `KemError` is what implementations of the KEM interfaces raise when encapsulation or decapsulation fails.

## What eccore does not do

- It has no curve arithmetic. It provides no point type, no point addition or scalar multiplication, and no public key type.
- It has no built-in curve definitions.
- `JwkEcKey.secret_scalar` checks that the JWK names the curve and that `x` and `y` decode correctly. It does not check that `d` actually matches that public point.
- The KEM module defines interfaces only. It contains no concrete encapsulation scheme.

## Running the tests

```
pip install -e ".[test]"
pytest
```