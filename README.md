# secpfun

Arithmetic on the secp256k1 elliptic curve: scalars modulo the group order,
points in Jacobian and affine form, BIP340-style tagged hashing, nonce
generation and polynomial helpers for secret sharing.

It is written in pure Python for clarity and experimentation. Nothing here
runs in constant time, so do not use it to protect real secrets.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `secpfun.hex`: `hex_val`, `encode`, `decode` and `decode_array`. Bad input raises `HexError` (a `ValueError`), whose `kind` is a `HexErrorKind`.
- `secpfun.hash`: `tag`, `tag_vectored`, `hash_into` and `add` for `hashlib` objects, and the `HashInto` base class.
- `secpfun.markers`: the enums `Secrecy`, `ZeroChoice` and `PointType`, which record what is known about a value.
- `secpfun.slice`: `Slice`, bytes marked public or secret, compared in constant time.
- `secpfun.backend`: `ProjectivePoint`, the generator `G_POINT`, the constants `P` and `N`, and low-level scalar helpers such as `scalar_from_bytes`, `scalar_invert`, `lincomb` and `point_x_eq_scalar`.
- `secpfun.scalar`: `Scalar`, an integer modulo the curve order carrying a secrecy and a zero choice.
- `secpfun.op`: operations such as `scalar_mul_point`, `point_add`, `point_sub`, `double_mul`, `point_scalar_dot_product` and `scalar_dot_product`.
- `secpfun.nonce`: the `Deterministic` and `Synthetic` nonce generators, `NoNonces`, and the randomness sources `GlobalRng` and `LockedRng`.
- `secpfun.poly`: scalar and point polynomials (`scalar_eval`, `point_eval`, `point_add`, `to_point_poly`, `generate`) and Lagrange interpolation (`eval_basis_poly_at_0`, `interpolate_and_eval_poly_at_0`, `point_interpolate`).

## Example

```python
import hashlib

from secpfun import poly
from secpfun.nonce import Deterministic
from secpfun.scalar import Scalar

x = Scalar.from_int(1)
nonce_gen = Deterministic(hashlib.sha256()).tag(b"PROTO_ONE")
h = nonce_gen.begin_derivation(x)
h.update(b"test")
nonce = Scalar.from_hash(h)

shares = [
    (Scalar.from_int(i).public(), poly.scalar_eval([Scalar.from_int(42)], Scalar.from_int(i)))
    for i in (1, 2, 3)
]
assert poly.interpolate_and_eval_poly_at_0(shares) == Scalar.from_int(42)
```

## What it does not do

- Points are plain `ProjectivePoint` values; there is no point class that
  carries secrecy or zero-choice markers, and no parsing of compressed or
  x-only point encodings beyond `ProjectivePoint.decompress` and
  `ProjectivePoint.from_coordinates`.
- There is no signature scheme and no command-line tool; the package is a
  library only.