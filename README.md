# ristrettox

Arithmetic in the Ristretto prime-order group built on Curve25519. The
package is pure Python and has no dependencies outside the standard library.

## What is in it

- `ristrettox.field.FieldElement`: elements of GF(2^255 - 19). It offers
  `from_bytes` / `to_bytes`, `invert`, `pow_p58`, `sqrt_ratio_i`, `invsqrt`
  and `FieldElement.batch_invert`. `batch_invert` raises `ValueError` if any
  input is zero.
- `ristrettox.scalar.Scalar`: integers modulo the group order ℓ. You can
  build one with `from_bytes_mod_order`, `from_bytes_mod_order_wide`,
  `from_canonical_bytes`, `from_bits` or `from_int`. It supports `+`, `-`,
  `*`, unary `-`, `invert`, `reduce` and `is_canonical`.
- `ristrettox.ristretto.RistrettoPoint` and `CompressedRistretto`: group
  elements and their canonical 32-byte encoding. Points support `+`, `-`,
  unary `-`, multiplication by a `Scalar` from either side, `compress` and
  `coset4`. `RistrettoPoint.basepoint()` returns the standard basepoint.
- `ristrettox.scalar_batch`: `batch_invert` returns the inverses together
  with the product of all the inverses. It also provides `scalar_sum` and
  `scalar_product`.
- `ristrettox.batch_compress`: `double_and_compress_batch` encodes [2]P for
  many points with one field inversion. `ristretto_sum` adds up points.
- `ristrettox.scalar_hash`: `random_scalar`, `hash_to_scalar` (SHA-512) and
  `scalar_from_hash`. `scalar_from_hash` takes any hash object that produces
  64 bytes.
- `ristrettox.elligator`: `elligator_ristretto_flavor`, `from_uniform_bytes`,
  `random_point`, `hash_to_point` (SHA-512) and `point_from_hash`.
- `ristrettox.naf.non_adjacent_form`: the width-w NAF of a scalar, for w
  from 2 to 8.
- `ristrettox.radix`: `to_radix_16`, `to_radix_2w` and
  `to_radix_2w_size_hint`, which give signed-digit expansions.
- `ristrettox.multiscalar`: `multiscalar_mul`, `vartime_multiscalar_mul`,
  `optional_multiscalar_mul`, `vartime_double_scalar_mul_basepoint` and
  `VartimeRistrettoPrecomputation`. `VartimeRistrettoPrecomputation` handles
  a mix of static and dynamic points.
- `ristrettox.basepoint_table.RistrettoBasepointTable`: precomputed
  multiples of a point for fixed-base multiplication.

## Installation

```
pip install ristrettox
```

## Example

```python
from ristrettox.scalar import Scalar
from ristrettox.ristretto import RistrettoPoint, CompressedRistretto
from ristrettox.multiscalar import multiscalar_mul
from ristrettox.elligator import hash_to_point

B = RistrettoPoint.basepoint()
a = Scalar.from_int(87329482)
b = Scalar.from_int(37264829)

P = a * B
encoded = P.compress().to_bytes()          # 32 bytes
assert CompressedRistretto(encoded).decompress() == P

Q = multiscalar_mul([a, b], [B, B + B])
assert Q == (a + b + b) * B

H = hash_to_point(b"some message")
```

When you decode untrusted data, `CompressedRistretto.decompress()` returns
`None` for any encoding that is not canonical. In the same way,
`Scalar.from_canonical_bytes()` returns `None` for any scalar that is not
canonical.

## What it does not include

The package works only with the Ristretto group and the field and scalar
arithmetic beneath it. It has no X25519 / Montgomery-ladder key exchange
and no Ed25519 signatures. It exposes no public Edwards-point type, and it
has no serialization other than the raw 32-byte encodings. It has no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```

## Caveats

Python integers are not constant-time. The conditional operations here are
ordinary branches. Use this package for protocols, tests and reference
computations. Do not use it where timing side channels matter.