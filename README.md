# unitfloats

Turn raw random bits into uniformly distributed floating-point numbers in
the unit interval, with exact control over which endpoints can occur and
over the precision of the result.

Everything lives in `unitfloats.floats`. Three distributions are provided:

| Distribution      | Interval | How the value is built                                    |
|-------------------|----------|-----------------------------------------------------------|
| `StandardUniform` | `[0, 1)` | top 24 (single) or 53 (double) bits times `2**-precision` |
| `OpenClosed01`    | `(0, 1]` | the same bits plus one, times `2**-precision`             |
| `Open01`          | `(0, 1)` | top 23 or 52 bits placed in the mantissa of `[1, 2)`, then `1 - ε/2` subtracted |

Each one can produce either width, chosen with `FloatWidth.F32` or
`FloatWidth.F64` (the default). Single-precision results are rounded as a
32-bit float would be, and are returned as Python floats holding that
32-bit value.

## Installing

```
pip install unitfloats
```

The package has no dependencies outside the standard library.

## Supplying bits

The distributions read from a `BitSource`. Subclass it and implement
`next_u64()`, returning an integer in `[0, 2**64)`. `next_u32()` defaults to
the low 32 bits of a `next_u64()` draw; override it if your generator has a
native 32-bit output.

```python
import random

from unitfloats.floats import BitSource, FloatWidth, Open01, OpenClosed01, StandardUniform


class PyRandomBits(BitSource):
    def __init__(self, seed):
        self._rng = random.Random(seed)

    def next_u64(self):
        return self._rng.getrandbits(64)


bits = PyRandomBits(42)

x = StandardUniform().sample(bits)                   # double, 0 <= x < 1
y = OpenClosed01().sample(bits, FloatWidth.F32)      # single, 0 < y <= 1
z = Open01().sample(bits, FloatWidth.F64)            # double, 0 < z < 1
```

Single-precision samples consume one `next_u32()` call; double-precision
samples consume one `next_u64()` call. The most significant bits of each
word are the ones used.

## Streams of samples

`sample_iter` returns an endless generator. Use `itertools.islice` to take
as many values as you need:

```python
from itertools import islice

values = list(islice(Open01().sample_iter(bits, FloatWidth.F32), 1000))
```

## Float widths

`FloatWidth` members carry the format's parameters: `bits`,
`fraction_bits`, `exponent_bias`, and the derived `precision` and `epsilon`.
`from_bits(n)` reinterprets an unsigned bit pattern as a float of that
width, and `round(x)` rounds a Python float to it.

## Building floats from fraction bits

`into_float_with_exponent(fraction, exponent, width)` joins a fraction
(23 low bits for single, 52 for double) with a biased exponent. The result
lies in `[2**exponent, 2**(exponent + 1))`:

```python
from unitfloats.floats import FloatWidth, into_float_with_exponent

into_float_with_exponent(0, 0, FloatWidth.F64)        # 1.0
into_float_with_exponent(1 << 51, 0, FloatWidth.F64)  # 1.5
into_float_with_exponent(0, 3, FloatWidth.F32)        # 8.0
```

A fraction that does not fit in the width's fraction bits, or an exponent
whose biased value falls outside the exponent field, raises `ValueError`.

## What it does not do

The package contains no random number generators of its own and no other
distributions (integer ranges, arbitrary float ranges, weighted choice);
it only converts bits you supply into unit-interval floats.

## Running the tests

```
pip install "unitfloats[test]"
pytest
```