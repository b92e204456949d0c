"""Uniform floating-point sampling on the unit interval from raw random bits."""

from __future__ import annotations

import abc
import enum
import struct
from collections.abc import Iterator
from dataclasses import dataclass


class FloatWidth(enum.Enum):
    """IEEE-754 binary floating-point formats that can be sampled."""

    F32 = (32, 23, 127, "<I", "<f")
    F64 = (64, 52, 1023, "<Q", "<d")

    def __init__(
        self,
        bits: int,
        fraction_bits: int,
        exponent_bias: int,
        int_format: str,
        float_format: str,
    ) -> None:
        self.bits = bits
        self.fraction_bits = fraction_bits
        self.exponent_bias = exponent_bias
        self._int_format = int_format
        self._float_format = float_format

    @property
    def precision(self) -> int:
        """Number of significant bits, including the implicit leading one."""
        return self.fraction_bits + 1

    @property
    def epsilon(self) -> float:
        """Distance between 1.0 and the next representable value."""
        return 2.0 ** -self.fraction_bits

    def from_bits(self, bits: int) -> float:
        """Reinterpret an unsigned integer bit pattern as a float of this width."""
        return struct.unpack(self._float_format, struct.pack(self._int_format, bits))[0]

    def round(self, value: float) -> float:
        """Round a Python float to the nearest value of this width."""
        if self is FloatWidth.F64:
            return value
        return struct.unpack(self._float_format, struct.pack(self._float_format, value))[0]


class BitSource(abc.ABC):
    """A source of uniformly random unsigned integers."""

    @abc.abstractmethod
    def next_u64(self) -> int:
        """Return a random integer in ``[0, 2**64)``."""

    def next_u32(self) -> int:
        """Return a random integer in ``[0, 2**32)``, the low half of a 64-bit draw."""
        return self.next_u64() & 0xFFFF_FFFF


def _random_word(rng: BitSource, width: FloatWidth) -> int:
    return rng.next_u32() if width is FloatWidth.F32 else rng.next_u64()


def into_float_with_exponent(fraction: int, exponent: int, width: FloatWidth) -> float:
    """Combine fraction bits with a fixed exponent into a float.

    With exponent 0 the result lies in ``[1, 2)``; in general in
    ``[2**exponent, 2**(exponent + 1))``.
    """
    if not 0 <= fraction < (1 << width.fraction_bits):
        raise ValueError(
            f"fraction must fit in {width.fraction_bits} bits, got {fraction:#x}"
        )
    biased = width.exponent_bias + exponent
    if not 0 <= biased < (1 << (width.bits - 1 - width.fraction_bits)):
        raise ValueError(f"exponent {exponent} is out of range for {width.name}")
    return width.from_bits(fraction | (biased << width.fraction_bits))


class FloatDistribution(abc.ABC):
    """A distribution producing floats from a bit source."""

    @abc.abstractmethod
    def sample(self, rng: BitSource, width: FloatWidth = FloatWidth.F64) -> float:
        """Draw one value."""

    def sample_iter(
        self, rng: BitSource, width: FloatWidth = FloatWidth.F64
    ) -> Iterator[float]:
        """Yield an endless stream of samples."""
        while True:
            yield self.sample(rng, width)


@dataclass(frozen=True)
class StandardUniform(FloatDistribution):
    """Uniform on ``[0, 1)`` using the most significant 24 or 53 bits."""

    def sample(self, rng: BitSource, width: FloatWidth = FloatWidth.F64) -> float:
        value = _random_word(rng, width) >> (width.bits - width.precision)
        scale = 1.0 / (1 << width.precision)
        return width.round(scale * value)


@dataclass(frozen=True)
class OpenClosed01(FloatDistribution):
    """Uniform on ``(0, 1]``; every value has the form ``n * epsilon / 2``."""

    def sample(self, rng: BitSource, width: FloatWidth = FloatWidth.F64) -> float:
        value = _random_word(rng, width) >> (width.bits - width.precision)
        scale = 1.0 / (1 << width.precision)
        return width.round(scale * (value + 1))


@dataclass(frozen=True)
class Open01(FloatDistribution):
    """Uniform on ``(0, 1)``; every value has the form ``n * epsilon + epsilon / 2``."""

    def sample(self, rng: BitSource, width: FloatWidth = FloatWidth.F64) -> float:
        fraction = _random_word(rng, width) >> (width.bits - width.fraction_bits)
        one_point = into_float_with_exponent(fraction, 0, width)
        return width.round(one_point - (1.0 - width.epsilon / 2.0))