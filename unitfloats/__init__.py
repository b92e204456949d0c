"""Uniform floating-point samples in the unit interval built from raw random bits."""

__version__ = "0.1.0"

__all__ = ["floats"]