"""Deterministic random number streams and value helpers."""

from .stream import RandomNumberStream
from .values import (
    ALPHA_NUMERIC,
    generate_random_charset,
    generate_random_url,
    generate_uniform_random_decimal,
    generate_uniform_random_int,
    generate_uniform_random_key,
    make_business_key,
)

__all__ = [
    "RandomNumberStream",
    "ALPHA_NUMERIC",
    "generate_random_charset",
    "generate_random_url",
    "generate_uniform_random_decimal",
    "generate_uniform_random_int",
    "generate_uniform_random_key",
    "make_business_key",
]
