"""Value helpers that turn raw stream draws into typed field values."""

from decimal import Decimal
from .stream import RandomNumberStream

ALPHA_NUMERIC = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
BUSINESS_KEY_ALPHABET = "ABCDEFGHIJKLMNOP"


def generate_uniform_random_int(minimum: int, maximum: int, stream: RandomNumberStream) -> int:
    """Draw once and fold the result into ``[minimum, maximum]``."""
    result = stream.next_random()
    result %= maximum - minimum + 1
    return result + minimum


def generate_uniform_random_key(minimum: int, maximum: int, stream: RandomNumberStream) -> int:
    """Same as :func:`generate_uniform_random_int`, kept separate for key columns."""
    return generate_uniform_random_int(minimum, maximum, stream)


def _exponent(value: Decimal) -> int:
    return max(0, -value.as_tuple().exponent)


def generate_uniform_random_decimal(minimum: Decimal, maximum: Decimal, stream: RandomNumberStream) -> Decimal:
    """
    Draw a decimal between two bounds.

    The result carries the smaller of the two bounds' precisions, so
    ``(Decimal("0.00"), Decimal("0.12"))`` yields values like ``0.07``.
    """
    precision = min(_exponent(minimum), _exponent(maximum))
    low = int(minimum.scaleb(precision))
    high = int(maximum.scaleb(precision))
    number = stream.next_random()
    number %= high - low + 1
    number += low
    return Decimal(number).scaleb(-precision)


def generate_random_charset(charset: str, minimum: int, maximum: int, stream: RandomNumberStream) -> str:
    """Random string of ``charset`` characters; draws ``1 + length`` times."""
    length = generate_uniform_random_int(minimum, maximum, stream)
    return "".join(
        charset[generate_uniform_random_int(0, len(charset) - 1, stream)]
        for _ in range(length)
    )


def generate_random_url(stream: RandomNumberStream) -> str:
    # Every generated page lives on the same host; no draws are taken.
    return "http://www.foo.com"


def make_char_key(source: int, character_count: int) -> str:
    """Encode ``source`` in base 16 with A-P digits, least significant first."""
    characters = []
    for _ in range(character_count):
        characters.append(BUSINESS_KEY_ALPHABET[source & 0xF])
        source >>= 4
    return "".join(characters)


def make_business_key(primary: int) -> str:
    """
    Build the 16 character business key for a surrogate key.

    >>> make_business_key(1)
    'AAAAAAAABAAAAAAA'
    """
    return make_char_key(primary >> 32, 8) + make_char_key(primary & 0xFFFFFFFF, 8)
