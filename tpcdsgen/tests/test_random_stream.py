"""Unit tests for seekable random number streams and value helpers."""

from decimal import Decimal

import pytest

from tpcdsgen.errors import InvariantViolationError
from tpcdsgen.generation.random.stream import MODULUS, RandomNumberStream
from tpcdsgen.generation.random.values import (
    ALPHA_NUMERIC,
    generate_random_charset,
    generate_uniform_random_decimal,
    generate_uniform_random_int,
    make_business_key,
)


def _sequential_draw(row_number, seeds_per_row, draws_per_row):
    """Walk row by row, drawing fewer values than the budget, then draw the row's first value."""
    stream = RandomNumberStream(42, seeds_per_row)
    for _ in range(row_number - 1):
        for _ in range(draws_per_row):
            stream.next_random()
        stream.consume_remaining_seeds_for_row()
    return stream.next_random()


@pytest.mark.parametrize("row_number", [1, 2, 1000])
@pytest.mark.parametrize("draws_per_row", [0, 1, 3])
def test_seek_matches_sequential_draws(row_number, draws_per_row):
    """Jumping ahead to a row gives the same draw as walking there."""
    seeked = RandomNumberStream(42, 3)
    seeked.skip_rows(row_number - 1)
    assert seeked.next_random() == _sequential_draw(row_number, 3, draws_per_row)


def test_draws_stay_in_range():
    """Park-Miller draws never hit 0 or the modulus."""
    stream = RandomNumberStream(7, 1)
    for _ in range(1000):
        value = stream.next_random()
        assert 1 <= value <= MODULUS - 1


def test_columns_have_distinct_streams():
    """Different global column numbers start from different seeds."""
    first = RandomNumberStream(1, 1).next_random()
    second = RandomNumberStream(2, 1).next_random()
    assert first != second


def test_budget_overrun_is_detected():
    """Using more draws than the per-row budget aborts at the row boundary."""
    stream = RandomNumberStream(3, 2)
    for _ in range(3):
        stream.next_random()
    with pytest.raises(InvariantViolationError):
        stream.consume_remaining_seeds_for_row()


def test_uniform_int_bounds():
    stream = RandomNumberStream(11, 1)
    values = [generate_uniform_random_int(1, 6, stream) for _ in range(500)]
    assert min(values) == 1
    assert max(values) == 6


def test_uniform_decimal_precision():
    """Decimals keep the smaller precision of the two bounds."""
    stream = RandomNumberStream(12, 1)
    for _ in range(100):
        value = generate_uniform_random_decimal(Decimal("0.00"), Decimal("0.12"), stream)
        assert Decimal("0.00") <= value <= Decimal("0.12")
        assert value.as_tuple().exponent == -2


def test_random_charset():
    stream = RandomNumberStream(13, 21)
    value = generate_random_charset(ALPHA_NUMERIC, 1, 20, stream)
    assert 1 <= len(value) <= 20
    assert all(c in ALPHA_NUMERIC for c in value)
    assert stream.seeds_used == len(value) + 1


def test_business_key_encoding():
    """Keys are 16 characters A-P, low nibble first within each half."""
    assert make_business_key(1) == "AAAAAAAABAAAAAAA"
    assert make_business_key(2415022) == "AAAAAAAAOKJNECAA"
    assert make_business_key(1 << 32) == "BAAAAAAAAAAAAAAA"
