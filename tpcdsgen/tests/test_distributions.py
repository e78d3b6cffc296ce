"""Tests for weighted distributions and the text helpers built on them."""

import pytest

from tpcdsgen.generation.distributions import available_distributions, get_distribution
from tpcdsgen.generation.distributions.english import generate_random_text, generate_word
from tpcdsgen.generation.random.stream import RandomNumberStream


def test_distributions_are_loaded_once():
    assert get_distribution("hours") is get_distribution("hours")


def test_every_packaged_distribution_loads():
    for name in available_distributions():
        distribution = get_distribution(name)
        assert distribution.size > 0
        assert distribution.weight_sets


def test_unknown_distribution():
    with pytest.raises(FileNotFoundError):
        get_distribution("no_such_distribution")


def test_zero_weight_entries_are_never_picked():
    """Stores are closed overnight, so store sale hours skip 0-7 and 22-23."""
    hours = get_distribution("hours")
    stream = RandomNumberStream(99, 1)
    picked = {int(hours.pick_random_value("store", stream)) for _ in range(2000)}
    assert picked <= set(range(8, 22))
    assert len(picked) > 10


def test_pick_draws_once():
    hours = get_distribution("hours")
    stream = RandomNumberStream(5, 3)
    hours.pick_random_index("uniform", stream)
    assert stream.seeds_used == 1


def test_value_columns_by_name():
    hours = get_distribution("hours")
    assert hours.get_value_at_index(0, "am_pm") == "AM"
    assert hours.get_value_at_index(23, "am_pm") == "PM"
    assert hours.get_value_for_index_mod_size(24) == hours.get_value_at_index(0)


def test_generate_word_is_deterministic():
    syllables = get_distribution("syllables")
    assert generate_word(0, 80) == ""
    assert generate_word(1, 80) == syllables.get_value_at_index(1)
    assert generate_word(11, 80) == syllables.get_value_at_index(1) * 2
    assert generate_word(123456, 80) == generate_word(123456, 80)


def test_generate_word_respects_length_limit():
    assert len(generate_word(987654321, 7)) <= 7


@pytest.mark.parametrize("bounds", [(1, 1), (10, 20), (100, 200)])
def test_random_text_length(bounds):
    minimum, maximum = bounds
    stream = RandomNumberStream(77, 1000)
    for _ in range(20):
        text = generate_random_text(minimum, maximum, stream)
        assert minimum <= len(text) <= maximum


def test_random_text_starts_with_capital():
    stream = RandomNumberStream(78, 1000)
    text = generate_random_text(30, 60, stream)
    assert text[0] == text[0].upper()
