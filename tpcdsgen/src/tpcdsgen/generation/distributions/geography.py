"""Street, city and county picks used to build addresses."""

from typing import NamedTuple

from tpcdsgen.generation.random.stream import RandomNumberStream
from . import get_distribution


class County(NamedTuple):
    name: str
    state: str
    zip_prefix: int
    gmt_offset: int


def pick_random_street_name(stream: RandomNumberStream, weight_set: str) -> str:
    """``weight_set`` is ``"first"`` or ``"second"``; the second may be empty."""
    return get_distribution("street_names").pick_random_value(weight_set, stream)


def pick_random_street_type(stream: RandomNumberStream) -> str:
    return get_distribution("street_types").pick_random_value("frequency", stream)


def pick_random_city(weight_set: str, stream: RandomNumberStream) -> str:
    return get_distribution("cities").pick_random_value(weight_set, stream)


def pick_random_county(stream: RandomNumberStream) -> County:
    distribution = get_distribution("fips_county")
    name, state, zip_prefix, gmt_offset = distribution.get_row_at_index(
        distribution.pick_random_index("population", stream)
    )
    return County(name, state, int(zip_prefix), int(gmt_offset))


def city_hash(city: str) -> int:
    """Stable hash of a city name used to spread zip codes within a county."""
    value = 0
    for character in city:
        value = (value * 31 + ord(character)) % 1000003
    return value
