"""Composite address type shared by dimension tables."""

from dataclasses import dataclass, replace

from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.random.values import generate_uniform_random_int
from tpcdsgen.generation.distributions.geography import (
    city_hash,
    pick_random_city,
    pick_random_county,
    pick_random_street_name,
    pick_random_street_type,
)

# Draws taken from the address stream per address
ADDRESS_SEEDS = 7


@dataclass(frozen=True)
class Address:
    suite_number: str
    street_number: int
    street_name1: str
    street_name2: str
    street_type: str
    city: str
    county: str
    state: str
    country: str
    zip: int
    gmt_offset: int

    @property
    def street_name(self) -> str:
        if not self.street_name2:
            return self.street_name1
        return f"{self.street_name1} {self.street_name2}"

    @property
    def zip_code(self) -> str:
        return f"{self.zip:05d}"

    @property
    def gmt_offset_text(self) -> str:
        return f"{self.gmt_offset:.2f}"

    def with_fields(self, **changes) -> "Address":
        return replace(self, **changes)


def make_address_for_column(table, stream: RandomNumberStream, scaling) -> Address:
    """
    Draw a complete address from one stream.

    Small tables pick cities by the "large" weights so that their few rows
    land in well-known places; everything else uses the unified weights.
    Always takes exactly ``ADDRESS_SEEDS`` draws.
    """
    street_number = generate_uniform_random_int(1, 1000, stream)
    street_name1 = pick_random_street_name(stream, "first")
    street_name2 = pick_random_street_name(stream, "second")
    street_type = pick_random_street_type(stream)

    suite = generate_uniform_random_int(1, 100, stream)
    if suite % 2 == 1:
        suite_number = f"Suite {(suite // 2) * 10}"
    else:
        suite_number = f"Suite {chr(ord('A') + (suite // 2) % 25)}"

    weight_set = "large" if table.is_small or scaling.get_row_count(table) < 1000 else "unified"
    city = pick_random_city(weight_set, stream)
    county = pick_random_county(stream)
    zip_code = (county.zip_prefix * 100 + city_hash(city) % 100) % 100000

    return Address(
        suite_number=suite_number,
        street_number=street_number,
        street_name1=street_name1,
        street_name2=street_name2,
        street_type=street_type,
        city=city,
        county=county.name,
        state=county.state,
        country="United States",
        zip=zip_code,
        gmt_offset=county.gmt_offset,
    )
