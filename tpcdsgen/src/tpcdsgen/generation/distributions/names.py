"""Person name picks."""

from enum import Enum

from tpcdsgen.generation.random.stream import RandomNumberStream
from . import get_distribution


class FirstNamesWeights(Enum):
    MALE_FREQUENCY = "male"
    FEMALE_FREQUENCY = "female"
    GENERAL_FREQUENCY = "general"


def pick_random_first_name(weights: FirstNamesWeights, stream: RandomNumberStream) -> str:
    return get_distribution("first_names").pick_random_value(weights.value, stream)


def pick_random_last_name(stream: RandomNumberStream) -> str:
    return get_distribution("last_names").pick_random_value("frequency", stream)


def pick_random_manager_name(stream: RandomNumberStream, gendered: bool) -> str:
    """First and last name from one stream; gendered naming favours male names."""
    weights = FirstNamesWeights.MALE_FREQUENCY if gendered else FirstNamesWeights.GENERAL_FREQUENCY
    first_name = pick_random_first_name(weights, stream)
    last_name = pick_random_last_name(stream)
    return f"{first_name} {last_name}"
