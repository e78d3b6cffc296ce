"""
Slowly changing dimension bookkeeping.

History-keeping tables lay out their business entities in blocks of six
row numbers. Within a block, ``row_number % 6`` decides the role of a row:

    1        a business entity with a single version
    2, 3     a business entity with two versions (half / half)
    4, 5, 0  a business entity with three versions (thirds)

Versions split the data date range, shifted back by six days per table
ordinal so that tables do not change on the same day.
"""

from dataclasses import dataclass

from tpcdsgen.generation.constants import NO_VALUE_KEY, SCD_BLOCK_SIZE
from tpcdsgen.generation.random.values import make_business_key
from tpcdsgen.generation.types.dates import JULIAN_DATA_END_DATE, JULIAN_DATA_START_DATE

ONE_HALF_DATE = JULIAN_DATA_START_DATE + (JULIAN_DATA_END_DATE - JULIAN_DATA_START_DATE) // 2
ONE_THIRD_PERIOD = (JULIAN_DATA_END_DATE - JULIAN_DATA_START_DATE) // 3
ONE_THIRD_DATE = JULIAN_DATA_START_DATE + ONE_THIRD_PERIOD
TWO_THIRDS_DATE = ONE_THIRD_DATE + ONE_THIRD_PERIOD


@dataclass(frozen=True)
class ScdKey:
    business_key: str
    start_date: int
    end_date: int
    is_new_business_key: bool


def compute_scd_key(table, row_number: int) -> ScdKey:
    """
    Resolve the business entity and validity window of a row.

    Args:
        table: History-keeping table the row belongs to
        row_number: 1-based row number

    Returns:
        ScdKey; an open-ended version has an end date of -1
    """
    modulo = row_number % SCD_BLOCK_SIZE
    shift = table.ordinal * SCD_BLOCK_SIZE

    if modulo == 1:
        business_row = row_number
        start_date = JULIAN_DATA_START_DATE - shift
        end_date = NO_VALUE_KEY
        is_new = True
    elif modulo == 2:
        business_row = row_number
        start_date = JULIAN_DATA_START_DATE - shift
        end_date = ONE_HALF_DATE - shift - 1
        is_new = True
    elif modulo == 3:
        business_row = row_number - 1
        start_date = ONE_HALF_DATE - shift
        end_date = NO_VALUE_KEY
        is_new = False
    elif modulo == 4:
        business_row = row_number
        start_date = JULIAN_DATA_START_DATE - shift
        end_date = ONE_THIRD_DATE - shift - 1
        is_new = True
    elif modulo == 5:
        business_row = row_number - 1
        start_date = ONE_THIRD_DATE - shift
        end_date = TWO_THIRDS_DATE - shift - 1
        is_new = False
    else:
        business_row = row_number - 2
        start_date = TWO_THIRDS_DATE - shift
        end_date = NO_VALUE_KEY
        is_new = False

    if end_date > JULIAN_DATA_END_DATE:
        end_date = NO_VALUE_KEY

    return ScdKey(make_business_key(business_row), start_date, end_date, is_new)


def get_value_for_slowly_changing_dimension(field_change_flags: int, is_new_key: bool, old_value, new_value):
    """New entities take the new value; later versions keep the old one unless the low flag bit is set."""
    if is_new_key or field_change_flags & 1:
        return new_value
    return old_value


def match_surrogate_key(unique_id: int, julian_date: int, table, scaling) -> int:
    """
    Row number of the version of business entity ``unique_id`` valid on ``julian_date``.

    Business ids are numbered 1.. in the order entities start; every block of
    six rows holds three ids.
    """
    block_start = (unique_id // 3) * SCD_BLOCK_SIZE
    position = unique_id % 3
    if position == 1:
        surrogate_key = block_start + 1
    elif position == 2:
        surrogate_key = block_start + 2
        if julian_date > ONE_HALF_DATE:
            surrogate_key += 1
    else:
        surrogate_key = block_start - 2
        if julian_date > ONE_THIRD_DATE:
            surrogate_key += 1
        if julian_date > TWO_THIRDS_DATE:
            surrogate_key += 1

    return min(surrogate_key, scaling.get_row_count(table))
