"""Calendar dimension: one row per day starting 1900-01-02."""

from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from typing import FrozenSet, List, Optional, Tuple

from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import make_business_key
from tpcdsgen.generation.types.dates import (
    CURRENT_DATE,
    JULIAN_DATE_DIM_FIRST_DATE,
    days_in_month,
    from_julian_days,
    shift_months,
    to_julian_days,
)
from tpcdsgen.schema.generator_columns import DateDimGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


@lru_cache(maxsize=None)
def _holidays() -> FrozenSet[Tuple[int, int]]:
    distribution = get_distribution("holidays")
    return frozenset(
        (int(distribution.get_value_at_index(i, "month")), int(distribution.get_value_at_index(i, "day")))
        for i in range(distribution.size)
    )


def is_holiday(value: date) -> bool:
    return (value.month, value.day) in _holidays()


def day_of_week(value: date) -> int:
    """0 for Sunday through 6 for Saturday."""
    return (value.weekday() + 1) % 7


def week_sequence(julian_days: int) -> int:
    return (julian_days - JULIAN_DATE_DIM_FIRST_DATE + 7) // 7


@dataclass(frozen=True)
class DateDimRow(TableRow):
    d_date_sk: int
    d_date_id: str
    d_month_seq: int
    d_week_seq: int
    d_quarter_seq: int
    d_year: int
    d_dow: int
    d_moy: int
    d_dom: int
    d_qoy: int
    d_fy_year: int
    d_fy_quarter_seq: int
    d_fy_week_seq: int
    d_day_name: str
    d_quarter_name: str
    d_holiday: bool
    d_weekend: bool
    d_following_holiday: bool
    d_first_dom: int
    d_last_dom: int
    d_same_day_ly: int
    d_same_day_lq: int
    d_current_day: bool
    d_current_week: bool
    d_current_month: bool
    d_current_quarter: bool
    d_current_year: bool

    def values(self) -> List[Optional[str]]:
        return [
            self.get_key_or_null(self.d_date_sk, 0),
            self.get_string_or_null(self.d_date_id, 1),
            self.get_date_string_or_null(self.d_date_sk, 2),
            self.get_string_or_null(self.d_month_seq, 3),
            self.get_string_or_null(self.d_week_seq, 4),
            self.get_string_or_null(self.d_quarter_seq, 5),
            self.get_string_or_null(self.d_year, 6),
            self.get_string_or_null(self.d_dow, 7),
            self.get_string_or_null(self.d_moy, 8),
            self.get_string_or_null(self.d_dom, 9),
            self.get_string_or_null(self.d_qoy, 10),
            self.get_string_or_null(self.d_fy_year, 11),
            self.get_string_or_null(self.d_fy_quarter_seq, 12),
            self.get_string_or_null(self.d_fy_week_seq, 13),
            self.get_string_or_null(self.d_day_name, 14),
            self.get_string_or_null(self.d_quarter_name, 15),
            self.get_flag_or_null(self.d_holiday, 16),
            self.get_flag_or_null(self.d_weekend, 17),
            self.get_flag_or_null(self.d_following_holiday, 18),
            self.get_key_or_null(self.d_first_dom, 19),
            self.get_key_or_null(self.d_last_dom, 20),
            self.get_key_or_null(self.d_same_day_ly, 21),
            self.get_key_or_null(self.d_same_day_lq, 22),
            self.get_flag_or_null(self.d_current_day, 23),
            self.get_flag_or_null(self.d_current_week, 24),
            self.get_flag_or_null(self.d_current_month, 25),
            self.get_flag_or_null(self.d_current_quarter, 26),
            self.get_flag_or_null(self.d_current_year, 27),
        ]


class DateDimRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.DATE_DIM)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        null_bitmap = create_null_bitmap(
            Table.DATE_DIM, self.get_random_number_stream(DateDimGeneratorColumn.D_NULLS)
        )

        julian_days = JULIAN_DATE_DIM_FIRST_DATE + row_number - 1
        value = from_julian_days(julian_days)
        quarter = (value.month - 1) // 3 + 1
        month_sequence = (value.year - 1900) * 12 + value.month - 1
        quarter_sequence = (value.year - 1900) * 4 + quarter
        dow = day_of_week(value)
        current_julian = to_julian_days(CURRENT_DATE)

        row = DateDimRow(
            null_bitmap=null_bitmap,
            d_date_sk=julian_days,
            d_date_id=make_business_key(julian_days),
            d_month_seq=month_sequence,
            d_week_seq=week_sequence(julian_days),
            d_quarter_seq=quarter_sequence,
            d_year=value.year,
            d_dow=dow,
            d_moy=value.month,
            d_dom=value.day,
            d_qoy=quarter,
            d_fy_year=value.year,
            d_fy_quarter_seq=quarter_sequence,
            d_fy_week_seq=week_sequence(julian_days),
            d_day_name=WEEKDAY_NAMES[dow],
            d_quarter_name=f"{value.year}Q{quarter}",
            d_holiday=is_holiday(value),
            d_weekend=dow in (0, 6),
            d_following_holiday=is_holiday(value - timedelta(days=1)),
            d_first_dom=to_julian_days(value.replace(day=1)),
            d_last_dom=to_julian_days(value.replace(day=days_in_month(value.year, value.month))),
            d_same_day_ly=to_julian_days(shift_months(value, -12)),
            d_same_day_lq=to_julian_days(shift_months(value, -3)),
            d_current_day=value == CURRENT_DATE,
            d_current_week=week_sequence(julian_days) == week_sequence(current_julian),
            d_current_month=(value.year, value.month) == (CURRENT_DATE.year, CURRENT_DATE.month),
            d_current_quarter=(value.year, quarter) == (CURRENT_DATE.year, (CURRENT_DATE.month - 1) // 3 + 1),
            d_current_year=value.year == CURRENT_DATE.year,
        )
        return RowGeneratorResult([row])
