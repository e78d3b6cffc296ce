"""Time of day dimension: one row per second."""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import make_business_key
from tpcdsgen.schema.generator_columns import TimeDimGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow


@dataclass(frozen=True)
class TimeDimRow(TableRow):
    t_time_sk: int
    t_time_id: str
    t_time: int
    t_hour: int
    t_minute: int
    t_second: int
    t_am_pm: str
    t_shift: str
    t_sub_shift: str
    t_meal_time: str

    def values(self) -> List[Optional[str]]:
        return [
            self.get_string_or_null(self.t_time_sk, 0),
            self.get_string_or_null(self.t_time_id, 1),
            self.get_string_or_null(self.t_time, 2),
            self.get_string_or_null(self.t_hour, 3),
            self.get_string_or_null(self.t_minute, 4),
            self.get_string_or_null(self.t_second, 5),
            self.get_string_or_null(self.t_am_pm, 6),
            self.get_string_or_null(self.t_shift, 7),
            self.get_string_or_null(self.t_sub_shift, 8),
            # Hours outside meal times have no meal name
            self.get_string_or_null(self.t_meal_time or None, 9),
        ]


class TimeDimRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.TIME_DIM)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        null_bitmap = create_null_bitmap(
            Table.TIME_DIM, self.get_random_number_stream(TimeDimGeneratorColumn.T_NULLS)
        )

        time_key = row_number - 1
        hour, remainder = divmod(time_key, 3600)
        minute, second = divmod(remainder, 60)
        hours = get_distribution("hours")

        row = TimeDimRow(
            null_bitmap=null_bitmap,
            t_time_sk=time_key,
            t_time_id=make_business_key(row_number),
            t_time=time_key,
            t_hour=hour,
            t_minute=minute,
            t_second=second,
            t_am_pm=hours.get_value_at_index(hour, "am_pm"),
            t_shift=hours.get_value_at_index(hour, "shift"),
            t_sub_shift=hours.get_value_at_index(hour, "sub_shift"),
            t_meal_time=hours.get_value_at_index(hour, "meal"),
        )
        return RowGeneratorResult([row])
