"""Income band dimension."""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.schema.generator_columns import IncomeBandGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow


@dataclass(frozen=True)
class IncomeBandRow(TableRow):
    ib_income_band_id: int
    ib_lower_bound: int
    ib_upper_bound: int

    def values(self) -> List[Optional[str]]:
        return [
            self.get_key_or_null(self.ib_income_band_id, 0),
            self.get_string_or_null(self.ib_lower_bound, 1),
            self.get_string_or_null(self.ib_upper_bound, 2),
        ]


class IncomeBandRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.INCOME_BAND)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        null_bitmap = create_null_bitmap(
            Table.INCOME_BAND, self.get_random_number_stream(IncomeBandGeneratorColumn.IB_NULLS)
        )
        bands = get_distribution("income_band")
        row = IncomeBandRow(
            null_bitmap=null_bitmap,
            ib_income_band_id=row_number,
            ib_lower_bound=int(bands.get_value_at_index(row_number - 1, "lower_bound")),
            ib_upper_bound=int(bands.get_value_at_index(row_number - 1, "upper_bound")),
        )
        return RowGeneratorResult([row])
