"""Return reason dimension."""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import make_business_key
from tpcdsgen.schema.generator_columns import ReasonGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow


@dataclass(frozen=True)
class ReasonRow(TableRow):
    r_reason_sk: int
    r_reason_id: str
    r_reason_description: str

    def values(self) -> List[Optional[str]]:
        return [
            self.get_key_or_null(self.r_reason_sk, 0),
            self.get_string_or_null(self.r_reason_id, 1),
            self.get_string_or_null(self.r_reason_description, 2),
        ]


class ReasonRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.REASON)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        null_bitmap = create_null_bitmap(Table.REASON, self.get_random_number_stream(ReasonGeneratorColumn.R_NULLS))
        row = ReasonRow(
            null_bitmap=null_bitmap,
            r_reason_sk=row_number,
            r_reason_id=make_business_key(row_number),
            r_reason_description=get_distribution("return_reasons").get_value_for_index_mod_size(row_number - 1),
        )
        return RowGeneratorResult([row])
