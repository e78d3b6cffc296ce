"""Ship mode dimension."""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import ALPHA_NUMERIC, generate_random_charset, make_business_key
from tpcdsgen.schema.generator_columns import ShipModeGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow

CONTRACT_MIN_LENGTH = 1
CONTRACT_MAX_LENGTH = 20


@dataclass(frozen=True)
class ShipModeRow(TableRow):
    sm_ship_mode_sk: int
    sm_ship_mode_id: str
    sm_type: str
    sm_code: str
    sm_carrier: str
    sm_contract: str

    def values(self) -> List[Optional[str]]:
        return [
            self.get_key_or_null(self.sm_ship_mode_sk, 0),
            self.get_string_or_null(self.sm_ship_mode_id, 1),
            self.get_string_or_null(self.sm_type, 2),
            self.get_string_or_null(self.sm_code, 3),
            self.get_string_or_null(self.sm_carrier, 4),
            self.get_string_or_null(self.sm_contract, 5),
        ]


class ShipModeRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.SHIP_MODE)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        null_bitmap = create_null_bitmap(
            Table.SHIP_MODE, self.get_random_number_stream(ShipModeGeneratorColumn.SM_NULLS)
        )

        # Decompose the row number in the mixed radix of (type, code) so every
        # combination appears once before any repeats
        types = get_distribution("ship_mode_type")
        codes = get_distribution("ship_mode_code")
        index = row_number - 1
        sm_type = types.get_value_at_index(index % types.size)
        index //= types.size
        sm_code = codes.get_value_at_index(index % codes.size)

        row = ShipModeRow(
            null_bitmap=null_bitmap,
            sm_ship_mode_sk=row_number,
            sm_ship_mode_id=make_business_key(row_number),
            sm_type=sm_type,
            sm_code=sm_code,
            sm_carrier=get_distribution("ship_mode_carrier").get_value_for_index_mod_size(row_number - 1),
            sm_contract=generate_random_charset(
                ALPHA_NUMERIC,
                CONTRACT_MIN_LENGTH,
                CONTRACT_MAX_LENGTH,
                self.get_random_number_stream(ShipModeGeneratorColumn.SM_CONTRACT),
            ),
        )
        return RowGeneratorResult([row])
