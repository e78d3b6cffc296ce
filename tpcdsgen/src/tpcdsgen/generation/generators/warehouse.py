"""Warehouse dimension."""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.generation.distributions.english import generate_random_text
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import generate_uniform_random_int, make_business_key
from tpcdsgen.generation.types.address import Address, make_address_for_column
from tpcdsgen.schema.generator_columns import WarehouseGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow

NAME_MIN_LENGTH = 10
NAME_MAX_LENGTH = 20
SQ_FT_MIN = 50000
SQ_FT_MAX = 1000000


@dataclass(frozen=True)
class WarehouseRow(TableRow):
    w_warehouse_sk: int
    w_warehouse_id: str
    w_warehouse_name: str
    w_warehouse_sq_ft: int
    w_address: Address

    def values(self) -> List[Optional[str]]:
        address = self.w_address
        return [
            self.get_key_or_null(self.w_warehouse_sk, 0),
            self.get_string_or_null(self.w_warehouse_id, 1),
            self.get_string_or_null(self.w_warehouse_name, 2),
            self.get_string_or_null(self.w_warehouse_sq_ft, 3),
            self.get_string_or_null(address.street_number, 4),
            self.get_string_or_null(address.street_name, 5),
            self.get_string_or_null(address.street_type, 6),
            self.get_string_or_null(address.suite_number, 7),
            self.get_string_or_null(address.city, 8),
            self.get_string_or_null(address.county, 9),
            self.get_string_or_null(address.state, 10),
            self.get_string_or_null(address.zip_code, 11),
            self.get_string_or_null(address.country, 12),
            self.get_string_or_null(address.gmt_offset_text, 13),
        ]


class WarehouseRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.WAREHOUSE)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        null_bitmap = create_null_bitmap(
            Table.WAREHOUSE, self.get_random_number_stream(WarehouseGeneratorColumn.W_NULLS)
        )
        row = WarehouseRow(
            null_bitmap=null_bitmap,
            w_warehouse_sk=row_number,
            w_warehouse_id=make_business_key(row_number),
            w_warehouse_name=generate_random_text(
                NAME_MIN_LENGTH,
                NAME_MAX_LENGTH,
                self.get_random_number_stream(WarehouseGeneratorColumn.W_WAREHOUSE_NAME),
            ),
            w_warehouse_sq_ft=generate_uniform_random_int(
                SQ_FT_MIN, SQ_FT_MAX, self.get_random_number_stream(WarehouseGeneratorColumn.W_WAREHOUSE_SQ_FT)
            ),
            w_address=make_address_for_column(
                Table.WAREHOUSE,
                self.get_random_number_stream(WarehouseGeneratorColumn.W_WAREHOUSE_ADDRESS),
                session.scaling,
            ),
        )
        return RowGeneratorResult([row])
