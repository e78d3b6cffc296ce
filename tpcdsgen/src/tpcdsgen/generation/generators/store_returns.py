"""Store returns: child rows of store_sales line items."""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.errors import ConfigurationError
from tpcdsgen.generation.constants import STORE_RETURN_MAX_DAYS, STORE_RETURN_SAME_CUSTOMER_PERCENT
from tpcdsgen.generation.join_keys import generate_join_key
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import generate_uniform_random_int
from tpcdsgen.generation.types.pricing import ReturnPricing, generate_return_pricing
from tpcdsgen.schema.generator_columns import StoreReturnsGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow


@dataclass(frozen=True)
class StoreReturnsRow(TableRow):
    sr_returned_date_sk: int
    sr_returned_time_sk: int
    sr_item_sk: int
    sr_customer_sk: int
    sr_cdemo_sk: int
    sr_hdemo_sk: int
    sr_addr_sk: int
    sr_store_sk: int
    sr_reason_sk: int
    sr_ticket_number: int
    sr_pricing: ReturnPricing

    def values(self) -> List[Optional[str]]:
        pricing = self.sr_pricing
        return [
            self.get_key_or_null(self.sr_returned_date_sk, 0),
            self.get_key_or_null(self.sr_returned_time_sk, 1),
            self.get_key_or_null(self.sr_item_sk, 2),
            self.get_key_or_null(self.sr_customer_sk, 3),
            self.get_key_or_null(self.sr_cdemo_sk, 4),
            self.get_key_or_null(self.sr_hdemo_sk, 5),
            self.get_key_or_null(self.sr_addr_sk, 6),
            self.get_key_or_null(self.sr_store_sk, 7),
            self.get_key_or_null(self.sr_reason_sk, 8),
            self.get_key_or_null(self.sr_ticket_number, 9),
            self.get_string_or_null(pricing.quantity, 10),
            self.get_decimal_or_null(pricing.return_amt, 11),
            self.get_decimal_or_null(pricing.return_tax, 12),
            self.get_decimal_or_null(pricing.return_amt_inc_tax, 13),
            self.get_decimal_or_null(pricing.fee, 14),
            self.get_decimal_or_null(pricing.return_ship_cost, 15),
            self.get_decimal_or_null(pricing.refunded_cash, 16),
            self.get_decimal_or_null(pricing.reversed_charge, 17),
            self.get_decimal_or_null(pricing.store_credit, 18),
            self.get_decimal_or_null(pricing.net_loss, 19),
        ]


class StoreReturnsRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.STORE_RETURNS)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        sale = getattr(parent_row_generator, "current_sale", None)
        if sale is None:
            raise ConfigurationError(
                "Store returns can only be generated from a store sales line",
                table=Table.STORE_RETURNS.table_name,
                row_number=row_number,
            )

        stream = self.get_random_number_stream
        scaling = session.scaling
        null_bitmap = create_null_bitmap(Table.STORE_RETURNS, stream(StoreReturnsGeneratorColumn.SR_NULLS))

        returned_date_sk = sale.ss_sold_date_sk + generate_uniform_random_int(
            1, STORE_RETURN_MAX_DAYS, stream(StoreReturnsGeneratorColumn.SR_RETURNED_DATE_SK)
        )
        returned_time_sk = generate_join_key(
            StoreReturnsGeneratorColumn.SR_RETURNED_TIME_SK,
            stream(StoreReturnsGeneratorColumn.SR_RETURNED_TIME_SK),
            Table.TIME_DIM,
            1,
            scaling,
        )

        # Most returns are brought back by the buyer
        customer_stream = stream(StoreReturnsGeneratorColumn.SR_CUSTOMER_SK)
        same_customer = generate_uniform_random_int(1, 100, customer_stream) <= STORE_RETURN_SAME_CUSTOMER_PERCENT
        other_customer = generate_join_key(
            StoreReturnsGeneratorColumn.SR_CUSTOMER_SK, customer_stream, Table.CUSTOMER, 1, scaling
        )
        customer_sk = sale.ss_sold_customer_sk if same_customer else other_customer

        def key(column: StoreReturnsGeneratorColumn, to_table: Table) -> int:
            return generate_join_key(column, stream(column), to_table, 1, scaling)

        row = StoreReturnsRow(
            null_bitmap=null_bitmap,
            sr_returned_date_sk=returned_date_sk,
            sr_returned_time_sk=returned_time_sk,
            sr_item_sk=sale.ss_sold_item_sk,
            sr_customer_sk=customer_sk,
            sr_cdemo_sk=key(StoreReturnsGeneratorColumn.SR_CDEMO_SK, Table.CUSTOMER_DEMOGRAPHICS),
            sr_hdemo_sk=key(StoreReturnsGeneratorColumn.SR_HDEMO_SK, Table.HOUSEHOLD_DEMOGRAPHICS),
            sr_addr_sk=key(StoreReturnsGeneratorColumn.SR_ADDR_SK, Table.CUSTOMER_ADDRESS),
            sr_store_sk=sale.ss_sold_store_sk,
            sr_reason_sk=key(StoreReturnsGeneratorColumn.SR_REASON_SK, Table.REASON),
            sr_ticket_number=sale.ss_ticket_number,
            sr_pricing=generate_return_pricing(sale.ss_pricing, stream(StoreReturnsGeneratorColumn.SR_PRICING)),
        )
        return RowGeneratorResult([row])
