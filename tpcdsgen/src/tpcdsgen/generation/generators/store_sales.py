"""
Store sales fact table.

One row number is one ticket. A ticket spans 8 to 16 line items, each
written as its own output row; the driver keeps calling the generator with
the same row number until ``should_end_row`` is set on the last line. Each
line may be returned, in which case the store_returns row is emitted right
after it.
"""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.generation.constants import (
    STORE_RETURN_PERCENT,
    STORE_SALES_MAX_LINES,
    STORE_SALES_MIN_LINES,
)
from tpcdsgen.generation.join_keys import generate_join_key
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import generate_uniform_random_int
from tpcdsgen.generation.types.pricing import Pricing, generate_pricing
from tpcdsgen.schema.generator_columns import StoreSalesGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow


@dataclass(frozen=True)
class StoreSalesRow(TableRow):
    ss_sold_date_sk: int
    ss_sold_time_sk: int
    ss_sold_item_sk: int
    ss_sold_customer_sk: int
    ss_sold_cdemo_sk: int
    ss_sold_hdemo_sk: int
    ss_sold_addr_sk: int
    ss_sold_store_sk: int
    ss_sold_promo_sk: int
    ss_ticket_number: int
    ss_pricing: Pricing

    def values(self) -> List[Optional[str]]:
        pricing = self.ss_pricing
        return [
            self.get_key_or_null(self.ss_sold_date_sk, 0),
            self.get_key_or_null(self.ss_sold_time_sk, 1),
            self.get_key_or_null(self.ss_sold_item_sk, 2),
            self.get_key_or_null(self.ss_sold_customer_sk, 3),
            self.get_key_or_null(self.ss_sold_cdemo_sk, 4),
            self.get_key_or_null(self.ss_sold_hdemo_sk, 5),
            self.get_key_or_null(self.ss_sold_addr_sk, 6),
            self.get_key_or_null(self.ss_sold_store_sk, 7),
            self.get_key_or_null(self.ss_sold_promo_sk, 8),
            self.get_key_or_null(self.ss_ticket_number, 9),
            self.get_string_or_null(pricing.quantity, 10),
            self.get_decimal_or_null(pricing.wholesale_cost, 11),
            self.get_decimal_or_null(pricing.list_price, 12),
            self.get_decimal_or_null(pricing.sales_price, 13),
            self.get_decimal_or_null(pricing.ext_discount_amt, 14),
            self.get_decimal_or_null(pricing.ext_sales_price, 15),
            self.get_decimal_or_null(pricing.ext_wholesale_cost, 16),
            self.get_decimal_or_null(pricing.ext_list_price, 17),
            self.get_decimal_or_null(pricing.ext_tax, 18),
            self.get_decimal_or_null(pricing.coupon_amt, 19),
            self.get_decimal_or_null(pricing.net_paid, 20),
            self.get_decimal_or_null(pricing.net_paid_inc_tax, 21),
            self.get_decimal_or_null(pricing.net_profit, 22),
        ]


@dataclass(frozen=True)
class _Ticket:
    """Fields shared by every line item of a ticket."""

    ticket_number: int
    sold_date_sk: int
    sold_time_sk: int
    customer_sk: int
    cdemo_sk: int
    hdemo_sk: int
    addr_sk: int
    store_sk: int
    line_count: int


class StoreSalesRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.STORE_SALES)
        self._ticket: Optional[_Ticket] = None
        self._lines_remaining = 0
        self.current_sale: Optional[StoreSalesRow] = None

    def _start_ticket(self, row_number: int, scaling) -> _Ticket:
        stream = self.get_random_number_stream
        sold_date_sk = generate_join_key(
            StoreSalesGeneratorColumn.SS_SOLD_DATE_SK,
            stream(StoreSalesGeneratorColumn.SS_SOLD_DATE_SK),
            Table.DATE_DIM,
            row_number,
            scaling,
        )

        def key(column: StoreSalesGeneratorColumn, to_table: Table) -> int:
            return generate_join_key(column, stream(column), to_table, 1, scaling, julian_date=sold_date_sk)

        return _Ticket(
            ticket_number=row_number,
            sold_date_sk=sold_date_sk,
            sold_time_sk=key(StoreSalesGeneratorColumn.SS_SOLD_TIME_SK, Table.TIME_DIM),
            customer_sk=key(StoreSalesGeneratorColumn.SS_SOLD_CUSTOMER_SK, Table.CUSTOMER),
            cdemo_sk=key(StoreSalesGeneratorColumn.SS_SOLD_CDEMO_SK, Table.CUSTOMER_DEMOGRAPHICS),
            hdemo_sk=key(StoreSalesGeneratorColumn.SS_SOLD_HDEMO_SK, Table.HOUSEHOLD_DEMOGRAPHICS),
            addr_sk=key(StoreSalesGeneratorColumn.SS_SOLD_ADDR_SK, Table.CUSTOMER_ADDRESS),
            store_sk=key(StoreSalesGeneratorColumn.SS_SOLD_STORE_SK, Table.STORE),
            line_count=generate_uniform_random_int(
                STORE_SALES_MIN_LINES,
                STORE_SALES_MAX_LINES,
                stream(StoreSalesGeneratorColumn.SS_TICKET_LINE_COUNT),
            ),
        )

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        stream = self.get_random_number_stream
        scaling = session.scaling

        if self._lines_remaining == 0:
            self._ticket = self._start_ticket(row_number, scaling)
            self._lines_remaining = self._ticket.line_count
        ticket = self._ticket

        null_bitmap = create_null_bitmap(Table.STORE_SALES, stream(StoreSalesGeneratorColumn.SS_NULLS))
        item_sk = generate_join_key(
            StoreSalesGeneratorColumn.SS_SOLD_ITEM_SK,
            stream(StoreSalesGeneratorColumn.SS_SOLD_ITEM_SK),
            Table.ITEM,
            1,
            scaling,
            julian_date=ticket.sold_date_sk,
        )
        promo_sk = generate_join_key(
            StoreSalesGeneratorColumn.SS_SOLD_PROMO_SK,
            stream(StoreSalesGeneratorColumn.SS_SOLD_PROMO_SK),
            Table.PROMOTION,
            1,
            scaling,
        )
        pricing = generate_pricing(stream(StoreSalesGeneratorColumn.SS_PRICING))
        is_returned = (
            generate_uniform_random_int(0, 99, stream(StoreSalesGeneratorColumn.SS_IS_RETURNED))
            < STORE_RETURN_PERCENT
        )

        row = StoreSalesRow(
            null_bitmap=null_bitmap,
            ss_sold_date_sk=ticket.sold_date_sk,
            ss_sold_time_sk=ticket.sold_time_sk,
            ss_sold_item_sk=item_sk,
            ss_sold_customer_sk=ticket.customer_sk,
            ss_sold_cdemo_sk=ticket.cdemo_sk,
            ss_sold_hdemo_sk=ticket.hdemo_sk,
            ss_sold_addr_sk=ticket.addr_sk,
            ss_sold_store_sk=ticket.store_sk,
            ss_sold_promo_sk=promo_sk,
            ss_ticket_number=ticket.ticket_number,
            ss_pricing=pricing,
        )
        self.current_sale = row
        rows: List[TableRow] = [row]

        if is_returned and child_row_generator is not None:
            child_result = child_row_generator.generate_row_and_child_rows(row_number, session, self, None)
            rows.extend(child_result.rows)

        self._lines_remaining -= 1
        return RowGeneratorResult(rows, should_end_row=self._lines_remaining == 0)
