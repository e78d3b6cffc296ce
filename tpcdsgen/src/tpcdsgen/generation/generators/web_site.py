"""
Web site dimension.

Web sites keep history: every business entity has one to three versions
(see :mod:`tpcdsgen.generation.scd`). A new entity draws its identity fields
(name, open and close dates); later versions copy them and decide field by
field, through one random change mask per row, whether each mutable field
takes its newly drawn value or keeps the previous version's value.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from tpcdsgen.errors import InvariantViolationError
from tpcdsgen.generation.constants import NO_VALUE_KEY
from tpcdsgen.generation.distributions.english import generate_random_text, generate_word
from tpcdsgen.generation.distributions.names import pick_random_manager_name
from tpcdsgen.generation.join_keys import generate_join_key
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import generate_uniform_random_decimal, generate_uniform_random_int
from tpcdsgen.generation.scd import compute_scd_key, get_value_for_slowly_changing_dimension
from tpcdsgen.generation.types.address import Address, make_address_for_column
from tpcdsgen.schema.generator_columns import WebSiteGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow

WEB_CLASS = "Unknown"
TAX_PERCENTAGE_MIN = Decimal("0.00")
TAX_PERCENTAGE_MAX = Decimal("0.12")


@dataclass(frozen=True)
class WebSiteRow(TableRow):
    web_site_sk: int
    web_site_id: str
    web_rec_start_date_id: int
    web_rec_end_date_id: int
    web_name: str
    web_open_date: int
    web_close_date: int
    web_class: str
    web_manager: str
    web_market_id: int
    web_market_class: str
    web_market_desc: str
    web_market_manager: str
    web_company_id: int
    web_company_name: str
    web_address: Address
    web_tax_percentage: Decimal

    def values(self) -> List[Optional[str]]:
        address = self.web_address
        return [
            self.get_key_or_null(self.web_site_sk, 0),
            self.get_string_or_null(self.web_site_id, 1),
            self.get_date_string_or_null(self.web_rec_start_date_id, 2),
            self.get_date_string_or_null(self.web_rec_end_date_id, 3),
            self.get_string_or_null(self.web_name, 4),
            self.get_key_or_null(self.web_open_date, 5),
            self.get_key_or_null(self.web_close_date, 6),
            self.get_string_or_null(self.web_class, 7),
            self.get_string_or_null(self.web_manager, 8),
            self.get_string_or_null(self.web_market_id, 9),
            self.get_string_or_null(self.web_market_class, 10),
            self.get_string_or_null(self.web_market_desc, 11),
            self.get_string_or_null(self.web_market_manager, 12),
            self.get_string_or_null(self.web_company_id, 13),
            self.get_string_or_null(self.web_company_name, 14),
            self.get_string_or_null(address.street_number, 15),
            self.get_string_or_null(address.street_name, 16),
            self.get_string_or_null(address.street_type, 17),
            self.get_string_or_null(address.suite_number, 18),
            self.get_string_or_null(address.city, 19),
            self.get_string_or_null(address.county, 20),
            self.get_string_or_null(address.state, 21),
            self.get_string_or_null(address.zip_code, 22),
            self.get_string_or_null(address.country, 23),
            self.get_string_or_null(address.gmt_offset_text, 24),
            self.get_decimal_or_null(self.web_tax_percentage, 25),
        ]


class WebSiteRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.WEB_SITE)
        self.previous_row: Optional[WebSiteRow] = None

    def _stream(self, column: WebSiteGeneratorColumn):
        return self.get_random_number_stream(column)

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        null_bitmap = create_null_bitmap(Table.WEB_SITE, self._stream(WebSiteGeneratorColumn.WEB_NULLS))

        scd_key = compute_scd_key(Table.WEB_SITE, row_number)
        is_new_key = scd_key.is_new_business_key
        scaling = session.scaling
        previous = self.previous_row

        if is_new_key:
            open_date = generate_join_key(
                WebSiteGeneratorColumn.WEB_OPEN_DATE,
                self._stream(WebSiteGeneratorColumn.WEB_OPEN_DATE),
                Table.DATE_DIM,
                row_number,
                scaling,
            )
            close_date = generate_join_key(
                WebSiteGeneratorColumn.WEB_CLOSE_DATE,
                self._stream(WebSiteGeneratorColumn.WEB_CLOSE_DATE),
                Table.DATE_DIM,
                row_number,
                scaling,
            )
            if close_date > scd_key.end_date:
                close_date = NO_VALUE_KEY
            name = f"site_{row_number // 6}"
        else:
            if previous is None:
                raise InvariantViolationError(
                    "Previous row has not been generated", table=Table.WEB_SITE.table_name, row_number=row_number
                )
            open_date = previous.web_open_date
            close_date = previous.web_close_date
            name = previous.web_name

        # One bit per mutable field, consumed in field order
        field_change_flags = self._stream(WebSiteGeneratorColumn.WEB_SCD).next_random()

        def changed(old_value, new_value):
            if previous is None:
                return new_value
            return get_value_for_slowly_changing_dimension(field_change_flags, is_new_key, old_value, new_value)

        manager = pick_random_manager_name(self._stream(WebSiteGeneratorColumn.WEB_MANAGER), session.is_sexist())
        manager = changed(previous and previous.web_manager, manager)
        field_change_flags >>= 1

        market_id = generate_uniform_random_int(1, 6, self._stream(WebSiteGeneratorColumn.WEB_MARKET_ID))
        market_id = changed(previous and previous.web_market_id, market_id)
        field_change_flags >>= 1

        market_class = generate_random_text(20, 50, self._stream(WebSiteGeneratorColumn.WEB_MARKET_CLASS))
        market_class = changed(previous and previous.web_market_class, market_class)
        field_change_flags >>= 1

        market_desc = generate_random_text(20, 100, self._stream(WebSiteGeneratorColumn.WEB_MARKET_DESC))
        market_desc = changed(previous and previous.web_market_desc, market_desc)
        field_change_flags >>= 1

        market_manager = pick_random_manager_name(
            self._stream(WebSiteGeneratorColumn.WEB_MARKET_MANAGER), session.is_sexist()
        )
        market_manager = changed(previous and previous.web_market_manager, market_manager)
        field_change_flags >>= 1

        company_id = generate_uniform_random_int(1, 6, self._stream(WebSiteGeneratorColumn.WEB_COMPANY_ID))
        company_id = changed(previous and previous.web_company_id, company_id)
        field_change_flags >>= 1

        company_name = generate_word(company_id, 100)
        company_name = changed(previous and previous.web_company_name, company_name)
        field_change_flags >>= 1

        address = make_address_for_column(Table.WEB_SITE, self._stream(WebSiteGeneratorColumn.WEB_ADDRESS), scaling)
        previous_address = previous.web_address if previous is not None else None

        # City and county always take the new value but still own a mask bit
        field_change_flags >>= 1  # city
        field_change_flags >>= 1  # county

        gmt_offset = changed(previous_address and previous_address.gmt_offset, address.gmt_offset)
        field_change_flags >>= 1

        # Same for state, street type and both street name parts
        field_change_flags >>= 1  # state
        field_change_flags >>= 1  # street type
        field_change_flags >>= 1  # street name 1
        field_change_flags >>= 1  # street name 2

        street_number = changed(previous_address and previous_address.street_number, address.street_number)
        field_change_flags >>= 1

        zip_code = changed(previous_address and previous_address.zip, address.zip)
        field_change_flags >>= 1

        address = address.with_fields(street_number=street_number, zip=zip_code, gmt_offset=gmt_offset)

        tax_percentage = generate_uniform_random_decimal(
            TAX_PERCENTAGE_MIN, TAX_PERCENTAGE_MAX, self._stream(WebSiteGeneratorColumn.WEB_TAX_PERCENTAGE)
        )
        tax_percentage = changed(previous and previous.web_tax_percentage, tax_percentage)

        row = WebSiteRow(
            null_bitmap=null_bitmap,
            web_site_sk=row_number,
            web_site_id=scd_key.business_key,
            web_rec_start_date_id=scd_key.start_date,
            web_rec_end_date_id=scd_key.end_date,
            web_name=name,
            web_open_date=open_date,
            web_close_date=close_date,
            web_class=WEB_CLASS,
            web_manager=manager,
            web_market_id=market_id,
            web_market_class=market_class,
            web_market_desc=market_desc,
            web_market_manager=market_manager,
            web_company_id=company_id,
            web_company_name=company_name,
            web_address=address,
            web_tax_percentage=tax_percentage,
        )
        self.previous_row = row
        return RowGeneratorResult([row])
