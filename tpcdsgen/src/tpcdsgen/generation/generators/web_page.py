"""Web page dimension; keeps history like web_site."""

from dataclasses import dataclass
from typing import List, Optional

from tpcdsgen.generation.constants import NO_VALUE_KEY, WEB_PAGE_AUTOGEN_PERCENT, WEB_PAGE_IDLE_TIME_MAX
from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.join_keys import generate_join_key
from tpcdsgen.generation.nulls import create_null_bitmap
from tpcdsgen.generation.random.values import generate_random_url, generate_uniform_random_int
from tpcdsgen.generation.scd import compute_scd_key, get_value_for_slowly_changing_dimension
from tpcdsgen.generation.types.dates import JULIAN_CURRENT_DATE
from tpcdsgen.schema.generator_columns import WebPageGeneratorColumn
from tpcdsgen.schema.table import Table
from .base import RowGenerator, RowGeneratorResult, TableRow

LINK_COUNT_MIN = 2
LINK_COUNT_MAX = 25
IMAGE_COUNT_MIN = 1
IMAGE_COUNT_MAX = 7
MAX_AD_COUNT_MAX = 4


@dataclass(frozen=True)
class WebPageRow(TableRow):
    wp_page_sk: int
    wp_page_id: str
    wp_rec_start_date_id: int
    wp_rec_end_date_id: int
    wp_creation_date_sk: int
    wp_access_date_sk: int
    wp_autogen_flag: bool
    wp_customer_sk: int
    wp_url: str
    wp_type: str
    wp_char_count: int
    wp_link_count: int
    wp_image_count: int
    wp_max_ad_count: int

    def values(self) -> List[Optional[str]]:
        return [
            self.get_key_or_null(self.wp_page_sk, 0),
            self.get_string_or_null(self.wp_page_id, 1),
            self.get_date_string_or_null(self.wp_rec_start_date_id, 2),
            self.get_date_string_or_null(self.wp_rec_end_date_id, 3),
            self.get_key_or_null(self.wp_creation_date_sk, 4),
            self.get_key_or_null(self.wp_access_date_sk, 5),
            self.get_flag_or_null(self.wp_autogen_flag, 6),
            self.get_key_or_null(self.wp_customer_sk, 7),
            self.get_string_or_null(self.wp_url, 8),
            self.get_string_or_null(self.wp_type, 9),
            self.get_string_or_null(self.wp_char_count, 10),
            self.get_string_or_null(self.wp_link_count, 11),
            self.get_string_or_null(self.wp_image_count, 12),
            self.get_string_or_null(self.wp_max_ad_count, 13),
        ]


class WebPageRowGenerator(RowGenerator):
    def __init__(self):
        super().__init__(Table.WEB_PAGE)
        self.previous_row: Optional[WebPageRow] = None

    def generate_row_and_child_rows(self, row_number, session, parent_row_generator, child_row_generator):
        stream = self.get_random_number_stream
        null_bitmap = create_null_bitmap(Table.WEB_PAGE, stream(WebPageGeneratorColumn.WP_NULLS))

        scd_key = compute_scd_key(Table.WEB_PAGE, row_number)
        is_new_key = scd_key.is_new_business_key
        previous = self.previous_row
        scaling = session.scaling

        field_change_flags = stream(WebPageGeneratorColumn.WP_SCD).next_random()

        def changed(field: str, new_value):
            nonlocal field_change_flags
            if previous is not None:
                new_value = get_value_for_slowly_changing_dimension(
                    field_change_flags, is_new_key, getattr(previous, field), new_value
                )
            field_change_flags >>= 1
            return new_value

        creation_date = changed(
            "wp_creation_date_sk",
            generate_join_key(
                WebPageGeneratorColumn.WP_CREATION_DATE_SK,
                stream(WebPageGeneratorColumn.WP_CREATION_DATE_SK),
                Table.DATE_DIM,
                row_number,
                scaling,
            ),
        )

        idle_days = generate_uniform_random_int(
            0, WEB_PAGE_IDLE_TIME_MAX, stream(WebPageGeneratorColumn.WP_ACCESS_DATE_SK)
        )
        access_date = changed("wp_access_date_sk", JULIAN_CURRENT_DATE - idle_days)

        autogen_roll = generate_uniform_random_int(0, 99, stream(WebPageGeneratorColumn.WP_AUTOGEN_FLAG))
        autogen_flag = changed("wp_autogen_flag", autogen_roll < WEB_PAGE_AUTOGEN_PERCENT)

        customer_sk = generate_join_key(
            WebPageGeneratorColumn.WP_CUSTOMER_SK,
            stream(WebPageGeneratorColumn.WP_CUSTOMER_SK),
            Table.CUSTOMER,
            1,
            scaling,
        )
        # Only generated pages belong to a customer
        if not autogen_flag:
            customer_sk = NO_VALUE_KEY
        customer_sk = changed("wp_customer_sk", customer_sk)

        url = changed("wp_url", generate_random_url(stream(WebPageGeneratorColumn.WP_URL)))
        page_type = changed(
            "wp_type", get_distribution("web_page_use").pick_random_value("frequency", stream(WebPageGeneratorColumn.WP_TYPE))
        )
        link_count = changed(
            "wp_link_count",
            generate_uniform_random_int(LINK_COUNT_MIN, LINK_COUNT_MAX, stream(WebPageGeneratorColumn.WP_LINK_COUNT)),
        )
        image_count = changed(
            "wp_image_count",
            generate_uniform_random_int(IMAGE_COUNT_MIN, IMAGE_COUNT_MAX, stream(WebPageGeneratorColumn.WP_IMAGE_COUNT)),
        )
        max_ad_count = changed(
            "wp_max_ad_count",
            generate_uniform_random_int(0, MAX_AD_COUNT_MAX, stream(WebPageGeneratorColumn.WP_MAX_AD_COUNT)),
        )
        char_count = changed(
            "wp_char_count",
            generate_uniform_random_int(
                link_count * 125 + image_count * 50,
                link_count * 300 + image_count * 150,
                stream(WebPageGeneratorColumn.WP_CHAR_COUNT),
            ),
        )

        row = WebPageRow(
            null_bitmap=null_bitmap,
            wp_page_sk=row_number,
            wp_page_id=scd_key.business_key,
            wp_rec_start_date_id=scd_key.start_date,
            wp_rec_end_date_id=scd_key.end_date,
            wp_creation_date_sk=creation_date,
            wp_access_date_sk=access_date,
            wp_autogen_flag=autogen_flag,
            wp_customer_sk=customer_sk,
            wp_url=url,
            wp_type=page_type,
            wp_char_count=char_count,
            wp_link_count=link_count,
            wp_image_count=image_count,
            wp_max_ad_count=max_ad_count,
        )
        self.previous_row = row
        return RowGeneratorResult([row])
