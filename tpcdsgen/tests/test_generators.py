"""Row-level tests for the dimension generators."""

from typing import List

import pytest

from tpcdsgen.config.session import Session
from tpcdsgen.errors import ConfigurationError
from tpcdsgen.generation.constants import NO_VALUE_KEY
from tpcdsgen.generation.distributions import get_distribution
from tpcdsgen.generation.generators.registry import create_row_generator
from tpcdsgen.schema.table import Table

SESSION = Session()


def generate_rows(table: Table, first_row: int, last_row: int, session: Session = SESSION) -> List:
    generator = create_row_generator(table)
    generator.skip_rows_until_starting_row_number(first_row)
    rows = []
    for row_number in range(first_row, last_row + 1):
        result = generator.generate_row_and_child_rows(row_number, session, None, None)
        rows.append(result.rows[0])
        generator.consume_remaining_seeds_for_row()
    return rows


def test_date_dim_first_row():
    values = generate_rows(Table.DATE_DIM, 1, 1)[0].values()
    assert values[0] == "2415022"
    assert values[1] == "AAAAAAAAOKJNECAA"
    assert values[2] == "1900-01-02"
    assert values[6] == "1900"
    assert values[7] == "2"
    assert values[14] == "Tuesday"
    assert values[15] == "1900Q1"
    assert values[16] == "N"
    assert values[17] == "N"
    # The day after New Year's Day
    assert values[18] == "Y"
    assert values[19] == "2415021"
    assert values[20] == "2415051"


def test_date_dim_keys_are_consecutive():
    rows = generate_rows(Table.DATE_DIM, 100, 110)
    assert [row.d_date_sk for row in rows] == list(range(2415022 + 99, 2415022 + 110))


def test_date_dim_weekend():
    # 1900-01-06 was a Saturday
    row = generate_rows(Table.DATE_DIM, 5, 5)[0]
    assert row.d_day_name == "Saturday"
    assert row.d_weekend


def test_time_dim_rows():
    midnight, = generate_rows(Table.TIME_DIM, 1, 1)
    assert midnight.values()[:6] == ["0", "AAAAAAAABAAAAAAA", "0", "0", "0", "0"]
    assert midnight.t_am_pm == "AM"
    assert midnight.values()[9] is None

    last, = generate_rows(Table.TIME_DIM, 86400, 86400)
    assert (last.t_hour, last.t_minute, last.t_second) == (23, 59, 59)
    assert last.t_am_pm == "PM"


def test_income_band_rows():
    row_count = SESSION.scaling.get_row_count(Table.INCOME_BAND)
    rows = generate_rows(Table.INCOME_BAND, 1, row_count)
    assert row_count == 20
    assert rows[0].ib_lower_bound == 0
    assert rows[0].ib_upper_bound == 10000
    for previous, row in zip(rows, rows[1:]):
        assert row.ib_lower_bound == previous.ib_upper_bound + 1


def test_reason_descriptions():
    rows = generate_rows(Table.REASON, 1, 3)
    assert rows[0].values() == ["1", "AAAAAAAABAAAAAAA", "Package was damaged"]
    assert rows[1].r_reason_description == "Stopped working"


def test_ship_mode_combinations_are_unique():
    row_count = SESSION.scaling.get_row_count(Table.SHIP_MODE)
    rows = generate_rows(Table.SHIP_MODE, 1, row_count)
    pairs = {(row.sm_type, row.sm_code) for row in rows}
    expected = min(row_count, get_distribution("ship_mode_type").size * get_distribution("ship_mode_code").size)
    assert len(pairs) == expected
    for row in rows:
        assert 1 <= len(row.sm_contract) <= 20
        assert row.sm_contract.isalnum()


def test_ship_mode_is_deterministic():
    first = [row.values() for row in generate_rows(Table.SHIP_MODE, 1, 5)]
    second = [row.values() for row in generate_rows(Table.SHIP_MODE, 1, 5)]
    assert first == second


def test_warehouse_rows():
    row_count = SESSION.scaling.get_row_count(Table.WAREHOUSE)
    for row in generate_rows(Table.WAREHOUSE, 1, row_count):
        values = row.values()
        assert 50000 <= row.w_warehouse_sq_ft <= 1000000
        assert 10 <= len(row.w_warehouse_name) <= 20
        assert len(row.w_address.zip_code) == 5
        assert len(values) == 14


def test_warehouse_seek_matches_sequential():
    sequential = [row.values() for row in generate_rows(Table.WAREHOUSE, 1, 5)]
    seeked = [row.values() for row in generate_rows(Table.WAREHOUSE, 3, 5)]
    assert seeked == sequential[2:]


def test_web_page_customer_only_on_generated_pages():
    for row in generate_rows(Table.WEB_PAGE, 1, 60):
        if row.wp_page_sk % 6 not in (1, 2, 4):
            continue
        if row.wp_autogen_flag:
            assert row.wp_customer_sk != NO_VALUE_KEY
        else:
            assert row.wp_customer_sk == NO_VALUE_KEY


def test_web_page_counts():
    for row in generate_rows(Table.WEB_PAGE, 1, 60):
        assert 2 <= row.wp_link_count <= 25
        assert 1 <= row.wp_image_count <= 7
        assert 0 <= row.wp_max_ad_count <= 4
        assert row.wp_url == "http://www.foo.com"


def test_web_page_versions_share_business_key():
    rows = generate_rows(Table.WEB_PAGE, 1, 6)
    assert rows[1].wp_page_id == rows[2].wp_page_id
    assert rows[3].wp_page_id == rows[4].wp_page_id == rows[5].wp_page_id
    assert rows[0].wp_page_id != rows[1].wp_page_id


def test_store_returns_need_a_store_sales_parent():
    generator = create_row_generator(Table.STORE_RETURNS)
    with pytest.raises(ConfigurationError):
        generator.generate_row_and_child_rows(1, SESSION, None, None)


def test_store_returns_need_a_current_sale():
    """A parent that has not produced a line yet gives the child nothing to return."""
    parent = create_row_generator(Table.STORE_SALES)
    child = create_row_generator(Table.STORE_RETURNS)
    with pytest.raises(ConfigurationError):
        child.generate_row_and_child_rows(1, SESSION, parent, None)
