"""Tests for the web_site generator: determinism, SCD history and change masks."""

import pytest

from tpcdsgen.config.session import Session
from tpcdsgen.errors import InvariantViolationError
from tpcdsgen.generation.generators.web_site import WebSiteRowGenerator
from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.types.address import make_address_for_column
from tpcdsgen.schema.generator_columns import WebSiteGeneratorColumn
from tpcdsgen.schema.table import Table

SESSION = Session()

# Mask bit consulted for each mutable field
MASK_BITS = {
    "web_manager": 0,
    "web_market_id": 1,
    "web_market_class": 2,
    "web_market_desc": 3,
    "web_market_manager": 4,
    "web_company_id": 5,
    "web_company_name": 6,
    "web_tax_percentage": 16,
}
ADDRESS_MASK_BITS = {"gmt_offset": 9, "street_number": 14, "zip": 15}


def generate_rows(first_row, last_row, session=SESSION):
    generator = WebSiteRowGenerator()
    generator.skip_rows_until_starting_row_number(first_row)
    rows = []
    for row_number in range(first_row, last_row + 1):
        rows.append(generator.generate_row_and_child_rows(row_number, session, None, None).rows[0])
        generator.consume_remaining_seeds_for_row()
    return rows


def change_flags(row_number):
    """The change mask drawn for a row, read straight from the SCD stream."""
    column = WebSiteGeneratorColumn.WEB_SCD
    stream = RandomNumberStream(column.global_column_number, column.seeds_per_row)
    stream.skip_rows(row_number - 1)
    return stream.next_random()


def test_generation_is_deterministic():
    first = [row.values() for row in generate_rows(1, 30)]
    second = [row.values() for row in generate_rows(1, 30)]
    assert first == second


def test_seeking_matches_sequential_generation():
    """Starting at a block boundary gives the same rows as generating from row 1."""
    sequential = [row.values() for row in generate_rows(1, 18)]
    seeked = [row.values() for row in generate_rows(7, 18)]
    assert seeked == sequential[6:]


def test_row_shape():
    for row in generate_rows(1, 12):
        values = row.values()
        assert len(values) == len(Table.WEB_SITE.columns)
        # Key, business key and start date are never null
        assert all(v is not None for v in values[:3])
        assert values[7] in ("Unknown", None)


def test_entities_share_identity_fields():
    rows = generate_rows(1, 6)
    assert rows[1].web_site_id == rows[2].web_site_id
    assert rows[1].web_name == rows[2].web_name == "site_0"
    assert rows[1].web_open_date == rows[2].web_open_date
    assert rows[3].web_site_id == rows[4].web_site_id == rows[5].web_site_id
    assert rows[3].web_close_date == rows[5].web_close_date
    assert rows[0].web_site_id != rows[1].web_site_id


def test_close_date_never_after_version_end():
    for row in generate_rows(1, 30):
        # Later versions copy the close date of the entity's first version
        if row.web_site_sk % 6 not in (1, 2, 4):
            continue
        if row.web_close_date != -1:
            assert row.web_rec_end_date_id != -1
            assert row.web_close_date <= row.web_rec_end_date_id


def test_unchanged_fields_follow_the_mask():
    """On continuation rows a clear mask bit keeps the previous version's value."""
    rows = generate_rows(1, 60)
    checked = 0
    for index in range(1, len(rows)):
        row, previous = rows[index], rows[index - 1]
        if row.web_site_sk % 6 not in (3, 5, 0):
            continue
        flags = change_flags(row.web_site_sk)
        for field, bit in MASK_BITS.items():
            if not (flags >> bit) & 1:
                assert getattr(row, field) == getattr(previous, field), field
                checked += 1
        for field, bit in ADDRESS_MASK_BITS.items():
            if not (flags >> bit) & 1:
                assert getattr(row.web_address, field) == getattr(previous.web_address, field), field
                checked += 1
    assert checked > 0


def test_new_entity_after_block_boundary():
    """Row 7 opens a new block and does not depend on rows 1-6."""
    values_from_seek = generate_rows(7, 7)[0]
    values_in_sequence = generate_rows(1, 7)[6]
    assert values_from_seek.values() == values_in_sequence.values()
    assert values_in_sequence.web_name == "site_1"


def test_name_weighting_keeps_streams_aligned():
    """Gender-neutral names draw as often as gendered ones, so other fields are unchanged."""
    gendered = generate_rows(1, 6)
    neutral = generate_rows(1, 6, SESSION.with_no_sexism(True))
    for a, b in zip(gendered, neutral):
        assert a.web_site_id == b.web_site_id
        assert a.web_market_desc == b.web_market_desc
        assert a.web_tax_percentage == b.web_tax_percentage


# Address parts that always take the new draw; their mask bits are skipped
ALWAYS_NEW_ADDRESS_BITS = {
    "city": 7,
    "county": 8,
    "state": 10,
    "street_type": 11,
    "street_name1": 12,
    "street_name2": 13,
}
CONTINUATION_RESIDUES = (3, 5, 0)


def fresh_address(row_number):
    """The address drawn for a row before any history is applied."""
    column = WebSiteGeneratorColumn.WEB_ADDRESS
    stream = RandomNumberStream(column.global_column_number, column.seeds_per_row)
    stream.skip_rows(row_number - 1)
    return make_address_for_column(Table.WEB_SITE, stream, SESSION.scaling)


class FixedMaskStream(RandomNumberStream):
    """Change-mask stream that keeps its position but always returns the same mask."""

    def __init__(self, mask):
        column = WebSiteGeneratorColumn.WEB_SCD
        super().__init__(column.global_column_number, column.seeds_per_row)
        self.mask = mask

    def next_random(self):
        super().next_random()
        return self.mask


def generate_rows_with_mask(mask, last_row):
    generator = WebSiteRowGenerator()
    generator._streams[WebSiteGeneratorColumn.WEB_SCD] = FixedMaskStream(mask)
    rows = []
    for row_number in range(1, last_row + 1):
        rows.append(generator.generate_row_and_child_rows(row_number, SESSION, None, None).rows[0])
        generator.consume_remaining_seeds_for_row()
    return rows


def test_address_parts_ignore_their_mask_bits():
    """City, county, state, street type and street names are always redrawn on continuation rows."""
    rows = generate_rows(1, 60)
    clear_bits_seen = 0
    for row in rows:
        if row.web_site_sk % 6 not in CONTINUATION_RESIDUES:
            continue
        flags = change_flags(row.web_site_sk)
        fresh = fresh_address(row.web_site_sk)
        for field, bit in ALWAYS_NEW_ADDRESS_BITS.items():
            assert getattr(row.web_address, field) == getattr(fresh, field), field
            if not (flags >> bit) & 1:
                clear_bits_seen += 1
    assert clear_bits_seen > 0


def test_same_mask_changes_same_fields():
    """Continuation rows drawing the same mask take new values for the same set of fields."""
    mask = (1 << 0) | (1 << 2) | (1 << 5) | (1 << 9) | (1 << 15)
    keep_all = generate_rows_with_mask(0, 5)
    change_all = generate_rows_with_mask(0x7FFFFFFF, 5)
    mixed = generate_rows_with_mask(mask, 5)

    # Rows 3 and 5 continue the entities started at rows 2 and 4
    for index in (2, 4):
        row, kept, changed = mixed[index], keep_all[index], change_all[index]
        for field, bit in MASK_BITS.items():
            expected = changed if (mask >> bit) & 1 else kept
            assert getattr(row, field) == getattr(expected, field), field
        for field, bit in ADDRESS_MASK_BITS.items():
            expected = changed if (mask >> bit) & 1 else kept
            assert getattr(row.web_address, field) == getattr(expected.web_address, field), field


def test_keep_all_mask_copies_previous_version():
    rows = generate_rows_with_mask(0, 3)
    for field in MASK_BITS:
        assert getattr(rows[2], field) == getattr(rows[1], field), field


def test_continuation_row_needs_previous_row():
    """Seeking into the middle of an entity leaves no version to continue from."""
    generator = WebSiteRowGenerator()
    generator.skip_rows_until_starting_row_number(3)
    with pytest.raises(InvariantViolationError):
        generator.generate_row_and_child_rows(3, SESSION, None, None)
