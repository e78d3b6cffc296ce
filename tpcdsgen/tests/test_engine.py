"""Tests for chunking, row formatting, output sinks and parallel invariance."""

from pathlib import Path

import pytest

from tpcdsgen.config.session import Session
from tpcdsgen.errors import ConfigurationError, OutputError
from tpcdsgen.generation.engine.chunks import split_work
from tpcdsgen.generation.engine.driver import TableGenerator
from tpcdsgen.generation.engine.pipeline import generate_data
from tpcdsgen.generation.engine.writer import FileSink, format_row, get_path
from tpcdsgen.schema.table import Table

TINY_SCALE = 0.0001


def test_format_row_terminated():
    session = Session(null_string="NULL")
    assert format_row(["a", None, "c"], session) == "a|NULL|c|\n"


def test_format_row_not_terminated():
    session = Session(null_string="NULL", do_not_terminate=True)
    assert format_row(["a", None, "c"], session) == "a|NULL|c\n"


def test_format_row_custom_separator_and_empty_null():
    session = Session(separator=",")
    assert format_row([None, "x"], session) == ",x,\n"


def test_output_paths(tmp_path):
    session = Session(target_directory=str(tmp_path))
    assert get_path(Table.WEB_SITE, session) == tmp_path / "web_site" / "web_site.dat"
    parallel = session.with_parallelism(4).with_chunk_number(3)
    assert get_path(Table.WEB_SITE, parallel) == tmp_path / "web_site" / "web_site_3_4.dat"


def test_sink_refuses_non_empty_file(tmp_path):
    path = tmp_path / "t" / "t.dat"
    path.parent.mkdir()
    path.write_text("existing\n")
    with pytest.raises(OutputError):
        FileSink(path, overwrite=False)
    assert path.read_text() == "existing\n"


def test_sink_accepts_empty_file(tmp_path):
    path = tmp_path / "t.dat"
    path.write_text("")
    with FileSink(path) as sink:
        sink.write("row\n")
    assert path.read_text() == "row\n"


def test_sink_overwrite_truncates(tmp_path):
    path = tmp_path / "t.dat"
    path.write_text("a much longer previous content\n")
    with FileSink(path, overwrite=True) as sink:
        sink.write("new\n")
    assert path.read_text() == "new\n"


@pytest.mark.parametrize("parallelism", [1, 2, 5, 7])
def test_split_work_covers_every_row_once(parallelism):
    session = Session(parallelism=parallelism)
    total = session.scaling.get_row_count(Table.STORE_SALES)
    covered = []
    for chunk in range(1, parallelism + 1):
        boundaries = split_work(Table.STORE_SALES, session.with_chunk_number(chunk))
        covered.extend(range(boundaries.first_row, boundaries.last_row + 1))
    assert covered == list(range(1, total + 1))


def test_split_work_remainder_goes_to_last_chunk():
    session = Session(parallelism=7)
    total = session.scaling.get_row_count(Table.STORE_SALES)
    last = split_work(Table.STORE_SALES, session.with_chunk_number(7))
    assert last.row_count == total - 6 * (total // 7)


def test_history_chunks_start_on_block_boundaries():
    session = Session(parallelism=7)
    for chunk in range(1, 8):
        boundaries = split_work(Table.ITEM, session.with_chunk_number(chunk))
        assert boundaries.first_row % 6 == 1


def test_small_tables_only_in_first_chunk():
    session = Session(parallelism=3)
    assert split_work(Table.WEB_SITE, session).row_count == session.scaling.get_row_count(Table.WEB_SITE)
    assert split_work(Table.WEB_SITE, session.with_chunk_number(2)).is_empty()


def test_child_table_uses_parent_rows():
    session = Session(parallelism=2, chunk_number=2)
    assert split_work(Table.STORE_RETURNS, session) == split_work(Table.STORE_SALES, session)


def _generate_chunks(directory: Path, parallelism: int, table: Table = Table.STORE_SALES) -> None:
    session = Session(scale=TINY_SCALE, target_directory=str(directory), parallelism=parallelism)
    for chunk in range(1, parallelism + 1):
        TableGenerator(session.with_chunk_number(chunk)).generate_table(table)


def _read_chunks(directory: Path, table: Table, parallelism: int) -> str:
    session = Session(target_directory=str(directory), parallelism=parallelism)
    return "".join(
        get_path(table, session.with_chunk_number(chunk)).read_text()
        for chunk in range(1, parallelism + 1)
        if get_path(table, session.with_chunk_number(chunk)).exists()
    )


@pytest.mark.parametrize("parallelism", [2, 5, "total"])
def test_output_is_independent_of_parallelism(tmp_path, parallelism):
    """Concatenated chunk files equal the single-chunk output byte for byte."""
    if parallelism == "total":
        parallelism = Session(scale=TINY_SCALE).scaling.get_row_count(Table.STORE_SALES)
    _generate_chunks(tmp_path / "serial", 1)
    _generate_chunks(tmp_path / "parallel", parallelism)
    for table in (Table.STORE_SALES, Table.STORE_RETURNS):
        serial = _read_chunks(tmp_path / "serial", table, 1)
        assert serial
        assert _read_chunks(tmp_path / "parallel", table, parallelism) == serial


def test_store_sales_tickets_have_eight_to_sixteen_lines(tmp_path):
    _generate_chunks(tmp_path, 1)
    lines = (tmp_path / "store_sales" / "store_sales.dat").read_text().splitlines()
    tickets = {}
    for line in lines:
        ticket = line.split("|")[9]
        tickets[ticket] = tickets.get(ticket, 0) + 1
    assert len(tickets) == Session(scale=TINY_SCALE).scaling.get_row_count(Table.STORE_SALES)
    assert all(8 <= count <= 16 for count in tickets.values())


def test_returns_reference_their_sales(tmp_path):
    _generate_chunks(tmp_path, 1)
    sales = [line.split("|") for line in (tmp_path / "store_sales" / "store_sales.dat").read_text().splitlines()]
    returns = [line.split("|") for line in (tmp_path / "store_returns" / "store_returns.dat").read_text().splitlines()]
    sold = {(fields[9], fields[2]) for fields in sales}
    assert returns
    for fields in returns:
        assert (fields[9], fields[2]) in sold


def test_child_generated_alone_matches_generated_alongside(tmp_path):
    _generate_chunks(tmp_path / "together", 1)
    session = Session(scale=TINY_SCALE, target_directory=str(tmp_path / "alone"), table="store_returns")
    TableGenerator(session).generate_table(Table.STORE_RETURNS)
    together = (tmp_path / "together" / "store_returns" / "store_returns.dat").read_text()
    alone = (tmp_path / "alone" / "store_returns" / "store_returns.dat").read_text()
    assert alone == together


def test_parent_generated_alone_has_no_child_file(tmp_path):
    session = Session(scale=TINY_SCALE, target_directory=str(tmp_path), table="store_sales", parallelism=2)
    totals = generate_data(session)
    assert set(totals) == {Table.STORE_SALES}
    assert (tmp_path / "store_sales" / "store_sales_1_2.dat").exists()
    assert (tmp_path / "store_sales" / "store_sales_2_2.dat").exists()
    assert not (tmp_path / "store_returns").exists()


def test_child_skipped_without_table_filter(tmp_path):
    session = Session(scale=TINY_SCALE, target_directory=str(tmp_path))
    assert TableGenerator(session).generate_table(Table.STORE_RETURNS) == {}


def test_reference_only_table_is_rejected(tmp_path):
    session = Session(target_directory=str(tmp_path), table="item")
    with pytest.raises(ConfigurationError):
        generate_data(session)
    with pytest.raises(ConfigurationError):
        TableGenerator(session).generate_table(Table.ITEM)


def test_existing_output_aborts_run(tmp_path):
    session = Session(target_directory=str(tmp_path), table="web_site")
    generate_data(session)
    first = get_path(Table.WEB_SITE, session).read_text()
    with pytest.raises(OutputError):
        generate_data(session)
    generate_data(Session(target_directory=str(tmp_path), table="web_site", overwrite=True))
    assert get_path(Table.WEB_SITE, session).read_text() == first


def test_single_chunk_run(tmp_path):
    session = Session(scale=TINY_SCALE, target_directory=str(tmp_path), table="store_sales", parallelism=3)
    generate_data(session, chunk_numbers=[2])
    assert not (tmp_path / "store_sales" / "store_sales_1_3.dat").exists()
    assert (tmp_path / "store_sales" / "store_sales_2_3.dat").exists()


@pytest.mark.parametrize("directory", ["hdfs://namenode/tpcds", "s3://bucket/tpcds", "file:///tmp/tpcds"])
def test_url_targets_are_rejected(tmp_path, monkeypatch, directory):
    """A URL target fails before anything is written instead of landing in a local folder."""
    monkeypatch.chdir(tmp_path)
    session = Session(target_directory=directory, table="web_site")
    with pytest.raises(OutputError):
        get_path(Table.WEB_SITE, session)
    with pytest.raises(OutputError):
        generate_data(session)
    assert list(tmp_path.iterdir()) == []
