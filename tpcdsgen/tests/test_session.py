"""Tests for run options and environment-backed settings."""

from pathlib import Path

import pytest

from tpcdsgen.config.session import Session, get_default_session
from tpcdsgen.config.settings import Settings
from tpcdsgen.errors import GenerationError, InvalidOptionError
from tpcdsgen.schema.table import Table


def test_defaults():
    session = get_default_session()
    assert session.scale == 1.0
    assert session.target_path == Path(".")
    assert session.suffix == ".dat"
    assert session.null_string == ""
    assert session.separator == "|"
    assert session.terminate_rows_with_separator()
    assert session.is_sexist()
    assert session.parallelism == 1
    assert session.chunk_number == 1
    assert not session.overwrite
    assert not session.generate_only_one_table()
    assert session.command_line_arguments() == ""


def test_table_names_are_case_insensitive():
    assert Session(table="WEB_SITE").table is Table.WEB_SITE
    assert Session(table="web_site").get_only_table_to_generate() is Table.WEB_SITE


def test_unknown_table():
    with pytest.raises(InvalidOptionError):
        Session(table="not_a_table")


def test_only_table_requires_a_table():
    with pytest.raises(GenerationError):
        Session().get_only_table_to_generate()


@pytest.mark.parametrize(
    "options",
    [
        {"scale": 0},
        {"scale": -1},
        {"scale": 100001},
        {"separator": "||"},
        {"separator": ""},
        {"parallelism": 0},
        {"parallelism": 2, "chunk_number": 3},
        {"chunk_number": 0},
    ],
)
def test_invalid_options(options):
    with pytest.raises(InvalidOptionError):
        Session(**options)


def test_with_methods_return_new_sessions():
    session = Session()
    derived = session.with_scale(10).with_parallelism(4).with_chunk_number(2).with_table(Table.WEB_PAGE)
    assert session.scale == 1.0
    assert session.parallelism == 1
    assert derived.scale == 10
    assert derived.parallelism == 4
    assert derived.chunk_number == 2
    assert derived.table is Table.WEB_PAGE
    assert not derived.with_no_sexism(True).is_sexist()


def test_with_methods_validate():
    with pytest.raises(InvalidOptionError):
        Session().with_chunk_number(2)


def test_sessions_are_immutable():
    session = Session()
    with pytest.raises(Exception):
        session.scale = 2.0


def test_command_line_arguments():
    session = Session(
        scale=10,
        target_directory="/tmp/out",
        table="store_sales",
        null_string="NULL",
        do_not_terminate=True,
        parallelism=4,
        overwrite=True,
    )
    assert session.command_line_arguments() == (
        "--scale 10 --directory /tmp/out --table store_sales --null NULL "
        "--do-not-terminate --parallelism 4 --overwrite"
    )


def test_scaling_follows_scale():
    assert Session(scale=10).scaling.get_scale() == 10


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TPCDS_SCALE", "100")
    monkeypatch.setenv("TPCDS_SEPARATOR", ",")
    monkeypatch.setenv("TPCDS_NO_SEXISM", "true")
    settings = Settings()
    assert settings.scale == 100
    assert settings.separator == ","
    assert settings.no_sexism is True
