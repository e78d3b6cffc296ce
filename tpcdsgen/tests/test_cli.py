"""Smoke tests for the command line interface."""

from typer.testing import CliRunner

from tpcdsgen.cli.app import app

runner = CliRunner()


def test_tables_lists_generated_tables():
    result = runner.invoke(app, ["tables"])
    assert result.exit_code == 0
    assert "web_site" in result.output
    assert "store_returns (child of store_sales)" in result.output
    assert "customer_address" not in result.output


def test_row_counts():
    result = runner.invoke(app, ["row-counts", "--scale", "1"])
    assert result.exit_code == 0
    assert "date_dim: 73,049" in result.output
    assert "store_sales: 240,000" in result.output


def test_row_counts_rejects_bad_scale():
    result = runner.invoke(app, ["row-counts", "--scale", "0"])
    assert result.exit_code == 1


def test_generate_single_table(tmp_path):
    result = runner.invoke(app, ["generate", "--table", "web_site", "--directory", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "web_site: 30 rows" in result.output
    lines = (tmp_path / "web_site" / "web_site.dat").read_text().splitlines()
    assert len(lines) == 30
    assert all(line.endswith("|") for line in lines)


def test_generate_refuses_to_overwrite(tmp_path):
    args = ["generate", "--table", "reason", "--directory", str(tmp_path)]
    assert runner.invoke(app, args).exit_code == 0
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert runner.invoke(app, args + ["--overwrite"]).exit_code == 0


def test_generate_unknown_table(tmp_path):
    result = runner.invoke(app, ["generate", "--table", "nope", "--directory", str(tmp_path)])
    assert result.exit_code == 1


def test_generate_rejects_unknown_log_level(tmp_path):
    result = runner.invoke(app, ["generate", "--table", "reason", "--directory", str(tmp_path), "--log-level", "bogus"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, AttributeError)
    assert not (tmp_path / "reason").exists()


def test_generate_rejects_url_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["generate", "--table", "reason", "--directory", "hdfs://namenode/tpcds"])
    assert result.exit_code == 1
    assert list(tmp_path.iterdir()) == []
