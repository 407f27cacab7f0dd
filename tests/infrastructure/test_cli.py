"""Tests for the command-line boundary."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    config = tmp_path / "config.properties"
    config.write_text("config.price.tax=1.25\n", encoding="utf-8")
    data = tmp_path / "products.json"
    data.write_text('[{"id":1,"name":"X","price":100}]', encoding="utf-8")
    monkeypatch.setenv("CATALOG_CONFIG_FILE", str(config))
    monkeypatch.setenv("CATALOG_DATA_FILE", str(data))
    monkeypatch.delenv("CATALOG_PRICE_TAX", raising=False)
    return CliRunner()


class TestProductList:

    def test_lists_primary_source_with_tax(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "RAM Memory" in result.output
        assert "250" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["product", "list", "--source", "json", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [{"id": 1, "name": "X", "price": 125}]

    def test_unknown_source(self, runner):
        result = runner.invoke(cli, ["product", "list", "--source", "xml"])
        assert result.exit_code != 0
        assert "Unknown product source" in result.output


class TestProductShow:

    def test_show_without_tax(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "2", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "id": 2,
            "name": "Keyboard Razer Mini 60%",
            "price": 150,
        }

    def test_missing_in_primary_source(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "999"])
        assert result.exit_code == 1
        assert "Product with ID '999' not found" in result.output

    def test_missing_in_json_source(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "2", "--source", "json"])
        assert result.exit_code == 1
        assert "Product with ID '2' not found" in result.output

    def test_fallback_source(self, runner):
        result = runner.invoke(cli, ["product", "show", "--id", "77", "--source", "foo"])
        assert result.exit_code == 0
        assert "Product #77 'Monitor Asus 27' at 600" in result.output


class TestSources:

    def test_marks_primary(self, runner):
        result = runner.invoke(cli, ["sources"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["list (primary)", "foo", "json"]


class TestErrorReporting:

    def test_oversized_price_reported_as_error(self, runner, tmp_path, monkeypatch):
        data = tmp_path / "huge.json"
        data.write_text(
            '[{"id":1,"name":"X","price":' + "9" * 400 + "}]", encoding="utf-8"
        )
        monkeypatch.setenv("CATALOG_DATA_FILE", str(data))

        result = runner.invoke(cli, ["product", "list", "--source", "json"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, OverflowError)
        assert "Error: Could not load products" in result.output

    def test_load_failure_reported_once(self, runner, tmp_path, monkeypatch):
        data = tmp_path / "broken.json"
        data.write_text("[{not json", encoding="utf-8")
        monkeypatch.setenv("CATALOG_DATA_FILE", str(data))

        result = runner.invoke(cli, ["product", "list", "--source", "json"])

        assert result.exit_code == 1
        assert result.output.count("Could not load products") == 1
