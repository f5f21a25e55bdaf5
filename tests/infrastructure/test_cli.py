"""End-to-end tests for the command line, using a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from bookstore.infrastructure.cli.main import cli

CUSTOMER_ARGS = [
    "--name", "Jane Reader",
    "--address", "12 Library Lane",
    "--phone", "123-456-7890",
    "--email", "jane@example.com",
    "--cc-number", "4111 1111 1111 1111",
]


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    (tmp_path / "books.json").write_text(json.dumps([
        {"id": 1001, "title": "The Left Hand of Darkness", "author": "Le Guin",
         "price": 1599, "category_id": 1},
        {"id": 1002, "title": "Dune", "author": "Herbert", "price": 1899, "category_id": 1},
    ]), encoding="utf-8")
    monkeypatch.setenv("BOOKSTORE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("BOOKSTORE_DATABASE_URL", raising=False)
    monkeypatch.setenv("BOOKSTORE_SURCHARGE", "500")
    monkeypatch.setenv("BOOKSTORE_LOG_LEVEL", "WARNING")
    return tmp_path


class TestCli:

    def test_book_list(self, data_dir):
        result = CliRunner().invoke(cli, ["book", "list"])
        assert result.exit_code == 0
        assert "Dune" in result.output
        assert "$18.99" in result.output

    def test_place_and_show(self, data_dir):
        runner = CliRunner()

        placed = runner.invoke(cli, ["order", "place", *CUSTOMER_ARGS, "--items", "1001:2,1002:1"])
        assert placed.exit_code == 0, placed.output
        assert "Order #1 placed." in placed.output

        shown = runner.invoke(cli, ["order", "show", "--id", "1"])
        assert shown.exit_code == 0, shown.output
        assert "Jane Reader" in shown.output
        assert "************1111" in shown.output
        assert "The Left Hand of Darkness" in shown.output
        assert "$55.97" in shown.output

    def test_invalid_input_reported(self, data_dir):
        args = ["order", "place", *CUSTOMER_ARGS, "--items", "1001:1"]
        args[args.index("123-456-7890")] = "12345"

        result = CliRunner().invoke(cli, args)

        assert result.exit_code == 1
        assert "Invalid phone field" in result.output

    def test_unknown_book_reported(self, data_dir):
        result = CliRunner().invoke(cli, ["order", "place", *CUSTOMER_ARGS, "--items", "4242:1"])
        assert result.exit_code == 1
        assert "Book #4242 not found" in result.output

    def test_malformed_items_rejected(self, data_dir):
        result = CliRunner().invoke(cli, ["order", "place", *CUSTOMER_ARGS, "--items", "dune"])
        assert result.exit_code == 2
        assert "Expected 'BookId:Quantity'" in result.output

    def test_unknown_order_reported(self, data_dir):
        result = CliRunner().invoke(cli, ["order", "show", "--id", "5"])
        assert result.exit_code == 1
        assert "Order #5 not found" in result.output
