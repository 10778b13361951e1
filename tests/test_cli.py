import json

import pytest
from click.testing import CliRunner

from videostore import __version__
from videostore.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def rental_file(tmp_path):
    path = tmp_path / "rentals.json"
    path.write_text(
        json.dumps(
            {
                "name": "Curly",
                "rentals": [
                    {"title": "Casablanca", "category": "regular", "days_rented": 1},
                    {"title": "Dune", "category": "new_release", "days_rented": 1},
                    {"title": "Paddington", "category": "children", "days_rented": 1},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"videostore version {__version__}"


def test_no_command_prints_help(runner):
    result = runner.invoke(main, [])

    assert result.exit_code == 0
    assert "statement" in result.output
    assert "quote" in result.output


def test_text_statement_command(runner, rental_file):
    result = runner.invoke(main, ["statement", str(rental_file)])

    assert result.exit_code == 0, result.output
    assert result.output == (
        "Rental Record for Curly\n"
        "\tCasablanca\t2.0\n"
        "\tDune\t3.0\n"
        "\tPaddington\t1.5\n"
        "Amount owed is 6.5\n"
        "You earned 3 frequent renter points\n"
    )


def test_html_statement_written_to_file(runner, rental_file, tmp_path):
    output = tmp_path / "statement.html"

    result = runner.invoke(main, ["statement", str(rental_file), "--format", "html", "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert f"written to {output}" in result.output
    rendered = output.read_text(encoding="utf-8")
    assert rendered.startswith("<H1>Rentals for <EM>Curly</EM></H1><P>\n")
    assert rendered.endswith("On this rental you earned <EM>3</EM> frequent renter points<P>")


def test_unknown_format_exits_with_structured_error(runner, rental_file):
    result = runner.invoke(main, ["statement", str(rental_file), "--format", "pdf"])

    assert result.exit_code == 2
    assert "videostore error [STATEMENT:UNKNOWN_FORMAT]" in result.output


def test_invalid_document_exits_with_structured_error(runner, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"name": "Curly", "rentals": [{"title": "Jaws"}]}), encoding="utf-8")

    result = runner.invoke(main, ["statement", str(path)])

    assert result.exit_code == 2
    assert "[INPUT:RENTAL_DOCUMENT]" in result.output


def test_quote_command(runner):
    result = runner.invoke(main, ["quote", "children", "5"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "children for 5 day(s): charge 4.5, points 1"


def test_quote_json(runner):
    result = runner.invoke(main, ["quote", "new-release", "2", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"category": "new_release", "days_rented": 2, "charge": 6.0, "points": 2}


def test_quote_rejects_zero_days_as_json(runner):
    result = runner.invoke(main, ["quote", "regular", "0", "--json"])

    assert result.exit_code == 2
    payload = json.loads(result.output)
    assert payload["ok"] is False
    assert payload["error"]["code"] == "INVALID_DURATION"
    assert payload["error"]["category"] == "PRICING"


def test_quote_rejects_unknown_category(runner):
    result = runner.invoke(main, ["quote", "platinum", "3"])

    assert result.exit_code == 2
    assert "[PRICING:INVALID_CATEGORY]" in result.output


def test_formats_command(runner):
    result = runner.invoke(main, ["formats"])

    assert result.exit_code == 0
    assert result.output.split() == ["html", "text"]


def test_non_utf8_document_exits_with_structured_error(runner, tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"name": "\xff"}')

    result = runner.invoke(main, ["statement", str(path)])

    assert result.exit_code == 2
    assert "[INPUT:RENTAL_DOCUMENT]" in result.output


def test_statement_default_format_comes_from_config(runner, rental_file, monkeypatch):
    monkeypatch.setenv("VIDEOSTORE_DEFAULT_FORMAT", "html")

    result = runner.invoke(main, ["statement", str(rental_file)])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("<H1>Rentals for <EM>Curly</EM></H1><P>\n")


def test_statement_format_option_overrides_config(runner, rental_file, monkeypatch):
    monkeypatch.setenv("VIDEOSTORE_DEFAULT_FORMAT", "html")

    result = runner.invoke(main, ["statement", str(rental_file), "--format", "text"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("Rental Record for Curly\n")


def test_quote_rejects_negative_days(runner):
    result = runner.invoke(main, ["quote", "regular", "-1"])

    assert result.exit_code == 2
    assert "videostore error [PRICING:INVALID_DURATION]" in result.output
    assert "got -1" in result.output
