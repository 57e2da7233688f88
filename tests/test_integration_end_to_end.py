"""
End-to-end tests for the command line interface: a clippings file on
disk goes in, titles or exported clippings come out on stdout.
"""

import json
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kindle_clippings.cli import main

MY_CLIPPINGS = (
    "\ufeffBook A (Some Author)\r\n"
    "- Your Highlight on page 12 | location 100-105 | Added on Monday, 1 January 2024 10:00:00\r\n"
    "\r\n"
    "It was a bright cold day in April.\r\n"
    "==========\r\n"
    "\ufeffBook A (Some Author)\r\n"
    "- Your Highlight on page 12 | location 100-105 | Added on Tuesday, 2 January 2024 08:15:00\r\n"
    "\r\n"
    "It was a bright cold day in April.\r\n"
    "==========\r\n"
    "\ufeffBook A (Some Author)\r\n"
    "- Your Note on page 13 | location 110 | Added on Tuesday, 2 January 2024 08:16:00\r\n"
    "\r\n"
    "idea\r\n"
    "==========\r\n"
    "\ufeffBook A (Some Author)\r\n"
    "- Your Bookmark on page 14 | location 120 | Added on Tuesday, 2 January 2024 08:17:00\r\n"
    "\r\n"
    "\r\n"
    "==========\r\n"
    "\ufeffAnother Book\r\n"
    "- Your Clip This Article\r\n"
    "\r\n"
    "broken\r\n"
    "==========\r\n"
    "\ufeffAnother Book\r\n"
    "- Your Highlight on page 3 | location 40-41 | Added on Wednesday, 3 January 2024 21:00:00\r\n"
    "\r\n"
    "the clocks were striking thirteen\r\n"
    "==========\r\n"
)


@pytest.fixture
def clippings_file(tmp_path):
    path = tmp_path / "My Clippings.txt"
    path.write_bytes(MY_CLIPPINGS.encode("utf-8"))
    return str(path)


def test_lists_document_titles(clippings_file, capsys):
    assert main([clippings_file]) == 0

    out = capsys.readouterr().out
    assert out == "Another Book\nBook A (Some Author)\n"


def test_json_export_deduplicates(clippings_file, capsys):
    assert main([clippings_file, "json", "Book A (Some Author)"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == [{
        "documentTitle": "Book A (Some Author)",
        "clippings": [
            {"kind": "highlight", "locationOrPage": [100, 105],
             "content": "It was a bright cold day in April."},
            {"kind": "note", "locationOrPage": 110, "content": "idea"},
        ],
    }]


def test_org_export_for_several_documents(clippings_file, capsys):
    assert main([clippings_file, "org", "Another Book\nBook A (Some Author)"]) == 0

    out = capsys.readouterr().out
    assert out == (
        "DOCUMENT: Another Book\n"
        "#+begin_quote\n[…] the clocks were striking thirteen […]\n#+end_quote\n"
        "\n"
        "DOCUMENT: Book A (Some Author)\n"
        "#+begin_quote\nIt was a bright cold day in April.\n#+end_quote\n"
        "#+begin_quote\n<idea>\n#+end_quote\n"
        "\n"
    )


def test_malformed_record_is_skipped(clippings_file, caplog):
    with caplog.at_level("WARNING"):
        assert main([clippings_file]) == 0

    assert any("matching info line" in message for message in caplog.messages)


def test_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")

    assert main([missing]) == 1

    assert f"Error opening clippings file: '{missing}'" in capsys.readouterr().err


@pytest.mark.parametrize("argv_tail", [
    ["json"],
    ["csv"],
    ["json", "Book A", "extra"],
])
def test_wrong_argument_count_prints_usage(clippings_file, capsys, argv_tail):
    assert main([clippings_file] + argv_tail) == 0

    out = capsys.readouterr().out
    assert out.startswith("usage: kindle-clippings")


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("usage: kindle-clippings")


def test_unknown_format_rejected(clippings_file):
    with pytest.raises(SystemExit) as excinfo:
        main([clippings_file, "csv", "Book A"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("content", [
    "",
    "Book A\r\n- Your Clip This Article\r\n\r\nbroken\r\n==========\r\n",
])
def test_no_titles_prints_nothing(tmp_path, capsys, content):
    path = tmp_path / "My Clippings.txt"
    path.write_bytes(content.encode("utf-8"))

    assert main([str(path)]) == 0

    assert capsys.readouterr().out == ""
