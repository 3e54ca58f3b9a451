from __future__ import annotations

import csv
from pathlib import Path

import pytest

from sortbench.domain.models import Dataset
from sortbench.infrastructure.csv_io import (
    DatasetError,
    DatasetIOError,
    DatasetNotFoundError,
    DatasetParseError,
    detect_delimiter,
    load_csv,
    save_csv,
)


@pytest.mark.parametrize(
    "first_line, expected",
    [
        ("a;b;c\n", ";"),
        ("a,b,c\n", ","),
        ("a\tb\tc\n", "\t"),
        ("a|b|c\n", "|"),
        ("a;b,c\n", ","),
        ("abc\n", ","),
        ("a,b;c;d\n", ";"),
    ],
)
def test_detect_delimiter(write_file, first_line: str, expected: str) -> None:
    path = write_file("data.txt", first_line + "1,2,3\n")
    assert detect_delimiter(path) == expected


def test_detect_delimiter_defaults_to_comma_for_missing_file(tmp_path: Path) -> None:
    assert detect_delimiter(tmp_path / "missing.csv") == ","


def test_detect_delimiter_empty_file(write_file) -> None:
    assert detect_delimiter(write_file("empty.csv", "")) == ","


def test_load_semicolon_file(write_file) -> None:
    path = write_file("people.csv", "name;age\nalice;30\nbob;4\n")

    dataset = load_csv(path)

    assert dataset.headers == ["name", "age"]
    assert dataset.records == [["alice", "30"], ["bob", "4"]]


def test_load_keeps_ragged_rows_and_skips_blank_lines(write_file) -> None:
    path = write_file("ragged.csv", "a,b,c\n1,2\n\n4,5,6,7\n")

    dataset = load_csv(path)

    assert dataset.records == [["1", "2"], ["4", "5", "6", "7"]]


def test_load_empty_file_returns_empty_dataset(write_file) -> None:
    dataset = load_csv(write_file("empty.csv", ""))
    assert dataset.headers == []
    assert dataset.row_count == 0


def test_load_with_explicit_delimiter(write_file) -> None:
    path = write_file("pipes.csv", "a,b|c\n1,2|3\n")
    assert load_csv(path, delimiter="|").headers == ["a,b", "c"]


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DatasetNotFoundError) as excinfo:
        load_csv(tmp_path / "nope.csv")
    assert excinfo.value.path == tmp_path / "nope.csv"
    assert isinstance(excinfo.value, DatasetError)


def test_load_directory_is_not_found(tmp_path: Path) -> None:
    with pytest.raises(DatasetNotFoundError):
        load_csv(tmp_path)


def test_load_malformed_quoting(write_file) -> None:
    path = write_file("bad.csv", 'a,b\n"unterminated,1\n')
    with pytest.raises(DatasetParseError):
        load_csv(path)


def test_load_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.csv"
    path.write_bytes("name\ncaf\xe9\n".encode("latin-1"))
    with pytest.raises(DatasetParseError):
        load_csv(path)


def test_save_quotes_embedded_delimiters(tmp_path: Path) -> None:
    path = tmp_path / "out" / "sorted.csv"

    save_csv(path, ["name", "note"], [["smith, j", 'said "hi"'], ["lee", "ok"]])

    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows == [["name", "note"], ["smith, j", 'said "hi"'], ["lee", "ok"]]
    assert '"smith, j"' in path.read_text(encoding="utf-8")


def test_save_then_load_preserves_dataset(tmp_path: Path, people: Dataset) -> None:
    path = tmp_path / "people.csv"
    save_csv(path, people.headers, people.records)
    assert load_csv(path) == people


def test_save_into_unwritable_location(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(DatasetIOError):
        save_csv(blocker / "child.csv", ["a"], [["1"]])


def test_load_strips_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "bom.csv"
    path.write_bytes("name;age\nalice;30\n".encode("utf-8-sig"))

    dataset = load_csv(path)

    assert dataset.headers == ["name", "age"]
    assert dataset.column_index("name") == 0
    assert detect_delimiter(path) == ";"
