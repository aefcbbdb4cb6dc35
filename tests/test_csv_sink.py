from __future__ import annotations

import csv
from pathlib import Path

import pytest

import csv_sink
from models import Record

SAMPLE_RECORD = Record(
    pubmed_id="39000001",
    title="Checkpoint Inhibitors in Solid Tumors",
    publication_date="2024",
    authors=("Smith", "Jones"),
    company_affiliations=("Acme Pharma Inc., Boston", "BioGen Ltd., London"),
)

OTHER_RECORD = Record(
    pubmed_id="39000002",
    title="Title, with \"quotes\" and commas",
    publication_date="Unknown Date",
    authors=("Lee",),
    company_affiliations=("Novel Therapeutics",),
)


def _read_rows(path: Path) -> list[dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as fh:
        return list(csv.DictReader(fh))


def test_write_records_creates_file_with_header(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"

    assert csv_sink.write_records([SAMPLE_RECORD], output) is True

    with output.open(newline="", encoding="utf-8") as fh:
        header = next(csv.reader(fh))
    assert header == [
        "PubmedID",
        "Title",
        "Publication Date",
        "Non-academic Author(s)",
        "Company Affiliation(s)",
        "Corresponding Author Email",
    ]


def test_write_records_joins_lists_with_semicolons(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"
    csv_sink.write_records([SAMPLE_RECORD], output)

    [row] = _read_rows(output)

    assert row["PubmedID"] == "39000001"
    assert row["Publication Date"] == "2024"
    assert row["Non-academic Author(s)"] == "Smith; Jones"
    assert row["Company Affiliation(s)"] == "Acme Pharma Inc., Boston; BioGen Ltd., London"
    assert row["Corresponding Author Email"] == "N/A"


def test_write_records_quotes_commas_and_quotes(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"
    csv_sink.write_records([SAMPLE_RECORD, OTHER_RECORD], output)

    rows = _read_rows(output)

    assert [r["PubmedID"] for r in rows] == ["39000001", "39000002"]
    assert rows[1]["Title"] == "Title, with \"quotes\" and commas"


def test_write_records_is_idempotent(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"

    csv_sink.write_records([SAMPLE_RECORD, OTHER_RECORD], output)
    first = output.read_bytes()
    csv_sink.write_records([SAMPLE_RECORD, OTHER_RECORD], output)

    assert output.read_bytes() == first


def test_write_records_overwrites_previous_content(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"
    output.write_text("stale,content\n", encoding="utf-8")

    csv_sink.write_records([SAMPLE_RECORD], output)

    assert "stale" not in output.read_text(encoding="utf-8")
    assert len(_read_rows(output)) == 1


def test_write_records_empty_list_writes_nothing(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"

    assert csv_sink.write_records([], output) is False
    assert not output.exists()


def test_write_records_unwritable_path_returns_false(tmp_path: Path) -> None:
    output = tmp_path / "missing_dir" / "results.csv"

    assert csv_sink.write_records([SAMPLE_RECORD], output) is False


def test_print_records_outputs_structured_form(capsys: pytest.CaptureFixture[str]) -> None:
    csv_sink.print_records([SAMPLE_RECORD])

    out = capsys.readouterr().out
    assert "'pubmed_id': '39000001'" in out
    assert "'company_affiliations'" in out
    assert "'Acme Pharma Inc., Boston'" in out


def test_print_records_empty_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    csv_sink.print_records([])

    assert capsys.readouterr().out == ""


def test_export_records_without_path_prints_and_creates_no_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)

    assert csv_sink.export_records([SAMPLE_RECORD]) is False

    assert "39000001" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_export_records_with_path_writes_file(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"

    assert csv_sink.export_records([SAMPLE_RECORD], output) is True
    assert output.exists()
