"""CSV file sink and console output for filtered PubMed records."""

from __future__ import annotations

import csv
import logging
from dataclasses import asdict
from pathlib import Path
from pprint import pprint

from models import Record

LOGGER = logging.getLogger(__name__)

CSV_COLUMNS = [
    "PubmedID",
    "Title",
    "Publication Date",
    "Non-academic Author(s)",
    "Company Affiliation(s)",
    "Corresponding Author Email",
]

_LIST_SEPARATOR = "; "
_EMPTY_NOTICE = "No papers with non-academic affiliations found."


def record_to_row(record: Record) -> dict[str, str]:
    """Map a Record onto the fixed CSV columns."""
    return {
        "PubmedID": record.pubmed_id,
        "Title": record.title,
        "Publication Date": record.publication_date,
        "Non-academic Author(s)": _LIST_SEPARATOR.join(record.authors),
        "Company Affiliation(s)": _LIST_SEPARATOR.join(record.company_affiliations),
        "Corresponding Author Email": record.corresponding_email,
    }


def write_records(records: list[Record], path: str | Path) -> bool:
    """Write records to a CSV file, replacing any existing content.

    Returns True if the file was written. An empty record list or an I/O
    error leaves no new file behind and returns False.
    """
    if not records:
        LOGGER.info(_EMPTY_NOTICE)
        return False

    path = Path(path)
    try:
        with path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.DictWriter(fh, fieldnames=CSV_COLUMNS)
            writer.writeheader()
            for record in records:
                writer.writerow(record_to_row(record))
    except OSError as exc:
        LOGGER.error("Failed writing results to %s: %s", path, exc)
        return False

    LOGGER.info("Results saved to %s", path)
    return True


def print_records(records: list[Record]) -> None:
    """Pretty-print records to stdout as a list of dicts."""
    if not records:
        LOGGER.info(_EMPTY_NOTICE)
        return

    pprint([asdict(record) for record in records], sort_dicts=False)


def export_records(records: list[Record], path: str | Path | None = None) -> bool:
    """Write records to path, or print them when no path is given."""
    if path:
        return write_records(records, path)

    print_records(records)
    return False
