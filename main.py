"""CLI entrypoint: PubMed search -> company-affiliation filter -> CSV."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

from csv_sink import export_records
from filters import COMPANY_KEYWORDS
from models import Record
from pubmed_client import fetch_pubmed_details, search_pubmed
from record_parser import parse_records


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        description="Fetch PubMed papers with at least one pharma/biotech company-affiliated author",
    )
    parser.add_argument("-q", "--query", required=True, help="Search query for PubMed")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-f", "--file", default=None, help="Filename to save results (prints to console if omitted)")
    args = parser.parse_args(argv)
    if not args.query.strip():
        parser.error("--query must not be blank")
    return args


def run(query: str, output_path: str | None = None) -> list[Record]:
    """Run one pipeline pass and return the records that were exported."""
    pubmed_ids = search_pubmed(query)
    if not pubmed_ids:
        records: list[Record] = []
    else:
        xml_body = fetch_pubmed_details(pubmed_ids)
        records = parse_records(xml_body, COMPANY_KEYWORDS) if xml_body else []

    logging.info(
        "Run complete. query=%r ids=%s records=%s",
        query,
        len(pubmed_ids),
        len(records),
    )

    export_records(records, output_path)
    return records


def main(argv: list[str] | None = None) -> None:
    """Initialize config and execute the pipeline."""
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    run(args.query, output_path=args.file)


if __name__ == "__main__":
    main()
