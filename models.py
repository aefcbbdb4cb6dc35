"""Shared typed models for the pipeline."""

from __future__ import annotations

from dataclasses import dataclass

NO_TITLE = "No Title"
UNKNOWN_DATE = "Unknown Date"
# PubMed efetch does not expose a corresponding-author email.
EMAIL_PLACEHOLDER = "N/A"


@dataclass(frozen=True, slots=True)
class Record:
    """PubMed article with at least one company-affiliated author."""

    pubmed_id: str
    title: str
    publication_date: str
    authors: tuple[str, ...]
    company_affiliations: tuple[str, ...]
    corresponding_email: str = EMAIL_PLACEHOLDER
