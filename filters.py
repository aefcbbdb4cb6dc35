"""Keyword filter for company (non-academic) author affiliations."""

from __future__ import annotations

from collections.abc import Iterable

# Organizational terms that mark an affiliation as industry rather than academia.
COMPANY_KEYWORDS: tuple[str, ...] = (
    "Pharma",
    "Biotech",
    "Therapeutics",
    "Inc.",
    "Ltd.",
    "GmbH",
    "Corporation",
    "Research Institute",
    "Technologies",
)


def is_company_affiliation(affiliation: str | None, keywords: Iterable[str] = COMPANY_KEYWORDS) -> bool:
    """Return True if any keyword occurs in the affiliation, ignoring case.

    Plain substring match: "Acme Pharmaceuticals" matches "Pharma" and
    "Tech Inc." matches "Inc.". Blank affiliations never match.
    """
    if not affiliation or not affiliation.strip():
        return False

    text = affiliation.lower()
    return any(keyword.lower() in text for keyword in keywords)
