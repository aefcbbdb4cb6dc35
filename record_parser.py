"""PubMed efetch XML parsing into company-affiliated Records."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from filters import COMPANY_KEYWORDS, is_company_affiliation
from models import NO_TITLE, UNKNOWN_DATE, Record

LOGGER = logging.getLogger(__name__)


def parse_records(xml_text: str | bytes, keywords: Iterable[str] = COMPANY_KEYWORDS) -> list[Record]:
    """Parse a PubmedArticleSet document and keep company-affiliated articles.

    Each article yields a Record only if at least one author affiliation
    matches a keyword. Missing fields fall back to placeholders; a document
    that is not well-formed XML yields an empty list.
    """
    keywords = tuple(keywords)

    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        LOGGER.error("Error parsing paper details XML: %s", exc)
        return []

    records: list[Record] = []
    articles = root.findall("PubmedArticle")
    for article in articles:
        record = _parse_article(article, keywords)
        if record is not None:
            records.append(record)

    LOGGER.info(
        "Parsed %s articles, %s with company affiliations",
        len(articles),
        len(records),
    )
    return records


def _parse_article(article: ET.Element, keywords: tuple[str, ...]) -> Record | None:
    citation = article.find("MedlineCitation")
    if citation is None:
        LOGGER.debug("Skipping PubmedArticle without MedlineCitation")
        return None

    pubmed_id = _text(citation.find("PMID"))
    title = _text(citation.find("Article/ArticleTitle")) or NO_TITLE
    publication_date = _text(citation.find("DateCompleted/Year")) or UNKNOWN_DATE

    authors: list[str] = []
    company_affiliations: list[str] = []
    for author in citation.findall("Article/AuthorList/Author"):
        name = _text(author.find("LastName")) or _text(author.find("CollectiveName"))
        if name:
            authors.append(name)

        # Only the first listed affiliation is considered per author.
        affiliation = _text(author.find("AffiliationInfo/Affiliation"))
        if affiliation and is_company_affiliation(affiliation, keywords):
            company_affiliations.append(affiliation)

    if not company_affiliations:
        LOGGER.debug("PMID %s: no company affiliations, dropped", pubmed_id or "?")
        return None

    return Record(
        pubmed_id=pubmed_id,
        title=title,
        publication_date=publication_date,
        authors=tuple(authors),
        company_affiliations=tuple(company_affiliations),
    )


def _text(element: ET.Element | None) -> str:
    """Full text of an element with inline markup (<i>, <sup>) flattened."""
    if element is None:
        return ""
    return " ".join("".join(element.itertext()).split())
