"""NCBI E-utilities helpers: esearch for PubMed ids, efetch for article XML."""

from __future__ import annotations

import logging
import os
from typing import Any

import requests

PUBMED_SEARCH_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esearch.fcgi"
PUBMED_FETCH_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/efetch.fcgi"
REQUEST_TIMEOUT_SECONDS = 30
NCBI_TOOL_NAME = "pubmed-company-papers"
_DEFAULT_RETMAX = 5

LOGGER = logging.getLogger(__name__)


def search_pubmed(query: str, retmax: int | None = None) -> list[str]:
    """Run an esearch query and return the matching PubMed ids in rank order.

    Args:
        query: PubMed search term, passed through as-is.
        retmax: Maximum number of ids to request. Reads PUBMED_RETMAX env var
            if not supplied; defaults to 5.

    Returns an empty list when the request or JSON decoding fails, or when
    the search has no hits.
    """
    if not query or not query.strip():
        raise ValueError("query must be a non-empty string")

    if retmax is None:
        retmax = _retmax_from_env()

    params = {
        "db": "pubmed",
        "term": query,
        "retmax": str(retmax),
        "retmode": "json",
        **_ncbi_identity_params(),
    }
    LOGGER.debug("PubMed search: url=%s params=%s", PUBMED_SEARCH_URL, _redact(params))

    try:
        response = requests.get(PUBMED_SEARCH_URL, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        LOGGER.error("Error fetching PubMed search results: %s", exc)
        return []

    pubmed_ids = _extract_id_list(payload)
    if not pubmed_ids:
        LOGGER.info("No papers found.")
        return []

    LOGGER.info("PubMed search: query=%r retmax=%s returned=%s", query, retmax, len(pubmed_ids))
    return pubmed_ids


def fetch_pubmed_details(pubmed_ids: list[str]) -> bytes | None:
    """Fetch full article records for the given ids as raw PubMed XML.

    All ids go out in one efetch request. The body is returned undecoded so
    the XML parser honours the document's own encoding declaration.
    Returns None on transport failure.
    """
    if not pubmed_ids:
        raise ValueError("pubmed_ids must be a non-empty list")

    params = {
        "db": "pubmed",
        "id": ",".join(pubmed_ids),
        "retmode": "xml",
        **_ncbi_identity_params(),
    }
    LOGGER.debug("PubMed fetch: url=%s params=%s", PUBMED_FETCH_URL, _redact(params))

    try:
        response = requests.get(PUBMED_FETCH_URL, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.RequestException as exc:
        LOGGER.error("Error fetching paper details: %s", exc)
        return None

    LOGGER.info("PubMed fetch: ids=%s bytes=%s", len(pubmed_ids), len(response.content))
    return response.content


def _retmax_from_env() -> int:
    """PUBMED_RETMAX as a positive int; blank or invalid values use the default."""
    raw = os.environ.get("PUBMED_RETMAX", "").strip()
    if not raw:
        return _DEFAULT_RETMAX

    try:
        retmax = int(raw)
    except ValueError:
        retmax = 0

    if retmax < 1:
        LOGGER.warning(
            "Ignoring invalid PUBMED_RETMAX=%r, using default %s", raw, _DEFAULT_RETMAX
        )
        return _DEFAULT_RETMAX
    return retmax


def _extract_id_list(payload: Any) -> list[str]:
    """Pull esearchresult.idlist out of a decoded esearch payload."""
    if not isinstance(payload, dict):
        return []

    result = payload.get("esearchresult")
    if not isinstance(result, dict):
        return []

    id_list = result.get("idlist")
    if not isinstance(id_list, list):
        return []

    return [str(item).strip() for item in id_list if str(item).strip()]


def _ncbi_identity_params() -> dict[str, str]:
    """Optional NCBI api_key / tool / email parameters from the environment."""
    params: dict[str, str] = {}
    api_key = os.getenv("NCBI_API_KEY")
    email = os.getenv("NCBI_EMAIL")
    if api_key:
        params["api_key"] = api_key
    if email:
        params["tool"] = NCBI_TOOL_NAME
        params["email"] = email
    return params


def _redact(params: dict[str, str]) -> dict[str, str]:
    return {key: ("***" if key == "api_key" else value) for key, value in params.items()}
