"""Dictionary lookup: fetching LDOCE pages and extracting entries."""

from autoanki.input.ldoce import (
    dictionary_url,
    parse_document,
    fetch_document,
    lookup_word,
    extract_entry,
    extract_detail,
    extract_explanation,
    extract_phrase,
)

__all__ = [
    "dictionary_url",
    "parse_document",
    "fetch_document",
    "lookup_word",
    "extract_entry",
    "extract_detail",
    "extract_explanation",
    "extract_phrase",
]
