"""
Busca full-text e sanitização de queries.
"""

from .query_sanitizer import build_query_variants, sanitize_fts_query, quote_phrase, strip_control_chars
from .legislation_search import search_legislation, SearchResult

__all__ = [
    "build_query_variants",
    "sanitize_fts_query",
    "quote_phrase",
    "strip_control_chars",
    "search_legislation",
    "SearchResult",
]
