"""
Motor de citações: parser, formatter, resolução de IDs e validação.
"""

from .models import (
    LawType,
    CitationFormat,
    ParsedCitation,
    Pinpoints,
    ValidationResult,
    PARAGRAPH_UNICO,
)
from .aliases import AliasEntry, ALIAS_MAP, lookup_alias
from .pinpoint import extract_pinpoints
from .parser import Grammar, parse_citation, parse_with_grammar
from .formatter import format_citation, build_pinpoint
from .statute_id import (
    normalize_reference,
    statute_id_candidates,
    resolve_existing_statute_id,
)
from .validator import validate_citation

__all__ = [
    # Models
    "LawType",
    "CitationFormat",
    "ParsedCitation",
    "Pinpoints",
    "ValidationResult",
    "PARAGRAPH_UNICO",
    # Aliases
    "AliasEntry",
    "ALIAS_MAP",
    "lookup_alias",
    # Parsing
    "extract_pinpoints",
    "Grammar",
    "parse_citation",
    "parse_with_grammar",
    # Formatting
    "format_citation",
    "build_pinpoint",
    # Statute IDs
    "normalize_reference",
    "statute_id_candidates",
    "resolve_existing_statute_id",
    # Validation
    "validate_citation",
]
