"""
Utils - Funcoes utilitarias compartilhadas.
"""

from .normalization import (
    normalize_citation_text,
    remove_accents,
    strip_ordinal,
    digits_only,
    format_law_number,
)

__all__ = [
    "normalize_citation_text",
    "remove_accents",
    "strip_ordinal",
    "digits_only",
    "format_law_number",
]
