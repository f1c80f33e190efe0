"""
Módulo de convenções de ID canônico.
"""

from .id_conventions import (
    LawType,
    build_document_id,
    parse_document_id,
    is_valid_document_id,
    article_ref_candidates,
    DEFAULT_CONSTITUTION_YEAR,
)

__all__ = [
    "LawType",
    "build_document_id",
    "parse_document_id",
    "is_valid_document_id",
    "article_ref_candidates",
    "DEFAULT_CONSTITUTION_YEAR",
]
