"""
Busca full-text nos dispositivos (FTS5 + bm25).

A query do usuário passa por build_query_variants(); as variantes são
tentadas em ordem e a primeira que executar sem erro de sintaxe vence.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from ..citation.statute_id import resolve_existing_statute_id
from ..config import config
from ..registry.document_store import FTS_TABLE, DocumentStore
from .query_sanitizer import build_query_variants

logger = logging.getLogger(__name__)

SNIPPET_OPEN = ">>>"
SNIPPET_CLOSE = "<<<"
SNIPPET_TOKENS = 32


@dataclass
class SearchResult:
    """Um dispositivo encontrado na busca."""

    document_id: str
    document_title: str
    document_status: str
    provision_ref: str
    chapter: Optional[str]
    section: str
    snippet: str
    relevance: float

    def to_dict(self) -> dict:
        return {
            "document_id": self.document_id,
            "document_title": self.document_title,
            "document_status": self.document_status,
            "provision_ref": self.provision_ref,
            "chapter": self.chapter,
            "section": self.section,
            "snippet": self.snippet,
            "relevance": self.relevance,
        }


def clamp_limit(limit: Optional[int]) -> int:
    """Limita o número de resultados a [1, search_max_limit]."""
    if limit is None:
        return config.search_default_limit
    return max(1, min(int(limit), config.search_max_limit))


def _build_sql(document_id: Optional[str], status: Optional[str]) -> str:
    sql = (
        "SELECT p.document_id, d.title AS document_title, d.status AS document_status, "
        "p.provision_ref, p.chapter, p.section, "
        f"snippet({FTS_TABLE}, 0, '{SNIPPET_OPEN}', '{SNIPPET_CLOSE}', '...', {SNIPPET_TOKENS}) AS snippet, "
        f"bm25({FTS_TABLE}) AS score "
        f"FROM {FTS_TABLE} "
        f"JOIN legal_provisions p ON p.id = {FTS_TABLE}.rowid "
        "JOIN legal_documents d ON d.id = p.document_id "
        f"WHERE {FTS_TABLE} MATCH :query"
    )
    if document_id:
        sql += " AND p.document_id = :document_id"
    if status:
        sql += " AND d.status = :status"
    return sql + " ORDER BY score LIMIT :limit"


def search_legislation(
    store: DocumentStore,
    query: str,
    document_id: Optional[str] = None,
    status: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[SearchResult]:
    """
    Busca dispositivos por palavra-chave.

    Args:
        store: DocumentStore
        query: Texto livre ou sintaxe FTS5 (AND, OR, NOT, "frase", prefixo*)
        document_id: Filtra uma norma (ID, referência ou nome popular)
        status: Filtra por vigência (in_force, amended, repealed)
        limit: Máximo de resultados (default 10, máx 50)

    Returns:
        Lista de SearchResult ordenada por relevância

    Raises:
        OperationalError: se nenhuma variante da query executar
    """
    variants = build_query_variants(query)
    if not variants:
        return []

    params = {"limit": clamp_limit(limit)}

    if document_id:
        params["document_id"] = resolve_existing_statute_id(document_id, store) or document_id.strip()
    if status:
        params["status"] = status

    sql = text(_build_sql(params.get("document_id"), status))

    last_error: Optional[OperationalError] = None
    for variant in variants:
        try:
            with store.engine.connect() as conn:
                rows = conn.execute(sql, {**params, "query": variant}).mappings().all()
        except OperationalError as e:
            logger.warning(f"Variante FTS rejeitada ({variant!r}): {e.orig}")
            last_error = e
            continue

        return [
            SearchResult(
                document_id=row["document_id"],
                document_title=row["document_title"],
                document_status=row["document_status"],
                provision_ref=row["provision_ref"],
                chapter=row["chapter"],
                section=row["section"],
                snippet=row["snippet"],
                relevance=round(-float(row["score"]), 4),
            )
            for row in rows
        ]

    raise last_error
