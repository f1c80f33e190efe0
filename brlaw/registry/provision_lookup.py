"""
get_provision - Recupera um artigo (ou todos) de uma norma federal.

A norma pode ser informada pelo ID ("lei-13709-2018"), por uma referência
("Lei 13.709/2018") ou por um nome popular ("LGPD"). O artigo aceita
"5", "5º", "art. 5" ou "Art. 5o".
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..canonical.id_conventions import article_ref_candidates
from ..citation.statute_id import resolve_existing_statute_id
from ..config import config
from ..utils.normalization import normalize_citation_text, strip_ordinal
from .document_store import DocumentStore, ProvisionRecord

logger = logging.getLogger(__name__)

_ARTICLE_PREFIX_RE = re.compile(r"^art(?:igo)?\.?\s*", re.IGNORECASE)

DEFAULT_CITATION_URL = "https://www.planalto.gov.br/ccivil_03/"


@dataclass
class ProvisionLookupResult:
    """Resultado de get_provision."""

    document_id: str
    provisions: list[ProvisionRecord] = field(default_factory=list)
    truncated: bool = False
    total: int = 0


def normalize_article_ref(article_ref: str) -> str:
    """
    Reduz a referência do artigo ao número.

    Exemplos:
        >>> normalize_article_ref("Art. 5º")
        '5'
        >>> normalize_article_ref("art5")
        '5'
    """
    ref = normalize_citation_text(article_ref)
    ref = _ARTICLE_PREFIX_RE.sub("", ref)
    return strip_ordinal(ref)


def citation_url(record: ProvisionRecord) -> str:
    return record.document_url or DEFAULT_CITATION_URL


def get_provision(
    store: DocumentStore,
    law_identifier: Optional[str],
    article: Optional[str] = None,
    max_all_provisions: Optional[int] = None,
) -> ProvisionLookupResult:
    """
    Busca dispositivos de uma norma.

    Args:
        store: DocumentStore
        law_identifier: ID, referência ou nome popular da norma
        article: Número do artigo; se omitido, devolve todos (com limite)
        max_all_provisions: Limite ao devolver todos (default: config)

    Returns:
        ProvisionLookupResult (provisions vazio se nada for encontrado)

    Raises:
        ValueError: se law_identifier não for informado
    """
    if not law_identifier or not law_identifier.strip():
        raise ValueError("document_id or law_identifier is required")

    document_id = resolve_existing_statute_id(law_identifier, store) or law_identifier.strip()

    if not article or not article.strip():
        cap = max_all_provisions or config.max_all_provisions
        total = store.count_provisions(document_id)
        provisions = store.get_provisions(document_id, limit=cap)
        if total > cap:
            logger.info(f"get_provision truncado: {document_id} ({total} > {cap})")
        return ProvisionLookupResult(
            document_id=document_id,
            provisions=provisions,
            truncated=total > cap,
            total=total,
        )

    article_number = normalize_article_ref(article)
    provisions = store.get_provisions(document_id, article_ref_candidates(article_number))
    return ProvisionLookupResult(
        document_id=document_id,
        provisions=provisions,
        total=len(provisions),
    )
