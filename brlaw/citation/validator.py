"""
Validador de citações.

Confere uma citação contra a base para garantir que o documento e o
dispositivo citados existem de fato.

Etapas:
1. Parse da citação (falha -> o erro do parser é o único aviso)
2. ID canônico -> busca exata; se não achar e houver título, busca por substring
3. Documento revogado -> aviso (a citação histórica continua válida)
4. Artigo -> testa as grafias equivalentes na base de dispositivos

Nenhum caso de entrada do usuário lança exceção; só erros da própria base
(ex: banco indisponível) propagam.
"""

import logging

from .models import ValidationResult
from .parser import parse_citation
from ..canonical.id_conventions import article_ref_candidates, build_document_id

logger = logging.getLogger(__name__)

REPEALED_STATUS = "repealed"


def validate_citation(citation_text: str, store) -> ValidationResult:
    """
    Valida uma citação contra a base de documentos.

    Args:
        citation_text: Citação em qualquer formato aceito pelo parser
        store: DocumentStore (lookup_by_id / lookup_by_title_substring / provision_exists)

    Returns:
        ValidationResult com flags de existência e avisos
    """
    parsed = parse_citation(citation_text)

    if not parsed.valid:
        return ValidationResult(
            citation=parsed,
            warnings=[parsed.error or "Invalid citation format"],
        )

    expected_id = build_document_id(parsed.kind, parsed.number, parsed.year)

    doc = store.lookup_by_id(expected_id)
    if doc is None and parsed.title:
        doc = store.lookup_by_title_substring(parsed.title)

    if doc is None:
        logger.info(f"Documento não encontrado: {expected_id}")
        return ValidationResult(
            citation=parsed,
            warnings=[f'Document "{expected_id}" not found in database'],
        )

    warnings: list[str] = []
    if doc.status == REPEALED_STATUS:
        warnings.append("This law has been repealed")

    provision_exists = False
    if parsed.article:
        provision_exists = store.provision_exists(doc.id, article_ref_candidates(parsed.article))
        if not provision_exists:
            logger.info(f"Art. {parsed.article} não encontrado em {doc.id}")
            warnings.append(f"Art. {parsed.article} not found in {doc.title}")

    return ValidationResult(
        citation=parsed,
        document_exists=True,
        provision_exists=provision_exists,
        document_title=doc.title,
        status=doc.status,
        warnings=warnings,
    )
