"""
Resolução de identificadores de normas.

Normas são identificadas por tipo-número-ano, ex: "lei-13709-2018" (LGPD).
O usuário pode informar o ID, uma referência ("Lei 13.709/2018",
"Lei nº 13.709, de 14 de agosto de 2018") ou um nome popular ("LGPD").

Duas etapas separadas:
- statute_id_candidates(): função pura, gera candidatos em ordem fixa
  (exato -> alias -> referência normalizada -> variação de separador)
- resolve_existing_statute_id(): testa os candidatos na base e, em último
  caso, faz busca por substring no título

A busca por título é APROXIMADA: devolve o primeiro documento cujo título
contém o texto, mesmo que outros também contenham.
"""

import logging
import re
from typing import Optional

from .aliases import TYPE_LABEL_PATTERN, lookup_alias, lookup_type_label
from ..canonical.id_conventions import build_document_id
from ..utils.normalization import digits_only, normalize_citation_text

logger = logging.getLogger(__name__)

# "Lei nº 13.709, de 14 de agosto de 2018" ou "Lei 13.709/2018"
REFERENCE_RE = re.compile(
    rf"^(?P<label>{TYPE_LABEL_PATTERN})\s+(?:n\.?\s*[ºo°]?\.?\s*)?(?P<number>\d[\d.]*)\s*"
    r"(?:/\s*|,\s*de\s+\d{1,2}\s*[ºo°]?\s+de\s+[a-z]+\s+de\s+)(?P<year>\d{4})",
    re.IGNORECASE,
)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_reference(reference: str) -> Optional[str]:
    """
    Converte uma referência textual no ID canônico.

    Exemplos:
        >>> normalize_reference("Lei 13.709/2018")
        'lei-13709-2018'
        >>> normalize_reference("Lei Complementar nº 101, de 4 de maio de 2000")
        'lc-101-2000'
        >>> normalize_reference("LGPD") is None
        True
    """
    match = REFERENCE_RE.match(normalize_citation_text(reference))
    if not match:
        return None

    digits = digits_only(match.group("number"))
    if not digits or int(digits) == 0:
        return None

    return build_document_id(
        lookup_type_label(match.group("label")),
        int(digits),
        int(match.group("year")),
    )


def statute_id_candidates(input_id: Optional[str]) -> list[str]:
    """
    Gera os IDs candidatos para uma entrada, sem duplicatas e em ordem.

    Args:
        input_id: ID, referência ou nome popular

    Returns:
        Lista ordenada de candidatos (vazia para entrada vazia)
    """
    trimmed = (input_id or "").strip()
    if not trimmed:
        return []

    lowered = trimmed.lower()
    candidates = [lowered, trimmed]

    entry = lookup_alias(lowered)
    if entry is not None:
        candidates.append(entry.document_id)

    normalized = normalize_reference(trimmed)
    if normalized:
        candidates.append(normalized)

    # Tolera os dois estilos de separador
    if " " in lowered:
        candidates.append(_WHITESPACE_RE.sub("-", lowered))
    if "-" in lowered:
        candidates.append(lowered.replace("-", " "))

    return list(dict.fromkeys(candidates))


def resolve_existing_statute_id(input_id: Optional[str], store) -> Optional[str]:
    """
    Resolve a entrada para um ID existente na base.

    Args:
        input_id: ID, referência ou nome popular
        store: DocumentStore (exists / lookup_by_title_substring)

    Returns:
        ID do documento, ou None se nada casar
    """
    candidates = statute_id_candidates(input_id)
    if not candidates:
        return None
    trimmed = input_id.strip()

    for candidate in candidates:
        if store.exists(candidate):
            return candidate

    # Último recurso: substring no título (aproximado)
    doc = store.lookup_by_title_substring(trimmed)
    if doc is None:
        return None

    logger.info(f"ID resolvido por título (aproximado): {input_id!r} -> {doc.id}")
    return doc.id
