"""
Extrator de pinpoints (parágrafo, inciso, alínea).

As buscas não são ancoradas: o pinpoint pode aparecer depois de qualquer
uma das gramáticas do parser ("Art. 5º, Lei 13.709/2018, § 1º", "lei-13709-2018, art. 7, IX").

Padrões detectados (sobre texto já normalizado, sem acentos):
- Parágrafo: "§ 1º", "§ 2", "paragrafo unico", "paragrafo 3º"
- Inciso: "inciso IV", ou um romano isolado entre vírgulas (", II,")
- Alínea: "alinea b"
"""

import re
from typing import Optional

from .models import PARAGRAPH_UNICO, Pinpoints
from ..utils.normalization import strip_ordinal

# Romano bem formado (I..MMMCMXCIX), nunca vazio
ROMAN_NUMERAL = (
    r"(?=[IVXLCDM])M{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})"
)

PARAGRAPH_RE = re.compile(
    r"§\s*(?:(?P<mark_unico>unico)\b|(?P<mark>\d+[ºªo°]?))"
    r"|\bparagrafo\s+(?:(?P<unico>unico)\b|(?P<number>\d+[ºªo°]?))",
    re.IGNORECASE,
)

INCISO_WORD_RE = re.compile(
    rf"\binciso\s+(?P<roman>{ROMAN_NUMERAL})\b",
    re.IGNORECASE,
)

# Segmento isolado: só maiúsculas, para não confundir siglas ("cdc", "cf")
INCISO_SEGMENT_RE = re.compile(
    rf",\s*(?P<roman>{ROMAN_NUMERAL})\s*[.;]?\s*(?=,|$)"
)

ALINEA_RE = re.compile(
    r"\balinea\s+[\"']?(?P<letter>[a-z])\b",
    re.IGNORECASE,
)


def extract_paragraph(normalized: str) -> Optional[str]:
    match = PARAGRAPH_RE.search(normalized)
    if not match:
        return None
    if match.group("mark_unico") or match.group("unico"):
        return PARAGRAPH_UNICO
    return strip_ordinal(match.group("mark") or match.group("number")) or None


def extract_inciso(normalized: str) -> Optional[str]:
    match = INCISO_WORD_RE.search(normalized) or INCISO_SEGMENT_RE.search(normalized)
    if not match:
        return None
    return match.group("roman").upper()


def extract_alinea(normalized: str) -> Optional[str]:
    match = ALINEA_RE.search(normalized)
    return match.group("letter").lower() if match else None


def extract_pinpoints(normalized: str) -> Pinpoints:
    """
    Extrai as três sub-referências de forma independente.

    Args:
        normalized: Texto já normalizado (normalize_citation_text)

    Returns:
        Pinpoints com os campos encontrados (todos podem ser None)

    Exemplos:
        >>> extract_pinpoints("Art. 5º, § 1º, II, alinea b")
        Pinpoints(paragraph='1', inciso='II', alinea='b')
        >>> extract_pinpoints("Art. 5º, paragrafo unico")
        Pinpoints(paragraph='unico', inciso=None, alinea=None)
    """
    if not normalized:
        return Pinpoints()

    return Pinpoints(
        paragraph=extract_paragraph(normalized),
        inciso=extract_inciso(normalized),
        alinea=extract_alinea(normalized),
    )
