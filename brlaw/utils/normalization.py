"""
Normalizacao de texto para citacoes legais brasileiras.

Todas as gramaticas do parser operam sobre texto normalizado:
- Remove acentos (NFD + descarta marcas combinantes): "Código" -> "Codigo"
- Remove espacos nas bordas
- Preserva os marcadores ordinais (º, ª) e o sinal de paragrafo (§),
  que nao sao decompostos pela NFD

Tambem concentra os helpers numericos usados por parser e formatter:
- strip_ordinal("1º") -> "1"
- digits_only("13.709") -> "13709"
- format_law_number(13709) -> "13.709"
"""

import re
import unicodedata
from typing import Optional

# Marcadores ordinais aceitos no fim de um token: º, ª, ° e o "o" ASCII
ORDINAL_SUFFIX_RE = re.compile(r"[ºªo°]+$", re.IGNORECASE)

_NON_DIGIT_RE = re.compile(r"\D")


def remove_accents(text: str) -> str:
    """
    Remove marcas diacriticas (acentos, cedilha, til).

    Exemplos:
        >>> remove_accents("Medida Provisória")
        'Medida Provisoria'
        >>> remove_accents("Art. 1º, § 2º")
        'Art. 1º, § 2º'
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_citation_text(text: Optional[str]) -> str:
    """
    Normaliza uma citacao para matching: sem acentos e sem espacos nas bordas.

    Idempotente: normalize_citation_text(normalize_citation_text(s)) == normalize_citation_text(s)

    Args:
        text: Texto livre (None e tratado como vazio)

    Returns:
        Texto normalizado
    """
    if not text:
        return ""

    # Acentos primeiro: uma marca combinante solta na borda nao pode
    # sobreviver ao strip
    return remove_accents(text).strip()


def strip_ordinal(token: Optional[str]) -> str:
    """
    Remove marcadores ordinais do FIM do token.

    Exemplos:
        >>> strip_ordinal("1º")
        '1'
        >>> strip_ordinal("2o ")
        '2'
        >>> strip_ordinal("10")
        '10'
    """
    if not token:
        return ""
    return ORDINAL_SUFFIX_RE.sub("", token.strip()).strip()


def digits_only(value: str) -> str:
    """Remove separadores de milhar e qualquer outro caractere nao numerico."""
    return _NON_DIGIT_RE.sub("", value or "")


def format_law_number(number: int) -> str:
    """
    Formata o numero de uma norma com ponto de milhar brasileiro.

    Independe do locale do processo.

    Exemplos:
        >>> format_law_number(13709)
        '13.709'
        >>> format_law_number(101)
        '101'
    """
    return f"{number:,}".replace(",", ".")
