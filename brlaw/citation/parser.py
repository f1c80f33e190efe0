"""
Parser de citações da legislação federal brasileira.

Aceita quatro gramáticas, tentadas nesta ordem (a primeira que casar vence):

1. IDENTIFIER: "lei-13709-2018, art. 1"  /  "constituicao-1988, art. 5"
2. FULL:       "Art. 1º, Lei nº 13.709, de 14 de agosto de 2018"
3. SHORT:      "Art. 1º, Lei 13.709/2018"
4. ALIAS:      "Art. 5º, LGPD"

FULL vem antes de SHORT porque as duas compartilham o prefixo "Art. N, Lei ...".
ALIAS vem por último porque aceita qualquer texto depois do artigo; se o
alias não existir na tabela, o parse falha (não há palpite mais fraco).

Pinpoints (parágrafo, inciso, alínea) são extraídos uma única vez do texto
inteiro, independente da gramática que casou.

Uso:
    from brlaw.citation.parser import parse_citation

    parsed = parse_citation("lei-13709-2018, art. 5, § 1º")
    # parsed.kind == LawType.LEI, parsed.number == 13709, parsed.paragraph == "1"

parse_citation nunca lança exceção: entrada inválida vira valid=False.
"""

import logging
import re
from enum import Enum
from typing import Callable, Optional

from .aliases import MONTHS, TYPE_LABEL_PATTERN, lookup_alias, lookup_type_label
from .models import LawType, ParsedCitation, Pinpoints
from .pinpoint import extract_pinpoints
from ..utils.normalization import digits_only, normalize_citation_text

logger = logging.getLogger(__name__)


class Grammar(str, Enum):
    """Gramáticas de entrada, na ordem de prioridade."""
    IDENTIFIER = "identifier"
    FULL = "full"
    SHORT = "short"
    ALIAS = "alias"


# Fragmentos comuns
_ARTICLE = r"art(?:igo)?\.?\s*(?P<article>\d+)\s*[ºªo°]?"
_NUMBER_PREFIX = r"(?:n\.?\s*[ºo°]?\.?\s*)?"
_LAW_NUMBER = r"(?P<number>\d[\d.]*)"
_LABEL = rf"(?P<label>{TYPE_LABEL_PATTERN})"

# "lei-13709-2018, art. 1" / "constituicao-1988, art. 5"
ID_CITATION_RE = re.compile(
    r"^(?:(?P<kind>lei|lc|mp|decreto)-(?P<number>[1-9]\d*)-(?P<year>\d{4})"
    r"|constituicao-(?P<cf_year>\d{4}))"
    rf"\s*,?\s*{_ARTICLE}",
    re.IGNORECASE,
)

# "Art. 1º, Lei nº 13.709, de 14 de agosto de 2018"
FULL_CITATION_RE = re.compile(
    rf"^{_ARTICLE}\s*,?\s*{_LABEL}\s+{_NUMBER_PREFIX}{_LAW_NUMBER}\s*,\s*"
    r"de\s+(?P<day>\d{1,2})\s*[ºo°]?\s+de\s+(?P<month>[a-z]+)\s+de\s+(?P<year>\d{4})",
    re.IGNORECASE,
)

# "Art. 1º, Lei 13.709/2018"
SHORT_CITATION_RE = re.compile(
    rf"^{_ARTICLE}\s*,?\s*{_LABEL}\s+{_NUMBER_PREFIX}{_LAW_NUMBER}\s*/\s*(?P<year>\d{{4}})\b",
    re.IGNORECASE,
)

# "Art. 5º, LGPD"
ALIAS_CITATION_RE = re.compile(
    rf"^{_ARTICLE}\s*,?\s*(?P<alias>.+)$",
    re.IGNORECASE,
)


def _build(
    match: re.Match,
    pinpoints: Pinpoints,
    kind: LawType,
    number: Optional[int],
    year: int,
    title: Optional[str] = None,
) -> ParsedCitation:
    return ParsedCitation(
        valid=True,
        kind=kind,
        number=number,
        year=year,
        article=match.group("article"),
        paragraph=pinpoints.paragraph,
        inciso=pinpoints.inciso,
        alinea=pinpoints.alinea,
        title=title,
    )


def _law_number(raw_number: str) -> Optional[int]:
    # Norma número 0 não existe e não gera ID canônico
    digits = digits_only(raw_number)
    number = int(digits) if digits else 0
    return number or None


def _match_identifier(text: str, pinpoints: Pinpoints) -> Optional[ParsedCitation]:
    match = ID_CITATION_RE.match(text)
    if not match:
        return None

    if match.group("cf_year"):
        return _build(match, pinpoints, LawType.CONSTITUICAO, None, int(match.group("cf_year")))

    return _build(
        match,
        pinpoints,
        LawType(match.group("kind").lower()),
        int(match.group("number")),
        int(match.group("year")),
    )


def _match_full(text: str, pinpoints: Pinpoints) -> Optional[ParsedCitation]:
    match = FULL_CITATION_RE.match(text)
    if not match:
        return None

    # Mês e dia precisam ser uma data plausível
    if match.group("month").lower() not in MONTHS:
        return None
    if not 1 <= int(match.group("day")) <= 31:
        return None

    number = _law_number(match.group("number"))
    if number is None:
        return None

    year = match.group("year")
    return _build(
        match,
        pinpoints,
        lookup_type_label(match.group("label")),
        number,
        int(year),
        title=f"{match.group('label')} {match.group('number')}/{year}",
    )


def _match_short(text: str, pinpoints: Pinpoints) -> Optional[ParsedCitation]:
    match = SHORT_CITATION_RE.match(text)
    if not match:
        return None

    number = _law_number(match.group("number"))
    if number is None:
        return None

    year = match.group("year")
    return _build(
        match,
        pinpoints,
        lookup_type_label(match.group("label")),
        number,
        int(year),
        title=f"{match.group('label')} {match.group('number')}/{year}",
    )


def _match_alias(text: str, pinpoints: Pinpoints) -> Optional[ParsedCitation]:
    match = ALIAS_CITATION_RE.match(text)
    if not match:
        return None

    entry = lookup_alias(match.group("alias"))
    if entry is None:
        return None

    return _build(match, pinpoints, entry.kind, entry.number, entry.year)


# Ordem fixa: adicionar uma gramática nova é acrescentar uma linha aqui
GRAMMARS: tuple[tuple[Grammar, Callable[[str, Pinpoints], Optional[ParsedCitation]]], ...] = (
    (Grammar.IDENTIFIER, _match_identifier),
    (Grammar.FULL, _match_full),
    (Grammar.SHORT, _match_short),
    (Grammar.ALIAS, _match_alias),
)


def _coerce_input(raw) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


def parse_with_grammar(raw) -> tuple[Optional[Grammar], ParsedCitation]:
    """
    Faz o parse e informa qual gramática casou.

    Returns:
        Tupla (grammar, citation). grammar é None quando nada casou.
    """
    raw_text = _coerce_input(raw)
    text = normalize_citation_text(raw_text)
    pinpoints = extract_pinpoints(text)

    if text:
        for grammar, matcher in GRAMMARS:
            parsed = matcher(text, pinpoints)
            if parsed is not None:
                return grammar, parsed

    logger.debug(f"Citação não reconhecida: {raw_text!r}")
    return None, ParsedCitation.invalid(f"could not parse citation: {raw_text}")


def parse_citation(raw) -> ParsedCitation:
    """
    Converte uma citação livre em ParsedCitation.

    Args:
        raw: Texto da citação (qualquer formato aceito)

    Returns:
        ParsedCitation. valid=False com error preenchido se nenhuma
        gramática casar; nunca lança exceção.

    Exemplos:
        >>> parse_citation("Art. 1º, Lei nº 13.709, de 14 de agosto de 2018").number
        13709
        >>> parse_citation("Art. 5º, LGPD").article
        '5'
        >>> parse_citation("not a citation at all").valid
        False
    """
    _, parsed = parse_with_grammar(raw)
    return parsed
