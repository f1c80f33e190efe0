"""
Formatador de citações.

Formatos:
    full:     "Art. 1º, Lei nº 13.709/2018"
    short:    "Art. 1º, Lei 13.709/2018"
    pinpoint: "Art. 1º, § 1º, II, alinea b"

A Constituição tem rótulos próprios:
    full:     "Art. 5º, Constituicao Federal de 1988"
    short:    "Art. 5º, CF/88"

Formatar é exibição best-effort: citação inválida ou sem artigo vira "".
"""

from typing import Union

from .aliases import KIND_LABELS
from .models import PARAGRAPH_UNICO, CitationFormat, LawType, ParsedCitation
from ..canonical.id_conventions import DEFAULT_CONSTITUTION_YEAR
from ..utils.normalization import format_law_number

ORDINAL_MARK = "\u00ba"
PARAGRAPH_MARK = "\u00a7"


def ordinal(n: Union[str, int]) -> str:
    return f"{n}{ORDINAL_MARK}"


def build_pinpoint(parsed: ParsedCitation) -> str:
    """
    Monta o fragmento artigo + parágrafo + inciso + alínea, nessa ordem.

    Exemplo: "5º, § 1º, II, alinea b"
    """
    parts = [ordinal(parsed.article or "")]

    if parsed.paragraph:
        if parsed.paragraph == PARAGRAPH_UNICO:
            parts.append("paragrafo unico")
        else:
            parts.append(f"{PARAGRAPH_MARK} {ordinal(parsed.paragraph)}")

    if parsed.inciso:
        parts.append(parsed.inciso)

    if parsed.alinea:
        parts.append(f"alinea {parsed.alinea}")

    return ", ".join(parts)


def _law_number(parsed: ParsedCitation) -> str:
    return format_law_number(parsed.number) if parsed.number else ""


def format_citation(
    parsed: ParsedCitation,
    style: Union[CitationFormat, str] = CitationFormat.FULL,
) -> str:
    """
    Renderiza uma ParsedCitation em um dos três formatos canônicos.

    Args:
        parsed: Citação estruturada
        style: "full", "short" ou "pinpoint"

    Returns:
        Citação formatada, ou "" se a citação for inválida ou sem artigo

    Raises:
        ValueError: se style não for um formato conhecido
    """
    if not isinstance(style, CitationFormat):
        style = CitationFormat(str(style).lower())

    if parsed is None or not parsed.valid or not parsed.article:
        return ""

    pinpoint = build_pinpoint(parsed)

    if style == CitationFormat.PINPOINT:
        return f"Art. {pinpoint}"

    if parsed.kind == LawType.CONSTITUICAO:
        if style == CitationFormat.SHORT:
            return f"Art. {pinpoint}, CF/88"
        return f"Art. {pinpoint}, Constituicao Federal de {parsed.year or DEFAULT_CONSTITUTION_YEAR}"

    label = KIND_LABELS.get(parsed.kind, KIND_LABELS[LawType.LEI])
    year = parsed.year or ""

    if style == CitationFormat.SHORT:
        return f"Art. {pinpoint}, {label} {_law_number(parsed)}/{year}".strip()

    return f"Art. {pinpoint}, {label} n{ORDINAL_MARK} {_law_number(parsed)}/{year}".strip()
