"""
Convenções de IDs de documentos legais.

O ID canônico é a única chave de junção com a base de documentos e precisa
ser reproduzível byte a byte a partir de qualquer ParsedCitation válida.

Formato dos IDs:
- Normas numeradas: {tipo}-{numero}-{ano}
  Exemplo: lei-13709-2018, lc-101-2000, mp-2200-2001, decreto-9637-2018
  (número sem zeros à esquerda e sem separadores, ano com 4 dígitos)

- Constituição: constituicao-{ano}
  Exemplo: constituicao-1988

Referências de dispositivo (provision_ref / section) aparecem na base em
grafias diferentes conforme a fonte:
- "art5", "art. 5", "5", "art005", "ART-005"
"""

import re
from enum import Enum
from typing import Optional, Tuple


class LawType(str, Enum):
    """Tipos de instrumento federal reconhecidos."""
    LEI = "lei"
    LEI_COMPLEMENTAR = "lc"
    MEDIDA_PROVISORIA = "mp"
    DECRETO = "decreto"
    CONSTITUICAO = "constituicao"
    UNKNOWN = "unknown"


# Tipos que usam o formato {tipo}-{numero}-{ano}
NUMBERED_TYPES = (
    LawType.LEI,
    LawType.LEI_COMPLEMENTAR,
    LawType.MEDIDA_PROVISORIA,
    LawType.DECRETO,
)

DEFAULT_CONSTITUTION_YEAR = 1988

# Regex para parsear IDs
DOCUMENT_ID_PATTERN = re.compile(
    r"^(?P<kind>lei|lc|mp|decreto)-(?P<number>[1-9]\d*)-(?P<year>\d{4})$"
)
CONSTITUTION_ID_PATTERN = re.compile(r"^constituicao-(?P<year>\d{4})$")


def build_document_id(
    kind: LawType,
    number: Optional[int],
    year: Optional[int],
) -> str:
    """
    Constrói o ID canônico de um documento.

    Args:
        kind: Tipo da norma
        number: Número da norma (ignorado para a Constituição)
        year: Ano da norma

    Returns:
        ID canônico (ex: "lei-13709-2018", "constituicao-1988")

    Raises:
        ValueError: se kind for UNKNOWN
    """
    kind = LawType(kind)
    if kind == LawType.CONSTITUICAO:
        return f"constituicao-{year or DEFAULT_CONSTITUTION_YEAR}"
    if kind not in NUMBERED_TYPES:
        raise ValueError(f"Tipo de norma sem ID canônico: {kind.value}")
    return f"{kind.value}-{number or 0}-{year or 0}"


def parse_document_id(document_id: str) -> Optional[Tuple[LawType, Optional[int], int]]:
    """
    Faz parse de um ID canônico.

    Args:
        document_id: ID (ex: "lei-13709-2018")

    Returns:
        Tupla (kind, number, year) ou None se inválido.
        Para a Constituição, number é None.
    """
    if not document_id:
        return None

    match = DOCUMENT_ID_PATTERN.match(document_id)
    if match:
        return (
            LawType(match.group("kind")),
            int(match.group("number")),
            int(match.group("year")),
        )

    match = CONSTITUTION_ID_PATTERN.match(document_id)
    if match:
        return (LawType.CONSTITUICAO, None, int(match.group("year")))

    return None


def is_valid_document_id(value: str) -> bool:
    """Verifica se é um ID canônico válido."""
    return parse_document_id(value) is not None


def article_ref_candidates(article: str) -> list[str]:
    """
    Gera as grafias equivalentes de um artigo usadas na base de dispositivos.

    Args:
        article: Número do artigo, só dígitos (ex: "5")

    Returns:
        Lista sem duplicatas, em ordem de preferência
        Exemplo: ["art5", "art. 5", "5", "art005", "ART-005"]
        Zeros à esquerda são ignorados: "05" gera as mesmas grafias de "5".
    """
    article = (article or "").strip()
    if not article:
        return []

    if article.isdecimal():
        article = str(int(article))

    candidates = [f"art{article}", f"art. {article}", article]
    if article.isdecimal():
        padded = f"{int(article):03d}"
        candidates.append(f"art{padded}")
        candidates.append(f"ART-{padded}")

    return list(dict.fromkeys(candidates))
