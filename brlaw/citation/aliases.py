"""
Tabelas estáticas do motor de citações.

- ALIAS_MAP: nomes populares -> (tipo, número, ano)
- TYPE_LABELS: rótulos de tipo na citação -> LawType
- KIND_LABELS: LawType -> rótulo de exibição
- MONTHS: meses em português (sem acento) -> número

As chaves estão em minúsculas e sem acento. As tabelas são somente leitura
(MappingProxyType) e não mudam em tempo de execução.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from ..canonical.id_conventions import LawType, build_document_id
from ..utils.normalization import normalize_citation_text


@dataclass(frozen=True)
class AliasEntry:
    """Instrumento referenciado por um nome popular."""

    kind: LawType
    number: Optional[int]
    year: int

    @property
    def document_id(self) -> str:
        return build_document_id(self.kind, self.number, self.year)


_LGPD = AliasEntry(LawType.LEI, 13709, 2018)
_MARCO_CIVIL = AliasEntry(LawType.LEI, 12965, 2014)
_CDC = AliasEntry(LawType.LEI, 8078, 1990)
_CODIGO_CIVIL = AliasEntry(LawType.LEI, 10406, 2002)
_CAROLINA_DIECKMANN = AliasEntry(LawType.LEI, 12737, 2012)
_LGT = AliasEntry(LawType.LEI, 9472, 1997)
_CF88 = AliasEntry(LawType.CONSTITUICAO, None, 1988)

ALIAS_MAP = MappingProxyType({
    "lgpd": _LGPD,
    "lei geral de protecao de dados": _LGPD,
    "lei geral de protecao de dados pessoais": _LGPD,
    "marco civil": _MARCO_CIVIL,
    "marco civil da internet": _MARCO_CIVIL,
    "cdc": _CDC,
    "codigo de defesa do consumidor": _CDC,
    "codigo civil": _CODIGO_CIVIL,
    "carolina dieckmann": _CAROLINA_DIECKMANN,
    "lei carolina dieckmann": _CAROLINA_DIECKMANN,
    "lgt": _LGT,
    "lei geral de telecomunicacoes": _LGT,
    "constituicao": _CF88,
    "constituicao federal": _CF88,
    "constituicao federal de 1988": _CF88,
    "constituicao de 1988": _CF88,
    "cf": _CF88,
    "cf/88": _CF88,
    "cf/1988": _CF88,
})

TYPE_LABELS = MappingProxyType({
    "lei": LawType.LEI,
    "lei complementar": LawType.LEI_COMPLEMENTAR,
    "lc": LawType.LEI_COMPLEMENTAR,
    "medida provisoria": LawType.MEDIDA_PROVISORIA,
    "mp": LawType.MEDIDA_PROVISORIA,
    "decreto": LawType.DECRETO,
})

KIND_LABELS = MappingProxyType({
    LawType.LEI: "Lei",
    LawType.LEI_COMPLEMENTAR: "Lei Complementar",
    LawType.MEDIDA_PROVISORIA: "Medida Provisoria",
    LawType.DECRETO: "Decreto",
    LawType.CONSTITUICAO: "Constituicao Federal",
})

MONTHS = MappingProxyType({
    "janeiro": 1, "fevereiro": 2, "marco": 3, "abril": 4,
    "maio": 5, "junho": 6, "julho": 7, "agosto": 8,
    "setembro": 9, "outubro": 10, "novembro": 11, "dezembro": 12,
})

# Alternância regex dos rótulos de tipo, mais longos primeiro
TYPE_LABEL_PATTERN = "|".join(
    r"\s+".join(re.escape(word) for word in label.split())
    for label in sorted(TYPE_LABELS, key=len, reverse=True)
)

_WHITESPACE_RE = re.compile(r"\s+")

# "constituicao federal de 1967", "constituicao de 1946": Constituicao de qualquer ano
CONSTITUTION_YEAR_RE = re.compile(r"^constituicao(?: federal)? de (?P<year>\d{4})$")


def alias_key(text: Optional[str]) -> str:
    """Chave de busca na tabela: sem acento, minúscula, espaços colapsados."""
    key = normalize_citation_text(text).lower()
    key = _WHITESPACE_RE.sub(" ", key)
    return key.rstrip(".;").strip()


def lookup_alias(text: Optional[str]) -> Optional[AliasEntry]:
    """
    Resolve um nome popular.

    Exemplos:
        >>> lookup_alias("LGPD").document_id
        'lei-13709-2018'
        >>> lookup_alias("Código Civil").number
        10406
        >>> lookup_alias("Constituição Federal de 1967").document_id
        'constituicao-1967'
        >>> lookup_alias("lei qualquer") is None
        True
    """
    key = alias_key(text)
    if not key:
        return None

    entry = ALIAS_MAP.get(key)
    if entry is not None:
        return entry

    match = CONSTITUTION_YEAR_RE.match(key)
    if match:
        return AliasEntry(LawType.CONSTITUICAO, None, int(match.group("year")))
    return None


def lookup_type_label(label: str) -> LawType:
    """Converte o rótulo capturado ("Lei Complementar") em LawType."""
    key = _WHITESPACE_RE.sub(" ", normalize_citation_text(label).lower())
    return TYPE_LABELS.get(key, LawType.LEI)
