"""
Tipos de dados das citacoes.

ParsedCitation e o valor central do motor: o parser o produz, o formatter e
o validator o consomem. Todos os valores sao efemeros (um por chamada).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..canonical.id_conventions import LawType


class CitationFormat(str, Enum):
    """Estilos de exibicao do formatter."""
    FULL = "full"
    SHORT = "short"
    PINPOINT = "pinpoint"


# Sentinela para "paragrafo unico"
PARAGRAPH_UNICO = "unico"


@dataclass(frozen=True)
class Pinpoints:
    """Sub-referencias de um artigo (paragrafo, inciso, alinea)."""

    paragraph: Optional[str] = None   # digitos ou "unico"
    inciso: Optional[str] = None      # numeral romano (I, II, XIV...)
    alinea: Optional[str] = None      # letra minuscula


@dataclass
class ParsedCitation:
    """
    Citacao decomposta.

    Invariante: valid=True implica kind != UNKNOWN e article nao vazio.
    Os campos de pinpoint sao sempre opcionais.
    """

    valid: bool
    kind: LawType = LawType.UNKNOWN
    number: Optional[int] = None      # None para a Constituicao
    year: Optional[int] = None
    article: Optional[str] = None     # apenas digitos
    paragraph: Optional[str] = None
    inciso: Optional[str] = None
    alinea: Optional[str] = None
    title: Optional[str] = None       # rotulo usado no fallback por titulo
    error: Optional[str] = None

    @classmethod
    def invalid(cls, error: str) -> "ParsedCitation":
        return cls(valid=False, kind=LawType.UNKNOWN, error=error)

    def to_dict(self) -> dict:
        """Converte para dicionário serializável."""
        return {
            "valid": self.valid,
            "type": self.kind.value,
            "number": self.number,
            "year": self.year,
            "article": self.article,
            "paragraph": self.paragraph,
            "inciso": self.inciso,
            "alinea": self.alinea,
            "title": self.title,
            "error": self.error,
        }


@dataclass
class ValidationResult:
    """Resultado da validacao de uma citacao contra a base de documentos."""

    citation: ParsedCitation
    document_exists: bool = False
    provision_exists: bool = False
    document_title: Optional[str] = None
    status: Optional[str] = None
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """Citacao parseada, documento e dispositivo encontrados."""
        return self.citation.valid and self.document_exists and self.provision_exists

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "citation": self.citation.to_dict(),
            "document_exists": self.document_exists,
            "provision_exists": self.provision_exists,
            "document_title": self.document_title,
            "status": self.status,
            "warnings": list(self.warnings),
        }
