"""
Modelos Pydantic da API de citações.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..citation.models import CitationFormat, LawType, ParsedCitation
from ..config import config


class ParsedCitationModel(BaseModel):
    """Citação decomposta."""

    valid: bool
    type: LawType = LawType.UNKNOWN
    number: Optional[int] = None
    year: Optional[int] = None
    article: Optional[str] = None
    paragraph: Optional[str] = None
    inciso: Optional[str] = None
    alinea: Optional[str] = None
    title: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_parsed(cls, parsed: ParsedCitation) -> "ParsedCitationModel":
        return cls(**parsed.to_dict())

    def to_parsed(self) -> ParsedCitation:
        return ParsedCitation(
            valid=self.valid,
            kind=self.type,
            number=self.number,
            year=self.year,
            article=self.article,
            paragraph=self.paragraph,
            inciso=self.inciso,
            alinea=self.alinea,
            title=self.title,
            error=self.error,
        )


class CitationRequest(BaseModel):
    """Request com uma citação livre."""

    citation: str = Field(
        ...,
        min_length=1,
        max_length=config.max_citation_length,
        description='Citação, ex: "Art. 1º, Lei 13.709/2018", "Art. 5, LGPD"',
    )


class FormatRequest(BaseModel):
    """Request de formatação: texto livre OU citação já estruturada."""

    citation: Optional[str] = Field(None, max_length=config.max_citation_length)
    parsed: Optional[ParsedCitationModel] = None
    format: CitationFormat = CitationFormat.FULL


class FormatResponse(BaseModel):
    formatted: str
    citation: ParsedCitationModel


class ValidationResponse(BaseModel):
    """Resultado da validação contra a base."""

    valid: bool
    citation: ParsedCitationModel
    document_exists: bool
    provision_exists: bool
    document_title: Optional[str] = None
    status: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)


class ProvisionModel(BaseModel):
    document_id: str
    document_title: str
    document_status: str
    provision_ref: str
    chapter: Optional[str] = None
    section: str
    article_number: str
    title: Optional[str] = None
    content: str
    citation_url: str


class ProvisionResponse(BaseModel):
    document_id: str
    provisions: list[ProvisionModel]
    truncated: bool = False
    total: int = 0


class SearchResultModel(BaseModel):
    document_id: str
    document_title: str
    document_status: str
    provision_ref: str
    chapter: Optional[str] = None
    section: str
    snippet: str
    relevance: float


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResultModel]
    count: int
