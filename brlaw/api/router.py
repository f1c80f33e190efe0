"""
Router FastAPI do motor de citações.

Endpoints:
    POST /citations/parse     - Decompõe uma citação livre
    POST /citations/format    - Renderiza em full / short / pinpoint
    POST /citations/validate  - Confere documento e artigo na base
    GET  /provisions          - Texto de um artigo (ou de todos) de uma norma
    GET  /search              - Busca full-text nos dispositivos
    GET  /sources             - Fontes e cobertura da base
    GET  /about               - Metadados do servidor e do dataset
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError

from ..citation.formatter import format_citation
from ..citation.parser import parse_citation
from ..citation.validator import validate_citation
from ..config import config
from ..registry.document_store import DocumentStore
from ..registry.models import DocumentStatus
from ..registry.provision_lookup import citation_url, get_provision, normalize_article_ref
from ..search.legislation_search import search_legislation
from .models import (
    CitationRequest,
    FormatRequest,
    FormatResponse,
    ParsedCitationModel,
    ProvisionModel,
    ProvisionResponse,
    SearchResponse,
    SearchResultModel,
    ValidationResponse,
)
from .sources import get_about, list_sources

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Citations"])


@lru_cache(maxsize=1)
def get_store() -> DocumentStore:
    """DocumentStore compartilhado (somente leitura)."""
    return DocumentStore()


@router.post("/citations/parse", response_model=ParsedCitationModel)
async def parse(request: CitationRequest):
    """Decompõe a citação; citação não reconhecida volta com valid=false."""
    return ParsedCitationModel.from_parsed(parse_citation(request.citation))


@router.post("/citations/format", response_model=FormatResponse)
async def format_(request: FormatRequest):
    """
    Formata uma citação.

    Aceita texto livre (campo citation) ou a estrutura já parseada (campo parsed).
    Citação inválida resulta em formatted="".
    """
    if request.parsed is not None:
        parsed = request.parsed.to_parsed()
    elif request.citation:
        parsed = parse_citation(request.citation)
    else:
        raise HTTPException(status_code=400, detail="citation or parsed is required")

    return FormatResponse(
        formatted=format_citation(parsed, request.format),
        citation=ParsedCitationModel.from_parsed(parsed),
    )


@router.post("/citations/validate", response_model=ValidationResponse)
def validate(request: CitationRequest, store: DocumentStore = Depends(get_store)):
    """Verifica se a norma e o artigo citados existem na base."""
    try:
        result = validate_citation(request.citation, store)
    except SQLAlchemyError as e:
        logger.error(f"Erro na validação: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return ValidationResponse(
        valid=result.valid,
        citation=ParsedCitationModel.from_parsed(result.citation),
        document_exists=result.document_exists,
        provision_exists=result.provision_exists,
        document_title=result.document_title,
        status=result.status,
        warnings=result.warnings,
    )


@router.get("/provisions", response_model=ProvisionResponse)
def provisions(
    law_identifier: Optional[str] = Query(None, description='ID, referência ou nome popular (ex: "LGPD")'),
    document_id: Optional[str] = Query(None, description="Alias de law_identifier"),
    article: Optional[str] = Query(None, description='Número do artigo (ex: "5")'),
    store: DocumentStore = Depends(get_store),
):
    """Recupera um artigo; sem article, devolve todos (com limite)."""
    try:
        result = get_provision(store, document_id or law_identifier, article)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Erro ao buscar dispositivos: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if article and not result.provisions:
        raise HTTPException(
            status_code=404,
            detail=f"Art. {normalize_article_ref(article)} not found in {result.document_id}",
        )

    return ProvisionResponse(
        document_id=result.document_id,
        provisions=[
            ProvisionModel(
                document_id=p.document_id,
                document_title=p.document_title,
                document_status=p.document_status,
                provision_ref=p.provision_ref,
                chapter=p.chapter,
                section=p.section,
                article_number=normalize_article_ref(p.provision_ref),
                title=p.title,
                content=p.content,
                citation_url=citation_url(p),
            )
            for p in result.provisions
        ],
        truncated=result.truncated,
        total=result.total,
    )


@router.get("/search", response_model=SearchResponse)
def search(
    query: str = Query(..., min_length=1, description='Ex: "dados pessoais" OR consentimento'),
    document_id: Optional[str] = Query(None),
    status: Optional[DocumentStatus] = Query(None),
    limit: int = Query(config.search_default_limit, ge=1, le=config.search_max_limit),
    store: DocumentStore = Depends(get_store),
):
    """Busca full-text (bm25) nos dispositivos."""
    try:
        results = search_legislation(
            store,
            query,
            document_id=document_id,
            status=status.value if status else None,
            limit=limit,
        )
    except SQLAlchemyError as e:
        logger.error(f"Erro na busca: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return SearchResponse(
        query=query,
        results=[SearchResultModel(**r.to_dict()) for r in results],
        count=len(results),
    )


@router.get("/sources")
def sources(store: DocumentStore = Depends(get_store)):
    """Fontes, build e limitações da base."""
    return list_sources(store)


@router.get("/about")
def about(store: DocumentStore = Depends(get_store)):
    """Metadados do servidor e do dataset."""
    return get_about(store)
