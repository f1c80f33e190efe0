"""
brlaw - FastAPI para resolução e validação de citações legais.

Endpoints:
    POST /citations/parse     - Decompõe uma citação
    POST /citations/format    - Formata (full / short / pinpoint)
    POST /citations/validate  - Valida contra a base
    GET  /provisions          - Recupera artigos
    GET  /search              - Busca full-text
    GET  /sources, /about     - Metadados
    GET  /healthz             - Liveness probe

Uso:
    uvicorn brlaw.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import router as citation_router
from .auth import APIKeyAuthMiddleware, parse_api_keys
from .config import config

# Logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle do app."""
    logger.info("=== brlaw iniciando ===")
    logger.info(f"Database: {config.database_url}")
    yield
    logger.info("=== brlaw encerrando ===")


app = FastAPI(
    title="brlaw",
    description="Resolução, formatação e validação de citações da legislação federal brasileira",
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Auth (somente se houver chaves configuradas)
_api_keys = parse_api_keys(config.api_keys)
if _api_keys:
    app.add_middleware(APIKeyAuthMiddleware, api_keys=_api_keys)
else:
    logger.info("Auth por API key DESATIVADA (BRLAW_API_KEYS vazio)")

# Routers
app.include_router(citation_router)


@app.get("/healthz")
async def healthz():
    """Liveness probe (Kubernetes)."""
    return {"status": "ok"}


@app.get("/")
async def root():
    """Redirect para docs."""
    from fastapi.responses import RedirectResponse

    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "brlaw.main:app",
        host=config.host,
        port=config.port,
        reload=False,
    )
