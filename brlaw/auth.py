"""
Middleware de autenticacao por API Key.

IMPORTANTE: Em BaseHTTPMiddleware, HTTPException nao funciona corretamente.
Usamos JSONResponse diretamente para retornar erros de autenticacao.

Chaves validas vem de BRLAW_API_KEYS (separadas por virgula). Sem chaves
configuradas o middleware nao e instalado (ver main.py).
"""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"

# Endpoints publicos (nao precisam de auth)
PUBLIC_ENDPOINTS = {
    "/",
    "/healthz",
    "/docs",
    "/openapi.json",
    "/redoc",
}


def parse_api_keys(raw: str) -> set[str]:
    """Converte "k1,k2" em {"k1", "k2"} ignorando entradas vazias."""
    return {key.strip() for key in (raw or "").split(",") if key.strip()}


def get_client_ip(request: Request) -> str:
    """
    Extrai o IP real do cliente, considerando proxies.

    Ordem de prioridade:
    1. X-Real-IP (nginx)
    2. X-Forwarded-For (primeiro IP da lista)
    3. request.client.host (conexao direta)
    """
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"


class APIKeyAuthMiddleware(BaseHTTPMiddleware):
    """Valida o header X-API-Key em todos os endpoints nao publicos."""

    def __init__(self, app, api_keys: set[str]):
        super().__init__(app)
        self.api_keys = api_keys

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if path in PUBLIC_ENDPOINTS:
            return await call_next(request)

        api_key = request.headers.get(API_KEY_HEADER)
        client_ip = get_client_ip(request)

        if not api_key:
            logger.warning(f"Request sem API key: {path} from {client_ip}")
            return JSONResponse(
                status_code=401,
                content={"detail": f"Missing {API_KEY_HEADER} header"},
            )

        if api_key not in self.api_keys:
            logger.warning(f"API key invalida: {api_key[:8]}... from {client_ip}")
            return JSONResponse(
                status_code=403,
                content={"detail": "Invalid API key"},
            )

        return await call_next(request)
