"""
Configurações do servidor de citações.
"""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Configuração do servidor e da base de legislação."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Base de documentos
    database_url: str = "sqlite:///data/database.db"

    # Busca full-text
    search_default_limit: int = 10
    search_max_limit: int = 50

    # Limite ao devolver todos os artigos de uma norma
    max_all_provisions: int = 200

    # Tamanho máximo de uma citação recebida via HTTP
    max_citation_length: int = 1000

    # Auth (vazio = desativado)
    api_keys: str = ""

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Carrega configuração de variáveis de ambiente."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            database_url=os.getenv("DATABASE_URL", "sqlite:///data/database.db"),
            search_default_limit=int(os.getenv("SEARCH_DEFAULT_LIMIT", "10")),
            search_max_limit=int(os.getenv("SEARCH_MAX_LIMIT", "50")),
            max_all_provisions=int(os.getenv("MAX_ALL_PROVISIONS", "200")),
            max_citation_length=int(os.getenv("MAX_CITATION_LENGTH", "1000")),
            api_keys=os.getenv("BRLAW_API_KEYS", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


# Singleton
config = Config.from_env()
