"""
Metadados da base: fontes, cobertura, proveniência.
"""

from .. import __version__
from ..registry.document_store import DocumentStore

JURISDICTION = "Brazil (BR)"

SOURCES = (
    {
        "name": "Planalto (Presidencia da Republica)",
        "authority": "Presidencia da Republica do Brasil",
        "url": "https://www.planalto.gov.br/ccivil_03/",
        "license": "Brazilian Government Public Domain",
        "coverage": (
            "Federal laws (Leis Ordinarias, Leis Complementares), provisional measures, "
            "decrees and the Constitution of 1988."
        ),
        "languages": ["pt"],
    },
    {
        "name": "LexML Brazil (Senado Federal)",
        "authority": "Senado Federal do Brasil",
        "url": "https://www.lexml.gov.br",
        "license": "Brazilian Government Open Data",
        "coverage": "Structured XML representations of federal legislation with URN identifiers.",
        "languages": ["pt"],
    },
)


def list_sources(store: DocumentStore) -> dict:
    """Fontes, estado do build e limitações conhecidas."""
    document_count = store.safe_count("legal_documents")
    provision_count = store.safe_count("legal_provisions")

    return {
        "jurisdiction": JURISDICTION,
        "sources": [dict(source) for source in SOURCES],
        "database": {
            "tier": store.get_metadata("tier"),
            "schema_version": store.get_metadata("schema_version"),
            "built_at": store.get_metadata("built_at"),
            "document_count": document_count,
            "provision_count": provision_count,
        },
        "limitations": [
            f"Covers {document_count} Brazilian federal instruments. "
            "State and municipal legislation are not included.",
            "Provisions are extracted from official Portuguese text.",
            "Always verify against the Diario Oficial da Uniao when legal certainty is required.",
        ],
    }


def get_about(store: DocumentStore) -> dict:
    """Identificação do servidor e estatísticas do dataset."""
    return {
        "server": {
            "name": "brlaw citation engine",
            "version": __version__,
        },
        "dataset": {
            "fingerprint": store.get_metadata("fingerprint"),
            "built": store.get_metadata("built_at"),
            "jurisdiction": JURISDICTION,
            "counts": {
                "legal_documents": store.safe_count("legal_documents"),
                "legal_provisions": store.safe_count("legal_provisions"),
            },
        },
        "security": {
            "access_model": "read-only",
            "network_access": False,
        },
    }
