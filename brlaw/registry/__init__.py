"""
Módulo da base de legislação (SQLite via SQLAlchemy).
"""

from .models import DocumentStatus, LegalDocument, LegalProvision, DbMetadata
from .document_store import DocumentStore, DocumentRecord, ProvisionRecord
from .provision_lookup import get_provision, ProvisionLookupResult

__all__ = [
    "DocumentStatus",
    "LegalDocument",
    "LegalProvision",
    "DbMetadata",
    "DocumentStore",
    "DocumentRecord",
    "ProvisionRecord",
    "get_provision",
    "ProvisionLookupResult",
]
