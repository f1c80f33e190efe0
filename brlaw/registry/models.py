"""
Modelos SQLAlchemy da base de legislação.

Tabelas:
- legal_documents: uma linha por norma (ID canônico como PK)
- legal_provisions: dispositivos (artigos) de cada norma
- db_metadata: chave/valor do build da base (tier, schema_version, built_at)

O índice full-text (provisions_fts, FTS5) não é um modelo ORM; é criado
por DocumentStore.create_schema().
"""

from enum import Enum

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class DocumentStatus(str, Enum):
    """Situação de vigência da norma."""

    IN_FORCE = "in_force"
    AMENDED = "amended"
    REPEALED = "repealed"
    NOT_YET_IN_FORCE = "not_yet_in_force"


class LegalDocument(Base):
    """Norma federal (lei, LC, MP, decreto ou Constituição)."""

    __tablename__ = "legal_documents"

    id = Column(String(100), primary_key=True)  # ex: lei-13709-2018
    type = Column(String(30), nullable=False)
    title = Column(Text, nullable=False)
    title_en = Column(Text, nullable=True)
    short_name = Column(String(100), nullable=True)
    status = Column(String(30), nullable=False, default=DocumentStatus.IN_FORCE.value)
    issued_date = Column(String(10), nullable=True)
    in_force_date = Column(String(10), nullable=True)
    url = Column(Text, nullable=True)
    description = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<LegalDocument(id={self.id}, status={self.status})>"


class LegalProvision(Base):
    """Dispositivo (artigo) de uma norma."""

    __tablename__ = "legal_provisions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(String(100), ForeignKey("legal_documents.id"), nullable=False, index=True)
    provision_ref = Column(String(50), nullable=False)  # ex: art5
    chapter = Column(Text, nullable=True)
    section = Column(String(50), nullable=False)        # ex: 5
    title = Column(Text, nullable=True)
    content = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<LegalProvision(document_id={self.document_id}, provision_ref={self.provision_ref})>"


class DbMetadata(Base):
    """Metadados do build da base."""

    __tablename__ = "db_metadata"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=True)
