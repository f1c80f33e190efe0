"""
Base de documentos e dispositivos (SQLite via SQLAlchemy).

Implementa a interface consumida pelo motor de citações:
- exists(id)
- lookup_by_id(id)
- lookup_by_title_substring(fragment)
- provision_exists(document_id, candidate_refs)

O motor só lê. Os métodos de escrita (create_schema, add_document,
add_provision, set_metadata) existem para montar bases locais e de teste.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy import create_engine, func, or_, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import config
from .models import Base, DbMetadata, DocumentStatus, LegalDocument, LegalProvision

logger = logging.getLogger(__name__)

FTS_TABLE = "provisions_fts"

FTS_DDL = (
    f"CREATE VIRTUAL TABLE IF NOT EXISTS {FTS_TABLE} USING fts5("
    "content, title, document_id UNINDEXED, provision_ref UNINDEXED, "
    "tokenize='unicode61 remove_diacritics 2')"
)

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class DocumentRecord:
    """Documento desanexado da sessão."""

    id: str
    title: str
    status: str
    type: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class ProvisionRecord:
    """Dispositivo com os dados do documento a que pertence."""

    document_id: str
    document_title: str
    document_status: str
    document_url: Optional[str]
    provision_ref: str
    chapter: Optional[str]
    section: str
    title: Optional[str]
    content: str


def escape_like(fragment: str) -> str:
    """Escapa curingas do LIKE para que o fragmento seja literal."""
    return (
        fragment.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class DocumentStore:
    """
    Acesso somente leitura à base de legislação.

    Uso:
        store = DocumentStore("sqlite:///data/database.db")
        store.exists("lei-13709-2018")
        store.provision_exists("lei-13709-2018", ["art5", "art. 5", "5"])
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: bool = False,
    ):
        """
        Inicializa o serviço.

        Args:
            database_url: URL SQLAlchemy (default: env DATABASE_URL)
            echo: Se True, loga queries SQL
        """
        self.database_url = database_url or config.database_url

        engine_kwargs = {"echo": echo}
        if self.database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.database_url in ("sqlite://", "sqlite:///:memory:"):
                # Todas as sessões precisam enxergar o mesmo banco em memória
                engine_kwargs["poolclass"] = StaticPool

        self._engine = create_engine(self.database_url, **engine_kwargs)
        self._session_factory = sessionmaker(bind=self._engine)

    @property
    def engine(self):
        return self._engine

    def _get_session(self) -> Session:
        """Cria uma nova sessão."""
        return self._session_factory()

    # =========================================================================
    # Interface do motor de citações
    # =========================================================================

    def exists(self, document_id: str) -> bool:
        """Verifica se existe um documento com exatamente esse ID."""
        if not document_id:
            return False
        with self._get_session() as session:
            return session.get(LegalDocument, document_id) is not None

    def lookup_by_id(self, document_id: str) -> Optional[DocumentRecord]:
        """
        Busca exata por ID.

        Args:
            document_id: ID canônico (ex: "lei-13709-2018")

        Returns:
            DocumentRecord ou None
        """
        if not document_id:
            return None
        with self._get_session() as session:
            doc = session.get(LegalDocument, document_id)
            return self._detach(doc) if doc else None

    def lookup_by_title_substring(self, fragment: str) -> Optional[DocumentRecord]:
        """
        Primeiro documento (por ID) cujo título contém o fragmento.

        Busca aproximada: quando vários títulos contêm o fragmento, não há
        desambiguação. Fragmento vazio nunca casa.
        """
        if not fragment or not fragment.strip():
            return None

        pattern = f"%{escape_like(fragment.strip())}%"
        with self._get_session() as session:
            doc = (
                session.query(LegalDocument)
                .filter(LegalDocument.title.ilike(pattern, escape=LIKE_ESCAPE))
                .order_by(LegalDocument.id)
                .first()
            )
            return self._detach(doc) if doc else None

    def provision_exists(self, document_id: str, candidate_refs: Iterable[str]) -> bool:
        """
        Verifica se algum dispositivo do documento casa com uma das grafias.

        A grafia é comparada tanto com provision_ref quanto com section.
        """
        refs = [ref for ref in candidate_refs if ref]
        if not document_id or not refs:
            return False

        with self._get_session() as session:
            row = (
                session.query(LegalProvision.id)
                .filter(
                    LegalProvision.document_id == document_id,
                    or_(
                        LegalProvision.provision_ref.in_(refs),
                        LegalProvision.section.in_(refs),
                    ),
                )
                .first()
            )
            return row is not None

    # =========================================================================
    # Consultas
    # =========================================================================

    def get_provisions(
        self,
        document_id: str,
        candidate_refs: Optional[Iterable[str]] = None,
        limit: Optional[int] = None,
    ) -> list[ProvisionRecord]:
        """
        Lista dispositivos de um documento, na ordem de inserção.

        Args:
            document_id: ID do documento
            candidate_refs: Se informado, filtra pelas grafias do artigo
            limit: Limite de resultados

        Returns:
            Lista de ProvisionRecord
        """
        with self._get_session() as session:
            query = (
                session.query(LegalProvision, LegalDocument)
                .join(LegalDocument, LegalDocument.id == LegalProvision.document_id)
                .filter(LegalProvision.document_id == document_id)
            )

            if candidate_refs is not None:
                refs = [ref for ref in candidate_refs if ref]
                if not refs:
                    return []
                query = query.filter(
                    or_(
                        LegalProvision.provision_ref.in_(refs),
                        LegalProvision.section.in_(refs),
                    )
                )

            query = query.order_by(LegalProvision.id)
            if limit is not None:
                query = query.limit(limit)

            return [self._provision_record(prov, doc) for prov, doc in query.all()]

    def count_provisions(self, document_id: Optional[str] = None) -> int:
        with self._get_session() as session:
            query = session.query(func.count(LegalProvision.id))
            if document_id is not None:
                query = query.filter(LegalProvision.document_id == document_id)
            return query.scalar() or 0

    def count_documents(self) -> int:
        with self._get_session() as session:
            return session.query(func.count(LegalDocument.id)).scalar() or 0

    def safe_count(self, table_name: str) -> int:
        """Contagem de linhas que trata tabela ausente como 0."""
        try:
            with self._engine.connect() as conn:
                return conn.execute(text(f'SELECT COUNT(*) FROM "{table_name}"')).scalar() or 0
        except OperationalError as e:
            logger.debug(f"Contagem indisponível para {table_name}: {e}")
            return 0

    def get_metadata(self, key: str, default: str = "unknown") -> str:
        """Lê um valor de db_metadata (tabela ausente vira default)."""
        try:
            with self._get_session() as session:
                row = session.get(DbMetadata, key)
                return row.value if row and row.value is not None else default
        except OperationalError as e:
            logger.debug(f"db_metadata indisponível: {e}")
            return default

    # =========================================================================
    # Escrita (build local / testes)
    # =========================================================================

    def create_schema(self) -> None:
        """Cria as tabelas e o índice FTS5 se não existirem."""
        Base.metadata.create_all(self._engine)
        with self._engine.begin() as conn:
            conn.execute(text(FTS_DDL))

    def add_document(
        self,
        document_id: str,
        type: str,
        title: str,
        status: DocumentStatus = DocumentStatus.IN_FORCE,
        **kwargs,
    ) -> DocumentRecord:
        """
        Cadastra uma norma.

        Args:
            document_id: ID canônico
            type: Tipo (lei, lc, mp, decreto, constituicao)
            title: Título oficial
            status: Situação de vigência
            **kwargs: Campos adicionais (short_name, url, issued_date, ...)

        Returns:
            DocumentRecord criado
        """
        with self._get_session() as session:
            doc = LegalDocument(
                id=document_id,
                type=type,
                title=title,
                status=DocumentStatus(status).value,
                **kwargs,
            )
            session.add(doc)
            session.commit()
            session.refresh(doc)
            return self._detach(doc)

    def add_provision(
        self,
        document_id: str,
        provision_ref: str,
        section: str,
        content: str,
        chapter: Optional[str] = None,
        title: Optional[str] = None,
    ) -> int:
        """
        Cadastra um dispositivo e o indexa no FTS5.

        Returns:
            ID (rowid) do dispositivo
        """
        with self._get_session() as session:
            prov = LegalProvision(
                document_id=document_id,
                provision_ref=provision_ref,
                section=section,
                content=content,
                chapter=chapter,
                title=title,
            )
            session.add(prov)
            session.flush()
            session.execute(
                text(
                    f"INSERT INTO {FTS_TABLE} (rowid, content, title, document_id, provision_ref) "
                    "VALUES (:rowid, :content, :title, :document_id, :provision_ref)"
                ),
                {
                    "rowid": prov.id,
                    "content": content,
                    "title": title or "",
                    "document_id": document_id,
                    "provision_ref": provision_ref,
                },
            )
            session.commit()
            return prov.id

    def set_metadata(self, key: str, value: str) -> None:
        with self._get_session() as session:
            session.merge(DbMetadata(key=key, value=value))
            session.commit()

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _detach(doc: LegalDocument) -> DocumentRecord:
        """Copia o documento para um valor que sobrevive ao fim da sessão."""
        return DocumentRecord(
            id=doc.id,
            title=doc.title,
            status=doc.status,
            type=doc.type,
            url=doc.url,
        )

    @staticmethod
    def _provision_record(prov: LegalProvision, doc: LegalDocument) -> ProvisionRecord:
        return ProvisionRecord(
            document_id=prov.document_id,
            document_title=doc.title,
            document_status=doc.status,
            document_url=doc.url,
            provision_ref=prov.provision_ref,
            chapter=prov.chapter,
            section=prov.section,
            title=prov.title,
            content=prov.content,
        )
