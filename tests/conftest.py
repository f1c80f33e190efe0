"""
Configuração global do pytest para os testes do brlaw.

Adiciona a raiz do projeto ao PYTHONPATH e monta uma base SQLite em memória
com um conjunto pequeno de normas reais.
"""

import sys
from pathlib import Path

import pytest

# Adiciona o diretório raiz do projeto
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from brlaw.registry.document_store import DocumentStore  # noqa: E402
from brlaw.registry.models import DocumentStatus  # noqa: E402


def _seed(store: DocumentStore) -> None:
    store.add_document(
        "lei-13709-2018",
        type="lei",
        title="Lei nº 13.709, de 14 de agosto de 2018 - Lei Geral de Proteção de Dados Pessoais (LGPD)",
        short_name="LGPD",
        url="https://www.planalto.gov.br/ccivil_03/_ato2015-2018/2018/lei/l13709.htm",
    )
    store.add_provision(
        "lei-13709-2018", "art1", "1",
        "Esta Lei dispõe sobre o tratamento de dados pessoais, inclusive nos meios digitais.",
        chapter="Capítulo I - Disposições Preliminares",
    )
    store.add_provision(
        "lei-13709-2018", "art5", "5",
        "Para os fins desta Lei, considera-se: I - dado pessoal: informação relacionada "
        "a pessoa natural identificada ou identificável.",
        chapter="Capítulo I - Disposições Preliminares",
    )
    store.add_provision(
        "lei-13709-2018", "art7", "7",
        "O tratamento de dados pessoais somente poderá ser realizado mediante o "
        "fornecimento de consentimento pelo titular.",
        chapter="Capítulo II - Do Tratamento de Dados Pessoais",
    )

    store.add_document(
        "lei-12965-2014",
        type="lei",
        title="Lei nº 12.965, de 23 de abril de 2014 - Marco Civil da Internet",
        short_name="Marco Civil",
    )
    store.add_provision(
        "lei-12965-2014", "art. 3", "3",
        "A disciplina do uso da internet no Brasil tem os seguintes princípios: "
        "proteção da privacidade e proteção dos dados pessoais.",
    )

    store.add_document(
        "lei-8078-1990",
        type="lei",
        title="Lei nº 8.078, de 11 de setembro de 1990 - Código de Defesa do Consumidor",
        short_name="CDC",
    )
    store.add_provision(
        "lei-8078-1990", "ART-006", "6",
        "São direitos básicos do consumidor a proteção da vida, saúde e segurança.",
    )

    store.add_document(
        "lei-8666-1993",
        type="lei",
        title="Lei nº 8.666, de 21 de junho de 1993 - Licitações e Contratos",
        status=DocumentStatus.REPEALED,
    )
    store.add_provision(
        "lei-8666-1993", "art1", "1",
        "Esta Lei estabelece normas gerais sobre licitações e contratos administrativos.",
    )

    store.add_document(
        "constituicao-1988",
        type="constituicao",
        title="Constituição da República Federativa do Brasil de 1988",
        short_name="CF/88",
    )
    store.add_provision(
        "constituicao-1988", "art5", "5",
        "Todos são iguais perante a lei, sem distinção de qualquer natureza, garantindo-se "
        "a inviolabilidade do direito à privacidade.",
        chapter="Título II - Dos Direitos e Garantias Fundamentais",
    )

    store.set_metadata("tier", "test")
    store.set_metadata("schema_version", "1")
    store.set_metadata("built_at", "2026-01-01T00:00:00Z")


@pytest.fixture
def store() -> DocumentStore:
    """DocumentStore em memória com LGPD, Marco Civil, CDC, Lei 8.666 (revogada) e CF/88."""
    document_store = DocumentStore("sqlite://")
    document_store.create_schema()
    _seed(document_store)
    return document_store


@pytest.fixture
def empty_store() -> DocumentStore:
    """DocumentStore em memória sem nenhuma tabela."""
    return DocumentStore("sqlite://")
