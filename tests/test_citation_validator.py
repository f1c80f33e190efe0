# -*- coding: utf-8 -*-
"""
Testes do validador de citações contra a base de documentos.
"""

from brlaw.citation.validator import validate_citation
from brlaw.registry.document_store import DocumentRecord


class TestValidateCitation:

    def test_valid_short_citation(self, store):
        result = validate_citation("Art. 1º, Lei 13.709/2018", store)
        assert result.valid
        assert result.document_exists
        assert result.provision_exists
        assert result.status == "in_force"
        assert "Proteção de Dados" in result.document_title
        assert result.warnings == []

    def test_valid_alias_citation(self, store):
        result = validate_citation("Art. 5º, LGPD", store)
        assert result.valid

    def test_constitution(self, store):
        result = validate_citation("Art. 5º, CF/88", store)
        assert result.valid
        assert result.citation.number is None

    def test_padded_provision_ref(self, store):
        """CDC grava "ART-006"; "Art. 6" precisa casar."""
        result = validate_citation("Art. 6, CDC", store)
        assert result.provision_exists

    def test_repealed_is_warning_not_error(self, store):
        result = validate_citation("Art. 1, Lei 8.666/1993", store)
        assert result.document_exists
        assert result.provision_exists
        assert result.valid
        assert result.status == "repealed"
        assert any("repealed" in w for w in result.warnings)

    def test_unknown_document(self, store):
        result = validate_citation("Art. 1, Lei 99.999/2099", store)
        assert not result.valid
        assert not result.document_exists
        assert not result.provision_exists
        assert result.warnings == ['Document "lei-99999-2099" not found in database']

    def test_zero_padded_article(self, store):
        """Artigo com zero à esquerda ("Art. 05") casa com o art5 gravado."""
        result = validate_citation("Art. 05, LGPD", store)
        assert result.provision_exists
        assert result.valid
        assert result.warnings == []

    def test_unknown_article(self, store):
        result = validate_citation("Art. 999, LGPD", store)
        assert result.document_exists
        assert not result.provision_exists
        assert not result.valid
        assert result.warnings == [f"Art. 999 not found in {result.document_title}"]

    def test_unparseable(self, store):
        result = validate_citation("not a citation at all", store)
        assert not result.valid
        assert not result.citation.valid
        assert result.warnings == ["could not parse citation: not a citation at all"]

    def test_title_fallback_when_id_missing(self, store):
        """ID inexistente e rótulo "Lei 12.965/2015" ausente dos títulos."""
        result = validate_citation("Art. 3, Lei 12.965/2015", store)
        assert not result.document_exists

    def test_to_dict(self, store):
        data = validate_citation("Art. 5, LGPD", store).to_dict()
        assert data["valid"] is True
        assert data["citation"]["type"] == "lei"
        assert data["citation"]["article"] == "5"


class TestValidateWithFakeStore:
    """O validador só depende da interface da base."""

    class Store:
        def __init__(self):
            self.title_queries = []

        def lookup_by_id(self, document_id):
            return None

        def lookup_by_title_substring(self, fragment):
            self.title_queries.append(fragment)
            return DocumentRecord(id="lei-13709-2018", title="LGPD", status="in_force")

        def provision_exists(self, document_id, refs):
            return "art5" in refs

    def test_title_fallback_used_for_reference_grammars(self):
        store = self.Store()
        result = validate_citation("Art. 5, Lei 13.709/2018", store)
        assert store.title_queries == ["Lei 13.709/2018"]
        assert result.valid

    def test_alias_has_no_title_fallback(self):
        store = self.Store()
        result = validate_citation("Art. 5, LGPD", store)
        assert store.title_queries == []
        assert not result.document_exists
