# -*- coding: utf-8 -*-
"""
Testes do DocumentStore (SQLite em memória).
"""

from brlaw.canonical.id_conventions import article_ref_candidates
from brlaw.registry.document_store import DocumentStore, escape_like


class TestLookup:

    def test_exists(self, store):
        assert store.exists("lei-13709-2018")
        assert not store.exists("lei-13709-2019")
        assert not store.exists("")

    def test_lookup_by_id(self, store):
        doc = store.lookup_by_id("lei-8666-1993")
        assert doc.id == "lei-8666-1993"
        assert doc.status == "repealed"
        assert store.lookup_by_id("nao-existe") is None

    def test_title_substring_case_insensitive(self, store):
        assert store.lookup_by_title_substring("marco civil").id == "lei-12965-2014"

    def test_title_substring_first_by_id(self, store):
        # "Lei nº" aparece em vários títulos
        assert store.lookup_by_title_substring("Lei nº").id == "lei-12965-2014"

    def test_title_substring_wildcards_are_literal(self, store):
        assert store.lookup_by_title_substring("%") is None
        assert store.lookup_by_title_substring("_") is None

    def test_title_substring_empty(self, store):
        assert store.lookup_by_title_substring("") is None
        assert store.lookup_by_title_substring("   ") is None


class TestProvisions:

    def test_provision_exists_by_ref(self, store):
        assert store.provision_exists("lei-13709-2018", article_ref_candidates("5"))

    def test_provision_exists_by_padded_ref(self, store):
        assert store.provision_exists("lei-8078-1990", ["ART-006"])

    def test_provision_exists_by_section(self, store):
        assert store.provision_exists("lei-12965-2014", ["3"])

    def test_provision_missing(self, store):
        assert not store.provision_exists("lei-13709-2018", article_ref_candidates("999"))
        assert not store.provision_exists("lei-13709-2018", [])

    def test_get_provisions_in_insertion_order(self, store):
        provisions = store.get_provisions("lei-13709-2018")
        assert [p.provision_ref for p in provisions] == ["art1", "art5", "art7"]
        assert provisions[0].document_title.startswith("Lei nº 13.709")

    def test_get_provisions_limit(self, store):
        assert len(store.get_provisions("lei-13709-2018", limit=2)) == 2

    def test_counts(self, store):
        assert store.count_documents() == 5
        assert store.count_provisions() == 7
        assert store.count_provisions("lei-13709-2018") == 3


class TestMetadata:

    def test_metadata(self, store):
        assert store.get_metadata("tier") == "test"
        assert store.get_metadata("missing") == "unknown"

    def test_missing_tables(self, empty_store):
        assert empty_store.get_metadata("tier") == "unknown"
        assert empty_store.safe_count("legal_documents") == 0

    def test_safe_count(self, store):
        assert store.safe_count("legal_documents") == 5


def test_escape_like():
    assert escape_like("100%_a\\b") == "100\\%\\_a\\\\b"


def test_separate_memory_databases():
    first = DocumentStore("sqlite://")
    first.create_schema()
    first.add_document("lei-1-2000", type="lei", title="Lei 1")
    second = DocumentStore("sqlite://")
    second.create_schema()
    assert first.exists("lei-1-2000")
    assert not second.exists("lei-1-2000")
