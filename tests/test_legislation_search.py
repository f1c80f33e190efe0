# -*- coding: utf-8 -*-
"""
Testes da busca full-text (FTS5 + bm25) sobre a base em memória.
"""

import pytest

from brlaw.config import config
from brlaw.search.legislation_search import clamp_limit, search_legislation


class TestSearchLegislation:

    def test_keyword(self, store):
        results = search_legislation(store, "consentimento")
        assert [r.document_id for r in results] == ["lei-13709-2018"]
        assert results[0].provision_ref == "art7"
        assert ">>>" in results[0].snippet and "<<<" in results[0].snippet

    def test_diacritics_insensitive(self, store):
        results = search_legislation(store, "protecao")
        assert {r.document_id for r in results} >= {"lei-12965-2014", "lei-8078-1990"}

    def test_phrase_and_or(self, store):
        results = search_legislation(store, '"dados pessoais" OR privacidade')
        ids = {r.document_id for r in results}
        assert "lei-13709-2018" in ids
        assert "constituicao-1988" in ids

    def test_document_filter_accepts_alias(self, store):
        results = search_legislation(store, "dados", document_id="Marco Civil")
        assert results
        assert {r.document_id for r in results} == {"lei-12965-2014"}

    def test_status_filter(self, store):
        results = search_legislation(store, "licitacoes", status="repealed")
        assert [r.document_id for r in results] == ["lei-8666-1993"]
        assert search_legislation(store, "licitacoes", status="in_force") == []

    def test_ordered_by_relevance(self, store):
        results = search_legislation(store, "dados")
        relevances = [r.relevance for r in results]
        assert relevances == sorted(relevances, reverse=True)

    def test_limit(self, store):
        assert len(search_legislation(store, "dados", limit=1)) == 1

    @pytest.mark.parametrize("raw", [
        '" OR 1=1 --',
        "NEAR(dados",
        "content:dados",
        "dados) OR (",
    ])
    def test_adversarial_input_never_breaks_query(self, store, raw):
        results = search_legislation(store, raw)
        assert isinstance(results, list)

    def test_empty_query(self, store):
        assert search_legislation(store, "   ") == []

    def test_nul_byte_in_query(self, store):
        results = search_legislation(store, "\x00consentimento")
        assert [r.provision_ref for r in results] == ["art7"]
        assert search_legislation(store, "\x00") == []

    def test_to_dict(self, store):
        data = search_legislation(store, "consentimento")[0].to_dict()
        assert set(data) == {
            "document_id", "document_title", "document_status", "provision_ref",
            "chapter", "section", "snippet", "relevance",
        }


class TestClampLimit:

    def test_default(self):
        assert clamp_limit(None) == config.search_default_limit

    def test_bounds(self):
        assert clamp_limit(0) == 1
        assert clamp_limit(10_000) == config.search_max_limit
        assert clamp_limit(5) == 5
