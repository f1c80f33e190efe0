# -*- coding: utf-8 -*-
"""
Testes do extrator de pinpoints (parágrafo, inciso, alínea).
"""

import pytest

from brlaw.citation.models import PARAGRAPH_UNICO, Pinpoints
from brlaw.citation.pinpoint import (
    extract_alinea,
    extract_inciso,
    extract_paragraph,
    extract_pinpoints,
)


class TestParagraph:

    @pytest.mark.parametrize("text,expected", [
        ("Art. 5º, § 1º", "1"),
        ("Art. 5, §2", "2"),
        ("Art. 5, § 12o", "12"),
        ("Art. 5, paragrafo 3º", "3"),
        ("Art. 5, Paragrafo 4", "4"),
    ])
    def test_numbered(self, text, expected):
        assert extract_paragraph(text) == expected

    @pytest.mark.parametrize("text", [
        "Art. 5º, paragrafo unico",
        "Art. 5º, Paragrafo Unico",
        "Art. 5º, § unico",
    ])
    def test_unico(self, text):
        assert extract_paragraph(text) == PARAGRAPH_UNICO

    def test_absent(self):
        assert extract_paragraph("Art. 5º, Lei 13.709/2018") is None


class TestInciso:

    def test_word_form(self):
        assert extract_inciso("Art. 7, inciso IX") == "IX"

    def test_word_form_lowercase_numeral(self):
        assert extract_inciso("art. 7, inciso iv") == "IV"

    def test_isolated_segment(self):
        assert extract_inciso("lei-13709-2018, art. 7, IX") == "IX"
        assert extract_inciso("Art. 5º, § 1º, II, alinea b") == "II"

    def test_segment_followed_by_comma(self):
        assert extract_inciso("Art. 5, III, Lei 13.709/2018") == "III"

    @pytest.mark.parametrize("text", [
        "Art. 5, CDC",
        "Art. 5, CF",
        "Art. 5, LGPD",
        "Art. 5, LC 101/2000",
        "Art. 5, Lei 13.709/2018",
    ])
    def test_acronyms_are_not_incisos(self, text):
        assert extract_inciso(text) is None

    def test_malformed_roman_rejected(self):
        assert extract_inciso("Art. 5, IIII") is None


class TestAlinea:

    def test_letter(self):
        assert extract_alinea("Art. 5, II, alinea b") == "b"

    def test_quoted_letter(self):
        assert extract_alinea('Art. 5, II, alinea "c"') == "c"

    def test_uppercase_normalized(self):
        assert extract_alinea("Art. 5, II, ALINEA D") == "d"

    def test_absent(self):
        assert extract_alinea("Art. 5, II") is None


class TestExtractPinpoints:

    def test_all_three(self):
        assert extract_pinpoints("Art. 5º, § 1º, II, alinea b") == Pinpoints(
            paragraph="1", inciso="II", alinea="b"
        )

    def test_independent_of_position(self):
        result = extract_pinpoints("alinea a, inciso III, paragrafo 2, art. 9")
        assert (result.paragraph, result.inciso, result.alinea) == ("2", "III", "a")

    def test_empty(self):
        assert extract_pinpoints("") == Pinpoints()
