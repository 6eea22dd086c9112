"""Tests for result_item.language."""

import pytest
import result_item.language as language_module
from result_item.language import LanguageResolver, find_language


class TestFindLanguage:
    def test_iso_639_1(self):
        language = find_language("en")
        assert language.name == "English"
        assert language.alpha_3 == "eng"

    def test_iso_639_3(self):
        assert find_language("eng").name == "English"

    def test_case_insensitive(self):
        assert find_language("EN").name == "English"

    def test_bibliographic_code(self):
        assert find_language("fre").alpha_3 == "fra"

    @pytest.mark.parametrize("code", [None, "", "   ", "xx-not-real", "zz", "e"])
    def test_not_found(self, code):
        assert find_language(code) is None


class TestLanguageResolver:
    def test_empty(self):
        resolver = LanguageResolver()
        assert resolver.language is None
        assert resolver.display_string is None
        assert resolver.iso_639_1 is None
        assert resolver.iso_639_3 is None

    def test_three_letter_code_without_two_letter_form(self):
        resolver = LanguageResolver("haw")
        assert resolver.display_string == "Hawaiian"
        assert resolver.iso_639_1 is None
        assert resolver.iso_639_3 == "haw"

    def test_override(self):
        resolver = LanguageResolver(display_override="Klingon")
        assert resolver.display_string == "Klingon"

    def test_lookup_memoized(self, monkeypatch):
        calls = []
        real = language_module.find_language

        def counting(code):
            calls.append(code)
            return real(code)

        monkeypatch.setattr(language_module, "find_language", counting)

        resolver = LanguageResolver("en")
        assert resolver.iso_639_1 == "en"
        assert resolver.iso_639_3 == "eng"
        assert resolver.display_string == "English"
        assert calls == ["en"]

    def test_miss_memoized(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            language_module, "find_language", lambda code: calls.append(code)
        )

        resolver = LanguageResolver("xx-not-real")
        assert resolver.display_string is None
        assert resolver.iso_639_3 is None
        assert calls == ["xx-not-real"]

    def test_code_change_invalidates(self, monkeypatch):
        calls = []
        real = language_module.find_language

        def counting(code):
            calls.append(code)
            return real(code)

        monkeypatch.setattr(language_module, "find_language", counting)

        resolver = LanguageResolver("en")
        assert resolver.display_string == "English"
        resolver.code = "de"
        assert resolver.display_string == "German"
        assert resolver.iso_639_1 == "de"
        assert calls == ["en", "de"]
