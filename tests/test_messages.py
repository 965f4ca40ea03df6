"""Tests for the locale-aware message catalog."""

import pytest
from posts_service.app.core import messages
from posts_service.app.core.messages import (
    MESSAGES,
    ErrorCode,
    negotiate_locale,
    resolve_message,
    supported_locales,
    validate_catalog,
)
from posts_service.app.core.settings import settings


class TestResolveMessage:
    def test_default_locale_messages(self) -> None:
        assert resolve_message(ErrorCode.post_not_found, "en") == "Post not found."
        assert resolve_message(ErrorCode.post_title_required, "en") == "Post title is required."

    def test_spanish_translation(self) -> None:
        assert resolve_message(ErrorCode.post_not_found, "es") == "Publicación no encontrada."

    def test_region_falls_back_to_language(self) -> None:
        assert resolve_message(ErrorCode.post_not_found, "es-MX") == "Publicación no encontrada."
        assert resolve_message(ErrorCode.post_not_found, "es_AR") == "Publicación no encontrada."

    def test_unknown_locale_falls_back_to_default(self) -> None:
        assert resolve_message(ErrorCode.post_not_found, "fr") == "Post not found."

    def test_no_locale_uses_default(self) -> None:
        assert resolve_message(ErrorCode.post_title_required) == "Post title is required."

    def test_missing_translation_falls_back_to_default(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        partial = {"en": MESSAGES["en"], "es": {}}
        monkeypatch.setattr(messages, "MESSAGES", partial)
        assert resolve_message(ErrorCode.post_not_found, "es") == "Post not found."

    def test_unknown_code_returns_code(self) -> None:
        assert resolve_message("error.unknown.key", "en") == "error.unknown.key"

    def test_plain_string_code_accepted(self) -> None:
        assert resolve_message("error.post.notFound", "en") == "Post not found."


class TestNegotiateLocale:
    @pytest.mark.parametrize("header", [None, "", "*"])
    def test_absent_header_gives_default(self, header: str | None) -> None:
        assert negotiate_locale(header) == settings.default_locale

    def test_exact_match(self) -> None:
        assert negotiate_locale("es") == "es"

    def test_region_matches_language(self) -> None:
        assert negotiate_locale("es-ES,es;q=0.9") == "es"

    def test_quality_ordering(self) -> None:
        assert negotiate_locale("en;q=0.4, es;q=0.8") == "es"

    def test_skips_unsupported(self) -> None:
        assert negotiate_locale("fr-FR, de;q=0.9, es;q=0.5") == "es"

    def test_nothing_supported_gives_default(self) -> None:
        assert negotiate_locale("fr, de") == settings.default_locale

    def test_zero_quality_ignored(self) -> None:
        assert negotiate_locale("es;q=0, en") == "en"

    def test_malformed_quality_ignored(self) -> None:
        assert negotiate_locale("es;q=abc") == settings.default_locale


class TestValidateCatalog:
    def test_shipped_catalog_is_valid(self) -> None:
        validate_catalog()  # should not raise

    def test_default_locale_defines_every_code(self) -> None:
        for code in ErrorCode:
            assert code in MESSAGES[settings.default_locale]

    def test_supported_locales(self) -> None:
        assert supported_locales() == ["en", "es"]

    def test_missing_default_locale_detected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(messages, "MESSAGES", {"es": MESSAGES["es"]})
        with pytest.raises(RuntimeError, match="no messages"):
            validate_catalog()

    def test_missing_default_code_detected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        incomplete = {"en": {ErrorCode.post_not_found: "Post not found."}}
        monkeypatch.setattr(messages, "MESSAGES", incomplete)
        with pytest.raises(RuntimeError, match="error.post.title.required"):
            validate_catalog()
