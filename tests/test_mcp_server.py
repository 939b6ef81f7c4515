from __future__ import annotations

from speller.api.main import SpellcheckService
from speller.mcp import server
from speller.spellcheck.dictionary import Dictionary
from speller.spellcheck.policy import ModelSet


def _use_models(monkeypatch, *dictionaries: Dictionary) -> None:
    service = SpellcheckService(model_set=ModelSet(dictionaries))
    monkeypatch.setattr(server, "spellcheck_service", service)


def test_correct_spelling_tool_delegates_to_service(monkeypatch) -> None:
    _use_models(monkeypatch, Dictionary({"lazy": 40, "dog": 95}))

    assert server.correct_spelling("Lazyz dogg") == "Lazy dog"


def test_correct_spelling_tool_returns_text_when_nothing_to_fix(monkeypatch) -> None:
    _use_models(monkeypatch, Dictionary({"lazy": 40, "dog": 95}))

    assert server.correct_spelling("lazy dog") == "lazy dog"


def test_is_known_word_checks_industry_model_first(monkeypatch) -> None:
    _use_models(monkeypatch, Dictionary({"ankle": 1}), Dictionary({"angel": 500}))

    assert server.is_known_word("Ankle")
    assert not server.is_known_word("angel")
