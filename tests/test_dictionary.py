import pytest

from speller.spellcheck.dictionary import Dictionary


def test_dictionary_behaves_like_read_only_mapping() -> None:
    model = Dictionary({"dog": 95, "fox": 60})

    assert "dog" in model
    assert "cat" not in model
    assert model["fox"] == 60
    assert len(model) == 2
    assert sorted(model) == ["dog", "fox"]
    assert model == {"dog": 95, "fox": 60}

    with pytest.raises(TypeError):
        model["cat"] = 1  # type: ignore[index]


def test_dictionary_lookups_for_missing_words() -> None:
    model = Dictionary([("dog", 95)])

    assert model.get("cat") is None
    assert model.get("cat", 0) == 0
    assert model.get("dog") == 95
    with pytest.raises(KeyError):
        model["cat"]


def test_dictionary_rejects_negative_frequency() -> None:
    with pytest.raises(ValueError):
        Dictionary({"dog": -1})
