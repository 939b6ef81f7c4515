from __future__ import annotations

from typing import Iterable, Mapping

from speller.spellcheck.engine import CorrectionResult, SpellCorrectorEngine, spellcorrector_engine


class ModelSet:
    """One or two spelling models consulted in order: industry first, general last.

    A correction found by the first model is final. Any other word is retried
    against the second model, whose answer is used whether or not it changed.
    """

    def __init__(
        self,
        dictionaries: Iterable[Mapping[str, int]],
        *,
        engine: SpellCorrectorEngine | None = None,
    ) -> None:
        self.dictionaries: tuple[Mapping[str, int], ...] = tuple(dictionaries)
        if not 1 <= len(self.dictionaries) <= 2:
            raise ValueError(f"expected 1 or 2 spelling models, got {len(self.dictionaries)}")
        self.engine = engine or spellcorrector_engine

    @property
    def primary(self) -> Mapping[str, int]:
        return self.dictionaries[0]

    def correct_word(self, word: str) -> CorrectionResult:
        result = self.engine.correct(word, self.primary)
        if result.changed or len(self.dictionaries) == 1:
            return result
        return self.engine.correct(word, self.dictionaries[1])

    def correct(self, words: Iterable[str]) -> list[str]:
        return [self.correct_word(word).corrected for word in words]

    def has_word(self, word: str) -> bool:
        return word in self.primary

    contains = has_word
