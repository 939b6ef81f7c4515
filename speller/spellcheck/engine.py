import re
from dataclasses import dataclass
from typing import Iterable, Mapping

WORD_RE = re.compile(r"[a-zA-Z]+(?:'[a-zA-Z]+)*")
ALPHABET = "abcdefghijklmnopqrstuvwxyz'"
MAX_WORD_LENGTH = 50


@dataclass(frozen=True)
class CorrectionResult:
    corrected: str
    changed: bool


class SpellCorrectorEngine:
    def __init__(self, alphabet: str = ALPHABET, max_word_length: int = MAX_WORD_LENGTH) -> None:
        self.alphabet = alphabet
        self.max_word_length = max_word_length

    def normalize_word(self, word: str) -> str:
        return (word or "").strip().lower()

    def iter_words(self, text: str) -> Iterable[str]:
        for token in WORD_RE.findall((text or "").lower()):
            if token:
                yield token

    def variants(self, word: str) -> list[str]:
        """All strings one deletion, transposition, substitution or insertion away from `word`.

        Phases are emitted in that order. Duplicates are kept, and a
        substitution with the same letter reproduces `word` itself.
        """
        n = len(word)
        result: list[str] = []
        for idx in range(n):
            result.append(word[:idx] + word[idx + 1 :])
        for idx in range(n - 1):
            result.append(word[:idx] + word[idx + 1] + word[idx] + word[idx + 2 :])
        for idx in range(n):
            head, tail = word[:idx], word[idx + 1 :]
            for letter in self.alphabet:
                result.append(head + letter + tail)
        for idx in range(n + 1):
            head, tail = word[:idx], word[idx:]
            for letter in self.alphabet:
                result.append(head + letter + tail)
        return result

    def _best_known(self, candidates: Iterable[str], dictionary: Mapping[str, int]) -> str | None:
        # Equal frequencies: the candidate seen last wins.
        best: str | None = None
        best_frequency = -1
        for candidate in candidates:
            frequency = dictionary.get(candidate)
            if frequency is None:
                continue
            if frequency >= best_frequency:
                best = candidate
                best_frequency = frequency
        return best

    def correct(self, word: str, dictionary: Mapping[str, int]) -> CorrectionResult:
        if word in dictionary or len(word) > self.max_word_length:
            return CorrectionResult(corrected=word, changed=False)

        first_pass = self.variants(word)
        best = self._best_known(first_pass, dictionary)
        if best is not None:
            return CorrectionResult(corrected=best, changed=True)

        second_pass = (second for first in first_pass for second in self.variants(first))
        best = self._best_known(second_pass, dictionary)
        if best is not None:
            return CorrectionResult(corrected=best, changed=True)

        return CorrectionResult(corrected=word, changed=False)

    def apply_case(self, original: str, replacement: str) -> str:
        if original.isupper():
            return replacement.upper()
        if original[:1].isupper() and original[1:].islower():
            return replacement.capitalize()
        return replacement


spellcorrector_engine = SpellCorrectorEngine()


def normalize_word(word: str) -> str:
    return spellcorrector_engine.normalize_word(word)


def iter_words(text: str) -> Iterable[str]:
    return spellcorrector_engine.iter_words(text)


def variants(word: str) -> list[str]:
    return spellcorrector_engine.variants(word)


def correct(word: str, dictionary: Mapping[str, int]) -> CorrectionResult:
    return spellcorrector_engine.correct(word, dictionary)


def apply_case(original: str, replacement: str) -> str:
    return spellcorrector_engine.apply_case(original, replacement)
