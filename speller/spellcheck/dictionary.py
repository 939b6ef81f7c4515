from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Iterable


class Dictionary(Mapping[str, int]):
    """Read-only word -> frequency mapping backing a spelling model."""

    __slots__ = ("_frequencies",)

    def __init__(self, entries: Mapping[str, int] | Iterable[tuple[str, int]] = ()) -> None:
        frequencies = dict(entries)
        for word, frequency in frequencies.items():
            if frequency < 0:
                raise ValueError(f"negative frequency {frequency} for {word!r}")
        self._frequencies: dict[str, int] = frequencies

    def __getitem__(self, word: str) -> int:
        return self._frequencies[word]

    def __contains__(self, word: object) -> bool:
        return word in self._frequencies

    def __iter__(self) -> Iterator[str]:
        return iter(self._frequencies)

    def __len__(self) -> int:
        return len(self._frequencies)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._frequencies)} words)"

    def get(self, word: str, default: int | None = None) -> int | None:
        return self._frequencies.get(word, default)
