from __future__ import annotations

import struct
from typing import BinaryIO, Mapping

from speller.spellcheck.dictionary import Dictionary
from speller.spellcheck.errors import ModelFormatError

_I32 = struct.Struct(">i")  # big-endian int32
_U16 = struct.Struct(">H")  # big-endian uint16

MAX_ENTRY_COUNT = 1 << 26
MAX_WORD_BYTES = 0xFFFF
MAX_FREQUENCY = 2**31 - 1


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise ModelFormatError(f"truncated model: expected {size} bytes for {what}, got {size - remaining}")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_word(stream: BinaryIO, index: int) -> str:
    (length,) = _U16.unpack(_read_exact(stream, _U16.size, f"length of word #{index}"))
    raw = _read_exact(stream, length, f"word #{index}")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ModelFormatError(f"word #{index} is not valid UTF-8") from exc


def decode(stream: BinaryIO) -> Dictionary:
    """Read a model from a decompressed byte stream.

    Exactly the declared number of entries is consumed; anything after the
    last entry is left unread.
    """
    (count,) = _I32.unpack(_read_exact(stream, _I32.size, "entry count"))
    if count < 0 or count > MAX_ENTRY_COUNT:
        raise ModelFormatError(f"invalid entry count {count}")

    frequencies: dict[str, int] = {}
    for index in range(count):
        word = _read_word(stream, index)
        (frequency,) = _I32.unpack(_read_exact(stream, _I32.size, f"frequency of {word!r}"))
        if frequency < 0:
            raise ModelFormatError(f"negative frequency {frequency} for {word!r}")
        frequencies[word] = frequency

    return Dictionary(frequencies)


def _pack_entry(word: str, frequency: int) -> bytes:
    raw = word.encode("utf-8")
    if len(raw) > MAX_WORD_BYTES:
        raise ModelFormatError(f"word too long for model ({len(raw)} bytes): {word[:32]!r}...")
    if not 0 <= frequency <= MAX_FREQUENCY:
        raise ModelFormatError(f"frequency {frequency} for {word!r} is out of range")
    return _U16.pack(len(raw)) + raw + _I32.pack(frequency)


def encode(dictionary: Mapping[str, int], sink: BinaryIO) -> None:
    """Write a model to an uncompressed byte sink, in the mapping's iteration order."""
    if len(dictionary) > MAX_ENTRY_COUNT:
        raise ModelFormatError(f"too many entries for model: {len(dictionary)}")
    sink.write(_I32.pack(len(dictionary)))
    for word, frequency in dictionary.items():
        sink.write(_pack_entry(word, frequency))
