import io
import struct

import pytest

from speller.spellcheck.codec import MAX_ENTRY_COUNT, decode, encode
from speller.spellcheck.dictionary import Dictionary
from speller.spellcheck.errors import ModelFormatError


def _encoded(mapping) -> bytes:
    sink = io.BytesIO()
    encode(mapping, sink)
    return sink.getvalue()


def test_encode_writes_big_endian_length_prefixed_entries() -> None:
    payload = _encoded(Dictionary({"a": 1, "of": 258}))

    assert payload == (
        b"\x00\x00\x00\x02"
        b"\x00\x01a\x00\x00\x00\x01"
        b"\x00\x02of\x00\x00\x01\x02"
    )


def test_encode_empty_dictionary() -> None:
    assert _encoded(Dictionary()) == b"\x00\x00\x00\x00"


def test_encode_prefixes_utf8_byte_length() -> None:
    payload = _encoded({"naïve": 3})

    assert payload[4:6] == b"\x00\x06"
    assert payload[6:12] == "naïve".encode("utf-8")


def test_decode_reverses_encode() -> None:
    model = Dictionary({"the": 100, "don't": 7, "café": 2, "zero": 0})

    assert decode(io.BytesIO(_encoded(model))) == model


def test_decode_stops_after_declared_entries() -> None:
    stream = io.BytesIO(_encoded({"dog": 95}) + b"trailing")

    assert decode(stream) == {"dog": 95}
    assert stream.read() == b"trailing"


def test_decode_keeps_last_frequency_for_repeated_word() -> None:
    payload = b"\x00\x00\x00\x02" + b"\x00\x03dog\x00\x00\x00\x01" + b"\x00\x03dog\x00\x00\x00\x09"

    assert decode(io.BytesIO(payload)) == {"dog": 9}


@pytest.mark.parametrize(
    "payload",
    [
        b"",
        b"\x00\x00",
        struct.pack(">i", -1),
        struct.pack(">i", MAX_ENTRY_COUNT + 1),
        b"\x00\x00\x00\x02" + b"\x00\x03dog\x00\x00\x00\x01",
        b"\x00\x00\x00\x01" + b"\x00\x05do",
        b"\x00\x00\x00\x01" + b"\x00\x03dog\x00\x00",
        b"\x00\x00\x00\x01" + b"\x00\x01\xff\x00\x00\x00\x01",
        b"\x00\x00\x00\x01" + b"\x00\x03dog\xff\xff\xff\xff",
    ],
    ids=[
        "empty",
        "short-count",
        "negative-count",
        "absurd-count",
        "missing-entry",
        "short-word",
        "short-frequency",
        "bad-utf8",
        "negative-frequency",
    ],
)
def test_decode_rejects_malformed_streams(payload: bytes) -> None:
    with pytest.raises(ModelFormatError):
        decode(io.BytesIO(payload))


def test_encode_rejects_oversized_word() -> None:
    with pytest.raises(ModelFormatError):
        _encoded({"a" * 70000: 1})


def test_encode_rejects_frequency_outside_int32() -> None:
    with pytest.raises(ModelFormatError):
        _encoded({"big": 2**31})
