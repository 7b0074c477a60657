from __future__ import annotations

import pytest

from fake_fs.content import (
    RawContent,
    TextContent,
    coerce_content,
    decode_bytes,
    encode_text,
    normalize_encoding,
)


def test_normalize_encoding_aliases() -> None:
    assert normalize_encoding("utf8") == "utf-8"
    assert normalize_encoding("UTF-8") == "utf-8"
    assert normalize_encoding("binary") == normalize_encoding("latin1")
    assert normalize_encoding("ucs2") == "utf-16-le"
    assert normalize_encoding("base64") == "base64"


def test_normalize_encoding_unknown() -> None:
    with pytest.raises(LookupError):
        normalize_encoding("klingon")


def test_text_defaults_to_binary() -> None:
    assert encode_text("\xe9") == b"\xe9"
    assert TextContent("abc").to_bytes() == b"abc"


def test_base64_and_hex() -> None:
    assert encode_text("TWFu", "base64") == b"Man"
    assert decode_bytes(b"Man", "base64") == "TWFu"
    assert encode_text("ff00", "hex") == b"\xff\x00"
    assert decode_bytes(b"\xff\x00", "hex") == "ff00"


def test_utf16() -> None:
    assert encode_text("hi", "ucs2") == b"h\x00i\x00"
    assert decode_bytes(b"h\x00i\x00", "utf16le") == "hi"


def test_text_round_trip() -> None:
    text = "żółw"
    assert decode_bytes(encode_text(text, "utf8"), "utf-8") == text


def test_invalid_bytes_are_replaced_on_decode() -> None:
    assert decode_bytes(b"a\xffb", "utf8") == "a�b"


def test_coerce_content_variants() -> None:
    assert coerce_content(None) == RawContent(b"")
    assert coerce_content(b"\x01") == RawContent(b"\x01")
    assert coerce_content(bytearray(b"\x02")) == RawContent(b"\x02")
    assert coerce_content(memoryview(b"\x03")) == RawContent(b"\x03")
    assert coerce_content("x") == TextContent("x", "binary")
    assert coerce_content("x", "utf8") == TextContent("x", "utf8")
    existing = TextContent("y", "ascii")
    assert coerce_content(existing) is existing


def test_coerce_content_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        coerce_content(3.5)  # type: ignore[arg-type]
