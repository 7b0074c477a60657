"""File content forms and text encodings.

Builders accept content either as raw bytes, stored verbatim, or as text
paired with an encoding name. Both are normalized into a ``Content`` variant
before they reach the tree.
"""

from __future__ import annotations

import base64
import codecs
from dataclasses import dataclass
from typing import Dict, Optional, Union

BINARY = "binary"

# Buffer-style encoding names mapped onto Python codecs.
_ALIASES: Dict[str, str] = {
    "binary": "latin-1",
    "latin1": "latin-1",
    "utf8": "utf-8",
    "ucs2": "utf-16-le",
    "ucs-2": "utf-16-le",
    "utf16le": "utf-16-le",
}

_BYTES_TO_TEXT = {"base64", "hex"}

BytesLike = Union[bytes, bytearray, memoryview]


def normalize_encoding(encoding: str) -> str:
    """Return the canonical codec name for ``encoding``.

    Raises ``LookupError`` for names neither listed above nor known to
    :mod:`codecs`.
    """

    name = encoding.strip().lower()
    if name in _BYTES_TO_TEXT:
        return name
    name = _ALIASES.get(name, name)
    return codecs.lookup(name).name


def encode_text(text: str, encoding: Optional[str] = None) -> bytes:
    codec = normalize_encoding(encoding or BINARY)
    if codec == "base64":
        return base64.b64decode(text)
    if codec == "hex":
        return bytes.fromhex(text)
    return text.encode(codec)


def decode_bytes(data: bytes, encoding: str) -> str:
    codec = normalize_encoding(encoding)
    if codec == "base64":
        return base64.b64encode(data).decode("ascii")
    if codec == "hex":
        return data.hex()
    return data.decode(codec, errors="replace")


@dataclass(frozen=True)
class RawContent:
    data: bytes

    def to_bytes(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class TextContent:
    text: str
    encoding: str = BINARY

    def to_bytes(self) -> bytes:
        return encode_text(self.text, self.encoding)


Content = Union[RawContent, TextContent]


def coerce_content(
    value: Union[str, BytesLike, Content, None],
    encoding: Optional[str] = None,
) -> Content:
    """Turn a builder ``content`` argument into a ``Content`` variant."""

    if value is None:
        return RawContent(b"")
    if isinstance(value, (RawContent, TextContent)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawContent(bytes(value))
    if isinstance(value, str):
        return TextContent(value, encoding or BINARY)
    raise TypeError(f"file content must be str or bytes, not {type(value).__name__}")
