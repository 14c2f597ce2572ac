"""
Lossless path records for the cache index.

Paths are stored as raw bytes with no delimiter or length prefix; any
container embedding them tracks record boundaries itself. The bytes are
only meaningful on the platform family that wrote them:

- POSIX: the path's native bytes, including sequences that are not valid
  text (Python carries those as surrogate escapes).
- Windows: each UTF-16 code unit as two bytes, low byte first. Unpaired
  surrogates are kept as-is.

Decoding returns the native path string exactly as stored, so
encode(decode(data)) == data. Wrap it in a Path only where normalisation
(dropped "." segments, doubled or trailing separators) does not matter.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Protocol, Union

from ..errors import CorruptPathError

StrPath = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class PathCodec(Protocol):
    """Protocol for converting paths to and from cache record bytes."""

    def encode(self, path: StrPath) -> bytes:
        ...

    def decode(self, data: bytes) -> str:
        ...


class NativeBytesCodec:
    """Byte-native records: the OS representation of the path, unchanged."""

    def encode(self, path: StrPath) -> bytes:
        return os.fsencode(path)

    def decode(self, data: bytes) -> str:
        return os.fsdecode(bytes(data))


class WideCharCodec:
    """Wide-character records: little-endian UTF-16 code units."""

    def encode(self, path: StrPath) -> bytes:
        text = os.fspath(path)
        if isinstance(text, bytes):
            raise TypeError("wide-character paths must be text, not bytes")
        return text.encode("utf-16-le", "surrogatepass")

    def decode(self, data: bytes) -> str:
        if len(data) % 2:
            raise CorruptPathError(f"wide-character path record has odd length ({len(data)} bytes)")
        return bytes(data).decode("utf-16-le", "surrogatepass")


PATH_CODEC: PathCodec = WideCharCodec() if os.name == "nt" else NativeBytesCodec()


def write_path(stream: BinaryIO, path: StrPath, codec: PathCodec | None = None) -> None:
    """Write one path record to a binary stream."""
    stream.write((codec or PATH_CODEC).encode(path))


def read_path(stream: BinaryIO, codec: PathCodec | None = None) -> str:
    """Read a path record from a binary stream, consuming it to EOF."""
    return (codec or PATH_CODEC).decode(stream.read())
