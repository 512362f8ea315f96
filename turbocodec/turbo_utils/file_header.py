"""
Turbo file header: 3-byte marker, 1-byte type, 4-byte original size.
"""

import struct
from typing import BinaryIO

HEADER_FORMAT = "<3scI"  # packed, little-endian
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

MARKER = b"Cmp"
TYPE_TURBO = b"T"


class FileHeader:
    """
    Header written in front of every Turbo-compressed file.
    """

    def __init__(self, orig_size: int, marker: bytes = MARKER, type_tag: bytes = TYPE_TURBO):
        self.marker = marker
        self.type_tag = type_tag
        self.orig_size = orig_size & 0xFFFFFFFF

    def __repr__(self):
        return f"<FileHeader marker={self.marker!r} type={self.type_tag!r} orig_size={self.orig_size}>"

    def __eq__(self, other):
        if not isinstance(other, FileHeader):
            return NotImplemented
        return (self.marker, self.type_tag, self.orig_size) == (
            other.marker, other.type_tag, other.orig_size
        )

    def to_bytes(self) -> bytes:
        return struct.pack(HEADER_FORMAT, self.marker, self.type_tag, self.orig_size)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "FileHeader":
        """
        Parses and validates a header.

        Raises:
            ValueError: If the header is truncated or not a Turbo header
        """
        if len(raw) < HEADER_SIZE:
            raise ValueError("File is corrupted or empty")
        marker, type_tag, orig_size = struct.unpack(HEADER_FORMAT, raw[:HEADER_SIZE])
        if marker != MARKER:
            raise ValueError("Invalid magic number")
        if type_tag != TYPE_TURBO:
            raise ValueError(f"Unsupported compression type: {type_tag!r}")
        return cls(orig_size, marker, type_tag)

    def write(self, stream: BinaryIO) -> int:
        return stream.write(self.to_bytes())

    @classmethod
    def read(cls, stream: BinaryIO) -> "FileHeader":
        return cls.from_bytes(stream.read(HEADER_SIZE))
