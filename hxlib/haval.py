"""HAVAL one-way hash with variable fingerprint length and pass count."""

from __future__ import annotations

import struct
from typing import BinaryIO

from hxlib.haval_rounds import INITIAL_FINGERPRINT, MASK, hash_block, tailor

VERSION = 1
BLOCK_SIZE = 128
READ_SIZE = 4096

VALID_FPTLENS = (128, 160, 192, 224, 256)
VALID_PASSES = (3, 4, 5)

_PADDING = b"\x01" + b"\x00" * 127
_BLOCK = struct.Struct("<32I")


class Haval:
    """Incremental HAVAL hasher."""

    def __init__(self, fptlen: int = 128, passes: int = 3) -> None:
        if fptlen not in VALID_FPTLENS:
            raise ValueError(f"unsupported fingerprint length: {fptlen}")
        if passes not in VALID_PASSES:
            raise ValueError(f"unsupported number of passes: {passes}")
        self.fptlen = fptlen
        self.passes = passes
        self._fingerprint = list(INITIAL_FINGERPRINT)
        self._buffer = bytearray()
        self._bits = 0

    @property
    def digest_size(self) -> int:
        """Length of the fingerprint in bytes."""
        return self.fptlen // 8

    def _absorb(self, data: bytes) -> None:
        self._buffer += data
        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        for start in range(0, full, BLOCK_SIZE):
            block = _BLOCK.unpack_from(self._buffer, start)
            self._fingerprint = hash_block(self._fingerprint, block, self.passes)
        del self._buffer[:full]

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._bits = (self._bits + len(data) * 8) & 0xFFFFFFFFFFFFFFFF
        self._absorb(data)

    def copy(self) -> "Haval":
        """Return an independent hasher with the same state."""
        clone = Haval(self.fptlen, self.passes)
        clone._fingerprint = list(self._fingerprint)
        clone._buffer = bytearray(self._buffer)
        clone._bits = self._bits
        return clone

    def digest(self) -> bytes:
        """Return the fingerprint of everything fed so far; the state is kept."""
        final = self.copy()
        tail = bytes(
            (
                ((self.fptlen & 0x3) << 6) | ((self.passes & 0x7) << 3) | (VERSION & 0x7),
                (self.fptlen >> 2) & 0xFF,
            )
        ) + struct.pack("<II", self._bits & MASK, (self._bits >> 32) & MASK)

        remainder = (self._bits >> 3) & 0x7F
        pad_len = 118 - remainder if remainder < 118 else 246 - remainder
        final._absorb(_PADDING[:pad_len])
        final._absorb(tail)

        words = tailor(final._fingerprint, self.fptlen)
        count = self.fptlen >> 5
        return struct.pack(f"<{count}I", *words[:count])

    def hexdigest(self) -> str:
        """Return the fingerprint as lower-case hex."""
        return self.digest().hex()


def haval_buffer(data: bytes, fptlen: int = 128, passes: int = 3) -> bytes:
    """Hash a byte string in one call."""
    hasher = Haval(fptlen, passes)
    hasher.update(data)
    return hasher.digest()


def haval_file(
    fileobj: BinaryIO, maxlen: int = 0, fptlen: int = 128, passes: int = 3
) -> bytes:
    """Hash a binary file object, reading at most ``maxlen`` bytes (0 means all)."""
    if maxlen < 0:
        raise ValueError("maxlen must not be negative")
    hasher = Haval(fptlen, passes)
    remaining = maxlen
    while True:
        size = READ_SIZE if not maxlen else min(READ_SIZE, remaining)
        if maxlen and size == 0:
            break
        chunk = fileobj.read(size)
        if not chunk:
            break
        hasher.update(chunk)
        if maxlen:
            remaining -= len(chunk)
    return hasher.digest()