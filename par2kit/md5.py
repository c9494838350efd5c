"""MD5 hash values and an incremental MD5 context."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64

_SHIFTS = (
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4
)
_CONSTANTS = [int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64)]
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def _rol(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


@dataclass(frozen=True)
class MD5Hash:
    """A 16 byte MD5 hash value.

    Ordering compares the bytes from the last one to the first, so the
    digest is treated as a little-endian 128-bit number.
    """

    digest: bytes = bytes(16)

    def __post_init__(self) -> None:
        if len(self.digest) != 16:
            raise ValueError("an MD5 hash is exactly 16 bytes")
        object.__setattr__(self, "digest", bytes(self.digest))

    def _key(self) -> bytes:
        return self.digest[::-1]

    def hex(self) -> str:
        """Upper-case hex of the hash, last byte first."""
        return self._key().hex().upper()

    def __lt__(self, other: MD5Hash) -> bool:
        if not isinstance(other, MD5Hash):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: MD5Hash) -> bool:
        if not isinstance(other, MD5Hash):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: MD5Hash) -> bool:
        if not isinstance(other, MD5Hash):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: MD5Hash) -> bool:
        if not isinstance(other, MD5Hash):
            return NotImplemented
        return self._key() >= other._key()

    def __str__(self) -> str:
        return self.hex()


class MD5Context:
    """Incremental MD5 computation with a 64 byte block buffer."""

    def __init__(self) -> None:
        self._block = bytearray(_BLOCK_SIZE)
        self.reset()

    def reset(self) -> None:
        """Return the context to its initial state."""
        self._state = list(_INITIAL_STATE)
        self._used = 0
        self._bytes = 0

    @property
    def bytes_processed(self) -> int:
        """Total number of bytes fed into the context."""
        return self._bytes

    def _update_state(self, chunk) -> None:
        words = [int.from_bytes(chunk[i:i + 4], "little") for i in range(0, 64, 4)]
        a, b, c, d = self._state
        for i in range(64):
            if i < 16:
                f = (b & c) | (~b & d)
                g = i
            elif i < 32:
                f = (d & b) | (~d & c)
                g = (5 * i + 1) % 16
            elif i < 48:
                f = b ^ c ^ d
                g = (3 * i + 5) % 16
            else:
                f = c ^ (b | (~d & _MASK))
                g = (7 * i) % 16
            f = (f + a + _CONSTANTS[i] + words[g]) & _MASK
            a, d, c = d, c, b
            b = (b + _rol(f, _SHIFTS[i])) & _MASK
        self._state = [
            (s + v) & _MASK for s, v in zip(self._state, (a, b, c, d))
        ]

    def update(self, data) -> None:
        """Feed bytes-like data into the hash."""
        view = memoryview(data).cast("B")
        length = len(view)
        self._bytes += length
        pos = 0

        if self._used and self._used + length >= _BLOCK_SIZE:
            have = _BLOCK_SIZE - self._used
            self._block[self._used:] = view[:have]
            pos = have
            self._update_state(self._block)
            self._used = 0

        while length - pos >= _BLOCK_SIZE:
            self._update_state(bytes(view[pos:pos + _BLOCK_SIZE]))
            pos += _BLOCK_SIZE

        remainder = length - pos
        if remainder > 0:
            self._block[self._used:self._used + remainder] = view[pos:]
            self._used += remainder

    def update_zeros(self, length: int) -> None:
        """Feed `length` zero bytes into the hash."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._bytes += length

        if self._used > 0:
            if self._used + length >= _BLOCK_SIZE:
                have = _BLOCK_SIZE - self._used
                self._block[self._used:] = bytes(have)
                length -= have
                self._update_state(self._block)
                self._used = 0
            else:
                self._block[self._used:self._used + length] = bytes(length)
                self._used += length
                return

        zeros = bytes(_BLOCK_SIZE)
        self._block[:] = zeros
        while length >= _BLOCK_SIZE:
            self._update_state(zeros)
            length -= _BLOCK_SIZE
        self._used = length

    def final(self) -> MD5Hash:
        """Pad the message and return the finished hash."""
        bits = (self._bytes << 3) & 0xFFFFFFFFFFFFFFFF
        if self._used >= _BLOCK_SIZE - 8:
            padding = _BLOCK_SIZE - 8 + _BLOCK_SIZE - self._used
        else:
            padding = _BLOCK_SIZE - 8 - self._used
        self.update(b"\x80" + bytes(padding - 1))
        self.update(bits.to_bytes(8, "little"))
        return self.hash()

    def hash(self) -> MD5Hash:
        """The current state read out as a hash value."""
        return MD5Hash(b"".join(s.to_bytes(4, "little") for s in self._state))

    def __str__(self) -> str:
        s = self._state
        return "%08X%08X%08X%08X:%08X%08X" % (
            s[3], s[2], s[1], s[0],
            (self._bytes >> 32) & _MASK,
            self._bytes & _MASK,
        )