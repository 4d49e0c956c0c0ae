"""
Fixed-capacity bit-addressable byte buffer.

Logical bit 0 is the most-significant bit of byte 0, bit 7 is the
least-significant bit of byte 0, bit 8 is the most-significant bit of
byte 1, and so on. Numeric decoding treats the first ``length`` bits as a
big-endian unsigned integer.
"""

from __future__ import annotations

import random
from typing import Callable, Optional


class BitVector:
    """A gene: ``byte_size`` bytes of storage, never resized after creation."""

    __slots__ = ("_data",)

    def __init__(self, byte_size: int = 0):
        if byte_size < 0:
            raise ValueError(f"byte_size must be non-negative, got {byte_size}")
        self._data = bytearray(byte_size)

    @classmethod
    def for_bits(cls, bit_size: int) -> "BitVector":
        """Allocate the smallest buffer holding ``bit_size`` bits."""
        return cls((bit_size + 7) // 8)

    @classmethod
    def from_bytes(cls, data: bytes) -> "BitVector":
        vector = cls(len(data))
        vector._data[:] = data
        return vector

    @property
    def bit_capacity(self) -> int:
        return len(self._data) * 8

    def get(self, bit_index: int) -> Optional[int]:
        """Return 0 or 1, or None when the addressed byte does not exist."""
        byte_index, offset = divmod(bit_index, 8)
        if not 0 <= byte_index < len(self._data):
            return None
        return (self._data[byte_index] >> (7 - offset)) & 1

    def edit(self, bit_index: int, value) -> bool:
        """Set (truthy ``value``) or clear the addressed bit.

        Returns False without touching the buffer when the byte does not exist.
        """
        byte_index, offset = divmod(bit_index, 8)
        if not 0 <= byte_index < len(self._data):
            return False
        mask = 1 << (7 - offset)
        if value:
            self._data[byte_index] |= mask
        else:
            self._data[byte_index] &= ~mask & 0xFF
        return True

    def flip(self, bit_index: int) -> bool:
        bit = self.get(bit_index)
        if bit is None:
            return False
        return self.edit(bit_index, not bit)

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Overwrite every byte with 8 independent fair coin flips."""
        draw = (rng or random).random
        for i in range(len(self._data)):
            byte = 0
            for _ in range(8):
                byte = (byte << 1) | (1 if draw() < 0.5 else 0)
            self._data[i] = byte

    def to_number(self, length: int) -> int:
        """Decode the first ``length`` bits as a big-endian unsigned integer.

        Bits past ``length`` in the final partial byte are shifted out.
        """
        self._check_length(length)
        if length == 0:
            return 0
        full_bytes, tail_bits = divmod(length, 8)
        result = int.from_bytes(self._data[:full_bytes], "big")
        if tail_bits:
            result = (result << tail_bits) | (
                self._data[full_bytes] >> (8 - tail_bits)
            )
        return result

    def get_binary(self, length: int) -> str:
        """Render the first ``length`` bits as a zero-padded binary string."""
        if length == 0:
            self._check_length(length)
            return ""
        return format(self.to_number(length), f"0{length}b")

    def copy(self) -> "BitVector":
        return BitVector.from_bytes(self._data)

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def _check_length(self, length: int) -> None:
        if not 0 <= length <= self.bit_capacity:
            raise ValueError(
                f"length {length} outside [0, {self.bit_capacity}] for a "
                f"{len(self._data)}-byte vector"
            )

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"BitVector({self._data.hex() or 'empty'}, bytes={len(self._data)})"


Gene = BitVector

ScoreFunction = Callable[[BitVector], float]
