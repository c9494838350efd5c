"""Arithmetic in the Galois fields GF(2^8) and GF(2^16)."""

from __future__ import annotations

from typing import ClassVar


class GaloisTable:
    """Log and antilog tables for GF(2^bits) built from a generator."""

    def __init__(self, bits: int, generator: int) -> None:
        self.bits = bits
        self.count = 1 << bits
        self.limit = self.count - 1
        self.generator = generator

        log = [0] * self.count
        antilog = [0] * self.count
        b = 1
        for exponent in range(self.limit):
            log[b] = exponent
            antilog[exponent] = b
            b <<= 1
            if b & self.count:
                b ^= generator
        log[0] = self.limit
        antilog[self.limit] = 0

        self.log = tuple(log)
        self.antilog = tuple(antilog)


class Galois:
    """An immutable element of a Galois field.

    Concrete fields are subclasses declared with the ``bits`` and
    ``generator`` class keywords.
    """

    __slots__ = ("_value",)

    BITS: ClassVar[int]
    COUNT: ClassVar[int]
    LIMIT: ClassVar[int]
    table: ClassVar[GaloisTable]

    def __init_subclass__(cls, bits: int, generator: int, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.table = GaloisTable(bits, generator)
        cls.BITS = bits
        cls.COUNT = cls.table.count
        cls.LIMIT = cls.table.limit

    def __init__(self, value: int = 0) -> None:
        if not hasattr(type(self), "table"):
            raise TypeError("use a concrete field such as Galois8 or Galois16")
        value = int(value)
        if not 0 <= value < self.COUNT:
            raise ValueError(
                f"{value} is outside the field {type(self).__name__}"
            )
        self._value = value

    @property
    def value(self) -> int:
        """The element as an integer."""
        return self._value

    def _coerce(self, other) -> Galois | None:
        if isinstance(other, type(self)):
            return other
        if isinstance(other, int):
            return type(self)(other)
        return None

    def __add__(self, other) -> Galois:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._value ^ other._value)

    __radd__ = __add__

    def __sub__(self, other) -> Galois:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._value ^ other._value)

    __rsub__ = __sub__

    def __mul__(self, other) -> Galois:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._value == 0 or other._value == 0:
            return type(self)(0)
        table = self.table
        total = table.log[self._value] + table.log[other._value]
        if total >= table.limit:
            total -= table.limit
        return type(self)(table.antilog[total])

    __rmul__ = __mul__

    def __truediv__(self, other) -> Galois:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("division by zero in a Galois field")
        if self._value == 0:
            return type(self)(0)
        table = self.table
        diff = table.log[self._value] - table.log[other._value]
        if diff < 0:
            diff += table.limit
        return type(self)(table.antilog[diff])

    def __rtruediv__(self, other) -> Galois:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def pow(self, exponent: int) -> Galois:
        """Raise the element to a non-negative integer power."""
        exponent = int(exponent)
        if exponent < 0:
            raise ValueError("the exponent must not be negative")
        if exponent == 0:
            return type(self)(1)
        if self._value == 0:
            return type(self)(0)
        table = self.table
        total = (table.log[self._value] * exponent) % table.limit
        return type(self)(table.antilog[total])

    def __pow__(self, exponent: int) -> Galois:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __xor__(self, exponent: int) -> Galois:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def log(self) -> int:
        """Discrete logarithm; zero maps to the field limit."""
        return self.table.log[self._value]

    def alog(self) -> int:
        """Antilogarithm of the element's value taken as an exponent."""
        return self.table.antilog[self._value]

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, type(self)):
            return self._value == other._value
        if isinstance(other, Galois):
            return False
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class Galois8(Galois, bits=8, generator=0x11D):
    """An element of GF(2^8) with generator 0x11D."""

    __slots__ = ()


class Galois16(Galois, bits=16, generator=0x1100B):
    """An element of GF(2^16) with generator 0x1100B."""

    __slots__ = ()