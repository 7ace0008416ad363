"""A set of bit flags drawn from the members of an enumeration."""

from enum import Enum


class FlagSet:
    """Bit flags whose individual flags are members of ``enum_type``.

    The stored value is an unsigned integer of ``bits`` bits. Operators
    accept another flag set of the same enumeration or one of its members.
    """

    __slots__ = ("enum_type", "bits", "flags")

    def __init__(self, enum_type, value=0, bits=32):
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"{enum_type!r} is not an enumeration")
        if bits <= 0:
            raise ValueError(f"bit width must be positive, got {bits}")
        self.enum_type = enum_type
        self.bits = bits
        if isinstance(value, int) and not isinstance(value, (bool, Enum)):
            raw = value
        else:
            raw = self._value_of(value)
            if raw is None:
                raise TypeError(f"cannot build a flag set of {enum_type.__name__} from {value!r}")
        self.flags = raw & self._mask

    @property
    def _mask(self):
        return (1 << self.bits) - 1

    def _value_of(self, other):
        if isinstance(other, FlagSet):
            return other.flags if other.enum_type is self.enum_type else None
        if isinstance(other, self.enum_type):
            if not isinstance(other.value, int):
                raise TypeError(f"{other!r} does not have an integer value")
            return other.value & self._mask
        return None

    def _require(self, other):
        raw = self._value_of(other)
        if raw is None:
            raise TypeError(f"{other!r} is not a flag of {self.enum_type.__name__}")
        return raw

    def _derive(self, raw):
        return FlagSet(self.enum_type, raw, self.bits)

    def add(self, flag):
        """Set the bits of ``flag``; return self."""
        self.flags = (self.flags | self._require(flag)) & self._mask
        return self

    def remove(self, flag):
        """Clear the bits of ``flag``; return self."""
        self.flags = self.flags & ~self._require(flag) & self._mask
        return self

    def contains(self, flag):
        """True if every bit of ``flag`` is set."""
        raw = self._require(flag)
        return self.flags & raw == raw

    def _binary(self, other, operation):
        raw = self._value_of(other)
        if raw is None:
            return NotImplemented
        return self._derive(operation(self.flags, raw))

    def __and__(self, other):
        return self._binary(other, lambda a, b: a & b)

    def __or__(self, other):
        return self._binary(other, lambda a, b: a | b)

    def __xor__(self, other):
        return self._binary(other, lambda a, b: a ^ b)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __invert__(self):
        return self._derive(~self.flags & self._mask)

    def __eq__(self, other):
        raw = self._value_of(other)
        if raw is None:
            return NotImplemented
        return self.flags == raw

    __hash__ = None

    def __bool__(self):
        return self.flags != 0

    def __int__(self):
        return self.flags

    def __repr__(self):
        return f"FlagSet({self.enum_type.__name__}, {self.flags:#x}, bits={self.bits})"