"""Conversions between host byte order and little or big endian integers."""

import sys

from extbasics.cast import to_signed, to_unsigned
from extbasics.errors import NotImplementedFeatureError

_SUPPORTED_SIZES = (2, 4, 8)


def is_little():
    """Return True when the host stores integers little endian."""
    return sys.byteorder == "little"


def byte_swap(value, size):
    """Reverse the byte order of an unsigned integer of ``size`` bytes."""
    return int.from_bytes(value.to_bytes(size, "little"), "big")


def _convert(value, size, signed, swap):
    if size not in _SUPPORTED_SIZES:
        raise NotImplementedFeatureError()
    bits = size * 8
    raw = to_unsigned(value, bits) if signed else value
    if not 0 <= raw < (1 << bits):
        raise OverflowError(f"{value} does not fit in an unsigned {bits}-bit integer")
    if swap:
        raw = byte_swap(raw, size)
    return to_signed(raw, bits) if signed else raw


def host_to_little(value, size=4, signed=False):
    """Convert a host-order integer to little endian order."""
    return _convert(value, size, signed, not is_little())


def little_to_host(value, size=4, signed=False):
    """Convert a little endian integer to host order."""
    return _convert(value, size, signed, not is_little())


def host_to_big(value, size=4, signed=False):
    """Convert a host-order integer to big endian order."""
    return _convert(value, size, signed, is_little())


def big_to_host(value, size=4, signed=False):
    """Convert a big endian integer to host order."""
    return _convert(value, size, signed, is_little())