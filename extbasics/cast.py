"""Integer signedness conversions and byte-level reinterpretation."""


def _check_bits(bits):
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")


def _signed_range(bits):
    half = 1 << (bits - 1)
    return -half, half - 1


def _require_signed(value, bits):
    low, high = _signed_range(bits)
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in a signed {bits}-bit integer")


def _require_unsigned(value, bits):
    if not 0 <= value < (1 << bits):
        raise OverflowError(f"{value} does not fit in an unsigned {bits}-bit integer")


def to_unsigned(value, bits):
    """Reinterpret a signed ``bits``-wide integer as unsigned (two's complement)."""
    _check_bits(bits)
    _require_signed(value, bits)
    return value & ((1 << bits) - 1)


def to_signed(value, bits):
    """Reinterpret an unsigned ``bits``-wide integer as signed (two's complement)."""
    _check_bits(bits)
    _require_unsigned(value, bits)
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


def to_unsigned_checked(value, bits):
    """Convert a signed integer to unsigned, refusing negative values."""
    _check_bits(bits)
    _require_signed(value, bits)
    if value < 0:
        raise ValueError("conversion to_unsigned not possible")
    return value


def to_signed_checked(value, bits):
    """Convert an unsigned integer to signed, refusing values above the signed maximum."""
    _check_bits(bits)
    _require_unsigned(value, bits)
    if value > _signed_range(bits)[1]:
        raise ValueError("conversion to_signed not possible")
    return value


def _check_size(size):
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def convert_checked(data, size):
    """Reinterpret ``data`` as an object of ``size`` bytes; sizes must match."""
    _check_size(size)
    if len(data) != size:
        raise ValueError("conversion requires types with equal size")
    return bytes(data)


def convert_to_bigger(data, size):
    """Copy ``data`` into the start of ``size`` bytes, filling the rest with zeros."""
    _check_size(size)
    if size < len(data):
        raise ValueError("conversion requires target with greater or equal size")
    return bytes(data) + bytes(size - len(data))


def convert_to_smaller(data, size):
    """Take the first ``size`` bytes of ``data``."""
    _check_size(size)
    if size > len(data):
        raise ValueError("conversion requires target with less or equal size")
    return bytes(data[:size])


def convert_different(data, size):
    """Truncate or zero-extend ``data`` to exactly ``size`` bytes."""
    _check_size(size)
    head = bytes(data[:size])
    return head + bytes(size - len(head))