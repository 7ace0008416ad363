"""Readable formatting of containers, tuples and scalar values."""

from collections.abc import Collection, Mapping, Set

_NOT_CONTAINERS = (str, bytes, bytearray, memoryview, tuple)


def is_container(value):
    """True for sized, iterable collections other than strings, bytes and tuples."""
    return isinstance(value, Collection) and not isinstance(value, _NOT_CONTAINERS)


def _scalar(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _element(value):
    """Format a value that sits inside a container or tuple; strings get quoted."""
    if isinstance(value, str):
        return f'"{value}"'
    return _format(value)


def _ordered(items):
    try:
        return sorted(items)
    except TypeError:
        return list(items)


def _format_tuple(items):
    if not items:
        return "( )"
    return "(" + ", ".join(_element(item) for item in items) + ")"


def _format_container(container):
    if isinstance(container, Mapping):
        opening, closing = "{", "}"
        parts = [f"{_element(key)}:{_element(value)}" for key, value in container.items()]
    elif isinstance(container, Set):
        opening, closing = "{", "}"
        parts = [_element(item) for item in _ordered(container)]
    else:
        opening, closing = "[", "]"
        parts = [_element(item) for item in container]
    body = ", ".join(parts) if parts else " "
    return opening + body + closing


def _format(value):
    if isinstance(value, tuple):
        return _format_tuple(value)
    if is_container(value):
        return _format_container(value)
    return _scalar(value)


def fmt(item):
    """Return a readable string for ``item``.

    Sequences print as ``[a, b]``, sets and mappings as ``{a, b}`` and
    ``{k:v}``, tuples as ``(a, b)``; strings inside them are quoted and
    booleans print as ``true``/``false``.
    """
    return _format(item)