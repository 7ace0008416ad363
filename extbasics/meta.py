"""Small logical and type-comparison helpers."""


def if_all(*args):
    """Logical conjunction of all arguments; True when none are given."""
    return all(args)


def if_any(*args):
    """Logical disjunction of all arguments; False when none are given."""
    return not if_all(*(not arg for arg in args))


def are_same(first, *args):
    """True if every further argument equals ``first``."""
    return if_all(*(first == other for other in args))


def is_any(first, *args):
    """True if any further argument equals ``first``."""
    return if_any(*(first == other for other in args))


def if_constant(condition, first, second):
    """Pick ``second`` when ``condition`` is false, otherwise ``first``."""
    return first if condition else second


def tuple_for_each(items, func):
    """Call ``func`` on each element of a tuple and return ``func``."""
    if not isinstance(items, tuple):
        raise TypeError(f"expected a tuple, got {type(items).__name__}")
    for item in items:
        func(item)
    return func