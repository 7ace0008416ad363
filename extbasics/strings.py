"""String helpers: headings, case mapping, prefix tests, splitting and replacing."""

_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def section(text, width=80, fill="="):
    """Centre ``text`` in a line of ``width`` characters padded with ``fill``.

    Text too long to fit with surrounding spaces is returned unchanged; empty
    text gives a full line of ``fill``.
    """
    if len(fill) != 1:
        raise ValueError(f"fill must be a single character, got {fill!r}")
    if len(text) + 2 >= width:
        return text
    if not text:
        return fill * width
    to_fill = width - len(text)
    odd = to_fill % 2
    to_fill -= odd
    half = to_fill // 2 - 1
    return fill * (half + odd) + " " + text + " " + fill * half


def to_upper(text):
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_UPPER)


def to_lower(text):
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_LOWER)


def starts_with(text, prefix):
    """True if ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text, suffix):
    """True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def split_on(text, sep, add_empty=False):
    """Split ``text`` on ``sep``; empty parts are kept only when ``add_empty``.

    An empty separator yields the whole text as the only part.
    """
    if not sep:
        return [text]
    parts = text.split(sep)
    if add_empty:
        return parts
    return [part for part in parts if part]


def replace(text, seq, replacement):
    """Replace every occurrence of ``seq``; an empty ``seq`` leaves the text alone."""
    if not seq:
        return text
    return replacement.join(split_on(text, seq, True))


def _first_char_matches(char, separators, ordered):
    """Return the longest length among separators starting with ``char`` and those separators.

    When unordered, a single-character match ends the search at once.
    """
    longest = 0
    candidates = []
    for sep in separators:
        if not sep or sep[0] != char:
            continue
        if not ordered and len(sep) == 1:
            return 1, []
        longest = max(longest, len(sep))
        candidates.append(sep)
    return longest, candidates


def split_on_multiple(text, separators=(" ",), ordered=True):
    """Split ``text`` on any of ``separators``.

    With ``ordered`` the separators are tried in sorted order; otherwise a
    single-character separator wins as soon as it is found. Adjacent
    separators produce empty parts, a trailing separator does not.
    """
    seps = sorted(separators) if ordered else list(separators)
    words = []
    start = current = 0
    end = len(text)

    while current != end:
        length, candidates = _first_char_matches(text[current], seps, ordered)
        if length == 0:
            current += 1
        elif length == 1:
            words.append(text[start:current])
            current += 1
            start = current
        else:
            for candidate in candidates:
                if text.startswith(candidate, current):
                    words.append(text[start:current])
                    current += min(len(candidate), end - current)
                    start = current
                    break
            else:
                current += 1

    if start != current:
        words.append(text[start:current])
    return words