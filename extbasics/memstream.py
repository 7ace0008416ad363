"""A read-only text stream over an existing string."""

import re

_WHITESPACE = " \t\n\v\f\r"
_WORD = re.compile(f"[{re.escape(_WHITESPACE)}]*([^{re.escape(_WHITESPACE)}]*)")


class ViewStream:
    """Read words and lines from a string without copying it up front.

    Reading past the end yields empty strings, and :meth:`reset` points the
    stream at a new string from its beginning.
    """

    __slots__ = ("_view", "_pos")

    def __init__(self, view=""):
        self.reset(view)

    def reset(self, view):
        """Start reading ``view`` from its beginning."""
        if not isinstance(view, str):
            raise TypeError(f"expected a string, got {type(view).__name__}")
        self._view = view
        self._pos = 0

    @property
    def position(self):
        return self._pos

    @property
    def at_end(self):
        return self._pos >= len(self._view)

    def read_word(self):
        """Skip whitespace and return the following word, or "" at the end."""
        match = _WORD.match(self._view, self._pos)
        self._pos = match.end()
        return match.group(1)

    def read_line(self):
        """Return the text up to the next newline, consuming the newline."""
        end = self._view.find("\n", self._pos)
        if end == -1:
            line = self._view[self._pos:]
            self._pos = len(self._view)
        else:
            line = self._view[self._pos:end]
            self._pos = end + 1
        return line

    def __iter__(self):
        """Yield the remaining words."""
        while True:
            word = self.read_word()
            if not word:
                return
            yield word

    def __repr__(self):
        return f"ViewStream(position={self._pos}, length={len(self._view)})"