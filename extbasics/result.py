"""Result objects that carry a status code and a lazily resolved message."""

OK = 0
FAIL = 1
ERROR_NET = 10

_ERROR_MESSAGES = {ERROR_NET: "network error"}


def error_code_to_string(code):
    """Return the known description of ``code``, or an empty string."""
    return _ERROR_MESSAGES.get(code, "")


class Result:
    """A status code with an optional message.

    When no message was given and the code signals a failure, the message
    is looked up from the code the first time it is read.
    """

    __slots__ = ("code", "_message")

    def __init__(self, code=OK, message=""):
        self.code = code
        self._message = message

    @property
    def message(self):
        if not self._message and self.code != OK:
            self._message = error_code_to_string(self.code)
        return self._message

    @message.setter
    def message(self, text):
        self._message = text

    def ok(self):
        return self.code == OK

    def fail(self):
        return not self.ok()

    def __bool__(self):
        return self.ok()

    def is_code(self, code):
        return self.code == code

    def reset(self, code=OK, message=""):
        """Replace code and message, or copy both from another result."""
        if isinstance(code, Result):
            self.code = code.code
            self._message = code._message
        else:
            self.code = code
            self._message = message
        return self

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __repr__(self):
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class TypedResult(Result):
    """A result that also carries a value; resetting never touches the value."""

    __slots__ = ("value",)

    def __init__(self, value=None, code=OK, message=""):
        super().__init__(code, message)
        self.value = value

    def to_result(self):
        """Return a boolean-valued result with the same code and message."""
        value = self.value if isinstance(self.value, bool) else False
        return TypedResult(value, self.code, self._message)

    @classmethod
    def success(cls, value=None):
        return cls(value)

    @classmethod
    def error(cls, code=FAIL, message=""):
        """Create a failed result; code and message may be given in either order."""
        if isinstance(code, str):
            code, message = (message if isinstance(message, int) else FAIL), code
        return cls(None, code, message)

    def __eq__(self, other):
        if isinstance(other, TypedResult):
            return super().__eq__(other) and self.value == other.value
        return super().__eq__(other)

    def __repr__(self):
        return (
            f"{type(self).__name__}(value={self.value!r}, code={self.code!r}, "
            f"message={self.message!r})"
        )