"""Alignment helpers and a pointer value that stores a tag in its low bits."""

_L1_CACHE_LINE_SIZE = 64


def cache_line_size():
    """Return the assumed L1 cache line size in bytes."""
    return _L1_CACHE_LINE_SIZE


def is_power_of_two(number):
    """True if ``number`` is a positive power of two."""
    return number > 0 and number & (number - 1) == 0


def is_alignment(number):
    """True if ``number`` is a valid alignment, i.e. a power of two."""
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f"alignment must be an integer, got {type(number).__name__}")
    if number < 0:
        raise ValueError(f"alignment must not be negative, got {number}")
    return is_power_of_two(number)


class TaggedPointer:
    """An aligned address whose unused low bits hold a small tag."""

    __slots__ = ("_alignment", "_raw")

    def __init__(self, pointer=0, tag=0, alignment=8):
        if not is_alignment(alignment):
            raise ValueError(f"{alignment} is not a valid alignment")
        self._alignment = alignment
        self._raw = self._create(pointer, tag)

    @property
    def alignment(self):
        return self._alignment

    @property
    def mask(self):
        return self._alignment - 1

    @property
    def pointer(self):
        return self._raw & ~self.mask

    @property
    def tag(self):
        return self._raw & self.mask

    @property
    def raw(self):
        return self._raw

    def _create(self, pointer, tag):
        mask = self.mask
        if pointer < 0:
            raise ValueError(f"pointer must not be negative, got {pointer}")
        if pointer & mask:
            raise ValueError(f"pointer {pointer:#x} is not aligned to {self._alignment}")
        if not 0 <= tag <= mask:
            raise ValueError(f"tag {tag} does not fit into mask {mask:#x}")
        return pointer | tag

    def tag_next(self):
        """Return the following tag, wrapping around at the mask."""
        return (self.tag + 1) & self.mask

    def set(self, pointer=None, tag=None):
        """Replace the pointer, the tag or both; omitted parts are kept."""
        self._raw = self._create(
            self.pointer if pointer is None else pointer,
            self.tag if tag is None else tag,
        )

    def __bool__(self):
        return self.pointer != 0

    def __eq__(self, other):
        if isinstance(other, TaggedPointer):
            return self._raw == other._raw
        if isinstance(other, int) and not isinstance(other, bool):
            return self.pointer == other
        return NotImplemented

    def __repr__(self):
        return (
            f"TaggedPointer(pointer={self.pointer:#x}, tag={self.tag}, "
            f"alignment={self._alignment})"
        )