"""Small utility building blocks: results, LRU cache, flag sets, endian, cast and string helpers."""

__version__ = "0.1.0"

__all__ = [
    "cast",
    "endian",
    "errors",
    "files",
    "flag_set",
    "lru_cache",
    "memory",
    "memstream",
    "meta",
    "pretty",
    "result",
    "stat",
    "strings",
]