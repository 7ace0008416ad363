# extbasics

A collection of small, dependency-free utilities for everyday Python code.

## Installation

```
pip install extbasics
```

## Contents

- `extbasics.errors`: exception types `NotImplementedFeatureError`
  (a `NotImplementedError`, default message "not implemented"), `DebugError`
  (an `AssertionError`), `PermissionDeniedError` (a `PermissionError`) and
  `CannotConnectError` (a `ConnectionError`).
- `extbasics.cast`: two's-complement reinterpretation of fixed-width integers
  with `to_unsigned(value, bits)` and `to_signed(value, bits)`. The
  `to_unsigned_checked` and `to_signed_checked` forms raise `ValueError` when
  the value cannot be represented in the target form. Out-of-range inputs raise
  `OverflowError`. For byte strings there are `convert_checked` (sizes must
  match), `convert_to_bigger` (zero-extend), `convert_to_smaller` (truncate) and
  `convert_different` (either, as needed).
- `extbasics.endian`: `is_little`, `byte_swap(value, size)`, and
  `host_to_little`, `little_to_host`, `host_to_big` and `big_to_host`. Each of
  the four takes `value`, `size` (2, 4 or 8 bytes, default 4) and `signed`
  (default `False`). Any other size raises `NotImplementedFeatureError`.
- `extbasics.meta`: `if_all`, `if_any`, `are_same`, `is_any`, `if_constant`
  and `tuple_for_each`, which calls a function on each element of a tuple and
  returns the function.
- `extbasics.result`: `Result` carries a status code and a message. Its
  `ok()`, `fail()`, `is_code()` and `reset()` methods work on that pair, and it
  is truthy when the code is `OK`. If no message was given for a failing code,
  the message is looked up with `error_code_to_string`. `TypedResult` adds a
  `value` and provides `success()`, `error()` and `to_result()`.
- `extbasics.stat`: `get_stat(path)` returns a frozen `StatInfo` with `inode`,
  `uid`, `gid`, `size` and `nlink`. It raises `OSError` if the path cannot be
  read.
- `extbasics.files`: `files_equal(file1, file2, verbose=False)` compares two
  files byte for byte. With `verbose`, it reports the paths and the elapsed
  time on standard error.
- `extbasics.memory`: `cache_line_size` (64), `is_power_of_two`,
  `is_alignment` and `TaggedPointer`, an aligned address with a small tag kept
  in its low bits. `TaggedPointer` has `pointer`, `tag`, `mask`, `raw`,
  `tag_next()` and `set()`.
- `extbasics.lru_cache`: `LruCache(max_size)`, a thread-safe
  least-recently-used cache. It provides `put`, `get`, `get_update`,
  `get_remove`, `remove`, `remove_all_matching`, `len()` and `in`.
- `extbasics.flag_set`: `FlagSet(enum_type, value=0, bits=32)`, a fixed-width
  set of flags taken from an enumeration. It has `add`, `remove` and
  `contains`, and supports `&`, `|`, `^`, `~` and `==` with other flag sets or
  enum members.
- `extbasics.memstream`: `ViewStream`, which reads whitespace-separated words
  (`read_word`, iteration) and lines (`read_line`) from a string. `reset()`
  points the stream at a new string.
- `extbasics.pretty`: `fmt` formats containers, tuples and scalars. Lists
  print as `[a, b]`, sets and dicts as `{a, b}` and `{k:v}`, and tuples as
  `(a, b)`. Strings inside them are quoted and booleans print as
  `true`/`false`. `is_container` tells whether a value counts as a container.
- `extbasics.strings`: `section`, `to_upper`, `to_lower`, `starts_with`,
  `ends_with`, `split_on`, `replace` and `split_on_multiple`.

## Example

```python
from extbasics.lru_cache import LruCache
from extbasics.strings import split_on, section
from extbasics.pretty import fmt

cache = LruCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.put("c", 3)          # evicts "a"
assert "a" not in cache

print(split_on("a,,b", ","))   # ['a', 'b']
print(section("title", 20))
print(fmt({1: "one"}))         # {1:"one"}
```

## What it does not do

This is a library only. It has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```