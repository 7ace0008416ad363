"""File comparison."""

import sys
import time

_CHUNK_SIZE = 64 * 1024


def files_equal(file1, file2, verbose=False):
    """Return True when both files hold exactly the same bytes."""
    start = time.perf_counter()
    if verbose:
        print(f"\ncompare: \n{file1}\n{file2}", file=sys.stderr)

    with open(file1, "rb") as first, open(file2, "rb") as second:
        while True:
            chunk1 = first.read(_CHUNK_SIZE)
            chunk2 = second.read(_CHUNK_SIZE)
            if chunk1 != chunk2:
                equal = False
                break
            if not chunk1:
                equal = True
                break

    if verbose:
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(f"files_equal: {elapsed_ms:.3f} ms", file=sys.stderr)
    return equal