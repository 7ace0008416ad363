"""File status information."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class StatInfo:
    """Selected fields of a file's status."""

    inode: int
    uid: int
    gid: int
    size: int
    nlink: int


def get_stat(path):
    """Return the status of ``path``; raise OSError when it cannot be read."""
    try:
        info = os.stat(path)
    except OSError as exc:
        raise OSError(exc.errno, "failed to get stat", os.fspath(path)) from exc
    return StatInfo(
        inode=info.st_ino,
        uid=info.st_uid,
        gid=info.st_gid,
        size=info.st_size,
        nlink=info.st_nlink,
    )