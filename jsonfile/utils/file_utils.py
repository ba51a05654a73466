"""File handling utilities.

Binary read/write/append primitives, blocking and non-blocking. Errors from
the filesystem (missing file, permissions, ...) are raised as-is.
"""
import os
from collections.abc import Callable

import aiofiles

PathLike = str | os.PathLike

# "ax" on a freshly created file is the same as an exclusive write
OPEN_MODES = {"w": "wb", "wx": "xb", "a": "ab", "ax": "xb"}


def _opener(mode: int | None) -> Callable[[str, int], int] | None:
    """Build an opener that creates new files with the given permission bits."""
    if mode is None:
        return None

    def opener(path: str, flags: int) -> int:
        return os.open(path, flags, mode)

    return opener


def _open_mode(flag: str) -> str:
    try:
        return OPEN_MODES[flag]
    except KeyError:
        raise ValueError(f"Unsupported file flag: {flag!r}") from None


def read_bytes(path: PathLike) -> bytes:
    """Read whole file."""
    with open(path, "rb") as f:
        return f.read()


def write_bytes(
    path: PathLike, data: bytes, mode: int | None = None, flag: str = "w"
) -> None:
    """Write file, replacing existing content unless flag says otherwise."""
    with open(path, _open_mode(flag), opener=_opener(mode)) as f:
        f.write(data)


def append_bytes(
    path: PathLike, data: bytes, mode: int | None = None, flag: str = "a"
) -> None:
    """Append to file, creating it if missing."""
    write_bytes(path, data, mode, flag)


async def read_bytes_async(path: PathLike) -> bytes:
    """Read whole file without blocking the event loop."""
    async with aiofiles.open(path, "rb") as f:
        return await f.read()


async def write_bytes_async(
    path: PathLike, data: bytes, mode: int | None = None, flag: str = "w"
) -> None:
    """Write file without blocking the event loop."""
    async with aiofiles.open(path, _open_mode(flag), opener=_opener(mode)) as f:
        await f.write(data)


async def append_bytes_async(
    path: PathLike, data: bytes, mode: int | None = None, flag: str = "a"
) -> None:
    """Append to file without blocking the event loop."""
    await write_bytes_async(path, data, mode, flag)
