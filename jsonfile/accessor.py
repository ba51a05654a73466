"""Read and write JSON documents on disk.

``JsonFile`` pairs the JSON codec with the filesystem. Every operation has a
blocking ``*_sync`` form and an awaitable form; both share the same encode and
decode routines and differ only in how the file is touched.

The ``indent`` attribute is read each time a document is encoded, so changing
it affects later calls only. Concurrent writers to one path are not
coordinated: the last write wins.
"""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Mapping

from jsonfile.config import DEFAULT_INDENT
from jsonfile.errors import JsonFormatError
from jsonfile.models import ReadOptions, WriteOptions, coerce_options
from jsonfile.utils import (
    append_bytes,
    append_bytes_async,
    decode_document,
    encode_document,
    read_bytes,
    read_bytes_async,
    write_bytes,
    write_bytes_async,
)
from jsonfile.utils.file_utils import PathLike

log = logging.getLogger(__name__)


async def _raise(exc: Exception) -> None:
    raise exc


async def _finish(pending: Awaitable[None], msg: str, *args: object) -> None:
    await pending
    log.debug(msg, *args)


ReadOptionsArg = ReadOptions | Mapping[str, object] | str | None
WriteOptionsArg = WriteOptions | Mapping[str, object] | str | None


class JsonFile:
    """JSON file accessor with a mutable indentation setting."""

    def __init__(self, indent: int | str | None = None) -> None:
        # None -> compact output
        self.indent = indent

    def __repr__(self) -> str:
        return f"{type(self).__name__}(indent={self.indent!r})"

    def _encode(self, obj: object, opts: WriteOptions) -> bytes:
        return encode_document(obj, self.indent, opts.encoding, opts.errors)

    def _prepare(
        self, obj: object, options: WriteOptionsArg
    ) -> tuple[bytes, WriteOptions]:
        opts = coerce_options(options, WriteOptions)
        return self._encode(obj, opts), opts

    async def read_file(self, path: PathLike, options: ReadOptionsArg = None) -> object:
        """Read and parse a JSON file.

        Raises OSError if the file cannot be read and JsonFormatError if its
        contents are not valid JSON.
        """
        opts = coerce_options(options, ReadOptions)
        raw = await read_bytes_async(path)
        obj = decode_document(raw, opts.encoding, opts.errors)
        log.debug("Read JSON from %s", path)
        return obj

    def read_file_sync(self, path: PathLike, options: ReadOptionsArg = None) -> object:
        """Read and parse a JSON file, blocking.

        With ``throws=False`` invalid JSON yields None instead of raising.
        Filesystem errors are raised regardless.
        """
        opts = coerce_options(options, ReadOptions)
        raw = read_bytes(path)
        try:
            obj = decode_document(raw, opts.encoding, opts.errors)
        except JsonFormatError as exc:
            if opts.throws:
                raise
            log.debug("Ignoring invalid JSON in %s: %s", path, exc)
            return None
        log.debug("Read JSON from %s", path)
        return obj

    def write_file(
        self, path: PathLike, obj: object, options: WriteOptionsArg = None
    ) -> Awaitable[None]:
        """Serialize ``obj`` now and return an awaitable that writes it to ``path``.

        The current ``indent`` is used even if it changes before the write
        runs. Encoding and option errors are raised when awaited.
        """
        try:
            data, opts = self._prepare(obj, options)
        except (TypeError, ValueError) as exc:
            return _raise(exc)
        pending = write_bytes_async(path, data, opts.mode, opts.flag or "w")
        return _finish(pending, "Wrote JSON to %s (%d bytes)", path, len(data))

    def write_file_sync(
        self, path: PathLike, obj: object, options: WriteOptionsArg = None
    ) -> None:
        """Serialize ``obj`` and write it to ``path``, blocking."""
        data, opts = self._prepare(obj, options)
        write_bytes(path, data, opts.mode, opts.flag or "w")
        log.debug("Wrote JSON to %s (%d bytes)", path, len(data))

    def append_file(
        self, path: PathLike, obj: object, options: WriteOptionsArg = None
    ) -> Awaitable[None]:
        """Serialize ``obj`` now and return an awaitable that appends it to ``path``."""
        try:
            data, opts = self._prepare(obj, options)
        except (TypeError, ValueError) as exc:
            return _raise(exc)
        pending = append_bytes_async(path, data, opts.mode, opts.flag or "a")
        return _finish(pending, "Appended JSON to %s (%d bytes)", path, len(data))

    def append_file_sync(
        self, path: PathLike, obj: object, options: WriteOptionsArg = None
    ) -> None:
        """Serialize ``obj`` and append it to ``path``, blocking."""
        data, opts = self._prepare(obj, options)
        append_bytes(path, data, opts.mode, opts.flag or "a")
        log.debug("Appended JSON to %s (%d bytes)", path, len(data))


# Process-wide accessor behind the module-level functions.
default_accessor = JsonFile(indent=DEFAULT_INDENT)

read_file = default_accessor.read_file
read_file_sync = default_accessor.read_file_sync
write_file = default_accessor.write_file
write_file_sync = default_accessor.write_file_sync
append_file = default_accessor.append_file
append_file_sync = default_accessor.append_file_sync
