"""Utility modules."""
from jsonfile.utils.file_utils import (
    append_bytes,
    append_bytes_async,
    read_bytes,
    read_bytes_async,
    write_bytes,
    write_bytes_async,
)
from jsonfile.utils.json_utils import (
    decode_document,
    encode_document,
    json_dump,
    json_load,
)

__all__ = [
    "append_bytes",
    "append_bytes_async",
    "read_bytes",
    "read_bytes_async",
    "write_bytes",
    "write_bytes_async",
    "decode_document",
    "encode_document",
    "json_dump",
    "json_load",
]
