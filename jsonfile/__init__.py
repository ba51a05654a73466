"""Read and write JSON files."""
from jsonfile.accessor import (
    JsonFile,
    append_file,
    append_file_sync,
    default_accessor,
    read_file,
    read_file_sync,
    write_file,
    write_file_sync,
)
from jsonfile.errors import JsonFormatError
from jsonfile.logging_setup import setup_console_logging
from jsonfile.models import ReadOptions, WriteOptions

__version__ = "1.0.0"

__all__ = [
    "JsonFile",
    "JsonFormatError",
    "ReadOptions",
    "WriteOptions",
    "append_file",
    "append_file_sync",
    "default_accessor",
    "read_file",
    "read_file_sync",
    "setup_console_logging",
    "write_file",
    "write_file_sync",
]
