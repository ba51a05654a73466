"""Library configuration and defaults."""
import os


def _parse_indent_env(name: str, default: int | str | None) -> int | str | None:
    """Parse JSON indentation from environment variable."""
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        # only whitespace is a usable indent string
        return raw if raw.isspace() else default
    if value < 0:
        return default
    return value


def _parse_str_env(name: str, default: str) -> str:
    """Parse non-empty string from environment variable."""
    raw = os.environ.get(name)
    if not raw:
        return default
    return raw


# Serialization
DEFAULT_INDENT = _parse_indent_env("JSONFILE_INDENT", None)
DEFAULT_ENCODING = _parse_str_env("JSONFILE_ENCODING", "utf-8")

# Documents
DOCUMENT_EOL = "\n"
UTF8_BOM = "\ufeff"
