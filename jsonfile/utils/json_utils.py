"""JSON serialization utilities."""
import json

from jsonfile.config import DOCUMENT_EOL, UTF8_BOM
from jsonfile.errors import JsonFormatError

COMPACT_SEPARATORS = (",", ":")
PRETTY_SEPARATORS = (",", ": ")


def json_dump(payload: object, indent: int | str | None = None) -> str:
    """Serialize object to JSON string, compact unless indent is given."""
    separators = COMPACT_SEPARATORS if indent is None else PRETTY_SEPARATORS
    try:
        return json.dumps(
            payload,
            ensure_ascii=False,
            allow_nan=False,
            indent=indent,
            separators=separators,
        )
    except (TypeError, ValueError) as exc:
        # ValueError covers circular references and NaN/Infinity
        raise JsonFormatError(f"Cannot encode value as JSON: {exc}") from exc


def json_load(data: str) -> object:
    """Deserialize JSON string to object."""
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise JsonFormatError(f"Invalid JSON: {exc}") from exc


def encode_document(
    payload: object,
    indent: int | str | None = None,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> bytes:
    """Serialize object to the on-disk document: JSON plus one newline."""
    text = json_dump(payload, indent) + DOCUMENT_EOL
    try:
        return text.encode(encoding, errors)
    except UnicodeEncodeError as exc:
        raise JsonFormatError(f"Cannot encode JSON text as {encoding}: {exc}") from exc


def decode_document(raw: bytes, encoding: str = "utf-8", errors: str = "strict") -> object:
    """Decode raw file contents and parse them as a JSON document."""
    try:
        text = raw.decode(encoding, errors)
    except UnicodeDecodeError as exc:
        raise JsonFormatError(f"Cannot decode file contents as {encoding}: {exc}") from exc
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM):]
    return json_load(text)
