import pytest
from pydantic import ValidationError

from jsonfile.config import DEFAULT_ENCODING
from jsonfile.models import ReadOptions, WriteOptions, coerce_options


def test_read_options_defaults() -> None:
    opts = ReadOptions()
    assert opts.encoding == DEFAULT_ENCODING
    assert opts.errors == "strict"
    assert opts.throws is True


def test_write_options_defaults() -> None:
    opts = WriteOptions()
    assert opts.encoding == DEFAULT_ENCODING
    assert opts.mode is None


def test_coerce_none_and_instance() -> None:
    assert coerce_options(None, ReadOptions) == ReadOptions()
    opts = WriteOptions(mode=0o644)
    assert coerce_options(opts, WriteOptions) is opts


def test_coerce_encoding_shorthand() -> None:
    assert coerce_options("latin-1", ReadOptions).encoding == "latin-1"
    assert coerce_options("utf-16", WriteOptions).encoding == "utf-16"


def test_coerce_mapping() -> None:
    opts = coerce_options({"throws": False}, ReadOptions)
    assert opts.throws is False
    assert opts.encoding == DEFAULT_ENCODING


def test_coerce_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        coerce_options({"throws": False}, WriteOptions)
    with pytest.raises(ValidationError):
        coerce_options({"flag": "a"}, ReadOptions)


def test_coerce_rejects_bad_values() -> None:
    with pytest.raises(ValidationError):
        coerce_options({"mode": -1}, WriteOptions)
    with pytest.raises(ValidationError):
        coerce_options("", ReadOptions)


def test_coerce_rejects_wrong_type() -> None:
    with pytest.raises(TypeError):
        coerce_options(42, ReadOptions)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        coerce_options(ReadOptions(), WriteOptions)  # type: ignore[arg-type]


def test_unknown_encoding_rejected() -> None:
    with pytest.raises(ValidationError):
        coerce_options({"encoding": "no-such-codec", "throws": False}, ReadOptions)
    with pytest.raises(ValidationError):
        coerce_options("no-such-codec", WriteOptions)
    assert coerce_options("UTF8", ReadOptions).encoding == "UTF8"


def test_unknown_error_handler_rejected() -> None:
    with pytest.raises(ValidationError):
        ReadOptions(errors="no-such-handler")
    assert WriteOptions(errors="replace").errors == "replace"


def test_write_flag() -> None:
    assert WriteOptions().flag is None
    assert coerce_options({"flag": "wx"}, WriteOptions).flag == "wx"
    with pytest.raises(ValidationError):
        coerce_options({"flag": "r"}, WriteOptions)
