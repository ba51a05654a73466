"""Exceptions raised by jsonfile."""


class JsonFormatError(ValueError):
    """Text could not be parsed as JSON, or a value could not be encoded."""
