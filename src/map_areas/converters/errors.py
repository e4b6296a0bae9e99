"""Errors raised by the converter layer.

Only input that cannot be understood at all is an error. Finding nothing, a
single bad numeric token, or a dangling named-area reference all decode to
fewer shapes instead.
"""


class MalformedInputError(ValueError):
    """Input text could not be parsed (invalid JSON or a wrongly typed key)."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class UnknownDialectError(KeyError):
    """No dialect is registered under the requested key."""


class UnsupportedFormatError(ValueError):
    """Requested export/import format or output style is not supported."""
