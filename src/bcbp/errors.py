"""Exceptions raised while decoding a boarding pass.

Decoding is all-or-nothing: the first failure aborts the decode and is
raised as one of the ``DecodeError`` subclasses below. Errors tied to a
specific item carry it in ``field`` so callers can report which part of
the barcode was at fault without re-deriving offsets.
"""

from __future__ import annotations

from bcbp.fields import Field


class DecodeError(ValueError):
    """Base class for every decoding failure."""

    default_message = "unable to decode boarding pass"

    def __init__(self, field: Field | None = None, message: str | None = None) -> None:
        self.field = field
        if message is None:
            message = self.default_message
            if field is not None:
                message = f"{message}: {field}"
        super().__init__(message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidCharacters(DecodeError):
    default_message = "data contains non-ASCII characters"


class UnsupportedFormat(DecodeError):
    default_message = "unsupported data format, expected Type 'M'"


class NoLegs(DecodeError):
    default_message = "no flight legs encoded"


class UnexpectedEndOfInput(DecodeError):
    default_message = "unexpected end of input"


class ExpectedInteger(DecodeError):
    default_message = "expected a numeric value"


class ValidationFailed(DecodeError):
    default_message = "field does not match its required format"


class InvalidStartOfVersionNumber(DecodeError):
    default_message = "missing '>' before the version number"


class InvalidStartOfSecurityData(DecodeError):
    default_message = "missing '^' before the security data"


class InvalidConditionalItemList(DecodeError):
    default_message = "conditional item list ends inside a field"


class SectionTooLong(InvalidConditionalItemList):
    default_message = "declared section size exceeds the remaining input"


class TrailingCharacters(DecodeError):
    default_message = "unexpected characters after the end of the boarding pass"
