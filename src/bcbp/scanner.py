"""Cursor over boarding pass text.

The scanner holds an immutable string and an offset that only moves
forward. Each read either consumes exactly the requested characters or
raises and leaves the offset where it was.

Variable-size sections are handled by carving a child scanner bounded
to the declared size; the parent skips the whole span at once, so a
section is always consumed in full whether or not its contents are
understood.
"""

from __future__ import annotations

import string

from bcbp.errors import ExpectedInteger, SectionTooLong, UnexpectedEndOfInput, ValidationFailed
from bcbp.fields import Field, matches_format

DECIMAL_DIGITS = frozenset(string.digits)
HEX_DIGITS = frozenset(string.digits + "ABCDEF")


class Scanner:
    def __init__(self, text: str, strict: bool = False) -> None:
        self._text = text
        self._offset = 0
        self.strict = strict

    def __repr__(self) -> str:
        return f"Scanner(offset={self._offset}, remaining={self.remaining_len()})"

    @property
    def offset(self) -> int:
        return self._offset

    def remaining_len(self) -> int:
        return len(self._text) - self._offset

    def is_at_end(self) -> bool:
        return self._offset >= len(self._text)

    def peek(self) -> str:
        """Return the unconsumed text without advancing."""
        return self._text[self._offset :]

    def _take(self, field: Field, length: int) -> str:
        if length > self.remaining_len():
            raise UnexpectedEndOfInput(field)
        value = self._text[self._offset : self._offset + length]
        self._offset += length
        return value

    def read_fixed(self, field: Field, length: int | None = None, validate: bool = True) -> str:
        """Read ``length`` characters (default: the catalog length of ``field``).

        In strict mode the value is checked against the field's format
        unless it is blank.
        """
        if length is None:
            length = field.length
        if length > self.remaining_len():
            raise UnexpectedEndOfInput(field)
        value = self._text[self._offset : self._offset + length]
        if validate and self.strict and not matches_format(field, value):
            raise ValidationFailed(field)
        self._offset += length
        return value

    def read_char(self, field: Field, validate: bool = True) -> str:
        return self.read_fixed(field, 1, validate=validate)

    def read_rest(self, field: Field, validate: bool = True) -> str:
        """Consume everything left in this scanner."""
        return self.read_fixed(field, self.remaining_len(), validate=validate)

    def _read_numeral(self, field: Field, digits: int, alphabet: frozenset[str], radix: int) -> int:
        if digits > self.remaining_len():
            raise UnexpectedEndOfInput(field)
        literal = self._text[self._offset : self._offset + digits]
        if not literal or any(ch not in alphabet for ch in literal):
            raise ExpectedInteger(field)
        value = int(literal, radix)
        self._offset += digits
        return value

    def read_decimal(self, field: Field, digits: int | None = None) -> int:
        return self._read_numeral(field, digits or field.length, DECIMAL_DIGITS, 10)

    def read_hex(self, field: Field, digits: int | None = None) -> int:
        """Read an uppercase hexadecimal literal such as a section size."""
        return self._read_numeral(field, digits or field.length, HEX_DIGITS, 16)

    def carve_section(self, field: Field, length: int) -> Scanner:
        """Split off the next ``length`` characters as a bounded child scanner.

        ``field`` is the size item that declared the section. The parent
        advances past the full span immediately.
        """
        if length > self.remaining_len():
            raise SectionTooLong(field)
        return Scanner(self._take(field, length), strict=self.strict)
