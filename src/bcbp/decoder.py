"""Decoder for IATA Type 'M' bar coded boarding passes.

The barcode text is read in a single forward pass:

    'M' legs(1) name(20) e-ticket(1)
    per leg: ten mandatory items, a 2-hex-digit variable section size,
             then the variable section itself
    optional trailer: '^' type(1) length(2 hex) payload

Variable sections nest: the first leg's section opens with '>' and a
version number, then a size-prefixed block of pass-level items; every
leg then carries a size-prefixed block of per-leg items; whatever is
left of the leg's section is airline individual use. Sizes are
authoritative, so a block is consumed in full even when newer versions
of the standard put items in it that this decoder does not know.

Decoding is a pure function of its input. There is no shared state
between calls, so independent inputs can be decoded from any number of
threads at once without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bcbp.errors import (
    InvalidCharacters,
    InvalidConditionalItemList,
    InvalidStartOfSecurityData,
    InvalidStartOfVersionNumber,
    NoLegs,
    TrailingCharacters,
    UnsupportedFormat,
)
from bcbp.fields import (
    FIELD_SPECS,
    LEG_MANDATORY_FIELDS,
    REPEATED_CONDITIONAL_FIELDS,
    UNIQUE_CONDITIONAL_FIELDS,
    Field,
)
from bcbp.model import BoardingPass, FlightLeg, PassMetadata, SecurityData
from bcbp.scanner import Scanner

logger = logging.getLogger(__name__)


def decode_conditional_section(scanner: Scanner, fields: Sequence[Field]) -> dict[Field, str]:
    """Read optional ``fields`` in order until the section runs out.

    Running out exactly between two items is normal (older versions of
    the standard define fewer items); running out inside an item is not.
    Characters left over once every known item is read are ignored.
    """
    values: dict[Field, str] = {}
    for field in fields:
        if scanner.is_at_end():
            break
        if scanner.remaining_len() < field.length:
            raise InvalidConditionalItemList(field)
        values[field] = scanner.read_fixed(field)
    if not scanner.is_at_end():
        logger.debug("Ignoring %d unrecognised characters in section", scanner.remaining_len())
    return values


def _read_structured_message(
    section: Scanner, size_field: Field, fields: Sequence[Field]
) -> dict[Field, str]:
    size = section.read_hex(size_field)
    if size == 0:
        return {}
    return decode_conditional_section(section.carve_section(size_field, size), fields)


def _decode_leg(
    scanner: Scanner, index: int
) -> tuple[FlightLeg, PassMetadata | None, str | None]:
    """Decode one leg; the first leg also yields pass metadata and version."""
    mandatory = {field.attribute: scanner.read_fixed(field) for field in LEG_MANDATORY_FIELDS}

    size_field = Field.FIELD_SIZE_OF_VARIABLE_SIZE_FIELD
    size = scanner.read_hex(size_field)
    if size == 0:
        return FlightLeg(**mandatory), None, None

    section = scanner.carve_section(size_field, size)
    metadata = None
    version = None

    if index == 0:
        marker = section.read_char(Field.BEGINNING_OF_VERSION_NUMBER, validate=False)
        if marker != FIELD_SPECS[Field.BEGINNING_OF_VERSION_NUMBER].literal:
            raise InvalidStartOfVersionNumber(Field.BEGINNING_OF_VERSION_NUMBER)
        version = section.read_char(Field.VERSION_NUMBER)
        unique = _read_structured_message(
            section, Field.FIELD_SIZE_OF_STRUCTURED_MESSAGE_UNIQUE, UNIQUE_CONDITIONAL_FIELDS
        )
        if unique:
            metadata = PassMetadata(**{field.attribute: value for field, value in unique.items()})

    repeated: dict[Field, str] = {}
    # a first-leg section may end right after the unique block
    if not section.is_at_end():
        repeated = _read_structured_message(
            section, Field.FIELD_SIZE_OF_STRUCTURED_MESSAGE_REPEATED, REPEATED_CONDITIONAL_FIELDS
        )

    individual_use = section.read_rest(Field.AIRLINE_INDIVIDUAL_USE, validate=False)
    leg = FlightLeg(
        **mandatory,
        **{field.attribute: value for field, value in repeated.items()},
        airline_individual_use=individual_use or None,
    )
    return leg, metadata, version


def _decode_security_data(scanner: Scanner) -> SecurityData:
    marker = scanner.read_char(Field.BEGINNING_OF_SECURITY_DATA, validate=False)
    if marker != FIELD_SPECS[Field.BEGINNING_OF_SECURITY_DATA].literal:
        raise InvalidStartOfSecurityData(Field.BEGINNING_OF_SECURITY_DATA)
    security_type = scanner.read_char(Field.TYPE_OF_SECURITY_DATA)
    length = scanner.read_hex(Field.LENGTH_OF_SECURITY_DATA)
    payload = scanner.read_fixed(Field.SECURITY_DATA, length, validate=False)
    return SecurityData(type_of_security_data=security_type, security_data=payload or None)


def decode(text: str | bytes, strict: bool = True) -> BoardingPass:
    """Decode Type 'M' barcode text into a ``BoardingPass``.

    With ``strict`` set, every non-blank item is also checked against the
    character-class rule of its field. Raises a ``DecodeError`` subclass
    on the first problem found; nothing is returned for partial input.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidCharacters() from exc
    if not text.isascii():
        raise InvalidCharacters()

    scanner = Scanner(text, strict=strict)

    format_code = scanner.read_char(Field.FORMAT_CODE, validate=False)
    if format_code != FIELD_SPECS[Field.FORMAT_CODE].literal:
        raise UnsupportedFormat(
            Field.FORMAT_CODE, f"unsupported data format {format_code!r}, expected Type 'M'"
        )

    leg_count = scanner.read_decimal(Field.NUMBER_OF_LEGS_ENCODED)
    if leg_count == 0:
        raise NoLegs(Field.NUMBER_OF_LEGS_ENCODED)

    passenger_name = scanner.read_fixed(Field.PASSENGER_NAME)
    electronic_ticket_indicator = scanner.read_char(Field.ELECTRONIC_TICKET_INDICATOR)

    legs: list[FlightLeg] = []
    metadata = None
    version = None
    for index in range(leg_count):
        leg, leg_metadata, leg_version = _decode_leg(scanner, index)
        if index == 0:
            metadata, version = leg_metadata, leg_version
        legs.append(leg)

    security = None
    if not scanner.is_at_end():
        security = _decode_security_data(scanner)

    if not scanner.is_at_end():
        raise TrailingCharacters(
            message=f"{scanner.remaining_len()} unexpected characters after the boarding pass"
        )

    logger.debug(
        "Decoded boarding pass: %d leg(s), version=%s, metadata=%s, security=%s",
        len(legs),
        version,
        metadata is not None,
        security is not None,
    )
    return BoardingPass(
        passenger_name=passenger_name,
        electronic_ticket_indicator=electronic_ticket_indicator,
        legs=tuple(legs),
        version_number=version,
        metadata=metadata,
        security=security,
    )
