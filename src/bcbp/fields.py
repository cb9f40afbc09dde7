"""Field catalog for IATA Type 'M' bar coded boarding passes.

Each field carries its item number from the Implementation Guide, the
exact length it occupies in the barcode text (0 means variable length,
only legal for the last field of a context), a display name, and the
character-class rule used for strict-mode validation.

Data formats follow IATA Resolution 792 Appendix A:
- f: any ASCII character, spaces mean "not set"
- N: digits, or all spaces
- a: uppercase letters, or all spaces
- composite shapes for flight number, seat number and check-in sequence
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class DataFormat(Enum):
    ARBITRARY = "arbitrary"
    IATA_ALPHANUMERIC = "f"
    IATA_NUMERIC = "N"
    IATA_ALPHABETIC = "a"
    LITERAL = "literal"
    FLIGHT_NUMBER = "NNNN[a]"
    SEAT_NUMBER = "NNNa"
    CHECK_IN_SEQUENCE = "NNNN[f]"


FORMAT_PATTERNS: dict[DataFormat, re.Pattern[str]] = {
    DataFormat.ARBITRARY: re.compile(r"[\x20-\x7e\t\n\r]*"),
    DataFormat.IATA_ALPHANUMERIC: re.compile(r"[\x00-\x7f]*"),
    DataFormat.IATA_NUMERIC: re.compile(r"[0-9]*"),
    DataFormat.IATA_ALPHABETIC: re.compile(r"[A-Z]*"),
    DataFormat.FLIGHT_NUMBER: re.compile(r"[0-9]{4}[A-Z ]?"),
    DataFormat.SEAT_NUMBER: re.compile(r"[0-9]{3}[A-Z]"),
    DataFormat.CHECK_IN_SEQUENCE: re.compile(r"[0-9]{4}[A-Z0-9 ]"),
}


class Field(Enum):
    """Fields of a Type 'M' boarding pass, valued by item number.

    Member names match the record attributes they populate, so
    ``Field.FLIGHT_NUMBER`` lands in ``FlightLeg.flight_number``.
    """

    FORMAT_CODE = 1
    AIRLINE_INDIVIDUAL_USE = 4
    NUMBER_OF_LEGS_ENCODED = 5
    FIELD_SIZE_OF_VARIABLE_SIZE_FIELD = 6
    OPERATING_CARRIER_PNR_CODE = 7
    BEGINNING_OF_VERSION_NUMBER = 8
    VERSION_NUMBER = 9
    FIELD_SIZE_OF_STRUCTURED_MESSAGE_UNIQUE = 10
    PASSENGER_NAME = 11
    SOURCE_OF_CHECK_IN = 12
    SOURCE_OF_BOARDING_PASS_ISSUANCE = 14
    PASSENGER_DESCRIPTION = 15
    DOCUMENT_TYPE = 16
    FIELD_SIZE_OF_STRUCTURED_MESSAGE_REPEATED = 17
    SELECTEE_INDICATOR = 18
    MARKETING_CARRIER_DESIGNATOR = 19
    FREQUENT_FLYER_AIRLINE_DESIGNATOR = 20
    AIRLINE_DESIGNATOR_OF_BOARDING_PASS_ISSUER = 21
    DATE_OF_ISSUE_OF_BOARDING_PASS = 22
    BAGGAGE_TAG_LICENSE_PLATE_NUMBERS = 23
    BEGINNING_OF_SECURITY_DATA = 25
    FROM_CITY_AIRPORT_CODE = 26
    TYPE_OF_SECURITY_DATA = 28
    LENGTH_OF_SECURITY_DATA = 29
    SECURITY_DATA = 30
    FIRST_NON_CONSECUTIVE_BAGGAGE_TAG_LICENSE_PLATE_NUMBER = 31
    SECOND_NON_CONSECUTIVE_BAGGAGE_TAG_LICENSE_PLATE_NUMBER = 32
    TO_CITY_AIRPORT_CODE = 38
    OPERATING_CARRIER_DESIGNATOR = 42
    FLIGHT_NUMBER = 43
    DATE_OF_FLIGHT = 46
    COMPARTMENT_CODE = 71
    ID_AD_INDICATOR = 89
    SEAT_NUMBER = 104
    CHECK_IN_SEQUENCE_NUMBER = 107
    INTERNATIONAL_DOCUMENT_VERIFICATION = 108
    PASSENGER_STATUS = 113
    FREE_BAGGAGE_ALLOWANCE = 118
    AIRLINE_NUMERIC_CODE = 142
    DOCUMENT_FORM_SERIAL_NUMBER = 143
    FREQUENT_FLYER_NUMBER = 236
    ELECTRONIC_TICKET_INDICATOR = 253
    FAST_TRACK = 254

    @property
    def item_number(self) -> int:
        return self.value

    @property
    def spec(self) -> FieldSpec:
        return FIELD_SPECS[self]

    @property
    def length(self) -> int:
        return FIELD_SPECS[self].length

    @property
    def title(self) -> str:
        return FIELD_SPECS[self].name

    @property
    def data_format(self) -> DataFormat:
        return FIELD_SPECS[self].data_format

    @property
    def attribute(self) -> str:
        """Name of the record attribute holding this field."""
        return self.name.lower()

    def __str__(self) -> str:
        return f"({self.item_number:03d}) {self.title}"


@dataclass(frozen=True)
class FieldSpec:
    length: int
    name: str
    data_format: DataFormat
    literal: str | None = None


_F = DataFormat.IATA_ALPHANUMERIC
_N = DataFormat.IATA_NUMERIC
_A = DataFormat.IATA_ALPHABETIC

FIELD_SPECS: dict[Field, FieldSpec] = {
    Field.FORMAT_CODE: FieldSpec(1, "Format Code", DataFormat.LITERAL, literal="M"),
    Field.AIRLINE_INDIVIDUAL_USE: FieldSpec(0, "Airline Individual Use", DataFormat.ARBITRARY),
    Field.NUMBER_OF_LEGS_ENCODED: FieldSpec(1, "Number of Legs Encoded", _N),
    Field.FIELD_SIZE_OF_VARIABLE_SIZE_FIELD: FieldSpec(2, "Field Size of Variable Size Field", _F),
    Field.OPERATING_CARRIER_PNR_CODE: FieldSpec(7, "Operating Carrier PNR Code", _F),
    Field.BEGINNING_OF_VERSION_NUMBER: FieldSpec(
        1, "Beginning of Version Number", DataFormat.LITERAL, literal=">"
    ),
    Field.VERSION_NUMBER: FieldSpec(1, "Version Number", _F),
    Field.FIELD_SIZE_OF_STRUCTURED_MESSAGE_UNIQUE: FieldSpec(
        2, "Field Size of Structured Message (Unique)", _F
    ),
    Field.PASSENGER_NAME: FieldSpec(20, "Passenger Name", _F),
    Field.SOURCE_OF_CHECK_IN: FieldSpec(1, "Source of Check-In", _F),
    Field.SOURCE_OF_BOARDING_PASS_ISSUANCE: FieldSpec(1, "Source of Boarding Pass Issuance", _F),
    Field.PASSENGER_DESCRIPTION: FieldSpec(1, "Passenger Description", _F),
    Field.DOCUMENT_TYPE: FieldSpec(1, "Document Type", _F),
    Field.FIELD_SIZE_OF_STRUCTURED_MESSAGE_REPEATED: FieldSpec(
        2, "Field Size of Structured Message (Repeated)", _F
    ),
    Field.SELECTEE_INDICATOR: FieldSpec(1, "Selectee Indicator", _F),
    Field.MARKETING_CARRIER_DESIGNATOR: FieldSpec(3, "Marketing Carrier Designator", _F),
    Field.FREQUENT_FLYER_AIRLINE_DESIGNATOR: FieldSpec(3, "Frequent Flyer Airline Designator", _F),
    Field.AIRLINE_DESIGNATOR_OF_BOARDING_PASS_ISSUER: FieldSpec(
        3, "Airline Designator of Boarding Pass Issuer", _F
    ),
    Field.DATE_OF_ISSUE_OF_BOARDING_PASS: FieldSpec(4, "Date of Issue of Boarding Pass", _N),
    Field.BAGGAGE_TAG_LICENSE_PLATE_NUMBERS: FieldSpec(
        13, "Baggage Tag License Plate Number(s)", _F
    ),
    Field.BEGINNING_OF_SECURITY_DATA: FieldSpec(
        1, "Beginning of Security Data", DataFormat.LITERAL, literal="^"
    ),
    Field.FROM_CITY_AIRPORT_CODE: FieldSpec(3, "From City Airport Code", _A),
    Field.TYPE_OF_SECURITY_DATA: FieldSpec(1, "Type of Security Data", _F),
    Field.LENGTH_OF_SECURITY_DATA: FieldSpec(2, "Length of Security Data", _F),
    Field.SECURITY_DATA: FieldSpec(0, "Security Data", DataFormat.ARBITRARY),
    Field.FIRST_NON_CONSECUTIVE_BAGGAGE_TAG_LICENSE_PLATE_NUMBER: FieldSpec(
        13, "First Non-Consecutive Baggage Tag License Plate Number", _F
    ),
    Field.SECOND_NON_CONSECUTIVE_BAGGAGE_TAG_LICENSE_PLATE_NUMBER: FieldSpec(
        13, "Second Non-Consecutive Baggage Tag License Plate Number", _F
    ),
    Field.TO_CITY_AIRPORT_CODE: FieldSpec(3, "To City Airport Code", _A),
    Field.OPERATING_CARRIER_DESIGNATOR: FieldSpec(3, "Operating Carrier Designator", _F),
    Field.FLIGHT_NUMBER: FieldSpec(5, "Flight Number", DataFormat.FLIGHT_NUMBER),
    Field.DATE_OF_FLIGHT: FieldSpec(3, "Date of Flight", _N),
    Field.COMPARTMENT_CODE: FieldSpec(1, "Compartment Code", _A),
    Field.ID_AD_INDICATOR: FieldSpec(1, "ID/AD Indicator", _F),
    Field.SEAT_NUMBER: FieldSpec(4, "Seat Number", DataFormat.SEAT_NUMBER),
    Field.CHECK_IN_SEQUENCE_NUMBER: FieldSpec(
        5, "Check-In Sequence Number", DataFormat.CHECK_IN_SEQUENCE
    ),
    Field.INTERNATIONAL_DOCUMENT_VERIFICATION: FieldSpec(
        1, "International Document Verification", _F
    ),
    Field.PASSENGER_STATUS: FieldSpec(1, "Passenger Status", _F),
    Field.FREE_BAGGAGE_ALLOWANCE: FieldSpec(3, "Free Baggage Allowance", _F),
    Field.AIRLINE_NUMERIC_CODE: FieldSpec(3, "Airline Numeric Code", _N),
    Field.DOCUMENT_FORM_SERIAL_NUMBER: FieldSpec(10, "Document Form / Serial Number", _F),
    Field.FREQUENT_FLYER_NUMBER: FieldSpec(16, "Frequent Flyer Number", _F),
    Field.ELECTRONIC_TICKET_INDICATOR: FieldSpec(1, "Electronic Ticket Indicator", _F),
    Field.FAST_TRACK: FieldSpec(1, "Fast Track", _F),
}

HEADER_FIELDS: tuple[Field, ...] = (
    Field.FORMAT_CODE,
    Field.NUMBER_OF_LEGS_ENCODED,
    Field.PASSENGER_NAME,
    Field.ELECTRONIC_TICKET_INDICATOR,
)

LEG_MANDATORY_FIELDS: tuple[Field, ...] = (
    Field.OPERATING_CARRIER_PNR_CODE,
    Field.FROM_CITY_AIRPORT_CODE,
    Field.TO_CITY_AIRPORT_CODE,
    Field.OPERATING_CARRIER_DESIGNATOR,
    Field.FLIGHT_NUMBER,
    Field.DATE_OF_FLIGHT,
    Field.COMPARTMENT_CODE,
    Field.SEAT_NUMBER,
    Field.CHECK_IN_SEQUENCE_NUMBER,
    Field.PASSENGER_STATUS,
)

# Pass-level items, physically stored in the first leg's variable section.
UNIQUE_CONDITIONAL_FIELDS: tuple[Field, ...] = (
    Field.PASSENGER_DESCRIPTION,
    Field.SOURCE_OF_CHECK_IN,
    Field.SOURCE_OF_BOARDING_PASS_ISSUANCE,
    Field.DATE_OF_ISSUE_OF_BOARDING_PASS,
    Field.DOCUMENT_TYPE,
    Field.AIRLINE_DESIGNATOR_OF_BOARDING_PASS_ISSUER,
    Field.BAGGAGE_TAG_LICENSE_PLATE_NUMBERS,
    Field.FIRST_NON_CONSECUTIVE_BAGGAGE_TAG_LICENSE_PLATE_NUMBER,
    Field.SECOND_NON_CONSECUTIVE_BAGGAGE_TAG_LICENSE_PLATE_NUMBER,
)

REPEATED_CONDITIONAL_FIELDS: tuple[Field, ...] = (
    Field.AIRLINE_NUMERIC_CODE,
    Field.DOCUMENT_FORM_SERIAL_NUMBER,
    Field.SELECTEE_INDICATOR,
    Field.INTERNATIONAL_DOCUMENT_VERIFICATION,
    Field.MARKETING_CARRIER_DESIGNATOR,
    Field.FREQUENT_FLYER_AIRLINE_DESIGNATOR,
    Field.FREQUENT_FLYER_NUMBER,
    Field.ID_AD_INDICATOR,
    Field.FREE_BAGGAGE_ALLOWANCE,
    Field.FAST_TRACK,
)

MINIMUM_HEADER_LENGTH: int = sum(FIELD_SPECS[field].length for field in HEADER_FIELDS)


def is_blank(value: str) -> bool:
    """A field made entirely of spaces is present but not set."""
    return value.strip(" ") == "" and value != ""


def matches_format(field: Field, value: str) -> bool:
    """Check ``value`` against the character-class rule of ``field``.

    Blank values always match: the standard uses spaces to mean "not set".
    """
    if is_blank(value):
        return True
    spec = FIELD_SPECS[field]
    if spec.data_format is DataFormat.LITERAL:
        return value == spec.literal
    return FORMAT_PATTERNS[spec.data_format].fullmatch(value) is not None
