import pytest

from bcbp.fields import (
    FIELD_SPECS,
    HEADER_FIELDS,
    LEG_MANDATORY_FIELDS,
    MINIMUM_HEADER_LENGTH,
    REPEATED_CONDITIONAL_FIELDS,
    UNIQUE_CONDITIONAL_FIELDS,
    DataFormat,
    Field,
    is_blank,
    matches_format,
)
from bcbp.model import FlightLeg, PassMetadata


def test_every_field_has_a_catalog_entry():
    assert set(FIELD_SPECS) == set(Field)
    for field in Field:
        spec = field.spec
        assert spec.length >= 0
        assert spec.name
        if spec.data_format is DataFormat.LITERAL:
            assert spec.literal is not None and len(spec.literal) == spec.length


def test_only_trailing_fields_are_variable_length():
    variable = {field for field in Field if field.length == 0}
    assert variable == {Field.AIRLINE_INDIVIDUAL_USE, Field.SECURITY_DATA}


def test_field_display_includes_item_number():
    assert str(Field.PASSENGER_NAME) == "(011) Passenger Name"
    assert str(Field.FAST_TRACK) == "(254) Fast Track"
    assert Field.SEAT_NUMBER.item_number == 104


def test_minimum_header_length():
    assert MINIMUM_HEADER_LENGTH == 23
    assert sum(f.length for f in HEADER_FIELDS) == MINIMUM_HEADER_LENGTH


def test_field_groups_map_onto_record_attributes():
    leg_attrs = set(FlightLeg.__dataclass_fields__)
    meta_attrs = set(PassMetadata.__dataclass_fields__)
    for field in LEG_MANDATORY_FIELDS + REPEATED_CONDITIONAL_FIELDS:
        assert field.attribute in leg_attrs
    for field in UNIQUE_CONDITIONAL_FIELDS:
        assert field.attribute in meta_attrs
    assert Field.AIRLINE_INDIVIDUAL_USE.attribute in leg_attrs
    assert sum(f.length for f in LEG_MANDATORY_FIELDS) == 35


def test_blank_values():
    assert is_blank("   ")
    assert is_blank(" ")
    assert not is_blank("")
    assert not is_blank(" A ")


@pytest.mark.parametrize(
    "field, value, expected",
    [
        (Field.FROM_CITY_AIRPORT_CODE, "YUL", True),
        (Field.FROM_CITY_AIRPORT_CODE, "yul", False),
        (Field.FROM_CITY_AIRPORT_CODE, "   ", True),
        (Field.DATE_OF_FLIGHT, "326", True),
        (Field.DATE_OF_FLIGHT, "32 ", False),
        (Field.FLIGHT_NUMBER, "0834 ", True),
        (Field.FLIGHT_NUMBER, "0834A", True),
        (Field.FLIGHT_NUMBER, "083A ", False),
        (Field.SEAT_NUMBER, "001A", True),
        (Field.SEAT_NUMBER, "INF ", False),
        (Field.SEAT_NUMBER, "    ", True),
        (Field.CHECK_IN_SEQUENCE_NUMBER, "0025 ", True),
        (Field.CHECK_IN_SEQUENCE_NUMBER, "00253", True),
        (Field.CHECK_IN_SEQUENCE_NUMBER, "002 5", False),
        (Field.PASSENGER_NAME, "Mroz/Martin         ", True),
        (Field.BEGINNING_OF_VERSION_NUMBER, ">", True),
        (Field.BEGINNING_OF_VERSION_NUMBER, "+", False),
        (Field.SECURITY_DATA, "GIWVC5EH7JNT", True),
        (Field.SECURITY_DATA, "\x01", False),
    ],
)
def test_matches_format(field, value, expected):
    assert matches_format(field, value) is expected
