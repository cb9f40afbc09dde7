"""Barcodes captured from issued passes (personal details masked)."""

import pytest

from bcbp.decoder import decode
from bcbp.errors import DecodeError, InvalidStartOfVersionNumber, ValidationFailed

ALASKA = (
    "M1MROZ/MARTIN         E"
    "XXXXXX SJCLAXAS 3317 207U001A0006 3"
    "4D"
    ">218" + " VV8207BAS" + " " * 14
    + "25" + "02771980993865 AS AS XXXXX55200000000"
    + "Z29  00010"
)

AIR_CANADA = (
    "M1Mroz/Martin         E"
    "XXXXXX YVRYOWAC 0344 211" + " " * 10 + "0"
    "72"
    ">20B" + "0  8203IAC "
    + "25" + "0140000000000 0AC AC AC000000000" + " " * 5
    + "*20000AC 223" + " " * 16 + "14080003068" + " " * 8 + "0B" + " " * 10 + "N"
)

KIOSK = (
    "M1ASKREN/TEST         E"
    "A272SL ORDNRTUA 0881 007F002K0303 1"
    "5C"
    ">318" + "0 K6007BUA" + " " * 14
    + "29" + "01624760758980 UA UA EY975897" + " " * 12
    + "*30600    09  UAG    "
)

# version 0 pass: seat is left-justified and the variable section has no '>'
LEGACY = "M1SOLLE/JOSUHUA       EQHSLJX ATLMEMDL 0254 006Y28C      10C3JIJI7O4M28C"


def test_alaska_airlines():
    bp = decode(ALASKA)
    assert bp.passenger_name_trimmed == "MROZ/MARTIN"
    assert bp.version_number == "2"

    meta = bp.metadata
    assert meta.passenger_description == " "
    assert meta.source_of_check_in == "V"
    assert meta.source_of_boarding_pass_issuance == "V"
    assert meta.date_of_issue_of_boarding_pass == "8207"
    assert meta.document_type == "B"
    assert meta.airline_designator_of_boarding_pass_issuer == "AS "
    assert meta.baggage_tag_license_plate_numbers == " " * 13

    (leg,) = bp.legs
    assert leg.from_city_airport_code == "SJC"
    assert leg.to_city_airport_code == "LAX"
    assert leg.flight_number == "3317 "
    assert leg.compartment_code == "U"
    assert leg.passenger_status == "3"
    assert leg.airline_numeric_code == "027"
    assert leg.document_form_serial_number == "7198099386"
    assert leg.selectee_indicator == "5"
    assert leg.international_document_verification == " "
    assert leg.frequent_flyer_number == "XXXXX55200000000"
    assert leg.id_ad_indicator is None
    assert leg.free_baggage_allowance is None
    assert leg.fast_track is None
    assert leg.airline_individual_use == "Z29  00010"
    assert bp.security is None


def test_air_canada():
    bp = decode(AIR_CANADA)
    assert bp.passenger_name == "Mroz/Martin         "
    assert bp.version_number == "2"

    meta = bp.metadata
    assert meta.passenger_description == "0"
    assert meta.source_of_check_in == " "
    assert meta.source_of_boarding_pass_issuance == " "
    assert meta.date_of_issue_of_boarding_pass == "8203"
    assert meta.document_type == "I"
    assert meta.airline_designator_of_boarding_pass_issuer == "AC "
    assert meta.baggage_tag_license_plate_numbers is None

    (leg,) = bp.legs
    assert leg.compartment_code == " "
    assert leg.seat_number == "    "
    assert leg.check_in_sequence_number == "     "
    assert leg.passenger_status == "0"
    assert leg.airline_numeric_code == "014"
    assert leg.document_form_serial_number == "0000000000"
    assert leg.international_document_verification == "0"
    assert leg.frequent_flyer_number == "AC000000000     "
    assert leg.airline_individual_use.startswith("*20000AC 223")
    assert leg.airline_individual_use.endswith("0B          N")
    assert len(leg.airline_individual_use) == 60


def test_kiosk_issued_pass():
    bp = decode(KIOSK)
    assert bp.version_number == "3"

    meta = bp.metadata
    assert meta.passenger_description == "0"
    assert meta.source_of_check_in == " "
    assert meta.source_of_boarding_pass_issuance == "K"
    assert meta.date_of_issue_of_boarding_pass == "6007"
    assert meta.document_type == "B"
    assert meta.airline_designator_of_boarding_pass_issuer == "UA "

    (leg,) = bp.legs
    assert leg.operating_carrier_pnr_code == "A272SL "
    assert leg.seat_number == "002K"
    assert leg.check_in_sequence_number == "0303 "
    assert leg.airline_numeric_code == "016"
    assert leg.document_form_serial_number == "2476075898"
    assert leg.selectee_indicator == "0"
    assert leg.marketing_carrier_designator == "UA "
    assert leg.frequent_flyer_airline_designator == "UA "
    assert leg.frequent_flyer_number == "EY975897        "
    assert leg.id_ad_indicator == " "
    assert leg.free_baggage_allowance == "   "
    assert leg.fast_track is None
    assert leg.airline_individual_use == "*30600    09  UAG    "


@pytest.mark.parametrize("text", [ALASKA, AIR_CANADA, KIOSK])
def test_lenient_matches_strict_for_well_formed_passes(text):
    assert decode(text, strict=False) == decode(text)


def test_version_zero_pass_is_rejected():
    with pytest.raises(ValidationFailed):
        decode(LEGACY)
    with pytest.raises(InvalidStartOfVersionNumber):
        decode(LEGACY, strict=False)


def test_version_zero_pass_raises_decode_error():
    with pytest.raises(DecodeError):
        decode(LEGACY, strict=False)
