"""Decoded boarding pass records.

Records are frozen: a decode builds them once and they never change
afterwards. Field text is kept exactly as it appears in the barcode,
including padding spaces; optional fields that were not present in the
input are ``None``. Single-character items are one-character strings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlightLeg:
    operating_carrier_pnr_code: str
    from_city_airport_code: str
    to_city_airport_code: str
    operating_carrier_designator: str
    flight_number: str
    date_of_flight: str
    compartment_code: str
    seat_number: str
    check_in_sequence_number: str
    passenger_status: str
    airline_numeric_code: str | None = None
    document_form_serial_number: str | None = None
    selectee_indicator: str | None = None
    international_document_verification: str | None = None
    marketing_carrier_designator: str | None = None
    frequent_flyer_airline_designator: str | None = None
    frequent_flyer_number: str | None = None
    id_ad_indicator: str | None = None
    free_baggage_allowance: str | None = None
    fast_track: str | None = None
    airline_individual_use: str | None = None


@dataclass(frozen=True)
class PassMetadata:
    """Pass-level items carried inside the first leg's variable section."""

    passenger_description: str | None = None
    source_of_check_in: str | None = None
    source_of_boarding_pass_issuance: str | None = None
    date_of_issue_of_boarding_pass: str | None = None
    document_type: str | None = None
    airline_designator_of_boarding_pass_issuer: str | None = None
    baggage_tag_license_plate_numbers: str | None = None
    first_non_consecutive_baggage_tag_license_plate_number: str | None = None
    second_non_consecutive_baggage_tag_license_plate_number: str | None = None


@dataclass(frozen=True)
class SecurityData:
    type_of_security_data: str | None = None
    security_data: str | None = None


@dataclass(frozen=True)
class BoardingPass:
    passenger_name: str
    electronic_ticket_indicator: str
    legs: tuple[FlightLeg, ...]
    version_number: str | None = None
    metadata: PassMetadata | None = None
    security: SecurityData | None = None

    @property
    def passenger_name_trimmed(self) -> str:
        return self.passenger_name.rstrip(" ")

    @property
    def number_of_legs(self) -> int:
        return len(self.legs)
