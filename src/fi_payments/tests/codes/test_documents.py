import dataclasses
import datetime

import pytest

from fi_payments.codes.barcode import format_barcode, split_barcode
from fi_payments.codes.documents import build_payment_codes, parse_finnish_date


@pytest.mark.parametrize(
    "value, expected",
    [
        ("15.12.2024", datetime.date(2024, 12, 15)),
        ("1.1.2026", datetime.date(2026, 1, 1)),
        ("01.01.2026", datetime.date(2026, 1, 1)),
        ("1.1.26", datetime.date(2026, 1, 1)),
        (" 5.3.2025 ", datetime.date(2025, 3, 5)),
    ],
)
def test_parse_finnish_date(value, expected):
    assert parse_finnish_date(value) == expected


@pytest.mark.parametrize("value", ["2024-12-15", "15/12/2024", "15.12.202", "", "31.2.2024"])
def test_parse_finnish_date_rejects_other_formats(value):
    with pytest.raises(ValueError):
        parse_finnish_date(value)


def test_build_payment_codes(finnish_iban, bic, rf_reference, due_date):
    codes = build_payment_codes(
        iban=finnish_iban,
        bic=bic,
        amount=150.50,
        reference=rf_reference,
        due_date=due_date,
        beneficiary_name="Oy Yritys Ab",
    )
    assert codes.reference == rf_reference
    assert len(codes.barcode) == 54
    assert codes.barcode_display == format_barcode(codes.barcode)
    assert codes.sepa_payload.split("\n")[7] == "EUR150.50"
    assert codes.sepa_payload.split("\n")[9] == rf_reference


def test_build_payment_codes_from_finnish_date(finnish_iban, bic, rf_reference):
    codes = build_payment_codes(
        iban=finnish_iban,
        bic=bic,
        amount=20,
        reference=rf_reference,
        due_date="15.12.2024",
        beneficiary_name="Oy Yritys Ab",
    )
    assert split_barcode(codes.barcode)["due_date"] == "151224"


def test_payment_codes_are_immutable(finnish_iban, bic, rf_reference, due_date):
    codes = build_payment_codes(
        iban=finnish_iban,
        bic=bic,
        amount=20,
        reference=rf_reference,
        due_date=due_date,
        beneficiary_name="Oy Yritys Ab",
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        codes.barcode = ""


def test_build_payment_codes_for_zero_amount(finnish_iban, bic, rf_reference, due_date):
    codes = build_payment_codes(
        iban=finnish_iban,
        bic=bic,
        amount=0,
        reference=rf_reference,
        due_date=due_date,
        beneficiary_name="Oy Yritys Ab",
    )
    assert split_barcode(codes.barcode)["amount"] == "00000000"
    assert codes.sepa_payload.split("\n")[7] == "EUR0.00"
