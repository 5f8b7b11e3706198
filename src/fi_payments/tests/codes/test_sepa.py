from decimal import Decimal

import pytest

from fi_payments.codes.exceptions import SepaFieldError
from fi_payments.codes.sepa import build_sepa_payload


def test_build_sepa_payload(finnish_iban, bic, rf_reference):
    payload = build_sepa_payload(finnish_iban, bic, 150, rf_reference, "Oy Yritys Ab")
    assert payload.split("\n") == [
        "BCD",
        "002",
        "1",
        "SCT",
        "NDEAFIHH",
        "Oy Yritys Ab",
        "FI2112345600000785",
        "EUR150.00",
        "",
        "RF74001",
        "",
    ]


@pytest.mark.parametrize(
    "bic, name, reference",
    [("", "", ""), ("NDEAFIHH", "", "RF74001"), ("", "Oy Yritys Ab", "")],
)
def test_empty_fields_keep_their_line(finnish_iban, bic, name, reference):
    lines = build_sepa_payload(finnish_iban, bic, 10, reference, name).split("\n")
    assert len(lines) == 11
    assert lines[3] == "SCT"
    assert lines[4] == bic
    assert lines[5] == name
    assert lines[9] == reference


@pytest.mark.parametrize(
    "amount, expected",
    [
        (150, "EUR150.00"),
        (0.1 + 0.2, "EUR0.30"),
        (Decimal("12.345"), "EUR12.35"),
        ("99.9", "EUR99.90"),
        (999999999.99, "EUR999999999.99"),
    ],
)
def test_amount_has_two_decimals(finnish_iban, bic, rf_reference, amount, expected):
    payload = build_sepa_payload(finnish_iban, bic, amount, rf_reference, "Oy Yritys Ab")
    assert payload.split("\n")[7] == expected


@pytest.mark.parametrize(
    "amount, expected",
    [(0, "EUR0.00"), (-5, "EUR-5.00"), (1000000000, "EUR1000000000.00")],
)
def test_any_numeric_amount_is_written(finnish_iban, bic, rf_reference, amount, expected):
    payload = build_sepa_payload(finnish_iban, bic, amount, rf_reference, "Oy Yritys Ab")
    lines = payload.split("\n")
    assert len(lines) == 11
    assert lines[7] == expected


@pytest.mark.parametrize("amount", ["abc", "nan", float("inf"), ""])
def test_non_numeric_amount(finnish_iban, bic, rf_reference, amount):
    with pytest.raises(SepaFieldError) as excinfo:
        build_sepa_payload(finnish_iban, bic, amount, rf_reference, "Oy Yritys Ab")
    assert excinfo.value.field == "amount"


@pytest.mark.parametrize(
    "field, kwargs",
    [
        ("beneficiary_name", {"beneficiary_name": "Oy Yritys\nAb"}),
        ("bic", {"bic": "NDEA\rFIHH"}),
        ("reference", {"reference": "RF74\n001"}),
        ("iban", {"iban": "FI21\n12345600000785"}),
    ],
)
def test_line_breaks_are_rejected(finnish_iban, bic, rf_reference, field, kwargs):
    arguments = {
        "iban": finnish_iban,
        "bic": bic,
        "amount": 10,
        "reference": rf_reference,
        "beneficiary_name": "Oy Yritys Ab",
    }
    arguments.update(kwargs)
    with pytest.raises(SepaFieldError) as excinfo:
        build_sepa_payload(**arguments)
    assert excinfo.value.field == field
