import datetime

import pytest


@pytest.fixture(scope="session")
def finnish_iban():
    """Provides a checksum-valid Finnish IBAN."""
    return "FI2112345600000785"


@pytest.fixture(scope="session")
def bic():
    return "NDEAFIHH"


@pytest.fixture(scope="session")
def rf_reference():
    """The reference generated for invoice INV-001."""
    return "RF74001"


@pytest.fixture(scope="session")
def due_date():
    """Provides a fixed due date of 15 December 2024."""
    return datetime.date(2024, 12, 15)


@pytest.fixture
def reject_seed_fallback(settings):
    """Configures reference generation to refuse seeds without digits."""
    settings.FI_PAYMENTS = {"REFERENCE_SEED_FALLBACK": "reject"}
    return settings
