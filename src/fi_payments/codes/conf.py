from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


SEED_FALLBACK_TIMESTAMP = "timestamp"
SEED_FALLBACK_REJECT = "reject"
SEED_FALLBACK_POLICIES = (SEED_FALLBACK_TIMESTAMP, SEED_FALLBACK_REJECT)

DEFAULTS: Dict[str, Any] = {
    "REFERENCE_SEED_FALLBACK": SEED_FALLBACK_TIMESTAMP,
    "REFERENCE_FALLBACK_DIGITS": 8,
}


def get_setting(name: str) -> Any:
    """Returns a payment codes setting, falling back to its default.

    Values come from the ``FI_PAYMENTS`` dict in the Django settings. They are
    looked up on every call so that overridden settings take effect at once.

    Args:
        name: Key inside ``FI_PAYMENTS`` (e.g. "REFERENCE_SEED_FALLBACK").

    Returns:
        The configured value, or the default when the key is missing or
        Django settings are not configured.

    Raises:
        KeyError: If `name` is not a known setting.
        ImproperlyConfigured: If the configured value is not acceptable.
    """
    default = DEFAULTS[name]
    overrides = getattr(settings, "FI_PAYMENTS", {}) if settings.configured else {}
    value = overrides.get(name, default)

    if name == "REFERENCE_SEED_FALLBACK" and value not in SEED_FALLBACK_POLICIES:
        raise ImproperlyConfigured(
            f"FI_PAYMENTS['REFERENCE_SEED_FALLBACK'] must be one of"
            f" {', '.join(SEED_FALLBACK_POLICIES)}, got {value!r}"
        )
    if name == "REFERENCE_FALLBACK_DIGITS" and (
        not isinstance(value, int) or isinstance(value, bool) or value < 1
    ):
        raise ImproperlyConfigured(
            f"FI_PAYMENTS['REFERENCE_FALLBACK_DIGITS'] must be a positive integer, got {value!r}"
        )
    return value
