import os

# The app has no models; host projects bring their own database settings.
INSTALLED_APPS = [
    "fi_payments.codes.apps.CodesConfig",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

LANGUAGE_CODE = "fi"
TIME_ZONE = "Europe/Helsinki"
USE_TZ = True

# --- PAYMENT CODES ---
FI_PAYMENTS = {
    # "timestamp" keeps invoices without digits in their number payable,
    # "reject" refuses to build a reference for them.
    "REFERENCE_SEED_FALLBACK": os.environ.get(
        "FI_PAYMENTS_REFERENCE_SEED_FALLBACK", "timestamp"
    ),
    "REFERENCE_FALLBACK_DIGITS": 8,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "fi_payments": {
            "level": os.environ.get("FI_PAYMENTS_LOG_LEVEL", "INFO"),
        },
    },
}
