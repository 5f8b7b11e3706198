from django.apps import AppConfig


class CodesConfig(AppConfig):
    """App configuration for the payment identifier codecs."""

    name = "fi_payments.codes"
    label = "payment_codes"
    verbose_name = "Payment codes"
