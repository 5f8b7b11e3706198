from django import template

from fi_payments.codes.barcode import encode_virtual_barcode, format_barcode
from fi_payments.codes.references import format_reference

register = template.Library()


@register.filter
def rf_display(reference):
    return format_reference(reference or "")


@register.filter
def barcode_display(barcode):
    return format_barcode(barcode or "")


@register.simple_tag
def virtual_barcode(iban, amount, reference, due_date):
    return encode_virtual_barcode(iban, amount, reference, due_date)
