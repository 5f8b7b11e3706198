"""Finnish payment identifiers: RF references, virtual barcodes and SEPA QR payloads."""
