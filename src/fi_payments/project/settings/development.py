from .base import *

# --- DEVELOPMENT-SPECIFIC SETTINGS ---

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = "django-insecure-fi-payments-development-key"

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

# Dump every barcode field while developing
LOGGING["loggers"]["fi_payments"]["level"] = "DEBUG"
