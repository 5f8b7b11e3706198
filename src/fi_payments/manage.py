#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

import os
import logging
import sys


logger = logging.getLogger(__name__)


def main() -> None:
    """Run administrative tasks for the Django project.

    Sets the default settings module, then hands the command-line arguments
    to Django's `execute_from_command_line`.

    Raises:
        ImportError: If Django cannot be imported, suggesting installation
            or environment activation issues.
    """
    os.environ.setdefault(
        "DJANGO_SETTINGS_MODULE", "fi_payments.project.settings.development"
    )

    logger.info(f"{os.environ.get('DJANGO_SETTINGS_MODULE')=}")

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
