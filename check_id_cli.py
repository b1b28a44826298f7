#!/usr/bin/env python3
"""CLI tool to check Bulgarian patient identifiers (EGN / LNCh / foreign)."""
import os
import sys

from dotenv import load_dotenv

from bg_identifiers.logging_config import setup_structured_logging
from bg_identifiers.models import IdentifierType
from bg_identifiers.tools import format_identifier_report
from bg_identifiers.validators import detect_id_type


def main(argv=None) -> int:
    """Print a report for every identifier; non-zero exit if any is invalid."""
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print("Usage: python check_id_cli.py <id> [<id> ...]")
        print("\nExample:")
        print("  python check_id_cli.py 8505155559 1234567893 AB123456CD")
        return 1

    load_dotenv()
    try:
        setup_structured_logging(os.getenv("LOG_LEVEL"))
    except ValueError as e:
        print(f"Error: {e}. Check LOG_LEVEL in your environment or .env file.")
        return 1

    exit_code = 0
    for value in args:
        print(format_identifier_report(value))
        if detect_id_type(value) == IdentifierType.INVALID:
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
