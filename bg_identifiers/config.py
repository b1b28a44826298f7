"""Configuration for patient identifier validation.

All algorithm constants centralized here - modify as needed without touching code.
"""
import os

# Both EGN and LNCh are 10 digits: 9 payload digits + 1 check digit
IDENTIFIER_LENGTH = 10

EGN_WEIGHTS = [2, 4, 8, 5, 10, 9, 7, 3, 6]
EGN_MODULUS = 11

LNCH_WEIGHTS = [21, 19, 17, 13, 11, 9, 7, 3, 1]
LNCH_MODULUS = 10

# EGN month field encodes the century (checked in order, first match wins)
EGN_CENTURY_OFFSETS = [
    {"month_offset": 40, "century": 2000},
    {"month_offset": 20, "century": 1800},
]
EGN_DEFAULT_CENTURY = 1900

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
