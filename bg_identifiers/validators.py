"""Bulgarian national identifier validation (EGN / LNCh) and classification.

EGN format: YYMMDDRRRC
- YY: year (last 2 digits)
- MM: month 01-12 (1900s), 21-32 (1800s) or 41-52 (2000s)
- DD: day 01-31
- RRR: region and birth order, 9th digit even = female, odd = male
- C: check digit

LNCh format: 9 digits + check digit, no encoded demographics.

All public validators are total: they never raise, every input yields a result.
Checks run in a fixed order so the same input always fails with the same error.
"""
import logging
import re
from datetime import date
from typing import Any, List, Optional, Sequence, Tuple

from bg_identifiers import config
from bg_identifiers.models import (
    EgnResult,
    IdentifierErrorCode,
    IdentifierType,
    LnchResult,
    Sex,
)

logger = logging.getLogger(__name__)

# ASCII only: str.isdigit() also accepts e.g. Arabic-Indic digits
DIGITS_PATTERN = re.compile(r'[0-9]+')
PREFIX_LENGTH = config.IDENTIFIER_LENGTH - 1


def _weighted_sum(digits: Sequence[int], weights: Sequence[int]) -> int:
    return sum(digit * weight for digit, weight in zip(digits, weights))


def _egn_check_digit(digits: Sequence[int]) -> int:
    checksum = _weighted_sum(digits, config.EGN_WEIGHTS) % config.EGN_MODULUS
    return 0 if checksum == 10 else checksum


def _lnch_check_digit(digits: Sequence[int]) -> int:
    return _weighted_sum(digits, config.LNCH_WEIGHTS) % config.LNCH_MODULUS


def _prefix_digits(prefix: str) -> List[int]:
    if not isinstance(prefix, str) or len(prefix) != PREFIX_LENGTH or not DIGITS_PATTERN.fullmatch(prefix):
        raise ValueError(
            f"Checksum prefix must be exactly {PREFIX_LENGTH} ASCII digits, got: {prefix!r}"
        )
    return [int(ch) for ch in prefix]


def egn_checksum(prefix: str) -> int:
    """
    Compute the EGN check digit for a 9-digit prefix.

    Weighted sum mod 11; a remainder of 10 becomes 0.

    Raises:
        ValueError: If prefix is not exactly 9 ASCII digits
    """
    return _egn_check_digit(_prefix_digits(prefix))


def lnch_checksum(prefix: str) -> int:
    """
    Compute the LNCh check digit for a 9-digit prefix (weighted sum mod 10).

    Raises:
        ValueError: If prefix is not exactly 9 ASCII digits
    """
    return _lnch_check_digit(_prefix_digits(prefix))


def decode_egn_date(digits: Sequence[int]) -> Tuple[int, int, int]:
    """
    Decode (year, month, day) from the first six EGN digits.

    The month field carries the century. No range checks are applied here:
    an out-of-range month or day is returned as decoded.

    Example:
        >>> decode_egn_date([0, 0, 4, 3, 2, 0])
        (2000, 3, 20)
    """
    year = digits[0] * 10 + digits[1]
    month = digits[2] * 10 + digits[3]
    day = digits[4] * 10 + digits[5]

    century = config.EGN_DEFAULT_CENTURY
    for rule in config.EGN_CENTURY_OFFSETS:
        if month > rule["month_offset"]:
            century = rule["century"]
            month -= rule["month_offset"]
            break

    return century + year, month, day


def _check_shape(value: Any, label: str) -> Tuple[Optional[List[int]], Optional[str], Optional[IdentifierErrorCode]]:
    """Type -> length -> digit-class gating shared by EGN and LNCh."""
    if not isinstance(value, str):
        return None, f"{label} must be a string", IdentifierErrorCode.NOT_A_STRING

    cleaned = value.strip()
    if len(cleaned) != config.IDENTIFIER_LENGTH:
        return None, f"{label} must be exactly {config.IDENTIFIER_LENGTH} digits", IdentifierErrorCode.WRONG_LENGTH

    if not DIGITS_PATTERN.fullmatch(cleaned):
        return None, f"{label} must contain only digits", IdentifierErrorCode.NON_DIGIT

    return [int(ch) for ch in cleaned], None, None


def _reject_egn(error: str, error_code: IdentifierErrorCode) -> EgnResult:
    logger.debug("EGN rejected: %s", error_code.value)
    return EgnResult.failure(error, error_code)


def _reject_lnch(error: str, error_code: IdentifierErrorCode) -> LnchResult:
    logger.debug("LNCh rejected: %s", error_code.value)
    return LnchResult.failure(error, error_code)


def validate_egn(value: Any, today: Optional[date] = None) -> EgnResult:
    """
    Validate a Bulgarian EGN and extract date of birth and sex.

    Args:
        value: Raw identifier (surrounding whitespace is ignored)
        today: Reference date for the future-birth check (defaults to date.today())

    Returns:
        EgnResult; on success sex and date_of_birth are set, otherwise error is.

    Example:
        >>> validate_egn("8505155559").date_of_birth
        datetime.date(1985, 5, 15)
    """
    digits, error, error_code = _check_shape(value, "EGN")
    if digits is None:
        return _reject_egn(error, error_code)

    if _egn_check_digit(digits) != digits[PREFIX_LENGTH]:
        return _reject_egn("Invalid EGN checksum", IdentifierErrorCode.CHECKSUM)

    year, month, day = decode_egn_date(digits)

    if month < 1 or month > 12:
        return _reject_egn("Invalid month in EGN", IdentifierErrorCode.MONTH_OUT_OF_RANGE)

    if day < 1 or day > 31:
        return _reject_egn("Invalid day in EGN", IdentifierErrorCode.DAY_OUT_OF_RANGE)

    try:
        date_of_birth = date(year, month, day)
    except ValueError:
        # e.g. 31 April, 29 February in a common year
        return _reject_egn("Invalid date in EGN", IdentifierErrorCode.INVALID_DATE)

    if date_of_birth > (today or date.today()):
        return _reject_egn("Date of birth cannot be in the future", IdentifierErrorCode.FUTURE_DATE)

    sex = Sex.FEMALE if digits[8] % 2 == 0 else Sex.MALE

    return EgnResult(valid=True, sex=sex, date_of_birth=date_of_birth)


def validate_lnch(value: Any) -> LnchResult:
    """
    Validate a Bulgarian LNCh (personal number of a foreigner).

    Args:
        value: Raw identifier (surrounding whitespace is ignored)

    Returns:
        LnchResult; LNCh carries no date of birth or sex.
    """
    digits, error, error_code = _check_shape(value, "LNCh")
    if digits is None:
        return _reject_lnch(error, error_code)

    if _lnch_check_digit(digits) != digits[PREFIX_LENGTH]:
        return _reject_lnch("Invalid LNCh checksum", IdentifierErrorCode.CHECKSUM)

    return LnchResult(valid=True)


def detect_id_type(value: Any, today: Optional[date] = None) -> IdentifierType:
    """
    Classify a patient identifier.

    Precedence:
    1. Non-string or empty -> INVALID (whitespace-only is not empty)
    2. Any non-digit character -> FOREIGN (passport numbers etc.)
    3. Numeric but not 10 digits -> FOREIGN
    4. Valid EGN -> EGN (EGN wins over LNCh when both checksums pass)
    5. Valid LNCh -> LNCH
    6. 10 digits failing both checksums -> FOREIGN

    Args:
        value: Raw identifier
        today: Reference date forwarded to the EGN future-birth check

    Returns:
        IdentifierType
    """
    if not isinstance(value, str) or not value:
        return IdentifierType.INVALID

    cleaned = value.strip()

    if not DIGITS_PATTERN.fullmatch(cleaned):
        return IdentifierType.FOREIGN

    if len(cleaned) != config.IDENTIFIER_LENGTH:
        return IdentifierType.FOREIGN

    if validate_egn(cleaned, today=today).valid:
        return IdentifierType.EGN

    if validate_lnch(cleaned).valid:
        return IdentifierType.LNCH

    return IdentifierType.FOREIGN
