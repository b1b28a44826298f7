"""Test result models."""
from datetime import date

import pytest
from pydantic import ValidationError

from bg_identifiers.models import (
    EgnResult,
    IdentifierErrorCode,
    IdentifierType,
    LnchResult,
    Sex,
)


def test_enums_serialize_as_strings():
    """Enum values match the identifiers stored on patient records."""
    assert IdentifierType.EGN.value == "egn"
    assert IdentifierType.LNCH.value == "lnch"
    assert IdentifierType.FOREIGN.value == "foreign"
    assert IdentifierType.INVALID.value == "invalid"
    assert Sex.MALE == "m"
    assert Sex.FEMALE == "f"


def test_valid_egn_result():
    result = EgnResult(valid=True, sex=Sex.MALE, date_of_birth=date(1985, 5, 15))

    assert result.error is None
    assert result.model_dump(mode="json") == {
        "valid": True,
        "error": None,
        "error_code": None,
        "sex": "m",
        "date_of_birth": "1985-05-15",
    }


def test_valid_egn_result_requires_demographics():
    """sex and date_of_birth are mandatory on success."""
    with pytest.raises(ValidationError) as exc_info:
        EgnResult(valid=True, sex=Sex.MALE)
    assert "requires sex and date_of_birth" in str(exc_info.value)


def test_invalid_egn_result_cannot_carry_demographics():
    with pytest.raises(ValidationError):
        EgnResult(
            valid=False,
            error="Invalid EGN checksum",
            error_code=IdentifierErrorCode.CHECKSUM,
            sex=Sex.FEMALE,
        )


def test_invalid_result_requires_error():
    """Failures always explain themselves."""
    with pytest.raises(ValidationError) as exc_info:
        LnchResult(valid=False)
    assert "must carry an error" in str(exc_info.value)


def test_valid_result_cannot_carry_error():
    with pytest.raises(ValidationError):
        LnchResult(valid=True, error="Invalid LNCh checksum", error_code=IdentifierErrorCode.CHECKSUM)


def test_failure_constructor():
    result = LnchResult.failure("Invalid LNCh checksum", IdentifierErrorCode.CHECKSUM)

    assert result.valid is False
    assert result.error_code == IdentifierErrorCode.CHECKSUM


def test_results_are_immutable():
    result = EgnResult.failure("Invalid EGN checksum", IdentifierErrorCode.CHECKSUM)

    with pytest.raises(ValidationError):
        result.valid = True
