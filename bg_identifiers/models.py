"""Value types for identifier validation results.

Best Practices:
- str Enums for closed sets (serialize as plain strings)
- Pydantic models for results, invariants enforced on construction
- Results are transient: nothing here is persisted
"""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Sex(str, Enum):
    """Sex encoded in the 9th EGN digit."""
    MALE = "m"
    FEMALE = "f"


class IdentifierType(str, Enum):
    """
    Classification of a patient identifier.

    Closed set, exactly one applies per input:
    - EGN: valid Bulgarian unified civil number
    - LNCH: valid personal number of a foreigner
    - FOREIGN: anything non-empty that is neither (passport numbers etc.)
    - INVALID: empty or not a string
    """
    EGN = "egn"
    LNCH = "lnch"
    FOREIGN = "foreign"
    INVALID = "invalid"


class IdentifierErrorCode(str, Enum):
    """Machine-readable reason a validation failed."""
    NOT_A_STRING = "not_a_string"
    WRONG_LENGTH = "wrong_length"
    NON_DIGIT = "non_digit"
    CHECKSUM = "checksum"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    INVALID_DATE = "invalid_date"
    FUTURE_DATE = "future_date"


class _ValidationResult(BaseModel):
    valid: bool = Field(..., description="Whether the identifier passed every check")
    error: Optional[str] = Field(None, description="Human-readable failure reason")
    error_code: Optional[IdentifierErrorCode] = Field(None, description="Failure category")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_error_matches_validity(self):
        """Errors are reported if and only if validation failed."""
        if self.valid and (self.error is not None or self.error_code is not None):
            raise ValueError("A valid result cannot carry an error")
        if not self.valid and (self.error is None or self.error_code is None):
            raise ValueError("An invalid result must carry an error and error_code")
        return self


class EgnResult(_ValidationResult):
    """Result of EGN validation with the demographics it encodes."""
    sex: Optional[Sex] = Field(None, description="Sex derived from the 9th digit")
    date_of_birth: Optional[date] = Field(None, description="Decoded date of birth")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "valid": True,
                "sex": "m",
                "date_of_birth": "1985-05-15",
                "error": None,
                "error_code": None
            }
        }
    )

    @model_validator(mode="after")
    def check_demographics_match_validity(self):
        """sex and date_of_birth are present if and only if valid."""
        has_demographics = self.sex is not None and self.date_of_birth is not None
        has_any = self.sex is not None or self.date_of_birth is not None
        if self.valid and not has_demographics:
            raise ValueError("A valid EGN result requires sex and date_of_birth")
        if not self.valid and has_any:
            raise ValueError("An invalid EGN result cannot carry sex or date_of_birth")
        return self

    @classmethod
    def failure(cls, error: str, error_code: IdentifierErrorCode) -> "EgnResult":
        return cls(valid=False, error=error, error_code=error_code)


class LnchResult(_ValidationResult):
    """Result of LNCh validation. LNCh encodes no demographics."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "valid": False,
                "error": "Invalid LNCh checksum",
                "error_code": "checksum"
            }
        }
    )

    @classmethod
    def failure(cls, error: str, error_code: IdentifierErrorCode) -> "LnchResult":
        return cls(valid=False, error=error, error_code=error_code)
