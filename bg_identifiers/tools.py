"""Booking-agent tool for checking a patient identifier mid-conversation.

The agent calls validate_patient_id_tool with whatever the patient typed and
reads back a single tagged line. The same line is printed by the CLI.
Reports contain the trimmed identifier; log events carry only its length.
"""
from datetime import date
from typing import Optional

from langchain_core.tools import tool

from bg_identifiers.logging_config import get_logger
from bg_identifiers.models import IdentifierType, Sex
from bg_identifiers.validators import detect_id_type, validate_egn

logger = get_logger(__name__)

NOT_A_STRING_REASON = "Identifier must be a string."
EMPTY_REASON = "Identifier is empty. Please provide an EGN, LNCh or passport number."

SEX_LABELS = {
    Sex.MALE: "male",
    Sex.FEMALE: "female",
}


def format_identifier_report(value: Optional[str], today: Optional[date] = None) -> str:
    """
    Build a one-line, bracket-tagged report for an identifier.

    Tags: [VALID], [FOREIGN], [INVALID]. An [INVALID] line states why the
    identifier was rejected (not a string, or empty).

    Args:
        value: Raw identifier
        today: Reference date for the EGN future-birth check

    Returns:
        Report line
    """
    id_type = detect_id_type(value, today=today)
    length = len(value.strip()) if isinstance(value, str) else None
    logger.info("patient_id_checked", id_type=id_type.value, length=length)

    if id_type == IdentifierType.EGN:
        egn = validate_egn(value, today=today)
        return (
            f"[VALID] EGN '{value.strip()}' is valid. "
            f"Date of birth: {egn.date_of_birth.isoformat()}, sex: {SEX_LABELS[egn.sex]}."
        )

    if id_type == IdentifierType.LNCH:
        return f"[VALID] LNCh '{value.strip()}' is valid."

    if id_type == IdentifierType.FOREIGN:
        return f"[FOREIGN] '{value.strip()}' is treated as a foreign ID / passport number."

    if not isinstance(value, str):
        return f"[INVALID] {NOT_A_STRING_REASON}"
    return f"[INVALID] {EMPTY_REASON}"


@tool
def validate_patient_id_tool(patient_id: Optional[str]) -> str:
    """
    Check a patient identifier: Bulgarian EGN, LNCh, or a foreign ID / passport number.

    Use this as soon as the patient gives their identifier. A valid EGN also
    yields the date of birth and sex, so do not ask the patient for them.
    Any non-empty value that is not an EGN or LNCh is accepted as a foreign ID.

    Args:
        patient_id: Identifier exactly as the patient gave it

    Returns:
        One line starting with [VALID], [FOREIGN] or [INVALID]

    Example:
        >>> validate_patient_id_tool.invoke({"patient_id": "8505155559"})
        "[VALID] EGN '8505155559' is valid. Date of birth: 1985-05-15, sex: male."
    """
    return format_identifier_report(patient_id)
