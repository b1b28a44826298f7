"""Patient intake: turn a raw identifier into the form's auto-fill decision.

The intake form validates the identifier when the field loses focus:
- EGN fills date of birth and sex
- LNCh / foreign IDs clear them and may suggest switching the patient's ID type
- Switching type needs the user's consent: this module only reports that a
  confirmation is needed, the caller asks and then calls resolve_confirmation()
"""
import logging
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bg_identifiers.models import IdentifierType, Sex
from bg_identifiers.validators import detect_id_type, validate_egn

logger = logging.getLogger(__name__)


class FeedbackLevel(str, Enum):
    """Severity of the feedback shown next to the identifier field."""
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"
    MUTED = "muted"


LNCH_SWITCH_PROMPT = "Detected LNCh format (Resident ID). Switch patient type to LNCh?"
FOREIGN_SWITCH_PROMPT = "ID does not match EGN/LNCh format. Mark patient as Foreign?"


class IntakeAssessment(BaseModel):
    """What the intake form should do with the identifier it was given."""
    id_type: Optional[IdentifierType] = Field(
        None,
        description="Detected identifier type (None for an empty field)"
    )
    suggested_type: Optional[IdentifierType] = Field(
        None,
        description="Type the form should select, None to keep the current one"
    )
    date_of_birth: Optional[str] = Field(None, description="ISO date (YYYY-MM-DD) to fill")
    sex: Optional[Sex] = Field(None, description="Sex to fill")
    feedback: str = Field("", description="Message shown next to the field")
    level: FeedbackLevel = Field(FeedbackLevel.MUTED, description="Feedback severity")
    requires_confirmation: bool = Field(
        False,
        description="True if suggested_type must be confirmed by the user"
    )
    confirmation_prompt: Optional[str] = Field(None, description="Question to ask the user")
    clear_demographics: bool = Field(
        False,
        description="True if date of birth and sex fields must be emptied"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id_type": "egn",
                "suggested_type": "egn",
                "date_of_birth": "1985-05-15",
                "sex": "m",
                "feedback": "Valid EGN - DOB and sex auto-filled",
                "level": "success",
                "requires_confirmation": False,
                "confirmation_prompt": None,
                "clear_demographics": False
            }
        }
    )


def assess_patient_id(
    value: str,
    current_type: Optional[IdentifierType] = None,
    today: Optional[date] = None
) -> IntakeAssessment:
    """
    Decide how the intake form reacts to an identifier.

    Args:
        value: Raw identifier from the form field
        current_type: ID type currently selected on the form
        today: Reference date for the EGN future-birth check

    Returns:
        IntakeAssessment
    """
    if not isinstance(value, str) or not value.strip():
        return IntakeAssessment()

    cleaned = value.strip()
    detected = detect_id_type(cleaned, today=today)
    logger.debug(
        "Identifier assessed: detected=%s current=%s",
        detected.value,
        current_type.value if current_type else None
    )

    if detected == IdentifierType.EGN:
        egn = validate_egn(cleaned, today=today)
        return IntakeAssessment(
            id_type=detected,
            suggested_type=IdentifierType.EGN,
            date_of_birth=egn.date_of_birth.isoformat(),
            sex=egn.sex,
            feedback="Valid EGN - DOB and sex auto-filled",
            level=FeedbackLevel.SUCCESS
        )

    if detected == IdentifierType.LNCH:
        if current_type == IdentifierType.LNCH:
            return IntakeAssessment(
                id_type=detected,
                suggested_type=IdentifierType.LNCH,
                feedback="Valid LNCh number",
                level=FeedbackLevel.SUCCESS
            )
        return IntakeAssessment(
            id_type=detected,
            suggested_type=IdentifierType.LNCH,
            feedback="Valid LNCh number",
            level=FeedbackLevel.INFO,
            requires_confirmation=True,
            confirmation_prompt=LNCH_SWITCH_PROMPT,
            clear_demographics=True
        )

    # Non-empty strings are never INVALID, so only FOREIGN is left
    if current_type == IdentifierType.FOREIGN:
        return IntakeAssessment(
            id_type=detected,
            suggested_type=IdentifierType.FOREIGN,
            feedback="Foreign ID / Passport",
            level=FeedbackLevel.MUTED
        )
    return IntakeAssessment(
        id_type=detected,
        suggested_type=IdentifierType.FOREIGN,
        feedback="ID does not match EGN/LNCh format",
        level=FeedbackLevel.INFO,
        requires_confirmation=True,
        confirmation_prompt=FOREIGN_SWITCH_PROMPT,
        clear_demographics=True
    )


def resolve_confirmation(assessment: IntakeAssessment, accepted: bool) -> IntakeAssessment:
    """
    Apply the user's answer to a suggested type switch.

    Args:
        assessment: Result of assess_patient_id()
        accepted: Whether the user agreed to switch

    Returns:
        Final assessment. Unchanged if no confirmation was required.
    """
    if not assessment.requires_confirmation:
        return assessment

    if assessment.id_type == IdentifierType.LNCH:
        if accepted:
            feedback, level = "Valid LNCh - Switched to LNCh type", FeedbackLevel.SUCCESS
        else:
            feedback, level = "Valid LNCh but kept current type", FeedbackLevel.WARNING
    elif accepted:
        feedback, level = "Marked as Foreign ID", FeedbackLevel.INFO
    else:
        feedback, level = "Invalid EGN/LNCh format", FeedbackLevel.WARNING

    return assessment.model_copy(update={
        "suggested_type": assessment.suggested_type if accepted else None,
        "feedback": feedback,
        "level": level,
        "requires_confirmation": False,
        "confirmation_prompt": None,
    })
