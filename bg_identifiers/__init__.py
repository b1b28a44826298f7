"""Bulgarian patient identifier validation (EGN / LNCh / foreign IDs)."""
from bg_identifiers.models import (
    EgnResult,
    IdentifierErrorCode,
    IdentifierType,
    LnchResult,
    Sex,
)
from bg_identifiers.validators import (
    decode_egn_date,
    detect_id_type,
    egn_checksum,
    lnch_checksum,
    validate_egn,
    validate_lnch,
)

__all__ = [
    "EgnResult",
    "IdentifierErrorCode",
    "IdentifierType",
    "LnchResult",
    "Sex",
    "decode_egn_date",
    "detect_id_type",
    "egn_checksum",
    "lnch_checksum",
    "validate_egn",
    "validate_lnch",
]
