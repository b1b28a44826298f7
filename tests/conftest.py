"""Shared test fixtures."""
from datetime import date

import pytest

from bg_identifiers.logging_config import setup_structured_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep validation logs out of test output (rebinds to the current stdout)."""
    setup_structured_logging(log_level="WARNING")
    yield


@pytest.fixture
def today() -> date:
    """Pinned reference date for the EGN future-birth check."""
    return date(2024, 6, 15)


@pytest.fixture
def make_egn():
    """Build a checksum-valid EGN from a 9-digit prefix."""
    from bg_identifiers.validators import egn_checksum

    def _create(prefix: str) -> str:
        return f"{prefix}{egn_checksum(prefix)}"
    return _create


@pytest.fixture
def make_lnch():
    """Build a checksum-valid LNCh from a 9-digit prefix."""
    from bg_identifiers.validators import lnch_checksum

    def _create(prefix: str) -> str:
        return f"{prefix}{lnch_checksum(prefix)}"
    return _create
