"""Test configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Ensure the project root is on PYTHONPATH
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT))

# Set test environment variables before anything else imports config
os.environ.setdefault("ENVIRONMENT", "development")

from ai_verify.models.checklist import ChecklistItem, ChecklistState  # noqa: E402


@pytest.fixture
def all_ticked() -> ChecklistState:
    return ChecklistState.all_ticked()


@pytest.fixture
def all_unticked() -> ChecklistState:
    return ChecklistState.all_unticked()


@pytest.fixture
def only_dose_missing() -> ChecklistState:
    return ChecklistState.all_ticked().with_tick(ChecklistItem.DOSE_PRESENT, False)
