"""Shared test fixtures for result page tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "REFERENCE_DATA_PATH",
        "TDEE_PAGE_LIMIT",
        "PROJECTION_START_DATE",
        "PAGES_HOST",
        "PAGES_ALLOW_INSECURE_BIND",
    ):
        monkeypatch.delenv(name, raising=False)

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from resultpages.core.reference.loader import (  # noqa: E402
    DEFAULT_REFERENCE_PATH,
    load_default_reference_data,
)
from resultpages.core.reference.models import ReferenceData  # noqa: E402


@pytest.fixture
def reference() -> ReferenceData:
    """The packaged reference data."""
    return load_default_reference_data()


@pytest.fixture
def reference_yaml_text() -> str:
    """Raw text of the packaged reference YAML, for tests that edit a copy."""
    return DEFAULT_REFERENCE_PATH.read_text()
