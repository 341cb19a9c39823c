"""Global pytest configuration for storepolicy tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC_ROOT = _REPO_ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

from storepolicy import StoreConfigurationBuilder  # noqa: E402
from storepolicy.constants import ENV_STRICT  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_strict_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep STOREPOLICY_STRICT from leaking in from the developer shell."""

    monkeypatch.delenv(ENV_STRICT, raising=False)


@pytest.fixture
def builder() -> StoreConfigurationBuilder:
    return StoreConfigurationBuilder()
