from __future__ import annotations

import os
from typing import Optional

from storepolicy.constants import ENV_STRICT

_TRUTHY = {"1", "true", "yes", "on"}


def env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def is_strict_mode() -> bool:
    """Return True when builders should run the extra strict-mode checks."""

    return env_truthy(os.getenv(ENV_STRICT))
