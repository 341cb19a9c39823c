"""Error taxonomy raised by store policy builders."""

from __future__ import annotations


class StorePolicyError(Exception):
    """Base class for every error raised by storepolicy."""


class InvalidArgumentError(StorePolicyError, ValueError):
    """Raised when a required argument is missing or not of the expected kind."""

    def __init__(self, argument: str, reason: str = "must not be None") -> None:
        super().__init__(f"{argument} {reason}.")
        self.argument = argument


class ConfigurationError(StorePolicyError, RuntimeError):
    """Raised when a store configuration fails validation."""


class BuilderStateError(StorePolicyError, RuntimeError):
    """Raised when a builder is used in a state that does not allow the call."""


class StrictModeViolation(ConfigurationError):
    """Raised when STOREPOLICY_STRICT invariants are not satisfied."""
