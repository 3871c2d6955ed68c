from __future__ import annotations

from typing import Optional


class UnitextError(Exception):
    pass


class ConfigurationError(UnitextError, ValueError):
    """Invalid or contradictory normalization options."""


class NormalizationError(UnitextError):
    """The Unicode data service reported a failure while normalizing."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
