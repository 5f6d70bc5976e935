"""
Exception hierarchy for the projection engine.

Each error also derives from the builtin a caller would naturally catch
(ValueError for bad input, KeyError for lookups), so plain ``except KeyError``
keeps working.
"""

from __future__ import annotations

from typing import Optional


class CashflowError(Exception):
    """Base class for every error raised by the engine."""


class ConfigurationError(CashflowError, ValueError):
    """Invalid construction-time configuration (period count, dates, ...)."""


class VariableDefinitionError(CashflowError, ValueError):
    """A variable descriptor or dependency reference is malformed."""


class DuplicateVariableError(VariableDefinitionError):
    """A variable name is already taken (including built-in and reserved names)."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable {name!r} is already registered")


class UnresolvedDependencyError(CashflowError, KeyError):
    """
    A dependency reference could not be resolved at a non-negative period index.

    Raised mid-run; the run is aborted and no result store is returned.
    """

    def __init__(self, name: str, *, period: int, variable: Optional[str] = None, reason: str = "not found"):
        self.name = name
        self.period = period
        self.variable = variable
        self.reason = reason
        super().__init__(name)

    def __str__(self) -> str:
        where = f" (needed by {self.variable!r})" if self.variable else ""
        return f"Dependency {self.name!r} {self.reason} at period {self.period}{where}"
