"""
Core package: configuration, schema constants, errors and shared utilities.
No business logic lives here.
"""

from .config import ProjectionConfig
from .errors import (
    CashflowError,
    ConfigurationError,
    DuplicateVariableError,
    UnresolvedDependencyError,
    VariableDefinitionError,
)
from .logger import get_logger
from .schema import BUILTIN_NAMES, PROJECTIONS, RESERVED_NAMES, TOTAL
from .utils import format_date

__all__ = [
    "ProjectionConfig",
    "CashflowError",
    "ConfigurationError",
    "DuplicateVariableError",
    "UnresolvedDependencyError",
    "VariableDefinitionError",
    "get_logger",
    "BUILTIN_NAMES",
    "PROJECTIONS",
    "RESERVED_NAMES",
    "TOTAL",
    "format_date",
]
