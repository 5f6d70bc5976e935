"""
Variable descriptors.

Three kinds share one shape (a name and a compute callable) and differ in how
the engine calls them:

  INTERNAL : engine-provided, called with no arguments before anything else
  EXTERNAL : caller-provided, called with no arguments
  DERIVED  : caller-provided, called with its resolved dependency values
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from core.errors import VariableDefinitionError

from .references import DependencyReference, coerce_references


class VariableKind(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"
    DERIVED = "derived"


@dataclass(frozen=True)
class Variable:
    """Interface: a named unit that produces one value per period."""

    name: str
    compute: Callable[..., Any]

    kind = VariableKind.EXTERNAL

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise VariableDefinitionError(f"Variable name must be a non-empty string, got {self.name!r}")
        if not callable(self.compute):
            raise VariableDefinitionError(f"Variable {self.name!r}: compute must be callable")


@dataclass(frozen=True)
class InternalVariable(Variable):
    kind = VariableKind.INTERNAL


@dataclass(frozen=True)
class ExternalVariable(Variable):
    kind = VariableKind.EXTERNAL


@dataclass(frozen=True)
class DerivedVariable(Variable):
    """
    Cashflow variable computed from other variables' histories.

    `compute` receives one positional argument per dependency, in order.
    `hidden` keeps the variable out of reporting views (it is still stored and
    referenceable); `include_in_total=False` keeps it out of the `total` series.
    """

    dependencies: Tuple[DependencyReference, ...] = ()
    hidden: bool = False
    include_in_total: bool = True
    description: Optional[str] = None

    kind = VariableKind.DERIVED

    def __post_init__(self):
        super().__post_init__()
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "dependencies", tuple(coerce_references(self.dependencies)))

    @property
    def source_names(self) -> List[str]:
        return [ref.source_name for ref in self.dependencies]
