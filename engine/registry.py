"""
Variable registry: one place that knows every descriptor, its kind, and the
fixed lookup order used when resolving dependencies.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from core.errors import DuplicateVariableError
from core.schema import STORE_KEYS
from variables.base import Variable, VariableKind

# Resolution priority; first match wins.
LOOKUP_ORDER: Tuple[VariableKind, ...] = (
    VariableKind.INTERNAL,
    VariableKind.EXTERNAL,
    VariableKind.DERIVED,
)


class VariableRegistry:
    def __init__(self):
        self._by_kind: Dict[VariableKind, List[Variable]] = {kind: [] for kind in LOOKUP_ORDER}
        self._index: Dict[VariableKind, Dict[str, Variable]] = {kind: {} for kind in LOOKUP_ORDER}

    def add(self, variable: Variable) -> Variable:
        if variable.name in STORE_KEYS or self.lookup(variable.name) is not None:
            raise DuplicateVariableError(variable.name)
        self._by_kind[variable.kind].append(variable)
        self._index[variable.kind][variable.name] = variable
        return variable

    def of_kind(self, kind: VariableKind) -> List[Variable]:
        return list(self._by_kind[kind])

    def lookup(self, name: str) -> Optional[Tuple[VariableKind, Variable]]:
        """(kind, variable) for `name`, searching internal, external then derived."""
        for kind in LOOKUP_ORDER:
            variable = self._index[kind].get(name)
            if variable is not None:
                return kind, variable
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self):
        for kind in LOOKUP_ORDER:
            yield from self._by_kind[kind]

    def __len__(self) -> int:
        return sum(len(v) for v in self._by_kind.values())
