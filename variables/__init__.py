"""
Variable descriptors: what the engine evaluates each period.
"""

from .base import DerivedVariable, ExternalVariable, InternalVariable, Variable, VariableKind
from .builtins import builtin_variables
from .references import DependencyReference, coerce_reference, coerce_references

__all__ = [
    "Variable",
    "VariableKind",
    "InternalVariable",
    "ExternalVariable",
    "DerivedVariable",
    "DependencyReference",
    "coerce_reference",
    "coerce_references",
    "builtin_variables",
]
