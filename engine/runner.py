"""
One-call projection runner.
"""

from __future__ import annotations

from typing import Iterable, Union

from core.config import ProjectionConfig
from variables.base import DerivedVariable, ExternalVariable

from .cashflow import CashflowEngine
from .store import ResultStore


def run_projection(
    config: Union[ProjectionConfig, int],
    externals: Iterable[ExternalVariable] = (),
    derived: Iterable[DerivedVariable] = (),
) -> ResultStore:
    """
    Build an engine, register the given variables in order and run it.

    Parameters
    ----------
    config : ProjectionConfig or int
        Projection settings, or just the number of periods
    externals : iterable of ExternalVariable
    derived : iterable of DerivedVariable
        Evaluated in the order given

    Returns
    -------
    ResultStore with one history per variable plus `total`
    """
    engine = CashflowEngine(config)
    for variable in externals:
        engine.register_external(variable)
    for variable in derived:
        engine.register_derived(variable)
    return engine.run()
