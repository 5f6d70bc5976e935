"""
CashflowEngine: registration API plus the single run() entry point.

    engine = CashflowEngine(ProjectionConfig(periods=12))
    engine.register_external("rate", lambda: 0.0087)
    engine.register_derived(
        "interest",
        lambda capital, rate: capital * rate,
        dependencies=[DependencyReference(source_name="capital", look_behind=1), "rate"],
    )
    store = engine.run()
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Union

from core.config import ProjectionConfig
from core.errors import VariableDefinitionError
from core.logger import get_logger
from variables.base import DerivedVariable, ExternalVariable, Variable, VariableKind
from variables.builtins import builtin_variables
from variables.references import ReferenceLike

from .context import EvaluationContext
from .evaluator import PeriodEvaluator
from .registry import VariableRegistry
from .store import ResultStore

logger = get_logger(__name__)


class CashflowEngine:
    def __init__(self, config: Union[ProjectionConfig, int]):
        if not isinstance(config, ProjectionConfig):
            config = ProjectionConfig(periods=config)
        self.config = config
        self.context = EvaluationContext(config)
        self.registry = VariableRegistry()
        for variable in builtin_variables(self.context):
            self.registry.add(variable)
        self._evaluator = PeriodEvaluator(self.registry, self.context)

    @property
    def periods(self) -> int:
        return self.config.periods

    @property
    def variables(self) -> List[Variable]:
        """All descriptors in evaluation order."""
        return list(self.registry)

    @property
    def dates(self) -> List[str]:
        """Formatted dates produced by the most recent run."""
        return list(self.context.computed_dates)

    def register_external(
        self,
        variable: Union[ExternalVariable, str],
        compute: Optional[Callable[[], Any]] = None,
    ) -> ExternalVariable:
        """Append an external variable; accepts a descriptor or (name, compute)."""
        if not isinstance(variable, ExternalVariable):
            if isinstance(variable, Variable):
                raise VariableDefinitionError(
                    f"Expected an external variable, got {variable.kind.value} {variable.name!r}"
                )
            variable = ExternalVariable(name=variable, compute=compute)
        elif compute is not None:
            raise VariableDefinitionError("compute given twice")
        self.registry.add(variable)
        logger.debug("Registered external variable %r", variable.name)
        return variable

    def register_derived(
        self,
        variable: Union[DerivedVariable, str],
        compute: Optional[Callable[..., Any]] = None,
        *,
        dependencies: Optional[Iterable[ReferenceLike]] = None,
        hidden: bool = False,
        include_in_total: bool = True,
        description: Optional[str] = None,
    ) -> DerivedVariable:
        """
        Append a derived (cashflow) variable.

        Only the shape of `dependencies` is checked here; whether the names
        exist is checked per period when they are resolved.
        """
        if not isinstance(variable, DerivedVariable):
            if isinstance(variable, Variable):
                raise VariableDefinitionError(
                    f"Expected a derived variable, got {variable.kind.value} {variable.name!r}"
                )
            variable = DerivedVariable(
                name=variable,
                compute=compute,
                dependencies=dependencies if dependencies is not None else (),
                hidden=hidden,
                include_in_total=include_in_total,
                description=description,
            )
        elif compute is not None or dependencies is not None:
            raise VariableDefinitionError("Pass either a DerivedVariable or its fields, not both")
        self.registry.add(variable)
        logger.debug(
            "Registered derived variable %r depending on %s", variable.name, variable.source_names
        )
        return variable

    # camelCase aliases
    registerExternal = register_external
    registerDerived = register_derived

    def run(self) -> ResultStore:
        """
        Evaluate every period and return the completed result store.

        Resets the period counter, the date cursor and the computed dates
        first; state inside caller-supplied closures is left alone.
        """
        logger.info(
            "Running projection: %d periods, %d external, %d derived",
            self.periods,
            len(self.registry.of_kind(VariableKind.EXTERNAL)),
            len(self.registry.of_kind(VariableKind.DERIVED)),
        )
        store = self._evaluator.evaluate()
        logger.info("Projection complete: total sum %s", store.total[-1].sum)
        return store

    calc = run
