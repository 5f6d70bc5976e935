import pytest

from core.errors import VariableDefinitionError
from variables.base import DerivedVariable, ExternalVariable, VariableKind
from variables.references import DependencyReference, coerce_reference, coerce_references


def test_defaults():
    ref = DependencyReference(source_name="capital")
    assert ref.look_behind == 0
    assert ref.projection == "current"


def test_camel_case_aliases():
    ref = DependencyReference.model_validate({"sourceName": "capital", "lookBehind": 2, "projection": "sum"})
    assert ref.source_name == "capital"
    assert ref.look_behind == 2
    assert ref.projection == "sum"


@pytest.mark.parametrize("spelling", ["avg", "AVG", "average", "mean"])
def test_average_aliases(spelling):
    assert DependencyReference(source_name="x", projection=spelling).projection == "average"


def test_period_index():
    ref = DependencyReference(source_name="x", look_behind=3)
    assert ref.period_index(5) == 2
    assert ref.period_index(1) == -2


def test_legacy_mapping_keys_are_accepted():
    ref = coerce_reference({"name": "capital", "lookBehind": 1, "type": "avg"})
    assert ref == DependencyReference(source_name="capital", look_behind=1, projection="average")


def test_bare_name():
    assert coerce_reference("rate") == DependencyReference(source_name="rate")


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "x", "lookBehind": -1},
        {"name": "x", "type": "median"},
        {"name": ""},
        {"lookBehind": 1},
        {"name": "x", "skipTotal": True},
        42,
    ],
)
def test_malformed_references_are_rejected(raw):
    with pytest.raises(VariableDefinitionError):
        coerce_reference(raw)


def test_dependencies_must_be_a_list():
    with pytest.raises(VariableDefinitionError):
        coerce_references("capital")
    assert coerce_references(None) == []


def test_derived_variable_coerces_dependencies():
    var = DerivedVariable(name="interest", compute=lambda c: c, dependencies=[{"name": "capital", "lookBehind": 1}])
    assert var.kind == VariableKind.DERIVED
    assert var.dependencies == (DependencyReference(source_name="capital", look_behind=1),)
    assert var.source_names == ["capital"]
    assert var.include_in_total is True
    assert var.hidden is False


def test_variable_requires_name_and_callable():
    with pytest.raises(VariableDefinitionError):
        ExternalVariable(name="", compute=lambda: 1)
    with pytest.raises(VariableDefinitionError):
        ExternalVariable(name="rate", compute=0.0087)


def test_derived_variable_is_hashable():
    def compute(c):
        return c

    var = DerivedVariable(name="interest", compute=compute, dependencies=["capital", {"name": "rate"}])
    assert isinstance(var.dependencies, tuple)
    same = DerivedVariable(name="interest", compute=compute, dependencies=("capital", "rate"))
    assert hash(var) == hash(same)
    assert len({var, same}) == 1
