"""
Tag tables used by the translator.

VALUES maps leaf tags to literal values:

    "Pi" -> math.pi, "ImaginaryUnit" -> 1j

FUNCTIONS maps interior tags to callable identifiers in the runtime
namespace (see lambdex.runtime). A tag missing from FUNCTIONS is its own
identifier, so "sin" resolves to "sin":

    "Add" -> "+", "Abs" -> "abs"

Both tables are read-only. Per-call overrides are merged into a new
mapping; the defaults are never changed.
"""

from fractions import Fraction
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union
import math

CallableId = Union[str, Callable[..., Any]]

# SymPy singleton and constant leaves
VALUES: Mapping[str, Any] = MappingProxyType({
    "Zero": 0,
    "One": 1,
    "NegativeOne": -1,
    "Half": Fraction(1, 2),
    "Pi": math.pi,
    "Exp1": math.e,
    "Infinity": math.inf,
    "NegativeInfinity": -math.inf,
    "ComplexInfinity": math.inf,
    "ImaginaryUnit": 1j,
    "NaN": math.nan,
    "EulerGamma": 0.5772156649015329,
    "GoldenRatio": (1 + math.sqrt(5)) / 2,
    "Catalan": 0.915965594177219,
    "BooleanTrue": True,
    "BooleanFalse": False,
})

# SymPy class names whose runtime name differs
FUNCTIONS: Mapping[str, CallableId] = MappingProxyType({
    # Arithmetic
    "Add": "+",
    "Sub": "-",
    "Mul": "*",
    "Div": "/",
    "Pow": "^",
    # Complex parts and friends
    "re": "real",
    "im": "imag",
    "Abs": "abs",
    "Min": "min",
    "Max": "max",
    "Poly": "identity",
    "Heaviside": "heaviside",
    # Relations
    "StrictLessThan": "<",
    "LessThan": "<=",
    "StrictGreaterThan": ">",
    "GreaterThan": ">=",
    "Equality": "==",
    "Unequality": "!=",
    # Logic
    "And": "and",
    "Or": "or",
    "Not": "not",
})


def merge_values(overrides: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    """Combine VALUES with caller overrides; overrides win key-for-key."""
    if not overrides:
        return VALUES
    return MappingProxyType({**VALUES, **overrides})


def merge_functions(overrides: Optional[Mapping[str, CallableId]] = None) -> Mapping[str, CallableId]:
    """Combine FUNCTIONS with caller overrides; overrides win key-for-key."""
    if not overrides:
        return FUNCTIONS
    return MappingProxyType({**FUNCTIONS, **overrides})


def resolve(node_tag: str, fns: Mapping[str, CallableId]) -> CallableId:
    """
    Return the callable identifier for a tag.

    Examples:
        resolve("Add", FUNCTIONS)  # => "+"
        resolve("sin", FUNCTIONS)  # => "sin"
    """
    return fns.get(node_tag, node_tag)
