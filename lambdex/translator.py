"""
SymPy tree to target expression translation.

    translate(x**2 + sin(y))  # => ["+", ["^", "x", 2], ["sin", "y"]]

The result holds only strings, numbers and lists, so nothing built from
it ever calls back into SymPy. A node that cannot be translated yields a
NotTranslatable result instead of raising.
"""

import sys
from fractions import Fraction
from typing import Any, Mapping, Optional, Union

from .nodes import (
    NodeKind, as_string, children, classify, float_value, integer_value,
    rational_parts, tag,
)
from .results import Failure, NotTranslatable
from .runtime import ExprType, constant
from .tables import CallableId, merge_functions, merge_values, resolve


def max_depth() -> int:
    """Deepest tree the translator will walk, a third of the recursion limit."""
    return sys.getrecursionlimit() // 3


def translate(
    node: Any,
    values: Optional[Mapping[str, Any]] = None,
    fns: Optional[Mapping[str, CallableId]] = None,
) -> Union[ExprType, NotTranslatable]:
    """
    Translate a SymPy node into a target expression.

    Args:
        node: The SymPy expression
        values: Extra leaf tag -> literal entries (win over VALUES)
        fns: Extra tag -> callable identifier entries (win over FUNCTIONS).
            An identifier is a runtime name or a Python callable.

    Returns:
        The target expression, or NotTranslatable

    Examples:
        translate(Symbol("x"))              # => "x"
        translate(Rational(1, 3))           # => Fraction(1, 3)
        translate(pi)                       # => 3.141592653589793
        translate(x*y, fns={"Mul": "max"})  # => ["max", "x", "y"]
    """
    return translate_node(node, merge_values(values), merge_functions(fns))


def translate_node(
    node: Any,
    values: Mapping[str, Any],
    fns: Mapping[str, CallableId],
    depth: int = 0,
    limit: Optional[int] = None,
) -> Union[ExprType, NotTranslatable]:
    """Translate with already merged tables."""
    if limit is None:
        limit = max_depth()
    if depth > limit:
        return NotTranslatable(f"expression nested deeper than {limit} levels")

    try:
        node_tag = tag(node)
        args = children(node)
    except Exception as e:
        return NotTranslatable(f"cannot read node {node!r}: {e}")

    kind = classify(node_tag, len(args), values, fns)

    if kind is NodeKind.SYMBOL:
        try:
            return as_string(node)
        except Exception as e:
            return NotTranslatable(f"cannot render symbol: {e}")

    if kind is NodeKind.INTEGER or kind is NodeKind.FLOAT:
        read = integer_value if kind is NodeKind.INTEGER else float_value
        try:
            return read(node)
        except Exception as e:
            return NotTranslatable(f"cannot read {node_tag} value: {e}")

    if kind is NodeKind.RATIONAL:
        try:
            p, q = rational_parts(node)
            return Fraction(p, q)
        except Exception as e:
            return NotTranslatable(f"malformed Rational: {e}")

    if kind is NodeKind.CONSTANT:
        # Children of a constant tag are ignored
        value = values[node_tag]
        if not constant(value):
            return NotTranslatable(f"value for {node_tag!r} is not a number: {value!r}")
        return value

    if kind is NodeKind.CALL:
        head = resolve(node_tag, fns)
        if not (isinstance(head, str) or callable(head)):
            return NotTranslatable(
                f"function entry for {node_tag!r} is not a name or callable: {head!r}")
        translated = [head]
        for child in args:
            result = translate_node(child, values, fns, depth + 1, limit)
            if isinstance(result, Failure):
                return result
            translated.append(result)
        return translated

    return NotTranslatable(f"no rule for leaf {node_tag!r}")
