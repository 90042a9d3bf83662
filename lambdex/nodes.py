"""
Read-only view over SymPy expression nodes.

Every SymPy node is identified by a tag, the name of its class
(``node.func.__name__``), and carries its children in ``node.args``:

    x**2 + 1   ->  Add(Pow(Symbol('x'), Integer(2)), One())

The functions here are the only place the rest of the package touches
SymPy objects. They never modify a node.
"""

from enum import Enum, auto
from typing import Any, List, Mapping, Tuple

from sympy import ordered

# Leaf tags with a special translation rule
SYMBOL_TAGS = frozenset({"Symbol", "Dummy"})
INTEGER_TAGS = frozenset({"Integer"})
FLOAT_TAGS = frozenset({"Float"})
RATIONAL_TAGS = frozenset({"Rational"})


class NodeKind(Enum):
    """How a node is translated, in order of precedence."""

    SYMBOL = auto()  # variable reference
    INTEGER = auto()  # exact int literal
    FLOAT = auto()  # float literal
    RATIONAL = auto()  # exact Fraction literal
    CONSTANT = auto()  # literal from the value table
    CALL = auto()  # call over translated children
    UNKNOWN = auto()  # childless tag nobody knows


def tag(node: Any) -> str:
    """Return the node's tag, e.g. "Add", "Symbol", "Integer"."""
    return node.func.__name__


def children(node: Any) -> Tuple:
    """Return the node's ordered children (empty for leaves)."""
    return tuple(node.args)


def as_string(node: Any) -> str:
    """Return the node's rendered form, used for symbol names."""
    return str(node)


def integer_value(node: Any) -> int:
    return int(node)


def float_value(node: Any) -> float:
    return float(node)


def rational_parts(node: Any) -> Tuple[int, int]:
    """
    Return (numerator, denominator) of a rational node as Python ints.

    Raises:
        TypeError: If either part is not an integer
    """
    p, q = node.as_numer_denom()
    if not (p.is_Integer and q.is_Integer):
        raise TypeError(f"rational parts of {node} are not integers: {p}, {q}")
    return int(p), int(q)


def free_variables(node: Any) -> List:
    """
    Return the node's free symbols in SymPy's canonical order.

    The order is stable between runs, unlike iterating free_symbols directly.
    """
    return list(ordered(node.free_symbols))


def classify(
    node_tag: str,
    nchildren: int,
    values: Mapping[str, Any],
    fns: Mapping[str, Any],
) -> NodeKind:
    """
    Decide how a node is translated.

    Numeric leaves come before the tables because they carry a payload
    rather than a resolvable name. The value table comes before the call
    rule so that tags like "Pi" are not treated as zero-argument calls.
    """
    if node_tag in SYMBOL_TAGS:
        return NodeKind.SYMBOL
    if node_tag in INTEGER_TAGS:
        return NodeKind.INTEGER
    if node_tag in FLOAT_TAGS:
        return NodeKind.FLOAT
    if node_tag in RATIONAL_TAGS:
        return NodeKind.RATIONAL
    if node_tag in values:
        return NodeKind.CONSTANT
    if nchildren > 0 or node_tag in fns:
        return NodeKind.CALL
    return NodeKind.UNKNOWN
