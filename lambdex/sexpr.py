"""
Target expressions as s-expressions.

The translator produces plain Python data:

    "x"                      - variable reference
    2, 0.5, Fraction(1, 3)   - literal
    ["+", "x", 1]            - call of "+" on the translated children

This module builds, parses and prints that form. It is handy for writing
expressions by hand and for showing what a compiled function evaluates:

    from lambdex import E, compile_expr

    f = compile_expr(E("(+ x (^ y 2))"), ["x", "y"])
    f(1, 3)  # => 10
"""

from fractions import Fraction
from typing import List, Tuple, Union

from .runtime import ExprType, compound, variable


# ============================================================
# Expression Builder
# ============================================================

class _ExprBuilder:
    """
    Expression builder for target expressions.

    Examples:
        from lambdex import E

        # Parse s-expression string
        expr = E("(+ x (* 2 y))")

        # Build programmatically with E.op()
        expr = E.op("+", "x", E.op("*", 2, "y"))

        # Create variables
        x, y = E.vars("x", "y")
        expr = E.op("+", x, E.op("*", 2, y))
    """

    def __call__(self, s: str) -> ExprType:
        """
        Parse an s-expression string.

        Examples:
            E("(+ x 1)") -> ["+", "x", 1]
            E("(* 1/3 x)") -> ["*", Fraction(1, 3), "x"]
        """
        return parse_sexpr(s)

    def op(self, name, *args) -> List:
        """
        Build a call with the given callable identifier and arguments.

        Examples:
            E.op("+", "x", 1) -> ["+", "x", 1]
            E.op("sin", E.op("*", 2, "x")) -> ["sin", ["*", 2, "x"]]
        """
        return [name] + list(args)

    def var(self, name: str) -> str:
        """
        Create a variable.

        Variables are just strings. This method exists for clarity.
        """
        return name

    def vars(self, *names: str) -> Tuple[str, ...]:
        """
        Create multiple variables for unpacking.

        Example:
            x, y, z = E.vars("x", "y", "z")
        """
        return names

    def const(self, value: Union[int, float, complex, Fraction]) -> Union[int, float, complex, Fraction]:
        """Create a literal. Literals are just numbers."""
        return value

    def __repr__(self) -> str:
        return "E (expression builder)"


# Singleton instance
E = _ExprBuilder()


def _parse_atom(s: str) -> ExprType:
    # Try number first: int, float, p/q, complex
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        pass
    if '/' in s:
        try:
            return Fraction(s)
        except ValueError:
            pass
    # "j" alone is a variable, "2j" is imaginary
    if s.endswith('j') and s[0] in '0123456789.':
        try:
            return complex(s)
        except ValueError:
            pass
    # Plain symbol
    return s


def _tokenize(s: str) -> List[str]:
    return s.replace('(', ' ( ').replace(')', ' ) ').split()


def _read(tokens: List[str], i: int) -> Tuple[ExprType, int]:
    # Returns the expression starting at tokens[i] and the index after it
    token = tokens[i]
    if token == ')':
        raise ValueError("unexpected ')'")
    if token != '(':
        return _parse_atom(token), i + 1

    items = []
    i += 1
    while i < len(tokens):
        if tokens[i] == ')':
            return items, i + 1
        item, i = _read(tokens, i)
        items.append(item)
    raise ValueError("missing ')'")


def parse_sexpr(s: str) -> ExprType:
    """
    Parse an S-expression string into a nested list.

    Examples:
        "(+ x 1)" -> ["+", "x", 1]
        "(^ x 1/2)" -> ["^", "x", Fraction(1, 2)]
        "(* 2j x)" -> ["*", 2j, "x"]

    Raises:
        ValueError: If the input is empty, has unbalanced parentheses,
            or holds more than one expression
    """
    tokens = _tokenize(s)
    if not tokens:
        raise ValueError("empty s-expression")
    expr, end = _read(tokens, 0)
    if end != len(tokens):
        raise ValueError(f"unexpected input after expression: {' '.join(tokens[end:])!r}")
    return expr


def format_sexpr(expr: ExprType) -> str:
    """
    Format a target expression as an S-expression string.

    Examples:
        ["+", "x", 1] -> "(+ x 1)"
        ["*", Fraction(1, 3), "x"] -> "(* 1/3 x)"
        [math.sqrt, "x"] -> "(sqrt x)"
    """
    if isinstance(expr, list):
        if not expr:
            return "()"
        parts = [format_sexpr(e) for e in expr]
        return "(" + " ".join(parts) + ")"
    elif callable(expr):
        return getattr(expr, "__name__", repr(expr))
    else:
        return str(expr)


def expr_depth(expr: ExprType) -> int:
    """
    Nesting depth of an expression.

    Examples:
        expr_depth("x") -> 0
        expr_depth(["+", ["*", "a", "b"], "c"]) -> 2
    """
    if not compound(expr):
        return 0
    return 1 + max((expr_depth(sub) for sub in expr[1:]), default=0)


def expr_variables(expr: ExprType) -> List[str]:
    """
    Variable names referenced by an expression, in order of first occurrence.

    Call heads are identifiers, not variables, and are skipped.

    Example:
        expr_variables(["+", "y", ["*", "x", "y"]]) -> ["y", "x"]
    """
    seen: List[str] = []

    def loop(e):
        if variable(e):
            if e not in seen:
                seen.append(e)
        elif compound(e):
            for sub in e[1:]:
                loop(sub)

    loop(expr)
    return seen
