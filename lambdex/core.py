"""
Top-level lambdify().

    from sympy import symbols, sin
    from lambdex import lambdify

    x, y = symbols("x y")
    lambdify(x**2)(2)                  # => 4
    lambdify(x*y**2)(2, 3)             # => 18, default order (x, y)
    lambdify(x*y**2, [y, x])(3, 2)     # => 18, y=3 and x=2

Evaluating the result never calls into SymPy, so it is much faster than
substituting into the expression.
"""

from typing import Any, Mapping, Optional, Sequence

from sympy import Basic, sympify

from .compiler import CompiledFunction, compile_expr
from .nodes import free_variables
from .results import Failure
from .runtime import Handler
from .tables import CallableId
from .translator import translate


class NotLambdifiable(ValueError):
    """
    The expression cannot be turned into a native function.

    Raised for every kind of failure alike. Callers are expected to fall
    back to evaluating the expression with SymPy. The reason attribute
    describes what went wrong, for humans only.
    """

    def __init__(self, reason: str = ""):
        super().__init__("Expression does not lambdify")
        self.reason = reason


def lambdify(
    expr: Any,
    params: Optional[Sequence] = None,
    *,
    values: Optional[Mapping[str, Any]] = None,
    fns: Optional[Mapping[str, CallableId]] = None,
    runtime: Optional[Mapping[str, Handler]] = None,
) -> CompiledFunction:
    """
    Turn a SymPy expression into a native Python function.

    Args:
        expr: SymPy expression (anything sympify() accepts is converted)
        params: Parameter order. Defaults to the free symbols of expr in
            SymPy's canonical order. Extra parameters are allowed; missing
            ones only fail when the function evaluates them.
        values: Extra leaf tag -> number entries, e.g. {"Pi": 3.14}
        fns: Extra tag -> runtime name or Python callable entries,
            e.g. {"sinc": my_sinc}
        runtime: Extra runtime name -> handler entries

    Returns:
        CompiledFunction called with positional arguments in params order

    Raises:
        NotLambdifiable: If any part of the translation fails, including
            trees nested deeper than max_depth()
    """
    try:
        if not isinstance(expr, Basic):
            expr = sympify(expr)
        if params is None:
            params = free_variables(expr)
        target = translate(expr, values=values, fns=fns)
        if isinstance(target, Failure):
            raise NotLambdifiable(str(target))
        compiled = compile_expr(target, params, runtime=runtime)
        if isinstance(compiled, Failure):
            raise NotLambdifiable(str(compiled))
    except NotLambdifiable:
        raise
    except Exception as e:
        raise NotLambdifiable(f"{type(e).__name__}: {e}") from None
    return compiled
