"""
Closure builder: target expression to Python callable.

compile_expr() walks a target expression once and turns every node into a
small closure over the argument tuple:

    "x"            -> lambda args: args[0]
    2              -> lambda args: 2
    ["+", a, b]    -> lambda args: RUNTIME["+"]([a(args), b(args)])

Call heads are resolved while building, so calling the result does no
name lookups. Variables missing from the parameter list are not an error
until the compiled function actually evaluates them.
"""

from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

from .results import CompilationFailed
from .runtime import (
    ExprType, Handler, car, cdr, compound, constant, merge_runtime,
    positional, variable,
)
from .sexpr import format_sexpr

Body = Callable[[Tuple], Any]


class _BuildError(Exception):
    """Raised inside the builder; converted to CompilationFailed."""


def _copy_structure(expr: ExprType) -> ExprType:
    # Lists are copied; heads and literals are shared
    if compound(expr):
        return [_copy_structure(e) for e in expr]
    return expr


class CompiledFunction:
    """
    A compiled expression with a fixed positional parameter list.

    Instances are immutable and hold no reference to the SymPy node the
    expression came from.

    Examples:
        f = compile_expr(["*", "x", ["^", "y", 2]], ["x", "y"])
        f(2, 3)        # => 18
        f.params       # => ("x", "y")
        f              # => CompiledFunction((x, y) -> (* x (^ y 2)))
    """

    __slots__ = ('_params', '_expr', '_body')

    def __init__(self, params: Tuple[str, ...], expr: ExprType, body: Body):
        object.__setattr__(self, '_params', params)
        object.__setattr__(self, '_expr', _copy_structure(expr))
        object.__setattr__(self, '_body', body)

    def __setattr__(self, name, value):
        raise AttributeError("CompiledFunction is immutable")

    @property
    def params(self) -> Tuple[str, ...]:
        """Parameter names, in call order."""
        return self._params

    @property
    def expr(self) -> ExprType:
        """A copy of the target expression this function evaluates."""
        return _copy_structure(self._expr)

    @property
    def arity(self) -> int:
        return len(self._params)

    def __call__(self, *args):
        if len(args) != len(self._params):
            raise TypeError(
                f"{self!r} takes {len(self._params)} positional argument"
                f"{'s' if len(self._params) != 1 else ''} but {len(args)} were given"
            )
        return self._body(args)

    def __repr__(self) -> str:
        return f"CompiledFunction(({', '.join(self._params)}) -> {format_sexpr(self._expr)})"


def compile_expr(
    expr: ExprType,
    params: Sequence,
    runtime: Optional[Mapping[str, Handler]] = None,
) -> Union[CompiledFunction, CompilationFailed]:
    """
    Build a callable from a target expression.

    Args:
        expr: Target expression (variable, literal or call list)
        params: Ordered parameter names; SymPy symbols are rendered with str()
        runtime: Extra identifier -> handler entries (win over RUNTIME)

    Returns:
        CompiledFunction, or CompilationFailed if a call head cannot be
        resolved, the parameters repeat, or the expression is malformed

    Examples:
        compile_expr(["^", "x", 2], ["x"])(3)           # => 9
        compile_expr("x", ["x", "unused"])(1, 2)        # => 1
        compile_expr(["nope", "x"], ["x"])              # => CompilationFailed(...)
    """
    names = tuple(str(p) for p in params)
    if len(set(names)) != len(names):
        duplicates = sorted({n for n in names if names.count(n) > 1})
        return CompilationFailed(f"duplicate parameters: {', '.join(duplicates)}")

    namespace = merge_runtime(runtime)
    positions = {name: i for i, name in enumerate(names)}

    try:
        body = _build(expr, positions, namespace)
    except _BuildError as e:
        return CompilationFailed(str(e))
    except RecursionError:
        return CompilationFailed("expression is nested too deeply")

    return CompiledFunction(names, expr, body)


def _build(expr: ExprType, positions: Mapping[str, int], namespace: Mapping[str, Handler]) -> Body:
    if variable(expr):
        return _load(expr, positions)

    if constant(expr):
        value = expr
        return lambda args: value

    if compound(expr):
        if not expr:
            raise _BuildError("empty call")
        func = _resolve_head(car(expr), namespace)
        operands = tuple(_build(sub, positions, namespace) for sub in cdr(expr))
        return _call(func, operands)

    raise _BuildError(f"not an expression: {expr!r}")


def _load(name: str, positions: Mapping[str, int]) -> Body:
    if name in positions:
        index = positions[name]
        return lambda args: args[index]

    def unbound(args):
        raise NameError(f"name {name!r} is not a parameter of this function")
    return unbound


def _call(func: Handler, operands: Tuple[Body, ...]) -> Body:
    # Common arities get their own closures
    if len(operands) == 1:
        (a,) = operands
        return lambda args: func([a(args)])
    if len(operands) == 2:
        a, b = operands
        return lambda args: func([a(args), b(args)])
    return lambda args: func([op(args) for op in operands])


def _resolve_head(head: Any, namespace: Mapping[str, Handler]) -> Handler:
    if isinstance(head, str):
        if head not in namespace:
            raise _BuildError(f"no runtime function named {head!r}")
        return namespace[head]
    if callable(head):
        return positional(head)
    raise _BuildError(f"call head is not a name or callable: {head!r}")
