"""
Sampling helpers for plotting symbolic expressions.

These functions turn expressions (or ordinary callables) into numpy arrays
that any plotting library can draw:

    from sympy import symbols, sin, cos
    from lambdex.plotting import sample, parametric, grid, VectorField

    x, y = symbols("x y")
    xs, ys = sample(x**2 - 2*x, 0, 4)             # line plot over [0, 4]
    us, vs = parametric((sin(2*x), cos(3*x)), 0, 6.28)
    Z = grid(np.linspace(0, 5), np.linspace(0, 5), x*y)   # contour/surface
    X, Y, U, V = VectorField(lambda x, y: 3*y*x).quiver()

Expressions go through lambdify(); when that raises NotLambdifiable the
expression is evaluated with SymPy instead, which is slower but works.
Points where evaluation fails with a domain or arithmetic error, or gives a
non-real value, become nan so the plot shows a gap.
"""

from typing import Any, Callable, Optional, Sequence, Tuple

import numpy as np
from sympy import Basic, Symbol, sympify

from .core import NotLambdifiable, lambdify
from .nodes import free_variables


def as_function(obj: Any, params: Optional[Sequence] = None, arity: int = 1) -> Callable:
    """
    Return a callable for an expression, callable or number.

    Args:
        obj: SymPy expression, Python callable, or number
        params: Parameter order for expressions (default: free symbols)
        arity: How many positional arguments the caller will pass. An
            expression with fewer free symbols gets unused trailing
            parameters so it can still be called that way.
    """
    if isinstance(obj, Basic):
        expr = obj
    elif callable(obj):
        return obj
    else:
        expr = sympify(obj)

    if params is None:
        params = [str(s) for s in free_variables(expr)]
        taken = set(params)
        i = 0
        while len(params) < arity:
            name = f"_{i}"
            if name not in taken:
                params.append(name)
            i += 1

    try:
        return lambdify(expr, params)
    except NotLambdifiable:
        return _sympy_function(expr, params)


def _sympy_function(expr: Basic, params: Sequence) -> Callable:
    """Evaluate through SymPy substitution, for expressions lambdify refuses."""
    symbols = [Symbol(p) if isinstance(p, str) else p for p in params]

    def evaluate(*args):
        return expr.subs(dict(zip(symbols, args))).evalf()
    return evaluate


def _as_real(value: Any) -> float:
    try:
        c = complex(value)
    except (TypeError, ValueError):
        return float("nan")
    if c.imag != 0:
        return float("nan")
    return c.real


def _point(f: Callable, *args) -> float:
    try:
        return _as_real(f(*args))
    except (ArithmeticError, ValueError):
        return float("nan")


def sample(obj: Any, a: float, b: float, n: int = 100) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample a function of one variable over [a, b].

    Returns:
        (xs, ys) arrays of length n
    """
    f = as_function(obj)
    xs = np.linspace(a, b, n)
    ys = np.array([_point(f, x) for x in xs.tolist()], dtype=float)
    return xs, ys


def parametric(objs: Sequence[Any], a: float, b: float, n: int = 100) -> Tuple[np.ndarray, ...]:
    """
    Sample a 2d or 3d parametric curve over [a, b].

    Each component is a function of the curve parameter.

    Returns:
        One array of length n per component
    """
    if len(objs) not in (2, 3):
        raise ValueError(f"parametric curves need 2 or 3 components, got {len(objs)}")
    ts = np.linspace(a, b, n).tolist()
    return tuple(
        np.array([_point(f, t) for t in ts], dtype=float)
        for f in (as_function(obj) for obj in objs)
    )


def grid(xs: Sequence[float], ys: Sequence[float], obj: Any) -> np.ndarray:
    """
    Evaluate a function of two variables on a grid.

    Returns:
        Z with Z[j, i] = f(xs[i], ys[j]), the layout contour and surface
        plots expect
    """
    f = as_function(obj, arity=2)
    xs = np.asarray(xs, dtype=float).tolist()
    ys = np.asarray(ys, dtype=float).tolist()
    return np.array([[_point(f, x, y) for x in xs] for y in ys], dtype=float)


class VectorField:
    """
    A vector field [fx(x, y), fy(x, y)] to draw as arrows.

    VectorField(F) with a single component draws the slope field of the
    ODE y' = F(x, y): fx is 1 everywhere and fy is F.

    Expressions must use two variables so they can be called with (x, y).
    An expression in y alone is called as y(x, y) with x bound to y's
    slot, so write it with both variables.

    Examples:
        field = VectorField(lambda x, y: np.sin(y), lambda x, y: np.cos(y))
        X, Y, U, V = field.quiver(xlims=(-6.28, 6.28), ylims=(-6.28, 6.28))
    """

    def __init__(self, fx: Any, fy: Any = None):
        if fy is None:
            fx, fy = (lambda x, y: 1.0), fx
        self.fx = as_function(fx, arity=2)
        self.fy = as_function(fy, arity=2)

    def quiver(
        self,
        xlims: Tuple[float, float] = (-5, 5),
        ylims: Tuple[float, float] = (-5, 5),
        n: int = 8,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Arrow positions and components over an n x n grid.

        Arrows are scaled so the longest one spans one grid cell.

        Returns:
            (x, y, u, v) arrays of length n*n
        """
        x = np.repeat(np.linspace(xlims[0], xlims[1], n), n)
        y = np.tile(np.linspace(ylims[0], ylims[1], n), n)

        u = np.array([_point(self.fx, a, b) for a, b in zip(x.tolist(), y.tolist())], dtype=float)
        v = np.array([_point(self.fy, a, b) for a, b in zip(x.tolist(), y.tolist())], dtype=float)

        delta = min((xlims[1] - xlims[0]) / n, (ylims[1] - ylims[0]) / n)
        norms = np.hypot(u, v)
        longest = np.nanmax(norms) if np.any(np.isfinite(norms)) else 0.0
        scale = delta / longest if np.isfinite(longest) and longest > 0 else 0.0

        return x, y, scale * u, scale * v

    def __repr__(self) -> str:
        return f"VectorField({self.fx!r}, {self.fy!r})"
