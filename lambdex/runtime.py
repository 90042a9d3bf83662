"""
Native runtime for compiled expressions.

LAMBDEX - Lambdify Expressions

This module provides the s-expression primitives shared by the translator
and the closure builder, and the runtime namespace that maps callable
identifiers to native handlers.

A handler receives the list of evaluated arguments and returns a value:

    RUNTIME["+"]([1, 2, 3])   # => 6
    RUNTIME["sin"]([0.0])     # => 0.0
"""

from types import MappingProxyType
from typing import Any, List, Union, Optional, Callable, Dict, Mapping
from fractions import Fraction
import cmath
import math
import numbers
import operator

# Type aliases
ExprType = Union[int, float, complex, Fraction, str, List]
NumericType = Union[int, float, complex, Fraction]
Handler = Callable[[List[Any]], Any]
RuntimeType = Mapping[str, Handler]


# ============================================================
# Primitive Operations (Lisp-like list operations)
# ============================================================

def car(lst: List) -> Any:
    """
    Return the first element of a list (head).

    Raises:
        TypeError: If argument is not a list
        ValueError: If list is empty
    """
    if not isinstance(lst, list):
        raise TypeError("car: argument must be a list")
    if not lst:
        raise ValueError("car: argument is an empty list")
    return lst[0]


def cdr(lst: List) -> List:
    """Return all but the first element of a list (tail)."""
    if not isinstance(lst, list):
        raise TypeError("cdr: argument must be a list")
    return lst[1:] if lst else []


def compound(exp: ExprType) -> bool:
    """Check if an expression is a call (a list)."""
    return isinstance(exp, list)


def constant(exp: ExprType) -> bool:
    """
    Check if an expression is a literal.

    Any number counts: int, float, complex, Fraction and bool
    (and numpy scalars, which register with the numbers ABCs).
    """
    return isinstance(exp, numbers.Number)


def variable(exp: ExprType) -> bool:
    """Check if an expression is a variable reference (string)."""
    return isinstance(exp, str)


# ============================================================
# Handler Builders
# ============================================================

def _check_arity(name: str, args: List, expected: int) -> None:
    if len(args) != expected:
        raise TypeError(
            f"{name}() takes {expected} argument{'s' if expected != 1 else ''} "
            f"but {len(args)} were given"
        )


def nary_fold(
    identity: NumericType,
    binary_op: Callable[[Any, Any], Any],
    unary: Optional[Callable[[Any], Any]] = None,
) -> Handler:
    """Create an n-ary handler with identity element.

    Args:
        identity: Value for 0-arity, e.g., 0 for +, 1 for *
        binary_op: Binary operation for folding
        unary: Optional special unary behavior (defaults to identity)

    Examples:
        nary_fold(0, operator.add)  # (+) = 0, (+ x) = x, (+ x y z) = x+y+z
        nary_fold(1, operator.mul)  # (*) = 1, (* x) = x, (* x y z) = x*y*z
    """
    def handler(args: List[Any]) -> Any:
        if len(args) == 0:
            return identity
        if len(args) == 1:
            return unary(args[0]) if unary else args[0]
        result = args[0]
        for a in args[1:]:
            result = binary_op(result, a)
        return result
    return handler


def variadic(f: Callable[..., Any], name: Optional[str] = None) -> Handler:
    """Create a handler that needs at least one argument (e.g., min, max)."""
    label = name or getattr(f, "__name__", "function")

    def handler(args: List[Any]) -> Any:
        if not args:
            raise TypeError(f"{label}() expected at least 1 argument, got 0")
        return f(*args)
    return handler


def unary_only(f: Callable[[Any], Any], name: Optional[str] = None) -> Handler:
    """Create a unary-only handler (e.g., sin, cos, exp)."""
    label = name or getattr(f, "__name__", "function")

    def handler(args: List[Any]) -> Any:
        _check_arity(label, args, 1)
        return f(args[0])
    return handler


def binary_only(f: Callable[[Any, Any], Any], name: Optional[str] = None) -> Handler:
    """Create a binary-only handler (e.g., /, ^, atan2)."""
    label = name or getattr(f, "__name__", "function")

    def handler(args: List[Any]) -> Any:
        _check_arity(label, args, 2)
        return f(args[0], args[1])
    return handler


def positional(f: Callable[..., Any]) -> Handler:
    """Adapt an ordinary Python callable to the handler convention."""
    def handler(args: List[Any]) -> Any:
        return f(*args)
    handler.__name__ = getattr(f, "__name__", "handler")
    return handler


def special_minus() -> Handler:
    """Special handler for subtraction: (-) = 0, (- x) = -x, (- x y) = x-y."""
    def handler(args: List[Any]) -> Any:
        if len(args) == 0:
            return 0
        if len(args) == 1:
            return -args[0]
        if len(args) == 2:
            return args[0] - args[1]
        raise TypeError(f"-() takes at most 2 arguments but {len(args)} were given")
    return handler


def elementary(name: str) -> Handler:
    """Unary handler that uses cmath for complex arguments and math otherwise.

    Examples:
        elementary("sqrt")([4])    # => 2.0
        elementary("sqrt")([-4j])  # => (1.4142135623730951-1.4142135623730951j)
    """
    real_fn = getattr(math, name)
    complex_fn = getattr(cmath, name)

    def fn(x):
        if isinstance(x, complex):
            return complex_fn(x)
        return real_fn(x)
    fn.__name__ = name
    return unary_only(fn, name)


def _reciprocal(name: str) -> Callable[[Any], Any]:
    base = getattr(cmath, name)
    real_base = getattr(math, name)

    def fn(x):
        if isinstance(x, complex):
            return 1 / base(x)
        return 1 / real_base(x)
    return fn


def _inverse_reciprocal(name: str) -> Callable[[Any], Any]:
    base = getattr(cmath, name)
    real_base = getattr(math, name)

    def fn(x):
        if isinstance(x, complex):
            return base(1 / x)
        return real_base(1 / x)
    return fn


def _sign(x):
    if isinstance(x, complex):
        return x / abs(x) if x else 0
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def _identity(args: List[Any]) -> Any:
    # Extra arguments, such as the generators of a Poly, are ignored
    if not args:
        raise TypeError("identity() takes at least 1 argument but 0 were given")
    return args[0]


def _heaviside(args: List[Any]) -> Any:
    # (heaviside x) or (heaviside x h0); h0 is the value at zero
    if len(args) not in (1, 2):
        raise TypeError(f"heaviside() takes 1 or 2 arguments but {len(args)} were given")
    x = args[0]
    at_zero = args[1] if len(args) == 2 else Fraction(1, 2)
    if x > 0:
        return 1
    if x < 0:
        return 0
    return at_zero


def _real(x):
    return x.real


def _imag(x):
    return x.imag


def _conjugate(x):
    return x.conjugate()


def _arg(x):
    return cmath.phase(x)


def _truediv(a, b):
    # int / int stays exact, matching Rational literals
    if isinstance(a, (int, Fraction)) and isinstance(b, (int, Fraction)) \
            and not isinstance(a, bool) and not isinstance(b, bool):
        return Fraction(a) / Fraction(b)
    return a / b


# ============================================================
# Standard Runtime Namespaces
# ============================================================

# Arithmetic runtime: basic arithmetic operators
ARITHMETIC_RUNTIME: Dict[str, Handler] = {
    "+": nary_fold(0, operator.add),
    "*": nary_fold(1, operator.mul),
    "-": special_minus(),
    "/": binary_only(_truediv, "/"),
    "^": binary_only(operator.pow, "^"),
}

# Math runtime: standard mathematical functions, under their SymPy names
MATH_RUNTIME: Dict[str, Handler] = {
    **ARITHMETIC_RUNTIME,
    "sin": elementary("sin"),
    "cos": elementary("cos"),
    "tan": elementary("tan"),
    "cot": unary_only(_reciprocal("tan"), "cot"),
    "sec": unary_only(_reciprocal("cos"), "sec"),
    "csc": unary_only(_reciprocal("sin"), "csc"),
    "asin": elementary("asin"),
    "acos": elementary("acos"),
    "atan": elementary("atan"),
    "acot": unary_only(_inverse_reciprocal("atan"), "acot"),
    "asec": unary_only(_inverse_reciprocal("acos"), "asec"),
    "acsc": unary_only(_inverse_reciprocal("asin"), "acsc"),
    "atan2": binary_only(math.atan2),
    "sinh": elementary("sinh"),
    "cosh": elementary("cosh"),
    "tanh": elementary("tanh"),
    "asinh": elementary("asinh"),
    "acosh": elementary("acosh"),
    "atanh": elementary("atanh"),
    "exp": elementary("exp"),
    "log": elementary("log"),
    "sqrt": elementary("sqrt"),
    "abs": unary_only(abs),
    "sign": unary_only(_sign, "sign"),
    "floor": unary_only(math.floor),
    "ceiling": unary_only(math.ceil, "ceiling"),
    "factorial": unary_only(math.factorial),
    "gamma": unary_only(math.gamma),
    "loggamma": unary_only(math.lgamma, "loggamma"),
    "erf": unary_only(math.erf),
    "erfc": unary_only(math.erfc),
    "min": variadic(min),
    "max": variadic(max),
    "real": unary_only(_real, "real"),
    "imag": unary_only(_imag, "imag"),
    "conjugate": unary_only(_conjugate, "conjugate"),
    "arg": unary_only(_arg, "arg"),
    "heaviside": _heaviside,
    "identity": _identity,
}

# Predicate runtime: comparisons and logic for relational expressions
PREDICATE_RUNTIME: Dict[str, Handler] = {
    ">": binary_only(operator.gt, ">"),
    "<": binary_only(operator.lt, "<"),
    ">=": binary_only(operator.ge, ">="),
    "<=": binary_only(operator.le, "<="),
    "==": binary_only(operator.eq, "=="),
    "!=": binary_only(operator.ne, "!="),
    "not": unary_only(operator.not_, "not"),
    "and": nary_fold(True, lambda a, b: a and b),
    "or": nary_fold(False, lambda a, b: a or b),
}

# Default runtime: everything above, read-only
RUNTIME: RuntimeType = MappingProxyType({
    **MATH_RUNTIME,
    **PREDICATE_RUNTIME,
})


def merge_runtime(extra: Optional[Mapping[str, Handler]] = None) -> RuntimeType:
    """
    Combine the default runtime with extra handlers.

    The defaults are never modified; extra handlers win on name collision.
    """
    if not extra:
        return RUNTIME
    return MappingProxyType({**RUNTIME, **extra})
