"""
LAMBDEX - Lambdify Expressions

Turn SymPy expressions into native Python functions that evaluate without
calling back into SymPy.

Quick Start:
    from sympy import symbols, sin
    from lambdex import lambdify

    x, y = symbols("x y")
    f = lambdify(sin(x) * y**2)      # parameters default to (x, y)
    f(0.5, 3)                        # => 4.314763...

    g = lambdify(x * y**2, [y, x])   # choose the parameter order
    g(3, 2)                          # => 18

How it works:
    1. translate() walks the SymPy tree and builds a target expression,
       an s-expression made of strings, numbers and lists:
           x*y**2  ->  ["*", "x", ["^", "y", 2]]
    2. compile_expr() turns the target expression into nested closures
       with a fixed positional parameter list.

Tables:
    VALUES     - leaf tag -> literal, e.g. "Pi" -> math.pi
    FUNCTIONS  - tag -> runtime name, e.g. "Add" -> "+"; other tags are
                 their own name ("sin" -> "sin")
    RUNTIME    - runtime name -> handler receiving the argument list

    All three are read-only. Pass values=, fns= or runtime= to lambdify()
    to extend or override them for one call:

        lambdify(sinc(x), fns={"sinc": my_sinc})

Errors:
    lambdify() raises NotLambdifiable for anything it cannot handle. The
    lower-level translate() and compile_expr() return NotTranslatable or
    CompilationFailed results instead of raising.
"""

__version__ = "0.1.0"

# Runtime namespace and s-expression primitives
from .runtime import (
    ExprType,
    NumericType,
    Handler,
    RuntimeType,
    # Handler builders
    nary_fold,
    variadic,
    unary_only,
    binary_only,
    positional,
    special_minus,
    elementary,
    # Standard runtimes
    ARITHMETIC_RUNTIME,
    MATH_RUNTIME,
    PREDICATE_RUNTIME,
    RUNTIME,
)

# Tag tables
from .tables import (
    CallableId,
    VALUES,
    FUNCTIONS,
)

# Results
from .results import (
    Failure,
    NotTranslatable,
    CompilationFailed,
)

# Target expressions
from .sexpr import (
    E,
    parse_sexpr,
    format_sexpr,
    expr_depth,
    expr_variables,
)

# Foreign nodes
from .nodes import NodeKind, free_variables

# Pipeline
from .translator import translate, max_depth
from .compiler import CompiledFunction, compile_expr
from .core import NotLambdifiable, lambdify

# Public API
__all__ = [
    # Version
    "__version__",
    # Types
    "ExprType",
    "NumericType",
    "Handler",
    "RuntimeType",
    "CallableId",
    # Handler builders
    "nary_fold",
    "variadic",
    "unary_only",
    "binary_only",
    "positional",
    "special_minus",
    "elementary",
    # Standard runtimes
    "ARITHMETIC_RUNTIME",
    "MATH_RUNTIME",
    "PREDICATE_RUNTIME",
    "RUNTIME",
    # Tables
    "VALUES",
    "FUNCTIONS",
    # Results
    "Failure",
    "NotTranslatable",
    "CompilationFailed",
    # Expression builder
    "E",
    "parse_sexpr",
    "format_sexpr",
    "expr_depth",
    "expr_variables",
    # Foreign nodes
    "NodeKind",
    "free_variables",
    # Pipeline
    "translate",
    "max_depth",
    "CompiledFunction",
    "compile_expr",
    "NotLambdifiable",
    "lambdify",
]
