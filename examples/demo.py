#!/usr/bin/env python3
"""
LAMBDEX Feature Demonstration

This script walks through the main features of the lambdex library.
"""

import math
import time

from sympy import Function, Rational, cos, exp, pi, sin, symbols, zoo

from lambdex import (
    NotLambdifiable, compile_expr, format_sexpr, lambdify, translate, E,
)
from lambdex.plotting import VectorField, sample


def section(title: str):
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def demo_basic_usage():
    """Demonstrate basic lambdify usage."""
    section("Basic Usage")

    x, y = symbols("x y")

    examples = [
        (x**2, (2,)),
        (x * y**2, (2, 3)),
        (sin(x) + cos(x), (0.5,)),
        (Rational(1, 3) * x, (1,)),
    ]

    for expr, args in examples:
        f = lambdify(expr)
        print(f"  {expr} at {args} => {f(*args)!r}")


def demo_parameter_order():
    """Demonstrate choosing the parameter order."""
    section("Parameter Order")

    x, y = symbols("x y")
    expr = x * y**2

    f = lambdify(expr)
    g = lambdify(expr, [y, x])
    print(f"  default order {f.params}: f(2, 3) = {f(2, 3)}")
    print(f"  chosen order  {g.params}: g(2, 3) = {g(2, 3)}")


def demo_translation():
    """Show the target expressions the translator builds."""
    section("Translation")

    x, y = symbols("x y")

    for expr in [x**2 + 1, x * y**2, sin(2 * x) * exp(-x), pi * x, zoo]:
        print(f"  {str(expr):<24} => {format_sexpr(translate(expr))}")


def demo_overrides():
    """Demonstrate value and function overrides."""
    section("Overrides")

    x = symbols("x")
    sinc = Function("sinc_")

    f = lambdify(pi * x, values={"Pi": 3})
    print(f"  pi*x with Pi=3 at 2 => {f(2)}")

    g = lambdify(sinc(x), fns={"sinc_": lambda v: math.sin(v) / v if v else 1.0})
    print(f"  custom sinc_ at 0 => {g(0)}")

    try:
        lambdify(Function("undefined")(x))
    except NotLambdifiable as e:
        print(f"  undefined(x) => {e} ({e.reason})")


def demo_handwritten():
    """Compile hand-written s-expressions."""
    section("Hand-written Expressions")

    f = compile_expr(E("(+ (* 2 x) (^ y 2))"), ["x", "y"])
    print(f"  {f!r}")
    print(f"  f(1, 3) = {f(1, 3)}")


def demo_timing():
    """Compare native evaluation with SymPy substitution."""
    section("Timing")

    x = symbols("x")
    expr = sin(x) * cos(2 * x) * exp(x**2 / 2)
    points = [i / 100 for i in range(200)]

    start = time.perf_counter()
    slow = [float(expr.subs(x, p)) for p in points]
    subs_time = time.perf_counter() - start

    f = lambdify(expr)
    start = time.perf_counter()
    fast = [f(p) for p in points]
    native_time = time.perf_counter() - start

    worst = max(abs(a - b) for a, b in zip(slow, fast))
    print(f"  subs:     {subs_time:.4f}s")
    print(f"  lambdify: {native_time:.4f}s")
    print(f"  largest difference: {worst:.2e}")


def demo_plotting():
    """Sample expressions for plotting."""
    section("Plotting Data")

    x, y = symbols("x y")

    xs, ys = sample(x**2 - 2 * x, 0, 4, n=5)
    print(f"  x^2 - 2x over [0, 4]: {ys.tolist()}")

    F = lambdify(y * (1 - y), [x, y])
    X, Y, U, V = VectorField(F).quiver(xlims=(0, 5), ylims=(0, 2), n=3)
    print(f"  slope field of y' = y(1-y): {len(X)} arrows")


def main():
    """Run all demos."""
    print("LAMBDEX - Lambdify Expressions")
    print("Feature Demonstration")

    demo_basic_usage()
    demo_parameter_order()
    demo_translation()
    demo_overrides()
    demo_handwritten()
    demo_timing()
    demo_plotting()

    print("\n" + "="*60)
    print(" Demo complete!")
    print("="*60)


if __name__ == "__main__":
    main()
