"""
Example custom tables for LAMBDEX.

This file shows how to extend the translation tables and the runtime
namespace for expressions the defaults do not cover.

Usage:
    python examples/custom_functions.py
"""

import math

from sympy import Function, Mod, besselj, pi, symbols

from lambdex import binary_only, lambdify, unary_only

# Extra runtime names; handlers receive the argument list
RUNTIME = {
    # Number theory
    "gcd": binary_only(math.gcd),
    "lcm": binary_only(math.lcm),
    "mod": binary_only(lambda a, b: a % b),

    # Special functions
    "sigmoid": unary_only(lambda v: 1 / (1 + math.exp(-v)), "sigmoid"),
}

# SymPy tags whose runtime name differs
FNS = {
    "Mod": "mod",
    "besselj": lambda n, v: _bessel_j0(v) if n == 0 else math.nan,
}

# Leaf overrides
VALUES = {
    "Pi": 3.14159,  # low-precision pi, for demonstration
}


def _bessel_j0(v, terms=30):
    # Power series for J0
    total = 0.0
    for k in range(terms):
        total += (-1) ** k * (v / 2) ** (2 * k) / math.factorial(k) ** 2
    return total


def main():
    x, y = symbols("x y")
    sigmoid = Function("sigmoid")

    f = lambdify(sigmoid(x), runtime=RUNTIME)
    print(f"sigmoid(0) = {f(0)}")

    g = lambdify(besselj(0, x), fns=FNS)
    print(f"J0(1) = {g(1.0):.6f}")

    h = lambdify(Mod(x, y), fns=FNS, runtime=RUNTIME)
    print(f"7 mod 3 = {h(7, 3)}")

    k = lambdify(2 * pi * x, values=VALUES)
    print(f"2*pi*x at x=1 with a rough pi = {k(1)}")


if __name__ == "__main__":
    main()
