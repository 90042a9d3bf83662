"""Tests for the runtime namespace and s-expression primitives."""

import cmath
import math
from fractions import Fraction

import pytest
from lambdex.runtime import (
    car, cdr, compound, constant, variable,
    nary_fold, unary_only, binary_only, variadic, positional, special_minus,
    elementary, merge_runtime,
    ARITHMETIC_RUNTIME, MATH_RUNTIME, PREDICATE_RUNTIME, RUNTIME,
)


class TestPrimitives:
    """Tests for list primitives and expression predicates."""

    def test_car_cdr(self):
        """car and cdr split head from tail."""
        assert car(["+", "x", 1]) == "+"
        assert cdr(["+", "x", 1]) == ["x", 1]
        assert cdr([]) == []

    def test_car_errors(self):
        """car rejects non-lists and empty lists."""
        with pytest.raises(TypeError):
            car("x")
        with pytest.raises(ValueError):
            car([])

    def test_constant_accepts_all_numbers(self):
        """Literals are any number, not just int and float."""
        assert constant(1)
        assert constant(2.5)
        assert constant(1j)
        assert constant(Fraction(1, 3))
        assert constant(True)
        assert not constant("x")
        assert not constant(["+", 1, 2])

    def test_variable_and_compound(self):
        """Strings are variables, lists are calls."""
        assert variable("x")
        assert not variable(1)
        assert compound(["sin", "x"])
        assert not compound("x")


class TestHandlerBuilders:
    """Tests for handler builders."""

    def test_nary_fold(self):
        """nary_fold folds any number of arguments."""
        add = nary_fold(0, lambda a, b: a + b)
        assert add([]) == 0
        assert add([5]) == 5
        assert add([1, 2, 3]) == 6

    def test_nary_fold_unary(self):
        """nary_fold uses the unary override for one argument."""
        neg = nary_fold(0, lambda a, b: a - b, unary=lambda a: -a)
        assert neg([4]) == -4
        assert neg([10, 3, 2]) == 5

    def test_unary_only_arity(self):
        """unary_only raises TypeError on wrong arity."""
        square = unary_only(lambda v: v * v, "square")
        assert square([3]) == 9
        with pytest.raises(TypeError, match="square"):
            square([1, 2])

    def test_binary_only_arity(self):
        """binary_only raises TypeError on wrong arity."""
        sub = binary_only(lambda a, b: a - b)
        assert sub([5, 3]) == 2
        with pytest.raises(TypeError):
            sub([5])

    def test_variadic(self):
        """variadic needs at least one argument."""
        biggest = variadic(max)
        assert biggest([3, 9, 4]) == 9
        with pytest.raises(TypeError):
            biggest([])

    def test_positional(self):
        """positional spreads the argument list."""
        h = positional(math.hypot)
        assert h([3, 4]) == 5.0
        assert h.__name__ == "hypot"

    def test_special_minus(self):
        """Subtraction: (-) = 0, (- x) = -x, (- x y) = x - y."""
        minus = special_minus()
        assert minus([]) == 0
        assert minus([4]) == -4
        assert minus([10, 3]) == 7
        with pytest.raises(TypeError):
            minus([1, 2, 3])

    def test_elementary_real(self):
        """elementary uses math for real arguments."""
        assert elementary("sqrt")([4]) == 2.0
        with pytest.raises(ValueError):
            elementary("sqrt")([-4])

    def test_elementary_complex(self):
        """elementary switches to cmath for complex arguments."""
        assert elementary("sqrt")([-4 + 0j]) == 2j
        assert elementary("exp")([1j * math.pi]) == pytest.approx(-1 + 0j)


class TestRuntime:
    """Tests for the standard runtime namespaces."""

    def test_arithmetic(self):
        """Arithmetic operators."""
        assert ARITHMETIC_RUNTIME["+"]([1, 2, 3]) == 6
        assert ARITHMETIC_RUNTIME["*"]([2, 3, 4]) == 24
        assert ARITHMETIC_RUNTIME["*"]([]) == 1
        assert ARITHMETIC_RUNTIME["^"]([2, 10]) == 1024

    def test_division_stays_exact(self):
        """Integer division gives a Fraction, float division a float."""
        assert ARITHMETIC_RUNTIME["/"]([1, 3]) == Fraction(1, 3)
        assert isinstance(ARITHMETIC_RUNTIME["/"]([1, 3]), Fraction)
        assert ARITHMETIC_RUNTIME["/"]([1.0, 2]) == 0.5

    def test_trig(self):
        """Trig functions under SymPy names."""
        assert MATH_RUNTIME["sin"]([0]) == 0.0
        assert MATH_RUNTIME["cot"]([math.pi / 4]) == pytest.approx(1.0)
        assert MATH_RUNTIME["sec"]([0]) == pytest.approx(1.0)
        assert MATH_RUNTIME["acot"]([1]) == pytest.approx(math.pi / 4)
        assert MATH_RUNTIME["atan2"]([1, 1]) == pytest.approx(math.pi / 4)

    def test_rounding_and_special(self):
        """floor, ceiling, factorial, gamma."""
        assert MATH_RUNTIME["floor"]([2.7]) == 2
        assert MATH_RUNTIME["ceiling"]([Fraction(1, 3)]) == 1
        assert MATH_RUNTIME["factorial"]([5]) == 120
        assert MATH_RUNTIME["gamma"]([5]) == pytest.approx(24.0)

    def test_complex_parts(self):
        """real, imag, conjugate, arg, abs."""
        z = 3 + 4j
        assert MATH_RUNTIME["real"]([z]) == 3.0
        assert MATH_RUNTIME["imag"]([z]) == 4.0
        assert MATH_RUNTIME["conjugate"]([z]) == 3 - 4j
        assert MATH_RUNTIME["arg"]([1j]) == pytest.approx(math.pi / 2)
        assert MATH_RUNTIME["abs"]([z]) == 5.0

    def test_sign(self):
        """sign of reals and complex numbers."""
        assert MATH_RUNTIME["sign"]([-2.5]) == -1
        assert MATH_RUNTIME["sign"]([0]) == 0
        assert MATH_RUNTIME["sign"]([7]) == 1
        assert MATH_RUNTIME["sign"]([3j]) == 1j

    def test_heaviside(self):
        """heaviside is 0, 1/2, 1; the value at zero can be given."""
        h = MATH_RUNTIME["heaviside"]
        assert h([-1]) == 0
        assert h([0]) == Fraction(1, 2)
        assert h([2]) == 1
        assert h([0, 1]) == 1

    def test_min_max(self):
        """min and max take any number of arguments."""
        assert MATH_RUNTIME["min"]([3, 1, 2]) == 1
        assert MATH_RUNTIME["max"]([3, 1, 2]) == 3

    def test_identity(self):
        """identity returns its first argument and needs at least one."""
        assert MATH_RUNTIME["identity"]([7]) == 7
        assert MATH_RUNTIME["identity"]([7, "x"]) == 7
        with pytest.raises(TypeError):
            MATH_RUNTIME["identity"]([])

    def test_predicates(self):
        """Comparisons and logic."""
        assert PREDICATE_RUNTIME["<"]([1, 2]) is True
        assert PREDICATE_RUNTIME[">="]([1, 2]) is False
        assert PREDICATE_RUNTIME["=="]([2, 2.0]) is True
        assert PREDICATE_RUNTIME["and"]([True, True, False]) is False
        assert PREDICATE_RUNTIME["or"]([False, True]) is True
        assert PREDICATE_RUNTIME["not"]([False]) is True

    def test_runtime_is_read_only(self):
        """The default runtime cannot be modified."""
        with pytest.raises(TypeError):
            RUNTIME["sin"] = unary_only(cmath.sin)

    def test_merge_runtime(self):
        """merge_runtime adds names without touching the defaults."""
        double = unary_only(lambda v: 2 * v)
        merged = merge_runtime({"double": double, "sin": double})
        assert merged["double"]([4]) == 8
        assert merged["sin"]([4]) == 8
        assert "double" not in RUNTIME
        assert RUNTIME["sin"]([0]) == 0.0

    def test_merge_runtime_empty(self):
        """No extra handlers returns the defaults."""
        assert merge_runtime(None) is RUNTIME
        assert merge_runtime({}) is RUNTIME
