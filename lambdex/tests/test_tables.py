"""Tests for the value and function tables."""

import math
from fractions import Fraction

import pytest
from lambdex.tables import (
    FUNCTIONS, VALUES, merge_functions, merge_values, resolve,
)


class TestDefaults:
    """Tests for the default tables."""

    def test_values(self):
        """Default values for SymPy constants."""
        assert VALUES["Pi"] == math.pi
        assert VALUES["Exp1"] == math.e
        assert VALUES["ImaginaryUnit"] == 1j
        assert VALUES["Half"] == Fraction(1, 2)
        assert VALUES["ComplexInfinity"] == math.inf
        assert VALUES["NegativeInfinity"] == -math.inf
        assert math.isnan(VALUES["NaN"])

    def test_functions(self):
        """Default identifiers for renamed SymPy functions."""
        assert FUNCTIONS["Add"] == "+"
        assert FUNCTIONS["Mul"] == "*"
        assert FUNCTIONS["Pow"] == "^"
        assert FUNCTIONS["re"] == "real"
        assert FUNCTIONS["Heaviside"] == "heaviside"
        assert FUNCTIONS["StrictLessThan"] == "<"

    def test_read_only(self):
        """Default tables cannot be modified."""
        with pytest.raises(TypeError):
            VALUES["Pi"] = 3
        with pytest.raises(TypeError):
            FUNCTIONS["Add"] = "-"


class TestMerge:
    """Tests for merging overrides."""

    def test_override_wins(self):
        """An override replaces the default entry."""
        merged = merge_values({"Pi": 3})
        assert merged["Pi"] == 3
        assert merged["Exp1"] == math.e

    def test_defaults_unchanged(self):
        """Merging never changes the defaults."""
        merge_values({"Pi": 3, "Tau": 2 * math.pi})
        merge_functions({"Add": "max", "sinc": "sinc"})
        assert VALUES["Pi"] == math.pi
        assert "Tau" not in VALUES
        assert FUNCTIONS["Add"] == "+"
        assert "sinc" not in FUNCTIONS

    def test_empty_overrides(self):
        """No overrides returns the defaults themselves."""
        assert merge_values(None) is VALUES
        assert merge_values({}) is VALUES
        assert merge_functions(None) is FUNCTIONS

    def test_merged_is_read_only(self):
        """Merged tables are read-only too."""
        merged = merge_functions({"Add": "max"})
        with pytest.raises(TypeError):
            merged["Add"] = "+"


class TestResolve:
    """Tests for identifier resolution."""

    def test_table_entry(self):
        """Tags in the table resolve to their entry."""
        assert resolve("Add", FUNCTIONS) == "+"
        assert resolve("Abs", FUNCTIONS) == "abs"

    def test_default_rule(self):
        """Other tags resolve to themselves."""
        assert resolve("sin", FUNCTIONS) == "sin"
        assert resolve("besselj", FUNCTIONS) == "besselj"

    def test_callable_entry(self):
        """Callable entries are returned as-is."""
        assert resolve("hyp", merge_functions({"hyp": math.hypot})) is math.hypot
