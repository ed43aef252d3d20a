"""
Tests for filter_criteria/operators/arrays.py and sets.py
"""

import pytest


class TestArrayOperators:
    """Tests for ARRAY predicates."""

    @pytest.mark.parametrize("operator,match_value,expected", [
        ("EXACTLY-MATCHES", ["b", "a"], True),
        ("EXACTLY-MATCHES", ["a"], False),
        ("HAS", "a", True),
        ("HAS", "z", False),
        ("INCLUDES-ALL", ["a", "b"], True),
        ("INCLUDES-ALL", ["a", "z"], False),
        ("INCLUDES-ANY", ["a", "z"], True),
        ("NOT-INCLUDES-ALL", ["a", "z"], True),
        ("NOT-INCLUDES-ANY", ["y", "z"], True),
        ("NOT-INCLUDES-ANY", ["a", "z"], False),
        ("IS-EMPTY", None, False),
        ("NOT-EMPTY", None, True),
        ("SIZE-EQUALS", 2, True),
        ("SIZE-GREATER", 1, True),
        ("SIZE-GREATER-OR-EQUALS", 3, False),
        ("SIZE-LESS", 3, True),
        ("SIZE-LESS-OR-EQUALS", 1, False),
    ])
    def test_operators(self, operator, match_value, expected):
        """Each operator on a two-item list."""
        from filter_criteria.operators import arrays

        assert arrays.evaluate(["a", "b"], operator, match_value) is expected

    def test_exactly_matches_is_multiset_equality(self):
        """Duplicates count; order does not."""
        from filter_criteria.operators import arrays

        assert arrays.evaluate([1, 1, 2], "EXACTLY-MATCHES", [1, 2, 1])
        assert not arrays.evaluate([1, 1, 2], "EXACTLY-MATCHES", [1, 2, 2])

    def test_deep_equality_containment(self):
        """Containment compares nested values structurally."""
        from filter_criteria.operators import arrays

        value = [{"a": [1, 2]}, {"b": 2}]

        assert arrays.evaluate(value, "HAS", {"a": [1, 2]})
        assert arrays.evaluate(value, "INCLUDES-ALL", [{"b": 2}])
        assert not arrays.evaluate([1], "HAS", True)

    def test_invalid_operands_are_false(self):
        """Shape mismatches never raise."""
        from filter_criteria.operators import arrays

        assert arrays.evaluate("ab", "HAS", "a") is False
        assert arrays.evaluate(["a"], "INCLUDES-ALL", "a") is False
        assert arrays.evaluate(["a"], "SIZE-EQUALS", "1") is False
        assert arrays.evaluate(["a"], "SIZE-EQUALS", True) is False


class TestSetOperators:
    """Tests for SET predicates."""

    def test_delegates_to_array_semantics(self):
        """Sets behave like arrays of their members."""
        from filter_criteria.operators import sets

        value = {"developer", "python"}

        assert sets.evaluate(value, "HAS", "python")
        assert sets.evaluate(value, "EXACTLY-MATCHES", ["python", "developer"])
        assert sets.evaluate(value, "INCLUDES-ANY", {"python", "go"})
        assert sets.evaluate(value, "SIZE-EQUALS", 2)
        assert sets.evaluate(frozenset(), "IS-EMPTY", None)

    def test_requires_a_set(self):
        """Lists are not sets."""
        from filter_criteria.operators import sets

        assert sets.evaluate(["python"], "HAS", "python") is False
