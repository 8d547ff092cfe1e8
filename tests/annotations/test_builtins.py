"""Tests for the stock annotation predicates."""

from collections import OrderedDict

import pytest

pytestmark = pytest.mark.unit

from pactum.annotations import builtins
from pactum.contracts import MISSING, Metadata, wrap


class TestTypePredicates:

    def test_number(self):
        assert builtins.is_number(1)
        assert builtins.is_number(1.5)
        assert builtins.is_number(float("nan"))
        assert not builtins.is_number(True)
        assert not builtins.is_number("1")
        assert not builtins.is_number(None)

    def test_integer(self):
        assert builtins.is_integer(0)
        assert builtins.is_integer(3)
        assert builtins.is_integer(3.0)
        assert not builtins.is_integer(-1)
        assert not builtins.is_integer(2.5)
        assert not builtins.is_integer(float("nan"))
        assert not builtins.is_integer(float("inf"))
        assert not builtins.is_integer(False)

    def test_string(self):
        assert builtins.is_string("")
        assert not builtins.is_string(b"bytes")

    def test_bool(self):
        assert builtins.is_bool(False)
        assert not builtins.is_bool(0)

    def test_array(self):
        assert builtins.is_array([])
        assert builtins.is_array((1, 2))
        assert not builtins.is_array("abc")
        assert not builtins.is_array(b"abc")
        assert not builtins.is_array({"a": 1})
        assert not builtins.is_array({1, 2})

    def test_object_and_hash(self):
        for value in ({}, {"a": 1}, OrderedDict()):
            assert builtins.is_object(value)
            assert builtins.is_hash(value)
        for value in ([], "a", None, 1):
            assert not builtins.is_object(value)
            assert not builtins.is_hash(value)

    def test_function(self):
        assert builtins.is_function(len)
        assert builtins.is_function(lambda: None)
        assert not builtins.is_function("len")

    def test_iterable(self):
        assert builtins.is_iterable([1])
        assert builtins.is_iterable({"a": 1})
        assert not builtins.is_iterable("abc")
        assert not builtins.is_iterable(7)


class TestPresencePredicates:

    def test_null_and_notnull(self):
        assert builtins.is_null(None)
        assert not builtins.is_null(MISSING)
        assert builtins.is_not_null(0)
        assert not builtins.is_not_null(None)

    def test_undefined_and_defined(self):
        assert builtins.is_undefined(MISSING)
        assert not builtins.is_undefined(None)
        assert builtins.is_defined(None)
        assert not builtins.is_defined(MISSING)

    def test_safe(self):
        assert builtins.is_safe(0)
        assert builtins.is_safe("")
        assert not builtins.is_safe(None)
        assert not builtins.is_safe(MISSING)

    def test_truthy_and_falsy(self):
        assert builtins.is_truthy([0])
        assert builtins.is_falsy([])
        assert builtins.is_falsy(MISSING)


class TestContractPredicate:

    def test_contract(self, context):
        guarded = wrap(Metadata(), len, context)
        assert builtins.is_contract(guarded)
        assert not builtins.is_contract(len)


def test_builtin_table_names():
    assert builtins.BUILTIN_ANNOTATIONS["number"] is builtins.is_number
    assert builtins.BUILTIN_ANNOTATIONS["notnull"] is builtins.is_not_null
    assert len(builtins.BUILTIN_ANNOTATIONS) == 17
