"""Tests for the contract wrapper.

These tests build contracts on an isolated context and verify check order,
late binding of annotations, and the two error kinds at call time.
"""

import pytest

pytestmark = pytest.mark.unit

from pactum.contracts import (
    MISSING,
    ConfigurationError,
    Contract,
    ContractViolation,
    ErrorKind,
    Metadata,
    has_contract,
    wrap,
)


def double(x):
    return x * 2


DOUBLE_META = Metadata(names=["x"], params={"x": ["@number"]}, retval=["@number"])


class TestWrapBasics:

    def test_round_trip(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        assert guarded(21) == 42

    def test_bad_argument_raises_violation(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        with pytest.raises(ContractViolation) as info:
            guarded("21")
        exc = info.value
        assert exc.kind is ErrorKind.CONTRACT
        assert exc.target == "x"
        assert exc.annotation == "@number"
        assert exc.value == "21"
        assert str(exc) == """Argument for parameter "x", does not satisfy @number: '21'"""

    def test_bad_return_value_raises_violation(self, context):
        guarded = wrap(["x", "@number", "return", "@string"], double, context)
        with pytest.raises(ContractViolation, match="Function return value does not satisfy @string") as info:
            guarded(4)
        assert info.value.target == "return"
        assert info.value.value == 8

    def test_token_and_mapping_specs(self, context):
        by_tokens = wrap(["x", "@number", "return", "@number"], double, context)
        by_mapping = wrap(
            {"names": ["x"], "params": {"x": ["@number"]}, "retval": ["@number"]},
            double, context,
        )
        assert by_tokens.metadata == by_mapping.metadata == DOUBLE_META

    def test_keyword_arguments_are_checked(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        assert guarded(x=21) == 42
        with pytest.raises(ContractViolation, match='parameter "x"'):
            guarded(x="a")

    def test_absent_argument_is_missing(self, context):
        def body(x, y=None):
            return x

        guarded = wrap(["x", "@number", "y", "@defined"], body, context)
        with pytest.raises(ContractViolation) as info:
            guarded(1)
        assert info.value.target == "y"
        assert info.value.value is MISSING

    def test_body_not_called_when_precondition_fails(self, context):
        calls = []

        def body(x):
            calls.append(x)
            return x

        guarded = wrap(["x", "@string"], body, context)
        with pytest.raises(ContractViolation):
            guarded(1)
        assert calls == []

    def test_empty_metadata_imposes_no_checks(self, context):
        guarded = wrap([], double, context)
        assert guarded("ab") == "abab"


class TestWrapIdentity:

    def test_wrapping_is_idempotent(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        assert wrap(DOUBLE_META, guarded, context) is guarded
        assert wrap(["x", "@string"], guarded, context) is guarded

    def test_has_contract(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        assert has_contract(guarded)
        assert not has_contract(double)
        assert not has_contract(None)

    def test_wrapper_preserves_body_identity(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        assert isinstance(guarded, Contract)
        assert guarded.__name__ == "double"
        assert guarded.__wrapped__ is double
        assert guarded.body is double
        assert guarded.metadata == DOUBLE_META

    def test_repr_shows_tokens(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        assert "double" in repr(guarded)
        assert "@number" in repr(guarded)

    def test_non_callable_body_rejected(self, context):
        with pytest.raises(ConfigurationError, match="must be callable"):
            wrap(DOUBLE_META, "world", context)

    def test_callable_spec_rejected(self, context):
        with pytest.raises(ConfigurationError, match="Cannot infer"):
            wrap(double, double, context)


class TestCheckOrder:

    def test_first_failing_annotation_is_reported(self, context):
        context.register("p1", lambda value: False)
        context.register("p2", lambda value: False)
        guarded = wrap(["a", "@p1", "@p2"], double, context)
        with pytest.raises(ContractViolation) as info:
            guarded(1)
        assert info.value.annotation == "@p1"

    def test_parameters_checked_in_declared_order(self, context):
        guarded = wrap(["a", "@string", "b", "@string"], lambda a, b: a + b, context)
        with pytest.raises(ContractViolation) as info:
            guarded(1, 2)
        assert info.value.target == "a"

    def test_predicates_see_target_and_argument_map(self, context):
        seen = []

        def below_y(value, target, arg_map):
            seen.append(target)
            return value < arg_map["y"]

        context.register("below_y", below_y)
        guarded = wrap(["x", "@below_y", "y", "@number"], lambda x, y: y - x, context)
        assert guarded(1, 2) == 1
        assert seen == ["x"]
        with pytest.raises(ContractViolation, match="@below_y"):
            guarded(3, 2)

    def test_return_predicate_gets_no_target(self, context):
        seen = []

        def record(value, target):
            seen.append(target)
            return True

        context.register("record", record)
        wrap(["return", "@record"], double, context)(2)
        assert seen == [None]


class TestLateBinding:

    def test_unknown_annotation_is_configuration_error(self, context):
        guarded = wrap(["x", "@nope"], double, context)
        with pytest.raises(ConfigurationError) as info:
            guarded(1)
        exc = info.value
        assert not isinstance(exc, ContractViolation)
        assert exc.kind is ErrorKind.CONFIGURATION
        assert str(exc) == 'Annotation @nope, for parameter "x", does not exist'

    def test_unknown_return_annotation(self, context):
        guarded = wrap(["return", "@nope"], double, context)
        with pytest.raises(ConfigurationError, match="Annotation @nope, for return value, does not exist"):
            guarded(1)

    def test_registration_after_build_takes_effect(self, context):
        guarded = wrap(["x", "@foo"], double, context)
        with pytest.raises(ConfigurationError):
            guarded(1)

        context.register("foo", lambda value: True)
        assert guarded(1) == 2

        context.register("foo", lambda value: False)
        with pytest.raises(ContractViolation, match="@foo"):
            guarded(1)


class TestEnforceSwitch:

    def test_checks_skipped_when_enforce_off(self, make_context):
        context = make_context(ENFORCE=False)
        guarded = wrap(DOUBLE_META, double, context)
        assert guarded("21") == "2121"

    def test_reconfigure_applies_to_existing_contracts(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        context.configure({"ENFORCE": False})
        assert guarded("a") == "aa"
        context.configure({"ENFORCE": True})
        with pytest.raises(ContractViolation):
            guarded("a")


class TestCustomChecks:

    def test_pre_returns_new_contract(self, context):
        guarded = wrap(DOUBLE_META, double, context)

        def positive(arg_map):
            return arg_map["x"] > 0

        stricter = guarded.pre(positive)
        assert stricter is not guarded
        assert guarded(-1) == -2
        with pytest.raises(ContractViolation, match="precondition positive") as info:
            stricter(-1)
        assert info.value.annotation == "positive"

    def test_pre_runs_after_annotations(self, context):
        stricter = wrap(DOUBLE_META, double, context).pre(lambda arg_map: arg_map["x"] > 0)
        with pytest.raises(ContractViolation) as info:
            stricter("a")
        assert info.value.annotation == "@number"

    def test_post_checks_return_value(self, context):
        def below_limit(retval, arg_map):
            return retval < 100

        stricter = wrap(DOUBLE_META, double, context).post(below_limit)
        assert stricter(10) == 20
        with pytest.raises(ContractViolation, match="postcondition below_limit") as info:
            stricter(60)
        assert info.value.target == "return"
        assert info.value.value == 120

    def test_non_callable_check_rejected(self, context):
        guarded = wrap(DOUBLE_META, double, context)
        with pytest.raises(ConfigurationError):
            guarded.pre("nope")
        with pytest.raises(ConfigurationError):
            guarded.post(None)


class TestMethodBinding:

    def test_contract_binds_as_method(self, context):
        class Counter:
            def __init__(self):
                self.total = 0

            def add(self, n):
                self.total += n
                return self.total

            add = wrap(["self", "@object", "n", "@integer", "return", "@integer"], add, context)

        context.register("object", lambda value: isinstance(value, Counter))
        counter = Counter()
        assert counter.add(3) == 3
        assert counter.add(4) == 7
        with pytest.raises(ContractViolation) as info:
            counter.add(-1)
        assert info.value.target == "n"

    def test_class_access_returns_contract(self, context):
        class Holder:
            run = wrap([], double, context)

        assert isinstance(Holder.run, Contract)
