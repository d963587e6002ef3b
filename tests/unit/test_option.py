"""
Tests for the Option container.

Tests cover:
  - Present/Absent creation, sealing and immutability
  - Unsafe and defaulting accessors
  - map, and_then, inspect, predicates
  - Boolean combinators (and_, or_, or_else, xor, zip, zip_with)
  - Conversions to list and Result
  - Equality, repr, truthiness and pattern matching
"""

from __future__ import annotations

import dataclasses

import pytest

from optres import Absent, Failure, NotFoundError, Option, Present, Success


# ═══════════════════════════════════════════════════════════════
# 1. Creation & Introspection
# ═══════════════════════════════════════════════════════════════


class TestPresentCreation:
    def test_present_wraps_value(self):
        option = Option.present(5)
        assert option.is_present()
        assert not option.is_absent()
        assert option.get() == 5

    def test_present_may_hold_none(self):
        option = Present(None)
        assert option.is_present()
        assert option.get() is None

    def test_present_is_truthy_even_for_falsy_values(self):
        assert Present(0)
        assert Present("")

    def test_factory_returns_present_variant(self):
        assert isinstance(Option.present("x"), Present)


class TestAbsentCreation:
    def test_absent_has_no_value(self):
        option = Option.absent()
        assert option.is_absent()
        assert not option.is_present()

    def test_absent_is_falsy(self):
        assert not Absent()

    def test_factory_returns_absent_variant(self):
        assert isinstance(Option.absent(), Absent)


class TestFromNullable:
    def test_none_becomes_absent(self):
        assert Option.from_nullable(None) == Absent()

    def test_value_becomes_present(self):
        assert Option.from_nullable("home") == Present("home")

    def test_falsy_value_stays_present(self):
        assert Option.from_nullable(0) == Present(0)


class TestSealing:
    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="cannot be instantiated"):
            Option()

    def test_base_cannot_be_subclassed(self):
        with pytest.raises(TypeError, match="sealed"):

            class Maybe(Option):
                pass

    def test_borrowed_module_name_cannot_subclass(self):
        with pytest.raises(TypeError, match="sealed"):

            class Lookalike(Option):
                __module__ = "optres.option"

    def test_present_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Present(1).value = 2  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════
# 2. Accessors
# ═══════════════════════════════════════════════════════════════


class TestUnsafeAccessors:
    def test_get_on_absent_raises_not_found(self):
        with pytest.raises(NotFoundError, match="value not found"):
            Absent().get()

    def test_unwrap_matches_get(self):
        assert Present(5).unwrap() == 5
        with pytest.raises(NotFoundError):
            Absent().unwrap()

    def test_expect_returns_value(self):
        assert Present(5).expect("must be set") == 5

    def test_expect_uses_caller_message(self):
        with pytest.raises(NotFoundError, match="config must be loaded") as excinfo:
            Absent().expect("config must be loaded")
        assert excinfo.value.message == "config must be loaded"

    def test_not_found_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            Absent().get()


class TestDefaultingAccessors:
    def test_get_or_default(self):
        assert Present(5).get_or_default(10) == 5
        assert Absent().get_or_default(10) == 10

    def test_unwrap_or(self):
        assert Present(5).unwrap_or(10) == 5
        assert Absent().unwrap_or(10) == 10

    def test_unwrap_or_else_is_lazy(self):
        calls = []

        def fallback():
            calls.append(1)
            return 10

        assert Present(5).unwrap_or_else(fallback) == 5
        assert calls == []
        assert Absent().unwrap_or_else(fallback) == 10
        assert calls == [1]


# ═══════════════════════════════════════════════════════════════
# 3. Transformations
# ═══════════════════════════════════════════════════════════════


class TestMap:
    def test_map_transforms_present_value(self):
        assert Present(5).map(lambda x: x * 2).get() == 10

    def test_map_skips_absent(self):
        assert Absent().map(lambda x: x * 2) == Absent()

    def test_map_chain(self):
        result = Present(3).map(lambda x: x + 1).map(lambda x: x * 2).map(str)
        assert result == Present("8")

    def test_map_returns_new_instance(self):
        original = Present(5)
        mapped = original.map(lambda x: x)
        assert mapped == original
        assert mapped is not original

    def test_map_propagates_callback_errors(self):
        with pytest.raises(ZeroDivisionError):
            Present(1).map(lambda x: x / 0)


class TestMapOr:
    def test_map_or_applies_fn_on_present(self):
        assert Present(5).map_or(0, lambda x: x * 2) == 10

    def test_map_or_returns_default_on_absent(self):
        assert Absent().map_or(0, lambda x: x * 2) == 0

    def test_map_or_else_default_fn_only_on_absent(self):
        assert Present(5).map_or_else(lambda: pytest.fail("default ran"), lambda x: x * 2) == 10
        assert Absent().map_or_else(lambda: 42, lambda x: pytest.fail("fn ran")) == 42


class TestAndThen:
    def test_and_then_chains_present(self):
        def half(x):
            return Present(x // 2) if x % 2 == 0 else Absent()

        assert Present(8).and_then(half) == Present(4)
        assert Present(3).and_then(half) == Absent()

    def test_and_then_short_circuits_on_absent(self):
        assert Absent().and_then(lambda x: pytest.fail("should not run")) == Absent()


# ═══════════════════════════════════════════════════════════════
# 4. Side Effects & Predicates
# ═══════════════════════════════════════════════════════════════


class TestInspect:
    def test_inspect_sees_present_value(self):
        seen = []
        option = Present(5)
        returned = option.inspect(seen.append)
        assert seen == [5]
        assert returned is option

    def test_inspect_is_noop_on_absent(self):
        seen = []
        option = Absent()
        assert option.inspect(seen.append) is option
        assert seen == []


class TestPredicates:
    def test_is_present_and(self):
        assert Present(5).is_present_and(lambda x: x > 0)
        assert not Present(5).is_present_and(lambda x: x < 0)
        assert not Absent().is_present_and(lambda x: pytest.fail("should not run"))

    def test_is_absent_or(self):
        assert Absent().is_absent_or(lambda x: pytest.fail("should not run"))
        assert Present(5).is_absent_or(lambda x: x > 0)
        assert not Present(5).is_absent_or(lambda x: x < 0)


# ═══════════════════════════════════════════════════════════════
# 5. Boolean Combinators
# ═══════════════════════════════════════════════════════════════


class TestAndOr:
    def test_and_returns_other_when_present(self):
        assert Present(1).and_(Present("b")) == Present("b")
        assert Present(1).and_(Absent()) == Absent()

    def test_and_short_circuits_on_absent(self):
        assert Absent().and_(Present("b")) == Absent()

    def test_or_keeps_present_self(self):
        option = Present(1)
        assert option.or_(Present(2)) is option

    def test_or_falls_back_on_absent(self):
        assert Absent().or_(Present(2)) == Present(2)
        assert Absent().or_(Absent()) == Absent()

    def test_or_else_is_lazy(self):
        assert Present(1).or_else(lambda: pytest.fail("should not run")) == Present(1)
        assert Absent().or_else(lambda: Present(2)) == Present(2)


class TestXor:
    def test_both_present_gives_absent(self):
        assert Present(5).xor(Present(10)) == Absent()

    def test_only_self_present(self):
        assert Present(5).xor(Absent()) == Present(5)

    def test_only_other_present(self):
        assert Absent().xor(Present(10)) == Present(10)

    def test_neither_present(self):
        assert Absent().xor(Absent()) == Absent()


class TestZip:
    def test_zip_pairs_present_values(self):
        assert Present(1).zip(Present("a")) == Present((1, "a"))

    def test_zip_with_absent_side(self):
        assert Present(1).zip(Absent()) == Absent()
        assert Absent().zip(Present("a")) == Absent()

    def test_zip_with_combines(self):
        assert Present(2).zip_with(Present(3), lambda a, b: a * b) == Present(6)

    def test_zip_with_skips_fn_when_absent(self):
        assert Absent().zip_with(Present(3), lambda a, b: pytest.fail("should not run")) == Absent()
        assert Present(2).zip_with(Absent(), lambda a, b: pytest.fail("should not run")) == Absent()


# ═══════════════════════════════════════════════════════════════
# 6. Conversions
# ═══════════════════════════════════════════════════════════════


class TestConversions:
    def test_to_list(self):
        assert Present(5).to_list() == [5]
        assert Absent().to_list() == []

    def test_iteration(self):
        assert list(Present(5)) == [5]
        assert list(Absent()) == []

    def test_to_result(self):
        assert Present(5).to_result("missing") == Success(5)
        assert Absent().to_result("missing") == Failure("missing")

    def test_to_result_else_is_lazy(self):
        assert Present(5).to_result_else(lambda: pytest.fail("should not run")) == Success(5)
        assert Absent().to_result_else(lambda: "computed") == Failure("computed")


# ═══════════════════════════════════════════════════════════════
# 7. Equality, Repr & Pattern Matching
# ═══════════════════════════════════════════════════════════════


class TestEqualityAndRepr:
    def test_present_equality(self):
        assert Present(42) == Present(42)
        assert Present(42) != Present(99)

    def test_absent_equality(self):
        assert Absent() == Absent()

    def test_present_not_equal_to_absent_or_success(self):
        assert Present(1) != Absent()
        assert Present(1) != Success(1)

    def test_hashable_when_payload_hashable(self):
        assert len({Present(1), Present(1), Absent(), Absent()}) == 2

    def test_repr(self):
        assert repr(Present(42)) == "Present(42)"
        assert repr(Present("x")) == "Present('x')"
        assert repr(Absent()) == "Absent()"


class TestPatternMatching:
    def test_match_present(self):
        match Option.present(7):
            case Present(v):
                matched = v
            case Absent():
                matched = None
        assert matched == 7

    def test_match_absent(self):
        match Option.absent():
            case Present(_):
                matched = "present"
            case Absent():
                matched = "absent"
        assert matched == "absent"
