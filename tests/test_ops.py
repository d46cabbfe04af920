"""Tests for the function-style API in klaw_option.ops."""

from collections import OrderedDict

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_option import (
    Err,
    Nothing,
    Ok,
    Some,
    UnwrapError,
    bind,
    expect,
    flatten,
    flatten_enum,
    from_result,
    map,
    or_else,
    or_else_with,
    return_,
    to_bool,
    to_result,
    traverse,
    unwrap,
)

from tests.strategies import nested_somes


class TestMap:
    """Tests for map()."""

    def test_map_some(self):
        """map() transforms a present value."""
        assert map(Some(1), lambda x: x + 1) == Some(2)

    def test_map_nothing(self):
        """map() leaves Nothing alone."""
        assert map(Nothing, lambda x: x + 1) is Nothing

    def test_curried_map(self):
        """map(f) returns a reusable step."""
        inc = map(lambda x: x + 1)
        assert inc(Some(1)) == Some(2)
        assert inc(Some(10)) == Some(11)
        assert inc(Nothing) is Nothing

    def test_map_rejects_non_option(self):
        """map() needs an Option as its first argument."""
        with pytest.raises(TypeError, match='expects an Option'):
            map(5, lambda x: x)  # type: ignore[call-overload]

    def test_map_rejects_non_callable(self):
        """A missing or non-callable function fails at the call site."""
        with pytest.raises(TypeError, match='expects a callable'):
            map(Some(1), None)  # type: ignore[call-overload]
        with pytest.raises(TypeError, match='expects a callable'):
            map(Some(1))  # type: ignore[call-overload]


class TestBind:
    """Tests for bind()."""

    def test_bind_some(self):
        """bind() returns the function's Option."""
        assert bind(Some(4), lambda x: Some(x // 2)) == Some(2)
        assert bind(Some(4), lambda x: Nothing) is Nothing

    def test_bind_nothing_does_not_call(self):
        """bind() on Nothing never calls the function."""
        calls = []
        assert bind(Nothing, calls.append) is Nothing
        assert calls == []

    def test_curried_bind(self):
        """bind(f) returns a reusable step."""

        def half(x):
            return Some(x // 2) if x % 2 == 0 else Nothing

        step = bind(half)
        assert step(Some(8)) == Some(4)
        assert step(Some(3)) is Nothing
        assert step(Nothing) is Nothing

    def test_bind_rejects_non_callable(self):
        """bind() needs a function in either form."""
        with pytest.raises(TypeError, match='expects a callable'):
            bind(Nothing, None)  # type: ignore[call-overload]
        with pytest.raises(TypeError, match='expects a callable'):
            bind(Some(1))  # type: ignore[call-overload]

    def test_lookup_chain(self):
        """bind threads a chain of lookups that may fail."""

        def find_by_id(x):
            return return_(None if x == 1 else {'id': x})

        found = bind(map(map(find_by_id(2), lambda r: r['id']), lambda x: x + 1), find_by_id)
        assert found == Some({'id': 3})
        assert bind(map(find_by_id(0), lambda r: r['id'] + 1), find_by_id) is Nothing


class TestFlatten:
    """Tests for flatten()."""

    def test_flatten_nested(self):
        """flatten() collapses any number of levels."""
        assert flatten(Some(Some(Some(5)))) == Some(5)

    def test_flatten_single_level(self):
        """A single-level Some is returned as is."""
        assert flatten(Some(5)) == Some(5)

    def test_flatten_inner_nothing(self):
        """Nothing at any level gives Nothing."""
        assert flatten(Some(Nothing)) is Nothing
        assert flatten(Some(Some(Nothing))) is Nothing

    def test_flatten_nothing(self):
        """A bare Nothing flattens to Nothing."""
        assert flatten(Nothing) is Nothing

    def test_flatten_lifted(self):
        """Repeated lifting flattens back to one level."""
        assert flatten(return_(return_(return_(5)))) == Some(5)

    def test_flatten_deep(self):
        """Depth is not limited by recursion."""
        option = Some(1)
        for _ in range(1000):
            option = Some(option)
        assert flatten(option) == Some(1)

    @given(nested_somes())
    def test_flatten_any_depth(self, case):
        """Any nesting depth flattens to the innermost value."""
        value, option = case
        assert flatten(option) == Some(value)


class TestFlattenEnum:
    """Tests for flatten_enum()."""

    def test_list_all_some(self):
        """A list of Somes becomes Some of a list, in order."""
        assert flatten_enum([Some(1), Some(2), Some(3)]) == Some([1, 2, 3])

    def test_list_with_nothing(self):
        """Any Nothing makes the whole result Nothing."""
        assert flatten_enum([Some(1), Nothing, Some(3)]) is Nothing

    def test_empty_list(self):
        """An empty list is Some of an empty list."""
        assert flatten_enum([]) == Some([])

    def test_tuple_keeps_container_type(self):
        """Tuples come back as tuples."""
        assert flatten_enum((Some(1), Some(2))) == Some((1, 2))

    def test_mapping_all_some(self):
        """A mapping keeps every key."""
        assert flatten_enum({'a': Some(1), 'b': Some(2), 'c': Some(3)}) == Some({'a': 1, 'b': 2, 'c': 3})

    def test_mapping_with_nothing(self):
        """Any Nothing value makes the whole result Nothing."""
        assert flatten_enum({'a': Some(1), 'b': Nothing, 'c': Some(3)}) is Nothing

    def test_mapping_preserves_key_order(self):
        """Other Mapping types come back as a dict in the same key order."""
        result = flatten_enum(OrderedDict([('z', Some(1)), ('a', Some(2))]))
        assert list(result.unwrap()) == ['z', 'a']

    def test_non_option_element(self):
        """Elements that are not Options count as absent."""
        assert flatten_enum([Some(1), 2]) is Nothing

    @pytest.mark.parametrize('shape', ['abc', b'abc', {Some(1)}, 5, None, (x for x in [Some(1)])])
    def test_other_shapes(self, shape):
        """Anything but a list, tuple or mapping gives Nothing."""
        assert flatten_enum(shape) is Nothing

    def test_stops_at_first_nothing(self):
        """The scan ends at the first Nothing."""
        seen = []

        class Spy(list):
            def __iter__(self):
                for item in super().__iter__():
                    seen.append(item)
                    yield item

        flatten_enum(Spy([Some(1), Nothing, Some(3)]))
        assert seen == [Some(1), Nothing]

    @given(st.lists(st.integers()))
    def test_order_preserved(self, values: list[int]):
        """Sequencing Somes gives the payloads in order."""
        assert flatten_enum([Some(v) for v in values]) == Some(values)

    @given(st.dictionaries(st.text(max_size=5), st.integers()))
    def test_keys_preserved(self, values: dict[str, int]):
        """Sequencing a mapping keeps every key."""
        assert flatten_enum({k: Some(v) for k, v in values.items()}) == Some(values)


class TestTraverse:
    """Tests for traverse()."""

    def test_all_present(self):
        """traverse collects every result."""
        assert traverse([1, 2, 3], lambda x: Some(x * 10)) == Some([10, 20, 30])

    def test_short_circuits(self):
        """traverse stops calling f after the first Nothing."""
        calls = []

        def f(x):
            calls.append(x)
            return Nothing if x == 2 else Some(x)

        assert traverse([1, 2, 3], f) is Nothing
        assert calls == [1, 2]

    def test_accepts_iterators(self):
        """Any iterable works, including generators."""
        assert traverse((x for x in range(3)), return_) == Some([0, 1, 2])


class TestUnwrapFamily:
    """Tests for unwrap, expect, or_else, or_else_with."""

    def test_unwrap(self):
        """unwrap() returns the value or raises."""
        assert unwrap(Some(5)) == 5
        with pytest.raises(UnwrapError, match='klaw_option.unwrap: the option has no value'):
            unwrap(Nothing)

    def test_expect(self):
        """expect() raises the caller's message."""
        assert expect(Some(5), 'The value was not what was expected') == 5
        with pytest.raises(UnwrapError, match='The value was not what was expected'):
            expect(Nothing, 'The value was not what was expected')

    def test_or_else(self):
        """or_else() falls back to the default."""
        assert or_else(Some(5), 4) == 5
        assert or_else(Nothing, 4) == 4

    def test_or_else_with_is_lazy(self):
        """or_else_with() only calls the thunk for Nothing."""
        calls = []

        def thunk():
            calls.append(True)
            return 4

        assert or_else_with(Some(5), thunk) == 5
        assert calls == []
        assert or_else_with(Nothing, thunk) == 4
        assert calls == [True]


class TestConversion:
    """Tests for to_result, to_bool, from_result."""

    def test_to_result(self):
        """to_result() maps Some to Ok and Nothing to Err."""
        assert to_result(Some(5)) == Ok(5)
        assert to_result(Nothing) == Err('klaw_option.to_result: the option was empty')

    def test_to_result_with_reason(self):
        """A reason of any type replaces the default message."""
        assert to_result(Some(5), 'unexpected_empty_value') == Ok(5)
        assert to_result(Nothing, 'unexpected_empty_value') == Err('unexpected_empty_value')
        assert to_result(Nothing, KeyError('id')).error.args == ('id',)

    def test_to_bool(self):
        """to_bool() ignores the value."""
        assert to_bool(Some(5)) is True
        assert to_bool(Some(False)) is True
        assert to_bool(Nothing) is False

    def test_from_result(self):
        """from_result() drops the error."""
        assert from_result(Ok(5)) == Some(5)
        assert from_result(Err('boom')) is Nothing

    def test_from_result_rejects_other_values(self):
        """from_result() needs Ok or Err."""
        with pytest.raises(TypeError, match='expects Ok or Err'):
            from_result(Some(5))  # type: ignore[arg-type]
