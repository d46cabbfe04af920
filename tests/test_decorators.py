"""Tests for decorators: @option, @optional, @safe."""

import pytest
from klaw_option import Nothing, Some, option, optional, return_, safe


class TestOptionDecorator:
    """Tests for @option decorator."""

    def test_returns_function_result(self):
        """@option returns the function's Option when nothing bails."""

        @option
        def total(order: dict):
            price = return_(order.get('price')).bail()
            qty = return_(order.get('qty')).bail()
            return Some(price * qty)

        assert total({'price': 3, 'qty': 2}) == Some(6)

    def test_bail_returns_nothing(self):
        """bail() on Nothing exits the function with Nothing."""
        reached = []

        @option
        def total(order: dict):
            price = return_(order.get('price')).bail()
            reached.append(price)
            qty = return_(order.get('qty')).bail()
            reached.append(qty)
            return Some(price * qty)

        assert total({'price': 3}) is Nothing
        assert reached == [3]

    def test_with_statement(self):
        """Entering a Nothing context exits the function with Nothing."""

        @option
        def double(value):
            with return_(value) as v:
                return Some(v * 2)

        assert double(4) == Some(8)
        assert double(None) is Nothing

    def test_other_exceptions_propagate(self):
        """@option only catches Propagate."""

        @option
        def boom():
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            boom()

    def test_preserves_function_name(self):
        """@option preserves function metadata."""

        @option
        def my_function():
            """My docstring."""
            return Nothing

        assert my_function.__name__ == 'my_function'
        assert my_function.__doc__ == 'My docstring.'


class TestOptionalDecorator:
    """Tests for @optional decorator."""

    def test_lifts_return_value(self):
        """@optional turns None into Nothing and values into Some."""

        @optional
        def find(users: dict, uid: int):
            return users.get(uid)

        assert find({1: 'ada'}, 1) == Some('ada')
        assert find({1: 'ada'}, 2) is Nothing

    def test_does_not_catch(self):
        """@optional lets exceptions through."""

        @optional
        def boom():
            raise KeyError('x')

        with pytest.raises(KeyError):
            boom()

    def test_works_on_methods(self):
        """@optional works on methods."""

        class Repo:
            def __init__(self):
                self.rows = {1: 'row'}

            @optional
            def get(self, key):
                return self.rows.get(key)

        assert Repo().get(1) == Some('row')
        assert Repo().get(2) is Nothing


class TestSafeDecorator:
    """Tests for @safe decorator."""

    def test_returns_some_on_success(self):
        """@safe lifts a successful return."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Some(5.0)

    def test_returns_nothing_on_exception(self):
        """@safe turns an exception into Nothing."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 0) is Nothing

    def test_none_return_is_nothing(self):
        """A None return is lifted to Nothing as well."""

        @safe
        def nothing_found():
            return None

        assert nothing_found() is Nothing

    def test_exceptions_param(self):
        """@safe(exceptions=...) catches only the listed exceptions."""

        @safe(exceptions=(ValueError,))
        def parse(text: str) -> int:
            if text == 'type':
                raise TypeError('type')
            return int(text)

        assert parse('42') == Some(42)
        assert parse('forty-two') is Nothing
        with pytest.raises(TypeError):
            parse('type')

    def test_preserves_function_name(self):
        """@safe preserves function metadata."""

        @safe
        def my_function():
            """My docstring."""
            return 1

        assert my_function.__name__ == 'my_function'
        assert my_function.__doc__ == 'My docstring.'
