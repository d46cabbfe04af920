"""Benchmarks for Option combinators.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_option import Nothing, Some, appl, bind, curry, flatten, flatten_enum, map, pipe, return_

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_return_none(self, benchmark):
        """Benchmark lifting None."""
        benchmark(return_, None)


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark the function-style combinators."""

    def test_map_some(self, benchmark):
        """Benchmark map on Some."""
        benchmark(map, Some(5), lambda x: x * 2)

    def test_bind_nothing(self, benchmark):
        """Benchmark bind on Nothing."""
        benchmark(bind, Nothing, lambda x: Some(x))

    def test_flatten_depth_10(self, benchmark):
        """Benchmark flattening ten levels."""
        option = Some(1)
        for _ in range(10):
            option = Some(option)
        benchmark(flatten, option)


# =============================================================================
# Applicative benchmarks
# =============================================================================


class TestAppl:
    """Benchmark partial application through appl."""

    def test_appl_chain_3(self, benchmark):
        """Benchmark saturating a three-argument function."""

        def add(a, b, c):
            return a + b + c

        def chain():
            return appl(appl(appl(Some(add), Some(1)), Some(2)), Some(3))

        benchmark(chain)

    def test_appl_chain_8(self, benchmark):
        """Benchmark saturating an eight-argument accumulator."""
        fn = Some(curry(lambda *xs: sum(xs), 8))
        args = [Some(i) for i in range(8)]

        def chain():
            option = fn
            for arg in args:
                option = option.appl(arg)
            return option

        benchmark(chain)


# =============================================================================
# Sequence benchmarks
# =============================================================================


class TestFlattenEnum:
    """Benchmark flatten_enum on collections."""

    def test_list_1000(self, benchmark):
        """Benchmark a list of 1000 Somes."""
        items = [Some(i) for i in range(1000)]
        benchmark(flatten_enum, items)

    def test_dict_1000(self, benchmark):
        """Benchmark a mapping of 1000 Somes."""
        items = {str(i): Some(i) for i in range(1000)}
        benchmark(flatten_enum, items)

    def test_pipe_3(self, benchmark):
        """Benchmark a three-step pipeline."""
        steps = (map(lambda x: x + 1), map(lambda x: x * 2), bind(lambda x: Some(x - 1)))
        benchmark(pipe, 5, *steps)
