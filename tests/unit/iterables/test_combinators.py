"""Unit tests for daygrid.iterables.combinators.

Besides results, several tests check *how far* a combinator pulls from its
source, using a counting iterator, since laziness is part of the contract.
"""

import itertools
import math

import pytest

from daygrid.iterables import (
    CursorView,
    EmptyError,
    EnumerateItem,
    LimitExceededError,
    UnderflowError,
    build,
    concat,
    count,
    enumerate_items,
    first_and_rest,
    group,
    group_by_first_element,
    group_by_last_element,
    numeric_range,
    once,
    take_first,
    take_last,
    unwrap,
    wrap,
)


class CountingIterator:
    """Iterator wrapper recording how many elements were pulled."""

    def __init__(self, iterable):
        self._iterator = iter(iterable)
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self):
        value = next(self._iterator)
        self.pulled += 1
        return value


# ============================================================================
#                           Creating iterables
# ============================================================================


def test_once_yields_exactly_one_element():
    """once(x) yields x and nothing else."""
    assert list(once("x")) == ["x"]


class TestBuild:
    """Tests for build()."""

    @staticmethod
    def test_concatenates_until_factory_returns_none():
        """Chunks are concatenated; None ends the sequence."""
        chunks = iter([[1, 2], [], [3]])
        assert list(build(lambda: next(chunks, None))) == [1, 2, 3]

    @staticmethod
    def test_factory_is_called_lazily():
        """The factory is only called when the previous chunk is exhausted."""
        calls = 0

        def factory():
            nonlocal calls
            calls += 1
            return [calls]

        numbers = build(factory)
        assert calls == 0
        assert list(itertools.islice(numbers, 3)) == [1, 2, 3]
        assert calls == 3


class TestNumericRange:
    """Tests for numeric_range()."""

    @staticmethod
    def test_single_argument_counts_from_zero():
        """numeric_range(n) is [0, n)."""
        assert list(numeric_range(4)) == [0, 1, 2, 3]

    @staticmethod
    def test_integer_step():
        """Integer arguments behave like the builtin range."""
        assert list(numeric_range(2, 11, 3)) == [2, 5, 8]

    @staticmethod
    def test_negative_step():
        """A negative step counts down, excluding the end."""
        assert list(numeric_range(3, 0, -1)) == [3, 2, 1]
        assert list(numeric_range(1.0, 0.0, -0.25)) == [1.0, 0.75, 0.5, 0.25]

    @staticmethod
    def test_float_step_does_not_accumulate_error():
        """The n-th value is a + n * step, not a running sum."""
        values = list(numeric_range(0, 1, 0.1))
        assert len(values) == 10
        assert values[-1] == pytest.approx(0.9)
        assert values[3] == 3 * 0.1

    @staticmethod
    def test_end_is_excluded_for_floats():
        """No value reaches the end of the interval."""
        assert all(v < 1.1 for v in numeric_range(0.0, 1.1, 0.1))

    @staticmethod
    def test_unbounded_end():
        """math.inf as the end gives an infinite sequence."""
        values = list(itertools.islice(numeric_range(0, math.inf, 2), 4))
        assert values == [0, 2, 4, 6]

    @staticmethod
    def test_empty_interval():
        """An interval with end before start is empty."""
        assert not list(numeric_range(5, 1))
        assert not list(numeric_range(0.5, 0.1, 0.1))

    @staticmethod
    def test_zero_step_is_rejected():
        """A zero step raises ValueError."""
        with pytest.raises(ValueError):
            list(numeric_range(0, 1, 0))


# ============================================================================
#                           Standard functions
# ============================================================================


class TestConcat:
    """Tests for concat()."""

    @staticmethod
    def test_yields_all_in_order():
        """Elements of each iterable follow one another."""
        assert list(concat([1, 2], (), iter([3]))) == [1, 2, 3]

    @staticmethod
    def test_advances_lazily():
        """The second iterable is untouched until the first is exhausted."""
        second = CountingIterator([10, 11])
        joined = concat([1, 2], second)
        assert [next(joined), next(joined)] == [1, 2]
        assert second.pulled == 0
        assert next(joined) == 10
        assert second.pulled == 1


class TestTakeFirst:
    """Tests for take_first()."""

    @staticmethod
    def test_takes_prefix_without_touching_the_rest():
        """Exactly n elements are pulled."""
        source = CountingIterator(range(100))
        assert list(take_first(source, 3)) == [0, 1, 2]
        assert source.pulled == 3

    @staticmethod
    def test_works_on_infinite_sources():
        """A prefix of an infinite sequence is fine."""
        assert list(take_first(itertools.count(), 2)) == [0, 1]

    @staticmethod
    def test_zero_takes_nothing():
        """n = 0 yields nothing."""
        assert not list(take_first([1, 2], 0))

    @staticmethod
    def test_underflow():
        """A source shorter than n raises UnderflowError."""
        with pytest.raises(UnderflowError) as excinfo:
            list(take_first([1, 2], 3))
        assert excinfo.value.requested == 3
        assert excinfo.value.produced == 2

    @staticmethod
    def test_underflow_is_raised_after_available_elements():
        """Elements that exist are still yielded before the error."""
        taken = take_first("ab", 3)
        assert next(taken) == "a"
        assert next(taken) == "b"
        with pytest.raises(UnderflowError):
            next(taken)


class TestTakeLast:
    """Tests for take_last()."""

    @staticmethod
    def test_takes_suffix_in_order():
        """The last n elements come out in original order."""
        assert list(take_last(range(10), 3)) == [7, 8, 9]

    @staticmethod
    def test_exact_length_returns_everything():
        """A source of length n is returned whole."""
        assert list(take_last("abc", 3)) == ["a", "b", "c"]

    @staticmethod
    def test_drains_the_source():
        """The whole source is consumed."""
        source = CountingIterator(range(10))
        list(take_last(source, 2))
        assert source.pulled == 10

    @staticmethod
    def test_zero_does_not_consume():
        """n = 0 yields nothing and pulls nothing."""
        source = CountingIterator(range(10))
        assert not list(take_last(source, 0))
        assert source.pulled == 0

    @staticmethod
    def test_underflow():
        """A source shorter than n raises UnderflowError."""
        with pytest.raises(UnderflowError) as excinfo:
            list(take_last([1, 2], 5))
        assert excinfo.value.requested == 5
        assert excinfo.value.produced == 2


class TestFirstAndRest:
    """Tests for first_and_rest()."""

    @staticmethod
    def test_splits_without_skipping_or_duplicating():
        """The rest continues right after the first element."""
        first, rest = first_and_rest(iter("abc"))
        assert first == "a"
        assert list(rest) == ["b", "c"]

    @staticmethod
    def test_pulls_exactly_one_element_eagerly():
        """Only the first element is pulled before the rest is iterated."""
        source = CountingIterator(range(5))
        first_and_rest(source)
        assert source.pulled == 1

    @staticmethod
    def test_rest_is_a_cursor_view():
        """The rest shares the source's cursor."""
        _, rest = first_and_rest([1, 2, 3])
        assert isinstance(rest, CursorView)

    @staticmethod
    def test_empty_source():
        """An exhausted source raises EmptyError."""
        with pytest.raises(EmptyError):
            first_and_rest([])


class TestCount:
    """Tests for count()."""

    @staticmethod
    def test_counts_elements():
        """Returns the number of elements."""
        assert count(iter("hello")) == 5
        assert count([]) == 0

    @staticmethod
    def test_fail_at_guards_infinite_sources():
        """Counting stops with LimitExceededError once the limit is reached."""
        with pytest.raises(LimitExceededError) as excinfo:
            count(itertools.count(), fail_at=100)
        assert excinfo.value.limit == 100

    @staticmethod
    def test_below_limit_is_fine():
        """A sequence shorter than the limit is counted normally."""
        assert count(range(99), fail_at=100) == 99


class TestEnumerateItems:
    """Tests for enumerate_items()."""

    @staticmethod
    def test_annotates_index_parity_and_first():
        """Each item carries index, parity and first flags; last is unknown."""
        items = list(enumerate_items("ab"))
        assert items == [
            EnumerateItem("a", 0, even=True, odd=False, first=True),
            EnumerateItem("b", 1, even=False, odd=True, first=False),
        ]
        assert all(item.last is None for item in items)

    @staticmethod
    def test_indicate_last():
        """With indicate_last, only the final item is marked last."""
        items = list(enumerate_items("abc", indicate_last=True))
        assert [item.value for item in items] == ["a", "b", "c"]
        assert [item.last for item in items] == [False, False, True]

    @staticmethod
    def test_indicate_last_uses_one_element_lookahead():
        """Producing an item pulls the following element as well."""
        source = CountingIterator(range(10))
        items = enumerate_items(source, indicate_last=True)
        next(items)
        assert source.pulled == 2

    @staticmethod
    def test_indicate_last_on_empty_source():
        """An empty source yields nothing."""
        assert not list(enumerate_items([], indicate_last=True))


# ============================================================================
#                           Cursor views
# ============================================================================


class TestWrapUnwrap:
    """Tests for wrap() / unwrap() and CursorView."""

    @staticmethod
    def test_view_continues_the_shared_cursor():
        """Breaking out of a loop over a view and iterating again resumes."""
        view = wrap(iter(range(6)))
        for value in view:
            if value == 2:
                break
        assert list(view) == [3, 4, 5]
        assert not list(view)

    @staticmethod
    def test_views_are_not_replays():
        """Two views over one cursor split the elements between them."""
        cursor = iter("abcd")
        first, second = wrap(cursor), wrap(cursor)
        assert next(iter(first)) == "a"
        assert next(iter(second)) == "b"
        assert list(first) == ["c", "d"]

    @staticmethod
    def test_unwrap_returns_the_cursor():
        """unwrap gives the iterator behind an iterable (or a view)."""
        cursor = iter([1, 2])
        assert unwrap(wrap(cursor)) is cursor
        assert next(unwrap([7])) == 7

    @staticmethod
    def test_wrapped_generator_survives_break():
        """A generator behind a view is not closed when a loop breaks."""

        def numbers():
            yield from range(4)

        view = wrap(numbers())
        for _ in view:
            break
        assert list(view) == [1, 2, 3]


# ============================================================================
#                           Grouping
# ============================================================================


class TestGroup:
    """Tests for group()."""

    @staticmethod
    def test_groups_adjacent_equal_keys():
        """Runs of equal keys are grouped; non-adjacent equal keys are not merged."""
        words = ["apple", "avocado", "banana", "blueberry", "apricot"]
        assert list(group(words, lambda w: w[0])) == [
            ["apple", "avocado"],
            ["banana", "blueberry"],
            ["apricot"],
        ]

    @staticmethod
    def test_single_group():
        """A sequence with one key gives one group."""
        assert list(group([1, 1, 1], lambda x: x)) == [[1, 1, 1]]

    @staticmethod
    def test_empty_source():
        """Grouping an empty sequence raises EmptyError on first pull."""
        groups = group([], lambda x: x)
        with pytest.raises(EmptyError):
            next(groups)

    @staticmethod
    def test_consumes_one_element_of_lookahead():
        """The first group is only known after the next group's first element."""
        source = CountingIterator([1, 1, 2, 2, 3])
        groups = group(source, lambda x: x)
        assert next(groups) == [1, 1]
        assert source.pulled == 3


class TestGroupByFirstElement:
    """Tests for group_by_first_element()."""

    @staticmethod
    def test_boundary_starts_a_new_group():
        """Matching elements open groups."""
        groups = group_by_first_element([0, 1, 2, 0, 1, 0], lambda x: x == 0)
        assert list(groups) == [[0, 1, 2], [0, 1], [0]]

    @staticmethod
    def test_first_group_may_start_without_boundary():
        """The seed element opens the first group even if it does not match."""
        groups = group_by_first_element([5, 6, 0, 1], lambda x: x == 0)
        assert list(groups) == [[5, 6], [0, 1]]

    @staticmethod
    def test_works_on_infinite_sources():
        """Groups are produced lazily from an unbounded source."""
        groups = group_by_first_element(itertools.count(), lambda x: x % 3 == 0)
        assert list(itertools.islice(groups, 3)) == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]

    @staticmethod
    def test_consumes_one_element_of_lookahead():
        """A group is only yielded once the next boundary has been pulled."""
        source = CountingIterator(range(10))
        groups = group_by_first_element(source, lambda x: x % 3 == 0)
        assert next(groups) == [0, 1, 2]
        assert source.pulled == 4

    @staticmethod
    def test_empty_source():
        """Grouping an empty sequence raises EmptyError on first pull."""
        with pytest.raises(EmptyError):
            next(group_by_first_element([], bool))


class TestGroupByLastElement:
    """Tests for group_by_last_element()."""

    @staticmethod
    def test_matching_element_closes_the_group():
        """Matching elements end groups; the trailing rest forms a last group."""
        groups = group_by_last_element([1, 2, 0, 3, 0, 4], lambda x: x == 0)
        assert list(groups) == [[1, 2, 0], [3, 0], [4]]

    @staticmethod
    def test_no_empty_trailing_group():
        """A source ending on a match does not produce an empty group."""
        groups = group_by_last_element([1, 0], lambda x: x == 0)
        assert list(groups) == [[1, 0]]

    @staticmethod
    def test_empty_source_gives_no_groups():
        """Nothing in, nothing out."""
        assert not list(group_by_last_element([], bool))

    @staticmethod
    def test_consumes_no_lookahead():
        """A group is yielded as soon as its closing element is pulled."""
        source = CountingIterator([1, 0, 2, 0, 3])
        groups = group_by_last_element(source, lambda x: x == 0)
        assert next(groups) == [1, 0]
        assert source.pulled == 2
