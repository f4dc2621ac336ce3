#!/usr/bin/env python3
"""
Tests for the iteration protocol and the adaptors.
"""

import unittest
from unittest import mock

from lazyseq import SeqConfig
from lazyseq.errors import (
    InvalidArgumentError, MissingArgumentError, NoSuchElementError
)
from lazyseq.iterators import (
    DistinctIterator, DropIterator, EmptyIterator, FilterIterator,
    FlatMapIterator, IndexedValue, IndexingIterator, IterableIterator,
    IteratorState, MapIterator, SeqIterator, TakeIterator, as_seq_iterator
)
from lazyseq.iterators import adaptors
from lazyseq.sequences import of


class CountingIterator(SeqIterator):
    """List-backed iterator recording how often it is pulled."""

    def __init__(self, items):
        self.items = list(items)
        self.position = 0
        self.pulls = 0

    def has_next(self):
        return self.position < len(self.items)

    def next(self):
        if not self.has_next():
            raise NoSuchElementError("CountingIterator is exhausted")
        self.pulls += 1
        element = self.items[self.position]
        self.position += 1
        return element


def drain(iterator):
    result = []
    while iterator.has_next():
        result.append(iterator.next())
    return result


class TestProtocol(unittest.TestCase):
    """Test the core pull contract."""

    def test_empty_iterator(self):
        iterator = EmptyIterator()
        self.assertFalse(iterator.has_next())
        self.assertFalse(iterator.has_next())
        with self.assertRaises(NoSuchElementError):
            iterator.next()
        self.assertEqual(list(iterator), [])

    def test_iterable_iterator(self):
        iterator = IterableIterator(iter([1, None, 3]))
        self.assertTrue(iterator.has_next())
        self.assertTrue(iterator.has_next())
        self.assertEqual(iterator.next(), 1)
        self.assertIsNone(iterator.next())
        self.assertEqual(iterator.next(), 3)
        self.assertFalse(iterator.has_next())
        with self.assertRaises(NoSuchElementError):
            iterator.next()

    def test_iterable_iterator_lookahead_pulls_once(self):
        source = iter(range(3))
        iterator = IterableIterator(source)
        for _ in range(5):
            self.assertTrue(iterator.has_next())
        # Only the buffered element was taken from the Python iterator
        self.assertEqual(next(source), 1)
        self.assertEqual(iterator.next(), 0)

    def test_next_without_has_next(self):
        iterator = IterableIterator(iter("ab"))
        self.assertEqual(iterator.next(), "a")
        self.assertEqual(iterator.next(), "b")
        with self.assertRaises(NoSuchElementError):
            iterator.next()

    def test_python_iteration_bridge(self):
        iterator = IterableIterator(iter([1, 2, 3]))
        self.assertIs(iter(iterator), iterator)
        self.assertEqual(next(iterator), 1)
        self.assertEqual(list(iterator), [2, 3])
        with self.assertRaises(StopIteration):
            next(iterator)

    def test_buffered_states(self):
        iterator = IterableIterator(iter([7]))
        self.assertIs(iterator.state, IteratorState.NOT_READY)
        iterator.has_next()
        self.assertIs(iterator.state, IteratorState.READY)
        iterator.next()
        self.assertIs(iterator.state, IteratorState.NOT_READY)
        iterator.has_next()
        self.assertIs(iterator.state, IteratorState.DONE)
        iterator.has_next()
        self.assertIs(iterator.state, IteratorState.DONE)

    def test_as_seq_iterator(self):
        counting = CountingIterator([1])
        self.assertIs(as_seq_iterator(counting), counting)
        self.assertEqual(drain(as_seq_iterator([1, 2])), [1, 2])
        self.assertEqual(drain(as_seq_iterator(of(3, 4))), [3, 4])
        self.assertEqual(drain(as_seq_iterator(x for x in "xy")), ["x", "y"])

        with self.assertRaises(TypeError):
            as_seq_iterator(42)
        with self.assertRaises(MissingArgumentError):
            as_seq_iterator(None)


class TestFilterIterator(unittest.TestCase):
    """Test FilterIterator."""

    def test_filter(self):
        iterator = FilterIterator(CountingIterator(range(10)), lambda x: x % 3 == 0)
        self.assertEqual(drain(iterator), [0, 3, 6, 9])

    def test_repeated_has_next_does_not_advance(self):
        upstream = CountingIterator([1, 2, 3, 4])
        iterator = FilterIterator(upstream, lambda x: x % 2 == 0)
        for _ in range(4):
            self.assertTrue(iterator.has_next())
        self.assertEqual(upstream.pulls, 2)
        self.assertEqual(iterator.next(), 2)
        self.assertEqual(iterator.next(), 4)
        self.assertFalse(iterator.has_next())

    def test_done_is_final(self):
        upstream = CountingIterator([1, 3])
        iterator = FilterIterator(upstream, lambda x: x > 5)
        self.assertFalse(iterator.has_next())
        self.assertIs(iterator.state, IteratorState.DONE)
        upstream.items.append(10)
        self.assertFalse(iterator.has_next())
        with self.assertRaises(NoSuchElementError):
            iterator.next()

    def test_none_elements_pass_through(self):
        iterator = FilterIterator(CountingIterator([None, 0, None]), lambda x: x is None)
        self.assertEqual(drain(iterator), [None, None])

    def test_missing_predicate(self):
        with self.assertRaises(MissingArgumentError):
            FilterIterator(CountingIterator([]), None)


class TestDistinctIterator(unittest.TestCase):
    """Test DistinctIterator and its seen-set."""

    def tearDown(self):
        SeqConfig.reset()

    def test_distinct_keeps_first_occurrence(self):
        iterator = DistinctIterator(CountingIterator([3, 1, 3, 2, 1, 3]))
        self.assertEqual(drain(iterator), [3, 1, 2])
        self.assertEqual(iterator.seen, {1, 2, 3})

    def test_value_equality(self):
        iterator = DistinctIterator(CountingIterator([1, 1.0, True, "1", (1,), (1,)]))
        self.assertEqual(drain(iterator), [1, "1", (1,)])

    def test_unhashable_element(self):
        iterator = DistinctIterator(CountingIterator([[1], [1]]))
        with self.assertRaises(TypeError):
            iterator.has_next()

    def test_memory_warning_logged_once(self):
        SeqConfig.set_defaults(distinct_check_interval=2, memory_threshold=0.5)
        with mock.patch.object(adaptors.psutil, 'virtual_memory',
                               return_value=mock.Mock(percent=95.0)) as memory:
            with self.assertLogs('lazyseq.iterators.adaptors', level='WARNING') as logs:
                result = drain(DistinctIterator(CountingIterator(range(10))))

        self.assertEqual(result, list(range(10)))
        self.assertEqual(len(logs.records), 1)
        self.assertIn("95.0%", logs.output[0])
        self.assertEqual(memory.call_count, 1)

    def test_no_warning_below_threshold(self):
        SeqConfig.set_defaults(distinct_check_interval=3)
        with mock.patch.object(adaptors.psutil, 'virtual_memory',
                               return_value=mock.Mock(percent=10.0)) as memory, \
                mock.patch.object(adaptors.logger, 'warning') as warning:
            drain(DistinctIterator(CountingIterator(range(9))))

        self.assertEqual(memory.call_count, 3)
        warning.assert_not_called()


class TestFlatMapIterator(unittest.TestCase):
    """Test FlatMapIterator."""

    def test_expansion(self):
        iterator = FlatMapIterator(CountingIterator([1, 2, 3]), lambda x: [x, x * 10])
        self.assertEqual(drain(iterator), [1, 10, 2, 20, 3, 30])

    def test_empty_expansions_are_skipped(self):
        upstream = CountingIterator(range(5))
        iterator = FlatMapIterator(upstream, lambda x: [] if x != 3 else ["three"])
        self.assertTrue(iterator.has_next())
        self.assertEqual(upstream.pulls, 4)
        self.assertEqual(iterator.next(), "three")
        self.assertFalse(iterator.has_next())
        self.assertEqual(upstream.pulls, 5)

    def test_all_empty(self):
        iterator = FlatMapIterator(CountingIterator(range(100)), lambda x: ())
        self.assertFalse(iterator.has_next())
        with self.assertRaises(NoSuchElementError):
            iterator.next()

    def test_sequence_like_results(self):
        results = {1: of("a", "b"), 2: IterableIterator(iter("c")), 3: "de"}
        iterator = FlatMapIterator(CountingIterator([1, 2, 3]), results.get)
        self.assertEqual(drain(iterator), ["a", "b", "c", "d", "e"])

    def test_next_without_has_next(self):
        iterator = FlatMapIterator(CountingIterator([[], [1]]), lambda x: x)
        self.assertEqual(iterator.next(), 1)

    def test_non_iterable_result(self):
        iterator = FlatMapIterator(CountingIterator([1]), lambda x: x)
        with self.assertRaises(TypeError):
            iterator.has_next()


class TestMapIterator(unittest.TestCase):
    """Test MapIterator."""

    def test_map(self):
        calls = []

        def double(x):
            calls.append(x)
            return x * 2

        iterator = MapIterator(CountingIterator([1, 2, 3]), double)
        self.assertTrue(iterator.has_next())
        self.assertEqual(calls, [])
        self.assertEqual(drain(iterator), [2, 4, 6])
        self.assertEqual(calls, [1, 2, 3])

    def test_exhausted(self):
        iterator = MapIterator(CountingIterator([]), str)
        with self.assertRaises(NoSuchElementError):
            iterator.next()

    def test_not_callable(self):
        with self.assertRaises(TypeError):
            MapIterator(CountingIterator([]), "upper")


class TestDropTakeIterators(unittest.TestCase):
    """Test DropIterator and TakeIterator."""

    def test_drop(self):
        self.assertEqual(drain(DropIterator(CountingIterator(range(5)), 2)), [2, 3, 4])
        self.assertEqual(drain(DropIterator(CountingIterator(range(5)), 0)), [0, 1, 2, 3, 4])
        self.assertEqual(drain(DropIterator(CountingIterator(range(5)), 9)), [])

    def test_drop_is_lazy(self):
        upstream = CountingIterator(range(5))
        iterator = DropIterator(upstream, 3)
        self.assertEqual(upstream.pulls, 0)
        self.assertEqual(iterator.next(), 3)
        self.assertEqual(upstream.pulls, 4)

    def test_take(self):
        self.assertEqual(drain(TakeIterator(CountingIterator(range(5)), 2)), [0, 1])
        self.assertEqual(drain(TakeIterator(CountingIterator(range(5)), 0)), [])
        self.assertEqual(drain(TakeIterator(CountingIterator(range(2)), 9)), [0, 1])

    def test_take_does_not_pull_extra(self):
        upstream = CountingIterator(range(100))
        iterator = TakeIterator(upstream, 3)
        self.assertEqual(drain(iterator), [0, 1, 2])
        self.assertEqual(upstream.pulls, 3)
        self.assertFalse(iterator.has_next())
        with self.assertRaises(NoSuchElementError):
            iterator.next()
        self.assertEqual(upstream.pulls, 3)

    def test_take_counts_failed_pull(self):
        def reject_one(x):
            if x == 1:
                raise ValueError("bad element")
            return x

        iterator = TakeIterator(MapIterator(CountingIterator([1, 2, 3]), reject_one), 1)
        with self.assertRaises(ValueError):
            iterator.next()
        self.assertEqual(iterator.count, 0)
        self.assertFalse(iterator.has_next())
        self.assertEqual(drain(iterator), [])

    def test_negative_count(self):
        with self.assertRaises(InvalidArgumentError):
            DropIterator(CountingIterator([]), -1)
        with self.assertRaises(InvalidArgumentError):
            TakeIterator(CountingIterator([]), -1)
        with self.assertRaises(ValueError):
            TakeIterator(CountingIterator([]), -5)

    def test_non_integer_count(self):
        with self.assertRaises(TypeError):
            TakeIterator(CountingIterator([]), 1.5)


class TestIndexingIterator(unittest.TestCase):
    """Test IndexingIterator."""

    def test_indices(self):
        iterator = IndexingIterator(CountingIterator("abc"))
        result = drain(iterator)
        self.assertEqual(result, [(0, "a"), (1, "b"), (2, "c")])
        self.assertIsInstance(result[0], IndexedValue)
        self.assertEqual(result[2].index, 2)
        self.assertEqual(result[2].value, "c")

    def test_has_next_does_not_count(self):
        iterator = IndexingIterator(CountingIterator("ab"))
        iterator.has_next()
        iterator.has_next()
        self.assertEqual(iterator.next().index, 0)
        self.assertEqual(iterator.index, 1)


class TestAdaptorChains(unittest.TestCase):
    """Test adaptors composed by hand."""

    def test_chain(self):
        upstream = CountingIterator(range(1, 100))
        iterator = TakeIterator(
            MapIterator(
                FilterIterator(DropIterator(upstream, 10), lambda x: x % 7 == 0),
                lambda x: -x),
            2)
        self.assertEqual(drain(iterator), [-14, -21])
        self.assertEqual(upstream.pulls, 21)

    def test_repr_shows_chain(self):
        iterator = TakeIterator(MapIterator(EmptyIterator(), str), 4)
        self.assertEqual(repr(iterator),
                         "TakeIterator(MapIterator(EmptyIterator()), count=4)")


if __name__ == "__main__":
    unittest.main()
