"""Transform combinators: map, filter, filter_map, flat_map, flatten, tap,
enumerate, scan.

All of them are lazy: callbacks run only when the result is pulled, and only
as many upstream elements are consumed as needed.
"""

from unittest.mock import Mock, call

import pytest

import lazyseq as ls
from lazyseq import Seq


# --- map --------------------------------------------------------------------

def test_map_returns_seq():
    assert isinstance(ls.map(lambda x: x, [1]), Seq)


def test_map_transforms_each_element():
    assert ls.collect(ls.map(lambda x: x + 1, [1, 2, 3])) == [2, 3, 4]


@pytest.mark.parametrize("items", [[], [1], [3, 1, 2], list(range(20))])
def test_map_preserves_length_and_order(items):
    fn = lambda x: x * 10

    result = ls.collect(ls.map(fn, items))
    assert len(result) == len(items)
    assert result == [fn(x) for x in items]


def test_map_calls_fn_once_per_pulled_element():
    fn = Mock(side_effect=lambda x: x * 2)
    seq = ls.map(fn, [1, 2, 3])
    fn.assert_not_called()

    assert next(seq) == 2
    assert fn.call_count == 1
    assert next(seq) == 4
    assert fn.call_count == 2


def test_map_pulls_upstream_one_at_a_time(counting_source):
    source = counting_source([1, 2, 3])
    seq = ls.map(str, source)

    assert source.pulled == 0
    next(seq)
    assert source.pulled == 1


def test_map_over_infinite_sequence():
    assert ls.collect(ls.take(3, ls.map(lambda x: x + 1, ls.repeat(0)))) == [1, 1, 1]


def test_callback_errors_propagate():
    def boom(x):
        raise RuntimeError("boom")

    seq = ls.map(boom, [1])
    with pytest.raises(RuntimeError, match="boom"):
        next(seq)


# --- filter -----------------------------------------------------------------

def test_filter_keeps_matching_elements():
    assert ls.collect(ls.filter(lambda x: x % 2 == 0, [1, 2, 3])) == [2]


def test_filter_result_is_ordered_subsequence():
    items = [5, 8, 1, 9, 4, 7]
    pred = lambda x: x > 4

    result = ls.collect(ls.filter(pred, items))
    assert result == [5, 8, 9, 7]
    assert all(pred(x) for x in result)


def test_filter_consumes_rejected_elements(counting_source):
    source = counting_source([1, 3, 4, 5])
    seq = ls.filter(lambda x: x % 2 == 0, source)

    assert next(seq) == 4
    assert source.pulled == 3


# --- filter_map -------------------------------------------------------------

def test_filter_map_yields_mapped_result():
    seq = ls.filter_map(lambda x: "haha" if x == 2 else None, [1, 2, 3])

    assert ls.collect(seq) == ["haha"]


@pytest.mark.parametrize("falsy", [0, "", False, None, [], {}])
def test_filter_map_drops_falsy_results(falsy):
    seq = ls.filter_map(lambda x: falsy if x == 1 else x, [1, 2])

    assert ls.collect(seq) == [2]


# --- enumerate --------------------------------------------------------------

def test_enumerate_is_value_then_index():
    assert ls.collect(ls.enumerate([1, 2, 3])) == [(1, 0), (2, 1), (3, 2)]


def test_enumerate_empty():
    assert ls.collect(ls.enumerate([])) == []


# --- scan -------------------------------------------------------------------

def test_scan_yields_running_states_without_seed():
    seq = ls.scan(lambda acc, x: acc + x, 0, [1, 2, 3])

    assert ls.collect(seq) == [1, 3, 6]


def test_scan_empty_yields_nothing():
    assert ls.collect(ls.scan(lambda acc, x: acc + x, 100, [])) == []


def test_scan_is_lazy():
    fn = Mock(side_effect=lambda acc, x: acc + x)
    seq = ls.scan(fn, 0, [1, 2, 3])
    fn.assert_not_called()

    assert next(seq) == 1
    fn.assert_called_once_with(0, 1)


# --- flat_map / flatten -----------------------------------------------------

def test_flat_map_splices_sequences():
    assert ls.collect(ls.flat_map(lambda x: [x, x], [1, 2])) == [1, 1, 2, 2]


def test_flat_map_passes_non_sequences_through():
    assert ls.collect(ls.flat_map(lambda x: x + 1, [1, 2])) == [2, 3]


def test_flat_map_does_not_split_strings():
    assert ls.collect(ls.flat_map(lambda x: "ab", [1, 2])) == ["ab", "ab"]


def test_flat_map_skips_empty_results():
    assert ls.collect(ls.flat_map(lambda x: [] if x % 2 else [x], [1, 2, 3, 4])) == [2, 4]


def test_flat_map_accepts_seq_results():
    seq = ls.flat_map(lambda x: ls.take(x, ls.repeat(x)), [1, 2, 3])

    assert ls.collect(seq) == [1, 2, 2, 3, 3, 3]


def test_flat_map_is_lazy_over_inner_sequences(counting_source):
    inner = counting_source([1, 2, 3])
    seq = ls.flat_map(lambda x: inner, [None])

    assert next(seq) == 1
    assert inner.pulled == 1


def test_flatten_flattens_one_level():
    assert ls.collect(ls.flatten([[1, 2], [3]])) == [1, 2, 3]
    assert ls.collect(ls.flatten([[1, [2]], [3]])) == [1, [2], 3]


def test_flatten_mixes_scalars_and_sequences():
    assert ls.collect(ls.flatten([1, [2, 3], (4,)])) == [1, 2, 3, 4]


# --- tap / inspect ----------------------------------------------------------

def test_tap_passes_elements_through():
    fn = Mock(return_value="ignored")
    seq = ls.tap(fn, [1, 2, 3])

    assert ls.collect(seq) == [1, 2, 3]
    assert fn.call_args_list == [call(1), call(2), call(3)]


def test_tap_runs_effect_only_when_pulled():
    fn = Mock()
    seq = ls.tap(fn, [1, 2, 3])
    fn.assert_not_called()

    next(seq)
    fn.assert_called_once_with(1)


def test_inspect_is_tap():
    assert ls.inspect is ls.tap
