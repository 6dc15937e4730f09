"""Tests for ordcache/utils.py — pair sources, callbacks and random choice."""

from collections import OrderedDict

import numpy as np
import pytest

from ordcache import InputError, OrderedCache
from ordcache.utils import adapt_callback, as_pair, choose, flatten_pairs, iter_elements, iter_pairs


class TestPairSources:
    def test_iter_pairs_sequences(self):
        assert list(iter_pairs([["a", 1], ("b", 2)])) == [("a", 1), ("b", 2)]

    def test_iter_pairs_mapping(self):
        assert list(iter_pairs(OrderedDict([("a", 1), ("b", 2)]))) == [("a", 1), ("b", 2)]

    def test_iter_pairs_cache(self):
        assert list(iter_pairs(OrderedCache.of(("a", 1)))) == [("a", 1)]

    def test_iter_pairs_generator(self):
        assert list(iter_pairs((k, k * 2) for k in range(2))) == [(0, 0), (1, 2)]

    def test_iter_pairs_rejects_non_iterable(self):
        with pytest.raises(InputError, match="Unsupported pair source"):
            list(iter_pairs(3.5))

    def test_as_pair(self):
        assert as_pair(["a", 1]) == ("a", 1)
        with pytest.raises(InputError):
            as_pair(("a",))
        with pytest.raises(InputError):
            as_pair("ab")

    def test_flatten_pairs(self):
        assert flatten_pairs([[("a", 1)], {"b": 2}]) == [("a", 1), ("b", 2)]

    def test_iter_elements_raw(self):
        assert list(iter_elements([1, 2])) == [1, 2]
        assert list(iter_elements({"a": 1})) == [("a", 1)]
        with pytest.raises(InputError):
            iter_elements(None)


class TestAdaptCallback:
    def test_drops_extra_arguments(self):
        call = adapt_callback(lambda value: value * 2)
        assert call(3, "ignored", None) == 6

    def test_varargs_receive_everything(self):
        call = adapt_callback(lambda *args: args)
        assert call(1, 2, 3) == (1, 2, 3)

    def test_this_arg(self):
        call = adapt_callback(lambda this, value: (this, value), this_arg="ctx")
        assert call(1, 2) == ("ctx", 1)

    def test_builtin_without_signature(self):
        assert adapt_callback(bool)(0, "key", None) is False
        assert adapt_callback(max, min_args=2)(1, 5, 0, []) == 5

    def test_rejects_non_callable(self):
        with pytest.raises(InputError):
            adapt_callback("not callable")


class TestChoose:
    def test_empty(self):
        assert choose([]) is None

    def test_seeded(self):
        items = ["a", "b", "c", "d"]
        first = choose(items, np.random.default_rng(0))
        assert first == choose(items, np.random.default_rng(0))
        assert first in items
