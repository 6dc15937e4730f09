"""Insertion-ordered key/value cache with positional and array-style operations."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import (
    Any,
    Callable,
    Generic,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    List,
    Optional,
    Tuple,
    TypeVar,
    ValuesView,
)

import numpy as np

from .constants.runtime import (
    DEFAULT_PROJECTION,
    NOT_FOUND_POSITION,
    STRING_CLOSE,
    STRING_EMPTY,
    STRING_ENTRY_SEPARATOR,
    STRING_KEY_VALUE_SEPARATOR,
    STRING_OPEN,
)
from .errors import InputError
from .projection import project
from .utils import adapt_callback, as_pair, choose, flatten_pairs, iter_elements, iter_pairs

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class OrderedCache(Generic[K, V]):
    """
    Ordered mapping of unique keys to values with array-like helpers.

    Entries keep insertion order; updating an existing key leaves it in
    place. A "position" is the 1-based rank of an element in a projection
    (the key sequence or the value sequence) and is recomputed from the
    current order on every query.

    Lookups never raise: misses return ``None`` (or ``-1`` for positions).
    Mutators return the cache itself so calls can be chained::

        cache = OrderedCache.of(("a", 1), ("b", 2)).set("c", 3).reverse()
    """

    def __init__(self, entries: Any = None):
        self._data: "OrderedDict[K, V]" = OrderedDict()
        if entries is not None:
            self.multi_set(entries)

    # ------------------------------------------------------------------
    # Core map operations
    # ------------------------------------------------------------------
    def set(self, key: K, value: V) -> "OrderedCache[K, V]":
        """Insert or update ``key``; new keys go to the end."""
        self._data[key] = value
        return self

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._data.get(key, default)

    def has(self, key: K) -> bool:
        return key in self._data

    def delete(self, key: K) -> bool:
        """Remove ``key``. Returns True if it was present."""
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def clear(self) -> None:
        self._data.clear()

    def entries(self) -> ItemsView[K, V]:
        return self._data.items()

    def keys(self) -> KeysView[K]:
        return self._data.keys()

    def values(self) -> ValuesView[V]:
        return self._data.values()

    def for_each(self, fn: Callable, this_arg: Any = None) -> None:
        """Call ``fn(value, key, cache)`` for every entry in order."""
        call = adapt_callback(fn, this_arg)
        for key, value in self._data.items():
            call(value, key, self)

    def get_key(self, value: V) -> Optional[K]:
        """Key of the first entry holding ``value``, or None."""
        return self.find(lambda key: self._data[key] == value, "key")

    def has_value(self, value: V) -> bool:
        return any(existing == value for existing in self._data.values())

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return iter(self._data.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedCache):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable container

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._data.items())!r})"

    def __str__(self) -> str:
        return self.to_string()

    def _replace(self, pairs: Iterable[Tuple[K, V]]) -> None:
        # Materialize first: ``pairs`` may be a view over our own storage.
        pairs = list(pairs)
        self._data.clear()
        self._data.update(pairs)

    # ------------------------------------------------------------------
    # Bulk construction & combination
    # ------------------------------------------------------------------
    def multi_set(self, *sources: Any) -> "OrderedCache[K, V]":
        """
        Merge one or more pair sources into the cache.

        Sources are applied in argument order, each in its own iteration
        order; later values win on key collisions.

        Raises:
            InputError: If a source is not iterable or yields a non-pair.
        """
        for source in sources:
            for key, value in list(iter_pairs(source)):
                self._data[key] = value
        return self

    def reset(self, *sources: Any) -> "OrderedCache[K, V]":
        """Drop every entry, then ``multi_set(*sources)``."""
        self._data.clear()
        return self.multi_set(*sources)

    @classmethod
    def of(cls, *pairs: Tuple[K, V]) -> "OrderedCache[K, V]":
        return cls(pairs)

    @classmethod
    def from_iterable(
        cls,
        source: Any,
        map_fn: Optional[Callable] = None,
        this_arg: Any = None,
    ) -> "OrderedCache[K, V]":
        """
        Create a cache from ``source``.

        Args:
            source: Pair source, or any iterable when ``map_fn`` is given.
            map_fn: Called as ``map_fn(element, index)`` with a 1-based index.
                Must return a ``(key, value)`` pair, or None to skip the element.
            this_arg: Bound as the first argument of ``map_fn``.
        """
        if map_fn is None:
            return cls(source)
        call = adapt_callback(map_fn, this_arg)
        cache = cls()
        for index, element in enumerate(iter_elements(source), start=1):
            update = call(element, index)
            if update is not None:
                key, value = as_pair(update)
                cache.set(key, value)
        return cache

    def clone(self) -> "OrderedCache[K, V]":
        """Shallow copy with the same entries in the same order."""
        return self.__class__(self)

    def concat(self, *items: Any) -> "OrderedCache[K, V]":
        """New cache holding this cache's entries followed by those of ``items``."""
        joined = self.clone()
        joined.multi_set(*items)
        return joined

    def join(self, *items: Any) -> "OrderedCache[K, V]":
        """In-place ``concat``."""
        return self.multi_set(*items)

    def equals(self, other: Any, order: bool = True) -> bool:
        """
        Compare with another cache.

        With ``order`` the entries must match pairwise in sequence; without
        it, every key of ``other`` must map to an equal value here.
        Non-caches and caches of a different size never compare equal.
        """
        if not self.is_cache(other):
            return False
        if self.size != other.size:
            return False
        if order:
            return list(self._data.items()) == list(other.entries())
        return all(
            key in self._data and self._data[key] == value
            for key, value in other.entries()
        )

    @staticmethod
    def is_cache(maybe_cache: Any) -> bool:
        return isinstance(maybe_cache, OrderedCache)

    # ------------------------------------------------------------------
    # Positional operations
    # ------------------------------------------------------------------
    def array(self, type: Optional[str] = DEFAULT_PROJECTION) -> List[Any]:
        """
        Snapshot the cache as a list.

        ``type`` picks the projection: key aliases (``k``, ``ke``, ``key``,
        ``keys``) give keys, ``both``/``entries``/``items`` give
        ``(key, value)`` tuples, anything else gives values.
        """
        return project(self._data, type)

    def position(self, search_element: Any, type: Optional[str] = DEFAULT_PROJECTION) -> int:
        """1-based rank of the first match in the projection, or -1."""
        arr = self.array(type)
        try:
            return arr.index(search_element) + 1
        except ValueError:
            return NOT_FOUND_POSITION

    def at(self, index: int) -> "OrderedCache[K, V]":
        """Single-entry cache for the zero-based ``index`` (negatives count from the end)."""
        pairs = self.array("both")
        try:
            pair = pairs[index]
        except IndexError:
            return self.__class__()
        return self.__class__.of(pair)

    def first(self, type: Optional[str] = DEFAULT_PROJECTION) -> Any:
        arr = self.array(type)
        return arr[0] if arr else None

    def last(self, type: Optional[str] = DEFAULT_PROJECTION) -> Any:
        arr = self.array(type)
        return arr[-1] if arr else None

    def random(
        self,
        type: Optional[str] = DEFAULT_PROJECTION,
        rng: Optional[np.random.Generator] = None,
    ) -> Any:
        """Uniformly random element of the projection, or None if empty."""
        return choose(self.array(type), rng)

    def set_at(
        self,
        new_key: K,
        new_value: V,
        position: int,
        remove: bool = False,
    ) -> "OrderedCache[K, V]":
        """
        Insert ``(new_key, new_value)`` before the entry at 1-based ``position``.

        ``position`` counts entries in the current order, so duplicate values
        never make the target ambiguous.

        Args:
            new_key: Key to insert. An existing entry under this key leaves
                its old slot.
            new_value: Value for ``new_key``.
            position: Target rank. Clamped to ``1..size + 1``; ``size + 1``
                appends.
            remove: Drop the entry previously at ``position``.
        """
        return self.multi_set_at(position, remove, [(new_key, new_value)])

    def multi_set_at(self, position: int, remove: bool, *sources: Any) -> "OrderedCache[K, V]":
        """``set_at`` for every pair of ``sources``, inserted in order at ``position``."""
        inserted = OrderedDict(flatten_pairs(sources))
        index = min(max(position - 1, 0), len(self._data))
        if index == len(self._data):
            logger.debug(f"Position {position} is past the end, appending {len(inserted)} entries")

        rebuilt: "OrderedDict[K, V]" = OrderedDict()
        for i, (key, value) in enumerate(self._data.items()):
            if i == index:
                rebuilt.update(inserted)
                if remove:
                    continue
            if key not in inserted:
                rebuilt[key] = value
        if index == len(self._data):
            rebuilt.update(inserted)

        self._replace(rebuilt.items())
        return self

    # ------------------------------------------------------------------
    # Functional transforms
    # ------------------------------------------------------------------
    def filter(self, predicate: Callable, this_arg: Any = None) -> "OrderedCache[K, V]":
        """New cache with the entries where ``predicate(value, key, cache)`` is truthy."""
        call = adapt_callback(predicate, this_arg)
        filtered = self.__class__()
        for key, value in self._data.items():
            if call(value, key, self):
                filtered.set(key, value)
        return filtered

    def hard_filter(self, predicate: Callable, this_arg: Any = None) -> "OrderedCache[K, V]":
        """In-place ``filter``."""
        filtered = self.filter(predicate, this_arg)
        self._replace(filtered.entries())
        return self

    def some(self, predicate: Callable, this_arg: Any = None) -> bool:
        call = adapt_callback(predicate, this_arg)
        return any(call(value, key, self) for key, value in self._data.items())

    def every(self, predicate: Callable, this_arg: Any = None) -> bool:
        call = adapt_callback(predicate, this_arg)
        return all(call(value, key, self) for key, value in self._data.items())

    def find(
        self,
        predicate: Callable,
        type: Optional[str] = DEFAULT_PROJECTION,
        this_arg: Any = None,
    ) -> Any:
        """First projection element for which ``predicate(element, index, array)`` holds."""
        arr = self.array(type)
        call = adapt_callback(predicate, this_arg)
        for index, element in enumerate(arr):
            if call(element, index, arr):
                return element
        return None

    def find_last(
        self,
        predicate: Callable,
        type: Optional[str] = DEFAULT_PROJECTION,
        this_arg: Any = None,
    ) -> Any:
        """Like ``find``, scanning from the end."""
        arr = self.array(type)
        call = adapt_callback(predicate, this_arg)
        for index in range(len(arr) - 1, -1, -1):
            if call(arr[index], index, arr):
                return arr[index]
        return None

    def map(self, callback: Callable, this_arg: Any = None) -> "OrderedCache":
        """
        New cache built from ``callback(pair, index, cache)`` results.

        ``index`` is 1-based. The callback returns a ``(key, value)`` pair,
        or None to leave the entry out.
        """
        call = adapt_callback(callback, this_arg)
        mapped = self.__class__()
        for index, pair in enumerate(list(self._data.items()), start=1):
            result = call(pair, index, self)
            if result is not None:
                key, value = as_pair(result)
                mapped.set(key, value)
        return mapped

    def reduce(
        self,
        callback: Callable,
        type: Optional[str] = DEFAULT_PROJECTION,
        initial: Any = _MISSING,
    ) -> Any:
        """
        Fold the projection left to right with ``callback(acc, element, index, array)``.

        Without ``initial`` the first element seeds the accumulator and the
        fold starts at index 1.

        Raises:
            InputError: If the projection is empty and no ``initial`` is given.
        """
        arr = self.array(type)
        return _fold(callback, arr, range(len(arr)), initial)

    def reduce_right(
        self,
        callback: Callable,
        type: Optional[str] = DEFAULT_PROJECTION,
        initial: Any = _MISSING,
    ) -> Any:
        """``reduce`` from right to left."""
        arr = self.array(type)
        return _fold(callback, arr, range(len(arr) - 1, -1, -1), initial)

    # ------------------------------------------------------------------
    # Structural slicing
    # ------------------------------------------------------------------
    def slice(self, start: Optional[int] = 0, end: Optional[int] = None) -> "OrderedCache[K, V]":
        """New cache with the entries ``[start:end]`` (zero-based, end exclusive)."""
        return self.__class__(list(self._data.items())[start:end])

    def splice(self, start: int, delete_count: Optional[int] = None, *items: Any) -> "OrderedCache[K, V]":
        """
        Remove and/or insert entries in place, starting at 1-based ``start``.

        Entries before ``start`` are kept. The pairs of ``items`` are inserted
        at ``start``; an original entry at ``position >= start`` survives iff
        ``position + inserted > len(result) + delete_count``, which drops
        exactly ``delete_count`` entries when the inserted keys are new.
        ``delete_count=None`` removes everything from ``start`` on.
        """
        inserted = flatten_pairs(items)
        if delete_count is None:
            delete_count = len(self._data)

        result: "OrderedDict[K, V]" = OrderedDict()
        placed = False
        for position, (key, value) in enumerate(self._data.items(), start=1):
            if position < start:
                result[key] = value
                continue
            if not placed:
                result.update(inserted)
                placed = True
            if position + len(inserted) > len(result) + delete_count and key not in result:
                result[key] = value
        if not placed:
            logger.debug(f"Splice start {start} is past the end, appending {len(inserted)} entries")
            result.update(inserted)

        self._replace(result.items())
        return self

    def fill(self, new_value: V, start: int = 1, end: Optional[int] = None) -> "OrderedCache[K, V]":
        """Set the value of every entry whose 1-based position is in ``[start, end]``."""
        if end is None:
            end = len(self._data)
        for position, key in enumerate(list(self._data), start=1):
            if start <= position <= end:
                self._data[key] = new_value
        return self

    def reverse(self) -> "OrderedCache[K, V]":
        for key in reversed(list(self._data)):
            self._data.move_to_end(key)
        return self

    def to_reversed(self) -> "OrderedCache[K, V]":
        return self.__class__(reversed(self._data.items()))

    def to_string(self) -> str:
        """Render as ``{ k1: v1, k2: v2 }`` using ``str()`` of keys and values."""
        if not self._data:
            return STRING_EMPTY
        body = STRING_ENTRY_SEPARATOR.join(
            f"{key}{STRING_KEY_VALUE_SEPARATOR}{value}" for key, value in self._data.items()
        )
        return f"{STRING_OPEN}{body}{STRING_CLOSE}"

    def bulk_delete(self, *keys: K) -> "OrderedCache[K, V]":
        for key in keys:
            self._data.pop(key, None)
        return self


def _fold(callback: Callable, arr: List[Any], indices: Iterable[int], initial: Any) -> Any:
    call = adapt_callback(callback, min_args=2)
    indices = iter(indices)
    if initial is _MISSING:
        try:
            acc = arr[next(indices)]
        except StopIteration:
            raise InputError("Cannot reduce an empty cache without an initial value") from None
    else:
        acc = initial
    for index in indices:
        acc = call(acc, arr[index], index, arr)
    return acc
