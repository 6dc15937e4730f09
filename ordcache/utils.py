"""Shared utility functions for ordcache."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .errors import InputError

_DEFAULT_RNG = np.random.default_rng()


def as_pair(item: Any) -> Tuple[Any, Any]:
    """Validate a single ``(key, value)`` element and return it as a tuple."""
    if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
        raise InputError(f"Expected a (key, value) pair, got {item!r}")
    pair = tuple(item)
    if len(pair) != 2:
        raise InputError(f"Expected a (key, value) pair of length 2, got {len(pair)} items: {item!r}")
    return pair


def iter_pairs(source: Any) -> Iterator[Tuple[Any, Any]]:
    """
    Iterate a pair source as ``(key, value)`` tuples.

    Accepted sources:
        - objects exposing ``entries()`` (another OrderedCache)
        - mappings (dict, OrderedDict, ...), via ``items()``
        - any iterable of 2-item sequences
    """
    if hasattr(source, "entries") and callable(source.entries):
        yield from source.entries()
        return
    if isinstance(source, Mapping):
        yield from source.items()
        return
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise InputError(f"Unsupported pair source type: {type(source)!r}")
    for item in source:
        yield as_pair(item)


def flatten_pairs(sources: Sequence[Any]) -> list:
    """Concatenate the pairs of several sources, in argument order."""
    pairs = []
    for source in sources:
        pairs.extend(iter_pairs(source))
    return pairs


def _positional_capacity(fn: Callable, fallback: int = 1) -> Optional[int]:
    """Number of positional arguments ``fn`` accepts, or None for ``*args``."""
    # inspect.signature fails on builtins such as bool or int; pass ``fallback`` args then.
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return fallback

    count = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def adapt_callback(fn: Callable, this_arg: Any = None, min_args: int = 1) -> Callable:
    """
    Wrap ``fn`` so it can be called with a fixed argument list.

    Extra trailing positional arguments are dropped when ``fn`` declares fewer
    parameters, so ``lambda value: ...`` works wherever
    ``(value, key, cache)`` is passed. ``this_arg``, when given, is bound as
    the first positional argument. Callables without an inspectable
    signature receive the first ``min_args`` arguments.
    """
    if not callable(fn):
        raise InputError(f"Expected a callable, got {fn!r}")
    if this_arg is not None:
        fn = functools.partial(fn, this_arg)
    capacity = _positional_capacity(fn, min_args)
    if capacity is None:
        return fn

    def call(*args):
        return fn(*args[:capacity])

    return call


def choose(items: Sequence[Any], rng: Optional[np.random.Generator] = None) -> Any:
    """Uniformly pick one element of ``items``; None when empty."""
    if not items:
        return None
    rng = _DEFAULT_RNG if rng is None else rng
    return items[int(rng.integers(len(items)))]


def iter_elements(source: Any) -> Iterator[Any]:
    """
    Iterate the raw elements of ``source`` for element-wise construction.

    Caches and mappings yield their ``(key, value)`` pairs; other iterables
    yield their elements unchanged (a string yields its characters).
    """
    if (hasattr(source, "entries") and callable(source.entries)) or isinstance(source, Mapping):
        return iter_pairs(source)
    if not isinstance(source, Iterable):
        raise InputError(f"Unsupported source type: {type(source)!r}")
    return iter(source)
