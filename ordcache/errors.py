"""Shared error types for ordcache."""

from __future__ import annotations


class OrdcacheError(Exception):
    """Base error type for ordcache."""


class InputError(OrdcacheError, ValueError):
    """Raised when a pair source or callback result is malformed."""
