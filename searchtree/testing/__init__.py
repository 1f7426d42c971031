"""Testing utilities for searchtree consumers."""

from .fixtures import TreeInvariantChecker

__all__ = ['TreeInvariantChecker']
