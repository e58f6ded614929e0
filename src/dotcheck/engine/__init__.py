"""Execution engine: trial runner and shrink search."""

from dotcheck.engine.runner import Runner, quick, verbose
from dotcheck.engine.shrink_search import shrink_search

__all__ = ["Runner", "quick", "shrink_search", "verbose"]
