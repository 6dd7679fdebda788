# tests/property/__init__.py
"""Property-based tests for quickverdict's own invariants.

The engine is checked with Hypothesis rather than with itself, so a bug in
quickverdict's generation or shrinking cannot hide its own test failures.

Test categories:
- strategies/: shrink finiteness, candidate ordering, logarithmic length reduction
- engine/: replay determinism, shrink soundness, report consistency
"""
