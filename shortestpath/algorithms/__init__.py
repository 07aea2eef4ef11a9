"""Shortest-path algorithms and the types they share.

Import from the submodules directly (``shortestpath.algorithms.spf``);
this package keeps no re-exports so ``shortestpath.config`` can depend on
``shortestpath.algorithms.base`` without an import cycle.
"""
