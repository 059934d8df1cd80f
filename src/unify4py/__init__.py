"""UNIFY4PY

A small utility library built around a generic hash set container with
membership, mutation and set-algebra operations, plus the ``unify`` command
that applies that algebra to element lists read from files.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
