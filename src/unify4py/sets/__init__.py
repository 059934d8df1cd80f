"""Set containers and set-algebra helpers.

`HashSet` is the container; `sequences` holds the equivalent operations for
plain iterables. Nothing in this package performs I/O or logging.
"""

from .hashset import HashSet

__all__ = ["HashSet"]
