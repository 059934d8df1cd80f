"""CLI helpers for unify.

Utilities used by the command-line interface: loading element files into
sets and rendering sets back to text, parsing logger-level options, and
message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .elements import convert_element, load_set, parse_elements, render_set
from .messages import error, success, warn

__all__ = [
    "convert_element",
    "load_set",
    "parse_elements",
    "render_set",
    "error",
    "success",
    "warn",
]
