"""Configuration utilities for unify4py.

This module centralizes the constants and environment-derived defaults used by
the ``unify`` command and its logging setup.
"""

import logging
import math
from collections.abc import Callable
from pathlib import Path

from platformdirs import user_log_dir

from .errors import UnknownElementTypeError

APP_NAME = "unify"  # pragma: no mutate
ENV_PREFIX = "UNIFY"  # pragma: no mutate

ELEMENT_TYPE_ENV = f"{ENV_PREFIX}_ELEMENT_TYPE"  # pragma: no mutate
DEFAULT_ELEMENT_TYPE = "str"  # pragma: no mutate

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

# Third-party loggers that are quieted unless overridden with -L NAME=LEVEL
DEFAULT_LOGGER_LEVELS: dict[str, int] = {"click_extra": logging.WARNING}


def _float_element(text: str) -> float:
    # NaN never equals itself and would not collapse to one element
    value = float(text)
    if math.isnan(value):
        raise ValueError(f"NaN is not a valid element: {text!r}")
    return value


ELEMENT_TYPES: dict[str, Callable[[str], object]] = {
    "str": str,
    "int": int,
    "float": _float_element,
}


def default_log_path() -> Path:
    """Return the default flight-recorder file path.

    The file lives in the per-user log directory reported by ``platformdirs``;
    the directory is created if it does not exist yet.

    Returns:
        ``<user log dir>/latest.log``.
    """
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"


def get_element_converter(type_name: str) -> Callable[[str], object]:
    """Look up the converter registered for ``type_name``.

    Args:
        type_name: One of the keys of `ELEMENT_TYPES`.

    Returns:
        A callable turning the textual form of an element into its value.

    Raises:
        UnknownElementTypeError: If no converter is registered for the name.
    """
    try:
        return ELEMENT_TYPES[type_name]
    except KeyError as e:
        raise UnknownElementTypeError(type_name, list(ELEMENT_TYPES)) from e
