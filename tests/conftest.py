"""Global pytest fixtures for unify4py."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def element_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an element file under ``tmp_path`` and returning its path.

    Example:
        ```py
        def test_something(element_file):
            path = element_file("fruits.txt", "apple", "pear")
        ```
    """

    def make(name: str, *lines: str) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return make
