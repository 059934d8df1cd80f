"""Fixtures for end-to-end runs of the `unify` command.

Each test runs inside an isolated directory that already holds three element
files, so commands can name them by relative path:

- ``a.txt``: 1, 2, 4, 2 (three distinct elements)
- ``b.txt``: 2, 3
- ``empty.txt``: no elements; loading it logs a warning
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name

ELEMENT_FILES = {
    "a.txt": "1\n2\n4\n2\n",
    "b.txt": "2\n3\n",
    "empty.txt": "",
}


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo -L overrides, which set levels on process-wide loggers."""
    names = list(logging.root.manager.loggerDict)
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name in list(logging.root.manager.loggerDict):
        logging.getLogger(name).setLevel(levels.get(name, logging.NOTSET))


@pytest.fixture
def runner() -> CliRunner:
    """CliRunner whose flight recorder defaults to ./latest.log.

    ``COLUMNS`` is widened so Rich does not wrap log lines mid-message.
    """
    return CliRunner(env={"UNIFY_LOG_PATH": "latest.log", "COLUMNS": "200"})


@pytest.fixture
def workdir(runner: CliRunner):
    """Isolated working directory populated with `ELEMENT_FILES`."""
    with runner.isolated_filesystem() as path:
        for name, text in ELEMENT_FILES.items():
            Path(name).write_text(text, encoding="utf-8")
        yield Path(path)
