import os
import shutil
import sys
from typing import Iterator

import pytest

from pygmentizer import base
from pygmentizer.highlighter import AsyncHighlighter, Highlighter

RESOURCE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "resource")


def find_pygmentize() -> str:
    executable = shutil.which("pygmentize")
    if executable is not None:
        return executable
    # Pygments installed in a virtual environment that is not on $PATH.
    candidate = os.path.join(os.path.dirname(sys.executable), "pygmentize")
    if os.access(candidate, os.X_OK):
        return candidate
    pytest.skip("pygmentize executable not found")


@pytest.fixture(scope="session")
def pygmentize() -> str:
    return find_pygmentize()


@pytest.fixture
def settings(monkeypatch, tmp_path) -> Iterator[str]:
    """An empty settings directory, so that no real configuration is read."""
    monkeypatch.setenv("PYGMENTIZER_HOME", str(tmp_path))
    base.reset_configuration()
    settings_dir = os.path.join(str(tmp_path), "etc")
    os.mkdir(settings_dir)
    yield settings_dir
    base.reset_configuration()


@pytest.fixture
def highlighter(pygmentize: str) -> Highlighter:
    return Highlighter(pygmentize)


@pytest.fixture
def async_highlighter(pygmentize: str) -> AsyncHighlighter:
    return AsyncHighlighter(pygmentize)


def resource_path(filename: str) -> str:
    return os.path.join(RESOURCE_DIR, filename)


__all__ = [
    "pygmentize",
    "settings",
    "highlighter",
    "async_highlighter",
    "resource_path",
]
