"""Shared fixtures."""

from pathlib import Path

import pytest

from android_missing_translations.utils.logging import reset_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test gets handlers bound to its own captured streams."""
    reset_logger()
    yield
    reset_logger()


def write_resources(directory: Path, body: str, file_name: str = 'strings.xml') -> Path:
    """Write a <resources> document into directory/file_name."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name
    path.write_text(
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<resources>\n{body}\n</resources>\n',
        encoding='utf-8'
    )
    return path


@pytest.fixture
def sample_project(tmp_path):
    """
    values/strings.xml     greeting, farewell
    values-fr/strings.xml  greeting
    values-de/strings.xml  (no strings)
    """
    res = tmp_path / 'app' / 'src' / 'main' / 'res'
    write_resources(res / 'values', (
        '    <string name="greeting">Hello</string>\n'
        '    <string name="farewell">Bye</string>'
    ))
    write_resources(res / 'values-fr', '    <string name="greeting">Bonjour</string>')
    write_resources(res / 'values-de', '')
    return tmp_path


@pytest.fixture
def make_resources():
    """Factory fixture around write_resources."""
    return write_resources
