"""Shared test fixtures for binding-fixups."""

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def loader(tmp_path):
    """A copy of the generated loader, named index.js."""
    target = tmp_path / "index.js"
    shutil.copyfile(FIXTURES / "index.js", target)
    return target


@pytest.fixture
def forbid_file_access(monkeypatch):
    """Fail the test if the patcher opens any file."""

    def _fail(*args, **kwargs):
        raise AssertionError(f"unexpected file access: {args!r}")

    monkeypatch.setattr("binding_fixups.patcher.open", _fail, raising=False)
