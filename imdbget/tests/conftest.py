"""Shared fixtures for the imdb-get test suite."""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from imdbget.catalog.settings import CatalogSettings  # noqa: E402


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CatalogSettings:
    """Provide default settings unaffected by the caller's environment."""

    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("IMDBGET_"):
            monkeypatch.delenv(name)
    return CatalogSettings()
