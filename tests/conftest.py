"""Shared test fixtures."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so random-input tests are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def write_file(tmp_path):
    """Write *text* to a file under tmp_path and return its path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
