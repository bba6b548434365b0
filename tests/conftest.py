"""Root test configuration — isolate tests from the caller's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDRENAME_* variables so settings come only from what a test sets."""
    for name in list(os.environ):
        if name.startswith("MDRENAME_"):
            monkeypatch.delenv(name)
