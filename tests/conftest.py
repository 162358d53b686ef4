"""
Shared fixtures for the parahash test suite.
"""
import pytest

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keeps PARAHASH_* settings and stray .env files from leaking into tests."""
    for name in ("REP", "PTLEN", "DTLEN", "OUTFILE", "LOG_LEVEL", "CONFIG"):
        # set first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(f"PARAHASH_{name}", "")
        monkeypatch.delenv(f"PARAHASH_{name}")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_text():
    return "Hello *world*.\n\nSecond  para."
