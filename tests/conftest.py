import pytest

from snapkit.io.settings import NEXT_PUBLIC_SNAPKIT_ORG_ENV, SNAPKIT_ORG_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without Snapkit variables and outside any snapkit.env."""
    monkeypatch.delenv(SNAPKIT_ORG_ENV, raising=False)
    monkeypatch.delenv(NEXT_PUBLIC_SNAPKIT_ORG_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
