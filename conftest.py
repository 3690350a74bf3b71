import pytest

from bms.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # --output stores the mode in the environment; reset it after every test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    yield
