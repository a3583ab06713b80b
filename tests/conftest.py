import pytest

from livr import reset_default_rules


@pytest.fixture(autouse=True)
def clean_default_rules():
    """Keep process-wide rule registrations from leaking between tests."""
    reset_default_rules()
    yield
    reset_default_rules()


class Spy:
    """Rule builder that counts builds and field validator calls."""

    def __init__(self, error: str = ""):
        self.error = error
        self.builds = 0
        self.calls = 0
        self.seen: list = []

    def __call__(self, *args):
        self.builds += 1

        def validator(value, record):
            self.calls += 1
            self.seen.append(value)
            return self.error

        return validator


@pytest.fixture
def make_spy():
    return Spy
