import pytest

from scicalc.evaluator import Evaluator


@pytest.fixture
def ev():
    """A fresh calculator session."""
    return Evaluator()
