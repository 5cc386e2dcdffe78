"""
Shared fixtures. The log directory is redirected before woro is imported
because Settings reads the environment at import time.
"""
import os
import tempfile

os.environ.setdefault("WORO_LOG_DIR", tempfile.mkdtemp(prefix="woro-log-"))

import pytest

from woro.models import Word
from woro.persistence import PersistenceGateway
from woro.quiz import QuizEngine, WordSelector


class SequenceSelector(WordSelector):
    """Returns the given indices in order, then keeps repeating the last one."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = 0

    def select(self, words):
        index = self.indices[min(self.calls, len(self.indices) - 1)]
        self.calls += 1
        return index


@pytest.fixture
def words_path(tmp_path):
    return tmp_path / "words_data.json"


@pytest.fixture
def gateway(words_path):
    return PersistenceGateway(words_path)


@pytest.fixture
def sample_words():
    return [
        Word(foreign="casa", translation="house", level=2),
        Word(foreign="perro", translation="dog animal", level=1),
        Word(foreign="gato", translation="cat", level=5),
    ]


@pytest.fixture
def make_engine(gateway):
    """Builds an engine over ``words`` (saved first) with a fixed index sequence."""

    def _make(words=(), indices=(0,)):
        if words:
            gateway.save(words)
        return QuizEngine(gateway, selector=SequenceSelector(indices))

    return _make
