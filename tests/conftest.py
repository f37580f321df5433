import random

import pytest

from wordguess.db import KeyValueStore
from wordguess.game import GameSession
from wordguess.scoring import RewardTable, ScoreKeeper
from wordguess.words import WordBank

WORDS = [
    "APPLE", "CRANE", "RANCH", "SLATE", "TRACE", "CRASH", "LEVEL",
    "ELBOW", "HOUSE", "MOUSE", "PLANT", "EERIE", "SPEED", "ABBEY",
]


@pytest.fixture
def store(tmp_path):
    s = KeyValueStore(f"sqlite:///{tmp_path / 'test.db'}")
    s.init()
    yield s
    s.dispose()


@pytest.fixture
def bank():
    return WordBank(WORDS)


@pytest.fixture
def score(store):
    return ScoreKeeper(store, RewardTable.tiered())


@pytest.fixture
def make_session(bank, score):
    def _make(target="CRANE", points=None):
        if points is not None:
            score.store.set_int("points", points)
            keeper = ScoreKeeper(score.store, score.rewards)
        else:
            keeper = score
        session = GameSession(score=keeper, bank=bank, rng=random.Random(1234))
        session.target = target
        return session
    return _make
