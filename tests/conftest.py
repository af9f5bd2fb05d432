"""Shared fixtures: a fixed root-word source and a small fixed dictionary."""

from __future__ import annotations

import pytest

from game_session import GameConfig, GameSession
from oracle import LexiconOracle, RootWordSource
from word_rules import WordValidator


class FixedSource(RootWordSource):
    """Hands out the given words in order, then None."""

    def __init__(self, *words: str) -> None:
        self._words = list(words)
        self.calls = 0

    def random_word(self) -> str | None:
        self.calls += 1
        if not self._words:
            return None
        return self._words.pop(0)


DICTIONARY = [
    "tile", "tiles", "elite", "vein", "lion", "lions", "list", "listen",
    "silent", "stone", "note", "novel", "sit", "tree", "teeter", "rattle",
    "retell", "letter", "silk", "worm", "milk",
]


@pytest.fixture
def oracle():
    return LexiconOracle({"en": DICTIONARY})


@pytest.fixture
def validator(oracle):
    return WordValidator(oracle)


@pytest.fixture
def session(validator):
    s = GameSession(FixedSource("television", "silkworm"), validator, GameConfig())
    s.start()
    return s
