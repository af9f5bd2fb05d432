"""Collaborators the game consumes: a dictionary and a root-word source."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, Mapping

from lexicon import load_lexicon


class DictionaryOracle(ABC):
    """Answers whether a token is a recognized word of a language."""

    @abstractmethod
    def is_recognized(self, word: str, language: str = "en") -> bool:
        ...


class RootWordSource(ABC):
    """Supplies root words for new games."""

    @abstractmethod
    def random_word(self) -> str | None:
        """Return one word from the list, or None if the list is empty."""
        ...


# ------------------------------------------------------------------
# Word-list backed implementations
# ------------------------------------------------------------------

class LexiconOracle(DictionaryOracle):
    """Dictionary backed by in-memory word lists, one per language.

    Lookups are case-insensitive; words are stored uppercase.

    Parameters
    ----------
    lexicons : mapping of language code -> iterable of words
    """

    def __init__(self, lexicons: Mapping[str, Iterable[str]]) -> None:
        self._words: dict[str, frozenset[str]] = {
            lang: frozenset(w.strip().upper() for w in words)
            for lang, words in lexicons.items()
        }

    @classmethod
    def from_file(cls, path: str | None = None, language: str = "en") -> LexiconOracle:
        lex = load_lexicon(path=path, kind="dictionary")
        return cls({language: lex.words})

    @property
    def languages(self) -> list[str]:
        return sorted(self._words)

    def is_recognized(self, word: str, language: str = "en") -> bool:
        if language not in self._words:
            raise ValueError(
                f"No dictionary loaded for language {language!r} "
                f"(available: {self.languages})"
            )
        return word.strip().upper() in self._words[language]


class WordListSource(RootWordSource):
    """Draw root words uniformly from a fixed list.

    Blank entries are dropped. ``seed`` makes the draw sequence
    reproducible.
    """

    def __init__(self, words: Iterable[str], seed: int | None = None) -> None:
        self._words = [w.strip() for w in words if w.strip()]
        self._rng = random.Random(seed)

    @classmethod
    def from_file(
        cls,
        path: str | None = None,
        min_length: int = 1,
        seed: int | None = None,
    ) -> WordListSource:
        lex = load_lexicon(path=path, min_length=min_length, kind="start")
        return cls(lex.words, seed=seed)

    def __len__(self) -> int:
        return len(self._words)

    def random_word(self) -> str | None:
        if not self._words:
            return None
        return self._rng.choice(self._words)
