"""Word rules: decide whether a candidate word is accepted for a root word."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from oracle import DictionaryOracle


class Rejection(Enum):
    """Why a candidate was refused, in the order the checks run."""

    TOO_SHORT = "too_short"
    IS_ROOT_WORD = "is_root_word"
    NOT_ORIGINAL = "not_original"
    NOT_REAL = "not_real"
    NOT_POSSIBLE = "not_possible"


@dataclass(frozen=True)
class Verdict:
    """Outcome of evaluating one candidate.

    ``reason`` is None exactly when the word was accepted.
    """

    word: str
    reason: Rejection | None = None

    @property
    def accepted(self) -> bool:
        return self.reason is None


def normalize(raw: str) -> str:
    """Uppercase *raw* and trim surrounding whitespace."""
    return raw.strip().upper()


# ------------------------------------------------------------------
# Individual checks
# ------------------------------------------------------------------

def is_long_enough(word: str, minimum_length: int = 4) -> bool:
    return len(word) >= minimum_length


def is_root_word(word: str, root_word: str) -> bool:
    return word == root_word


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """True if *word* can be spelled from the letters of *root_word*.

    Each root letter can be consumed once, so repeated letters in *word*
    need as many copies in *root_word*.
    """
    remaining = Counter(root_word)
    for letter in word:
        if remaining[letter] <= 0:
            return False
        remaining[letter] -= 1
    return True


# ------------------------------------------------------------------
# Validator
# ------------------------------------------------------------------

class WordValidator:
    """Stateless rule evaluator.

    Parameters
    ----------
    oracle : DictionaryOracle
        Decides whether a token is a real word.
    language : str
        Language code handed to the oracle.
    """

    def __init__(self, oracle: DictionaryOracle, language: str = "en") -> None:
        self._oracle = oracle
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def evaluate(
        self,
        candidate: str,
        root_word: str,
        used_words: Iterable[str],
        minimum_length: int = 4,
    ) -> Verdict:
        """Run the checks in order and stop at the first failure.

        *candidate* and *root_word* must already be normalized.
        """
        if not is_long_enough(candidate, minimum_length):
            return Verdict(candidate, Rejection.TOO_SHORT)
        if is_root_word(candidate, root_word):
            return Verdict(candidate, Rejection.IS_ROOT_WORD)
        if not is_original(candidate, used_words):
            return Verdict(candidate, Rejection.NOT_ORIGINAL)
        if not self._oracle.is_recognized(candidate, self._language):
            return Verdict(candidate, Rejection.NOT_REAL)
        if not is_possible(candidate, root_word):
            return Verdict(candidate, Rejection.NOT_POSSIBLE)
        return Verdict(candidate)
