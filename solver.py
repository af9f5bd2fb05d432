"""Enumerate every dictionary word a root word can produce.

Words are encoded as 26-column letter-count vectors so a whole vocabulary
can be checked against one root with a single vectorized comparison.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

_ALPHABET = 26


def _counts(word: str) -> np.ndarray:
    vec = np.zeros(_ALPHABET, dtype=np.int16)
    for ch in word:
        idx = ord(ch) - ord("A")
        if not 0 <= idx < _ALPHABET:
            raise ValueError(f"{word!r} contains non A-Z letter {ch!r}")
        vec[idx] += 1
    return vec


class WordIndex:
    """Letter-count matrix over a vocabulary of uppercase A-Z words.

    Parameters
    ----------
    vocabulary : iterable of str
        Words to index. Entries are uppercased and trimmed; anything that
        is not purely A-Z after that is skipped.
    """

    def __init__(self, vocabulary: Iterable[str]) -> None:
        words = sorted({w.strip().upper() for w in vocabulary})
        self._words = [w for w in words if w.isascii() and w.isalpha()]
        self._lengths = np.array([len(w) for w in self._words], dtype=np.int32)
        if self._words:
            self._matrix = np.stack([_counts(w) for w in self._words])
        else:
            self._matrix = np.zeros((0, _ALPHABET), dtype=np.int16)

    def __len__(self) -> int:
        return len(self._words)

    def derivable(self, root_word: str, minimum_length: int = 4) -> list[str]:
        """Words that pass the length, not-root and spelling rules for *root_word*."""
        root = root_word.strip().upper()
        root_vec = _counts(root)
        mask = np.all(self._matrix <= root_vec, axis=1)
        mask &= self._lengths >= minimum_length
        return [w for w, ok in zip(self._words, mask) if ok and w != root]

    def max_score(self, root_word: str, minimum_length: int = 4) -> int:
        """Best possible score for a game on *root_word*."""
        return sum(len(w) for w in self.derivable(root_word, minimum_length))
