"""Game session: root word, accepted words and score for one play-through."""

from __future__ import annotations

from dataclasses import dataclass

from oracle import RootWordSource
from word_rules import Verdict, WordValidator, normalize


class NoRootWordAvailable(RuntimeError):
    """The root-word source had nothing to offer."""


@dataclass(frozen=True)
class GameConfig:
    """Rules that stay fixed for the lifetime of a session.

    Attributes
    ----------
    minimum_word_length : int
        Candidates shorter than this are rejected as too short.
    """

    minimum_word_length: int = 4

    def __post_init__(self) -> None:
        if self.minimum_word_length < 1:
            raise ValueError(
                f"minimum_word_length must be >= 1, got {self.minimum_word_length}"
            )


class GameSession:
    """A single word-scramble game.

    Parameters
    ----------
    source : RootWordSource
        Where root words are drawn from on start and restart.
    validator : WordValidator
        Decides acceptance of each submitted word.
    config : GameConfig
        Minimum word length.
    """

    def __init__(
        self,
        source: RootWordSource,
        validator: WordValidator,
        config: GameConfig | None = None,
    ) -> None:
        self._source = source
        self._validator = validator
        self._config = config if config is not None else GameConfig()

        # Game state (set by start)
        self._root_word: str | None = None
        self._used_words: list[str] = []
        self._score = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Draw a new root word and clear the previous game.

        Raises
        ------
        NoRootWordAvailable
            If the source returned nothing usable. The session keeps
            whatever state it had before the call.
        """
        drawn = self._source.random_word()
        root_word = normalize(drawn) if drawn is not None else ""
        if not root_word:
            raise NoRootWordAvailable("Root-word source produced no words")
        self._root_word = root_word
        self._used_words = []
        self._score = 0

    def restart(self) -> None:
        self.start()

    def submit(self, raw: str) -> Verdict | None:
        """Submit a word typed by the player.

        Returns None for blank input, otherwise the verdict. State only
        changes when the verdict is accepted.

        Raises
        ------
        RuntimeError
            If called before start().
        """
        if self._root_word is None:
            raise RuntimeError("Call start() before submitting words")
        word = normalize(raw)
        if not word:
            return None

        verdict = self._validator.evaluate(
            word,
            self._root_word,
            self._used_words,
            self._config.minimum_word_length,
        )
        if verdict.accepted:
            self._used_words.insert(0, word)
            self._score += len(word)
        return verdict

    @property
    def is_active(self) -> bool:
        return self._root_word is not None

    @property
    def root_word(self) -> str:
        if self._root_word is None:
            raise RuntimeError("No game in progress")
        return self._root_word

    @property
    def used_words(self) -> tuple[str, ...]:
        """Accepted words, most recent first."""
        return tuple(self._used_words)

    @property
    def score(self) -> int:
        return self._score

    @property
    def config(self) -> GameConfig:
        return self._config
