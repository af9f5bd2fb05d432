#!/usr/bin/env python3
"""Play Word Scramble in the terminal.

Usage:
    python3 play.py                                  # bundled sample lists
    python3 play.py --words data/start_words.txt --dictionary data/english_words.txt
    python3 play.py --min-length 3 --seed 7

Type a word and press Enter. Commands:
    :hint      show how many words are still out there
    :restart   new root word, score back to zero
    :quit      leave the game
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from game_session import GameConfig, GameSession, NoRootWordAvailable
from lexicon import load_lexicon
from oracle import LexiconOracle, WordListSource
from solver import WordIndex
from word_rules import Rejection, Verdict, WordValidator

# reason -> (title, message)
REJECTION_TEXT: dict[Rejection, tuple[str, str]] = {
    Rejection.TOO_SHORT: ("Word is too short", "Minimum length of word is {min_length}"),
    Rejection.IS_ROOT_WORD: ("Word is identical to the starting word", "Really dude?"),
    Rejection.NOT_ORIGINAL: ("Used already", "Be more original!"),
    Rejection.NOT_REAL: ("Word not recognized", "You can't just make them up!"),
    Rejection.NOT_POSSIBLE: ("Word not possible", "You can't spell that word from '{root}'"),
}


def describe_rejection(verdict: Verdict, session: GameSession) -> tuple[str, str]:
    """Turn a rejected verdict into the title and message shown to the player."""
    if verdict.reason is None:
        raise ValueError("verdict was accepted")
    title, message = REJECTION_TEXT[verdict.reason]
    return title, message.format(
        min_length=session.config.minimum_word_length,
        root=session.root_word,
    )


def print_board(session: GameSession) -> None:
    print(f"\n=== {session.root_word} ===")
    print(f"Your current score is {session.score}")
    for word in session.used_words:
        print(f"  ({len(word)}) {word}")


def print_hint(session: GameSession, index: WordIndex | None) -> None:
    if index is None:
        print("Hints are disabled.")
        return
    min_length = session.config.minimum_word_length
    possible = index.derivable(session.root_word, min_length)
    best = index.max_score(session.root_word, min_length)
    print(f"Found {len(session.used_words)} of {len(possible)} words, "
          f"score {session.score} of {best}")


def run(
    session: GameSession,
    lines: Iterable[str],
    index: WordIndex | None = None,
    prompt: bool = False,
) -> int:
    """Drive *session* with one input line per submission; return the final score.

    The session must already be started.
    """
    print_board(session)
    if prompt:
        print("> ", end="", flush=True)
    for line in lines:
        command = line.strip().lower()
        if command == ":quit":
            break
        if command == ":restart":
            try:
                session.restart()
            except NoRootWordAvailable as exc:
                print(f"Could not restart: {exc}", file=sys.stderr)
            else:
                print_board(session)
        elif command == ":hint":
            print_hint(session, index)
        else:
            verdict = session.submit(line)
            if verdict is not None and verdict.accepted:
                print_board(session)
            elif verdict is not None:
                title, message = describe_rejection(verdict, session)
                print(f"[{title}] {message}")
        if prompt:
            print("> ", end="", flush=True)

    print(f"\nFinal score: {session.score}")
    return session.score


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Word Scramble: make words from a root word")
    parser.add_argument("--words", type=str, default=None,
                        help="Root-word list (default: data/start_words.txt or bundled sample)")
    parser.add_argument("--dictionary", type=str, default=None,
                        help="Dictionary word list (default: data/english_words.txt "
                             "or bundled sample)")
    parser.add_argument("--min-length", type=int, default=4, help="Minimum word length")
    parser.add_argument("--language", type=str, default="en", help="Dictionary language code")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for root words")
    parser.add_argument("--no-hints", action="store_true",
                        help="Skip building the hint index (faster start on big dictionaries)")
    args = parser.parse_args(argv)

    try:
        config = GameConfig(minimum_word_length=args.min_length)
        dictionary = load_lexicon(path=args.dictionary, kind="dictionary")
        source = WordListSource.from_file(args.words, min_length=args.min_length, seed=args.seed)
        oracle = LexiconOracle({args.language: dictionary.words})
        session = GameSession(source, WordValidator(oracle, language=args.language), config)
        session.start()
    except (FileNotFoundError, ValueError, NoRootWordAvailable) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Dictionary: {len(dictionary)} words from {dictionary.source}")
    index = None if args.no_hints else WordIndex(dictionary.words)
    run(session, sys.stdin, index=index, prompt=sys.stdin.isatty())


if __name__ == "__main__":
    main()
