"""
Tests for the terminal shell.
"""

import pytest

import play
from conftest import FixedSource
from game_session import GameSession
from solver import WordIndex
from word_rules import Rejection, Verdict


class TestDescribeRejection:

    @pytest.mark.parametrize(
        "reason, title",
        [
            (Rejection.TOO_SHORT, "Word is too short"),
            (Rejection.IS_ROOT_WORD, "Word is identical to the starting word"),
            (Rejection.NOT_ORIGINAL, "Used already"),
            (Rejection.NOT_REAL, "Word not recognized"),
            (Rejection.NOT_POSSIBLE, "Word not possible"),
        ],
    )
    def test_every_reason_has_a_title(self, session, reason, title):
        assert play.describe_rejection(Verdict("WORD", reason), session)[0] == title

    def test_messages_are_filled_in(self, session):
        _, short = play.describe_rejection(Verdict("SIT", Rejection.TOO_SHORT), session)
        _, spell = play.describe_rejection(Verdict("WORM", Rejection.NOT_POSSIBLE), session)
        assert short == "Minimum length of word is 4"
        assert spell == "You can't spell that word from 'TELEVISION'"

    def test_accepted_verdict_is_refused(self, session):
        with pytest.raises(ValueError):
            play.describe_rejection(Verdict("TILE"), session)


class TestRun:

    def test_plays_until_input_ends(self, session, capsys):
        score = play.run(session, ["tile\n", "\n", "sit\n", "worm\n", "lion\n"])
        out = capsys.readouterr().out

        assert score == 8
        assert "=== TELEVISION ===" in out
        assert "Your current score is 8" in out
        assert "  (4) LION" in out
        assert "[Word is too short] Minimum length of word is 4" in out
        assert "[Word not possible]" in out
        assert "Final score: 8" in out

    def test_quit_stops_reading(self, session):
        score = play.run(session, ["tile\n", ":quit\n", "lion\n"])
        assert score == 4
        assert session.used_words == ("TILE",)

    def test_restart_command(self, session, capsys):
        play.run(session, ["tile\n", ":restart\n", "milk\n"])
        out = capsys.readouterr().out
        assert "=== SILKWORM ===" in out
        assert session.root_word == "SILKWORM"
        assert session.used_words == ("MILK",)

    def test_failed_restart_keeps_playing(self, validator, capsys):
        session = GameSession(FixedSource("television"), validator)
        session.start()
        score = play.run(session, ["tile\n", ":restart\n", "lion\n"])
        captured = capsys.readouterr()
        assert "Could not restart" in captured.err
        assert score == 8

    def test_hint(self, session, capsys):
        index = WordIndex(["tile", "lion", "stone", "worm"])
        play.run(session, ["tile\n", ":hint\n"], index=index)
        out = capsys.readouterr().out
        assert "Found 1 of 3 words, score 4 of 13" in out

    def test_hint_reports_best_score_from_index(self, session, capsys):
        class CountingIndex(WordIndex):
            calls = 0

            def max_score(self, root_word, minimum_length=4):
                CountingIndex.calls += 1
                return super().max_score(root_word, minimum_length)

        play.run(session, [":hint\n"], index=CountingIndex(["tile", "lion"]))
        assert CountingIndex.calls == 1
        assert "Found 0 of 2 words, score 0 of 8" in capsys.readouterr().out

    def test_hint_disabled(self, session, capsys):
        play.run(session, [":hint\n"])
        assert "Hints are disabled." in capsys.readouterr().out


class TestMain:

    @pytest.fixture
    def lists(self, tmp_path):
        words = tmp_path / "start.txt"
        words.write_text("television\n", encoding="utf-8")
        dictionary = tmp_path / "dict.txt"
        dictionary.write_text("tile\nlion\n", encoding="utf-8")
        return words, dictionary

    def test_main_runs_a_game(self, lists, monkeypatch, capsys):
        words, dictionary = lists
        monkeypatch.setattr("sys.stdin", _Lines(["tile\n", "lion\n"]))
        play.main(["--words", str(words), "--dictionary", str(dictionary), "--seed", "1"])
        out = capsys.readouterr().out
        assert "Dictionary: 2 words" in out
        assert "Final score: 8" in out

    def test_default_lists_from_checkout(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", _Lines([":quit\n"]))
        play.main(["--seed", "3", "--no-hints"])
        out = capsys.readouterr().out
        assert "Dictionary:" in out
        assert "Final score: 0" in out

    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            play.main(["--words", str(tmp_path / "missing.txt"), "--no-hints"])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_min_length_exits(self, lists):
        words, dictionary = lists
        with pytest.raises(SystemExit):
            play.main(["--words", str(words), "--dictionary", str(dictionary),
                       "--min-length", "0"])


class _Lines(list):
    """Stand-in for stdin: iterable lines, not a terminal."""

    def isatty(self):
        return False
