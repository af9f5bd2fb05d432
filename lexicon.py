"""Word-list loading utilities (self-contained).

Supports two formats:
  - Plain text: one word per line
  - CSV with a ``word`` column (any other columns are ignored)

And two kinds of list:
  - ``dictionary``: every word the game recognizes as real
  - ``start``: candidate root words a game is started from
"""

from __future__ import annotations

import csv
import re
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path


_DIR = Path(__file__).resolve().parent
_DATA = _DIR / "data"

WORD_RE = re.compile(r"^[A-Z]+$")

# kind -> (downloaded file, bundled sample)
_DEFAULT_FILES = {
    "dictionary": ("english_words.txt", "mini_english_words.txt"),
    "start": ("start_words.txt", "mini_start_words.txt"),
}


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in nfkd if unicodedata.category(ch) != "Mn")


def normalize_word(raw: str) -> str:
    return _strip_accents(raw.strip()).upper()


# ------------------------------------------------------------------
# Lexicon dataclass
# ------------------------------------------------------------------

@dataclass
class Lexicon:
    """A sorted, de-duplicated word list."""
    words: list[str]
    source: Path | None = None
    _index: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = frozenset(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().upper() in self._index

    def __len__(self) -> int:
        return len(self.words)


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def _keep(words: list[str], seen: set[str], w: str, min_length: int) -> None:
    if not w or w in seen:
        return
    if len(w) >= min_length and WORD_RE.match(w):
        seen.add(w)
        words.append(w)


def _load_txt(path: Path, min_length: int) -> list[str]:
    """Load plain-text word list (one word per line)."""
    seen: set[str] = set()
    words: list[str] = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        _keep(words, seen, normalize_word(raw), min_length)
    words.sort()
    return words


def _load_csv(path: Path, min_length: int) -> list[str]:
    """Load CSV with a ``word`` header."""
    seen: set[str] = set()
    words: list[str] = []
    with path.open("r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or "word" not in reader.fieldnames:
            raise ValueError(f"{path} has no 'word' column")
        for row in reader:
            _keep(words, seen, normalize_word(row["word"] or ""), min_length)
    words.sort()
    return words


def resolve_path(kind: str = "dictionary") -> Path:
    """Locate the default file for *kind*: downloaded list first, then sample."""
    if kind not in _DEFAULT_FILES:
        raise ValueError(f"kind must be 'dictionary' or 'start', got {kind!r}")
    full_name, mini_name = _DEFAULT_FILES[kind]
    full_path = _DATA / full_name
    mini_path = _DATA / mini_name
    if full_path.exists():
        return full_path
    if mini_path.exists():
        return mini_path
    raise FileNotFoundError(
        f"No {kind} word list found. "
        f"Looked for:\n  {full_path}\n  {mini_path}\n"
        f"Run: python download_words.py"
    )


def load_lexicon(
    path: str | Path | None = None,
    min_length: int = 1,
    kind: str = "dictionary",
) -> Lexicon:
    """Load and normalize a word list.

    Parameters
    ----------
    path : str, Path or None
        Path to a ``.txt`` (one word/line) or ``.csv`` (``word`` column).
        None falls back to the default file for *kind* under ``data/``.
    min_length : int
        Drop words shorter than this.
    kind : ``"dictionary"`` or ``"start"``
        Which default file to use when *path* is None.

    Returns
    -------
    Lexicon
        Uppercase, accent-free, alphabetic words only.
    """
    src = Path(path) if path is not None else resolve_path(kind)
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    if src.suffix == ".csv":
        words = _load_csv(src, min_length)
    else:
        words = _load_txt(src, min_length)

    if not words:
        raise ValueError(f"No words of length >= {min_length} found in {src}")

    return Lexicon(words=words, source=src)
