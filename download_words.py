#!/usr/bin/env python3
"""
Download and prepare the English word lists for Word Scramble.

Pipeline:
  1. Download the dwyl ``words_alpha.txt`` list (alphabetic English words, Unlicense)
  2. Download the google-10000-english common-word list (no swears)
  3. Dictionary: every words_alpha entry, uppercased
  4. Root words: common words of the root length present in BOTH sources

Cross-referencing keeps root words familiar to players while the full
dictionary still accepts rarer words found from them.

Usage:
    python download_words.py                    # 8-letter root words
    python download_words.py --root-length 7    # 7-letter root words
"""

from __future__ import annotations

import argparse
import urllib.request
from pathlib import Path

from lexicon import normalize_word, WORD_RE


_DIR = Path(__file__).resolve().parent
_DATA = _DIR / "data"
_CACHE = _DATA / ".cache"

WORDS_ALPHA_URL = (
    "https://raw.githubusercontent.com/dwyl/"
    "english-words/master/words_alpha.txt"
)
COMMON_URL = (
    "https://raw.githubusercontent.com/first20hours/"
    "google-10000-english/master/google-10000-english-no-swears.txt"
)


# ------------------------------------------------------------------
# Download helpers
# ------------------------------------------------------------------

def _download(url: str, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    if dest.exists():
        print(f"  (cached) {dest.name}")
        return
    print(f"  Downloading {url} ...")
    urllib.request.urlretrieve(url, dest)
    print(f"  Saved {dest.name}")


def _read_words(path: Path) -> list[str]:
    """Read one word per line, normalized like ``lexicon.load_lexicon``."""
    raw = path.read_bytes()
    # Try UTF-8 first, fall back to ISO-8859-1 (latin1)
    for enc in ("utf-8", "iso-8859-1"):
        try:
            text = raw.decode(enc)
            break
        except UnicodeDecodeError:
            continue
    else:
        raise ValueError(f"Cannot decode {path}")

    words = {normalize_word(line) for line in text.splitlines()}
    return sorted(w for w in words if w and WORD_RE.match(w))


def _write_words(words: list[str], dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"    {dest} ({len(words)} words)")


# ------------------------------------------------------------------
# Main pipeline
# ------------------------------------------------------------------

def build_wordlists(root_length: int = 8) -> tuple[Path, Path]:
    """Download both sources and write the dictionary and root-word lists."""
    alpha_path = _CACHE / "words_alpha.txt"
    common_path = _CACHE / "google-10000-english-no-swears.txt"
    _download(WORDS_ALPHA_URL, alpha_path)
    _download(COMMON_URL, common_path)

    dictionary = _read_words(alpha_path)
    common = _read_words(common_path)
    known = set(dictionary)
    roots = [w for w in common if len(w) == root_length and w in known]
    if not roots:
        raise RuntimeError(f"No common {root_length}-letter words found")

    print(f"\n  dictionary: {len(dictionary)} words")
    print(f"  root words: {len(common)} common -> {len(roots)} of length {root_length}")

    dict_out = _DATA / "english_words.txt"
    start_out = _DATA / "start_words.txt"
    _write_words(dictionary, dict_out)
    _write_words(roots, start_out)
    return dict_out, start_out


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Download and build English word lists for Word Scramble"
    )
    parser.add_argument("--root-length", type=int, default=8,
                        help="Length of root words (default: 8)")
    args = parser.parse_args()

    print("Building English word lists ...\n")
    build_wordlists(root_length=args.root_length)
    print("\nDone.")


if __name__ == "__main__":
    main()
