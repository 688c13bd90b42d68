"""
Word sources for the assistant.

Every source answers one question: "which words of length N do you have?"
(`extract_words`). The engine only ever sees the resulting list of strings.

Sources:
  - TxtDictionary   : a local text file, one word per line.
  - CachedDictionary: the default English list, downloaded once into the
                      user's cache directory and then read like a file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Protocol

from .download import ENGLISH_WORDS_URL, fetch_words
from .errors import LoadError

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = "wordle-helper"
DEFAULT_FILENAME = "words_alpha.txt"


class WordSource(Protocol):
    path: Path

    def extract_words(self, word_length: int) -> List[str]:
        ...


def load(source: Path | str) -> List[str]:
    """
    Read every non-blank line of a UTF-8 word list, stripped, in file order.

    Lines that are not valid UTF-8 are skipped, not fatal.
    Raises LoadError if the file is missing or unreadable.
    """
    p = Path(source)
    words: List[str] = []
    skipped = 0
    try:
        with p.open("rb") as f:
            for raw in f:
                try:
                    w = raw.decode("utf-8").strip()
                except UnicodeDecodeError:
                    skipped += 1
                    continue
                if w:
                    words.append(w)
    except OSError as e:
        raise LoadError(f"failed to load '{p}': {e}") from e
    if skipped:
        log.warning("Skipped %d undecodable line(s) in %s", skipped, p)
    log.info("Read %d words from %s", len(words), p)
    return words


def default_dict_path() -> Path:
    """
    Cache location of the default dictionary:
      $XDG_CACHE_HOME/wordle-helper/words_alpha.txt
      else $HOME/.cache/wordle-helper/words_alpha.txt
      else /tmp/wordle-helper/words_alpha.txt
    """
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / DEFAULT_CACHE_DIR / DEFAULT_FILENAME
    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".cache" / DEFAULT_CACHE_DIR / DEFAULT_FILENAME
    return Path("/tmp") / DEFAULT_CACHE_DIR / DEFAULT_FILENAME


class TxtDictionary:
    """A local word list; the file is read on each `extract_words` call."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        if not self.path.is_file():
            raise LoadError(f"dictionary not found: {self.path}")

    def extract_words(self, word_length: int) -> List[str]:
        return [w for w in load(self.path) if len(w) == word_length]


class CachedDictionary(TxtDictionary):
    """
    The default dictionary. If the cache file is missing, `confirm(prompt)`
    is asked first; on yes the list is downloaded into the cache. Without a
    `confirm` callable nothing is downloaded.

    Raises LoadError when the user declines (or cannot be asked) or the
    download fails.
    """

    def __init__(
            self,
            path: Path | str | None = None,
            *,
            url: str = ENGLISH_WORDS_URL,
            confirm: Optional[Callable[[str], bool]] = None,
    ):
        path = Path(path) if path else default_dict_path()
        if not path.is_file():
            log.info("Default dictionary is not found at %s", path)
            prompt = f"Download the dictionary from {url} into {path}?"
            if confirm is None or not confirm(prompt):
                raise LoadError(f"dictionary not available: {path}")
            fetch_words(url, path)
        super().__init__(path)


def open_dictionary(path: Path | str | None, *,
                    confirm: Optional[Callable[[str], bool]] = None) -> WordSource:
    """Empty/None path -> the cached default list; anything else -> that file."""
    if not path:
        return CachedDictionary(confirm=confirm)
    return TxtDictionary(path)
