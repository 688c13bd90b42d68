"""
Download the default English word list into a local cache file.

What it does:
- Streams the file at ENGLISH_WORDS_URL (about 4 MB) with a progress bar.
- Writes to a temporary sibling first and renames on success, so a broken
  download never leaves a truncated dictionary behind.
"""

from __future__ import annotations

import logging
from pathlib import Path

import requests
from tqdm import tqdm

from .errors import LoadError

log = logging.getLogger(__name__)

ENGLISH_WORDS_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
CHUNK_SIZE = 64 * 1024


def fetch_words(url: str, dest: Path | str, *, timeout: float = 30, progress: bool = True) -> Path:
    """
    Download `url` to `dest` and return the destination path.

    Raises LoadError (wrapping the requests/OS error) on any failure.
    """
    dest = Path(dest)
    tmp = dest.with_name(dest.name + ".part")
    log.info("Downloading %s", url)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        with requests.get(url, stream=True, timeout=timeout) as r:
            r.raise_for_status()
            total = int(r.headers.get("content-length", 0)) or None
            with tmp.open("wb") as f, tqdm(
                    total=total, unit="B", unit_scale=True, desc="Downloading",
                    disable=not progress,
            ) as bar:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
                    bar.update(len(chunk))
        tmp.replace(dest)
    except (requests.RequestException, OSError) as e:
        tmp.unlink(missing_ok=True)
        raise LoadError(f"failed to download {url}: {e}") from e
    log.info("Saved dictionary to %s", dest)
    return dest
