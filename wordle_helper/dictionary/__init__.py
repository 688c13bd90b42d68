from .errors import LoadError
from .download import ENGLISH_WORDS_URL, fetch_words
from .source import (
    WordSource, TxtDictionary, CachedDictionary, load, default_dict_path, open_dictionary,
)
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "LoadError", "ENGLISH_WORDS_URL", "fetch_words", "WordSource", "TxtDictionary",
    "CachedDictionary", "load", "default_dict_path", "open_dictionary",
    "validate_wordlist", "pretty_summary",
]
