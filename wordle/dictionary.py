"""
- Local file first, HTTP download with clear fallback
Load the word list from a local file. If the file is missing we download a full
English dictionary and cache it on disk. If anything goes wrong with the download
(no internet, timeout, bad response), we fall back to a small built-in list so the
game still works.
"""

import logging
from pathlib import Path
from typing import List, Optional

import requests

from . import config
from .types import Word, WORD_LENGTH

logger = logging.getLogger(__name__)

# Used only when neither the local file nor the download is available
BUILTIN_WORDS = [
    "CRANE", "SLATE", "ADIEU", "STARE", "RAISE", "PRIDE", "CHAOS", "FLAME",
    "GLINT", "HOVER", "MIRTH", "NOBLE", "OCEAN", "PROUD", "QUAKE", "SAINT",
    "TANGY", "VIVID", "WALTZ", "YIELD", "BLOOM", "CANDY", "EAGER", "HAVEN",
    "LEMON", "MANGO", "OPERA", "PIANO", "ROBOT", "TIGER", "ERASE", "TOTAL",
]

def parse_words(text: str) -> List[Word]:
    """Keep only 5-letter alphabetic entries, upper-cased, in file order."""
    words = []
    for line in text.splitlines():
        word = line.strip()
        if len(word) == WORD_LENGTH and word.isascii() and word.isalpha():
            words.append(word.upper())
    return words

def download_dictionary(url: str, path: Path, timeout: float = config.DOWNLOAD_TIMEOUT) -> str:
    response = requests.get(url, timeout=timeout)

    # If the response was not 200 OK, this will raise an error
    response.raise_for_status()

    # Save the full list so the next start does not hit the network
    try:
        path.write_text(response.text, encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not cache dictionary at %s: %s", path, exc)
    else:
        logger.info("Dictionary downloaded from %s and cached at %s", url, path)
    return response.text

def load_dictionary(path: Optional[str] = None, url: Optional[str] = None) -> List[Word]:
    dict_path = Path(path or config.DICT_PATH)
    dict_url = url or config.DICT_URL

    if dict_path.exists():
        try:
            # Undecodable bytes become U+FFFD, which parse_words drops with the rest of the line
            text = dict_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Could not read dictionary at %s (%s). Downloading.", dict_path, exc)
        else:
            words = parse_words(text)
            logger.info("Loaded %d words from %s", len(words), dict_path)
            return words
    else:
        logger.warning("Dictionary not found at %s. Downloading.", dict_path)

    try:
        text = download_dictionary(dict_url, dict_path)
    except requests.RequestException as exc:
        # Fallback: keep playing with the built-in list
        logger.warning("Dictionary download failed (%s); using built-in word list.", exc)
        return list(BUILTIN_WORDS)

    return parse_words(text)
