"""
Single place to:
- Load env vars from .env if present
- Read the dictionary location/URL and the optional RNG seed

Why: the API, the console and the tests all read settings the same way.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# dev convenience; in prod the platform injects env vars
load_dotenv()

APP_ENV = os.getenv("APP_ENV", "local")

# Local cache of the word list; downloaded on first run if missing
DICT_PATH = os.getenv("WORDLE_DICT_PATH", "wordle.dict")
DICT_URL = os.getenv(
    "WORDLE_DICT_URL",
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt",
)
DOWNLOAD_TIMEOUT = float(os.getenv("WORDLE_DOWNLOAD_TIMEOUT", "10"))

def get_seed() -> Optional[int]:
    """WORDLE_SEED makes target selection reproducible; unset means random."""
    raw = os.getenv("WORDLE_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"WORDLE_SEED must be an integer, got {raw!r}.") from None
