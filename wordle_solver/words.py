"""
Word lists
==========

Loading of the candidate corpus and conversion of words to the letter-code
matrices used by the numeric kernels.

The default corpus is a static list of valid five-letter words shipped in
``data/solutions.txt``. Set ``WORDLE_SOLVER_WORDS`` to use another file.
"""

import numpy as np
from functools import lru_cache
from typing import Iterable, List, Tuple
import os


# ============================================================================
# CONFIGURATION
# ============================================================================

GUESS_LENGTH = 5
ALPHABET_SIZE = 26
WORDS_ENV_VAR = "WORDLE_SOLVER_WORDS"
DEFAULT_WORDS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                  "data", "solutions.txt")


# ============================================================================
# LOADING
# ============================================================================

def is_word(word: str, length: int = GUESS_LENGTH) -> bool:
    """True if WORD is LENGTH lower-case ascii letters."""
    return len(word) == length and word.isascii() and word.isalpha() and word.islower()


def unique_words(words: Iterable[str]) -> List[str]:
    """Drop repeats, keeping the first occurrence of each word."""
    return list(dict.fromkeys(words))


def load_words(filepath: str, length: int = GUESS_LENGTH) -> List[str]:
    """Load word list from file."""
    with open(filepath, 'r') as f:
        words = [line.strip().lower() for line in f if line.strip()]
    return unique_words(w for w in words if is_word(w, length))


@lru_cache(maxsize=None)
def default_corpus() -> Tuple[str, ...]:
    """
    The read-only default corpus, loaded once per process.

    Solvers copy from it and never hand it out for mutation.
    """
    return tuple(load_words(os.environ.get(WORDS_ENV_VAR, DEFAULT_WORDS_FILE)))


# ============================================================================
# CHAR CODES
# ============================================================================

def words_to_chars(words: Iterable[str], length: int = GUESS_LENGTH) -> np.ndarray:
    """Convert words to a (n, length) array of char codes (0-25 for a-z)."""
    words = list(words)
    arr = np.zeros((len(words), length), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


def char_code(letter: str) -> int:
    return ord(letter) - ord('a')
