"""
Letter-Frequency Wordle Solver
==============================

Narrows a corpus of candidate words round by round from guess feedback and
proposes the next guess with a letter-frequency heuristic.

    solver = WordleSolver()

    # 'later' came back grey, grey, hit, misplaced, misplaced:
    solver.apply_feedback('later', 'eexii').get_best_guess()

    # Start again.
    solver.reset()

Ranking prefers words with more distinct letters, then words whose letters
are most common among the remaining candidates. It is greedy: most words are
found in a handful of guesses, but families of near-identical words
(e.g. _ight) can take several.

The corpus is held as an immutable tuple plus its char-code matrix. Every
filter builds a new, smaller pair and replaces the old one.
"""

import logging
import numpy as np
from numba import jit
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .feedback import Feedback, FeedbackCode, FeedbackLike, InvalidInput, parse_feedback
from .words import ALPHABET_SIZE, GUESS_LENGTH, char_code, default_corpus, is_word, \
    unique_words, words_to_chars

log = logging.getLogger(__name__)


class GuessRecord(NamedTuple):
    guess: str
    feedback: Feedback


# ============================================================================
# NUMBA RANKING KERNEL
# ============================================================================

@jit(nopython=True, cache=True)
def rank_keys(chars: np.ndarray, letter_freq: np.ndarray):
    """
    Ranking keys for every word.

    Args:
        chars: shape (n, length) array of char codes
        letter_freq: shape (26,) occurrence counts over the current corpus

    Returns:
        (unique letter count, sum of letter frequencies) per word
    """
    n = chars.shape[0]
    length = chars.shape[1]
    uniques = np.zeros(n, dtype=np.int64)
    totals = np.zeros(n, dtype=np.int64)

    for w in range(n):
        seen = np.zeros(letter_freq.shape[0], dtype=np.bool_)
        for j in range(length):
            c = chars[w, j]
            totals[w] += letter_freq[c]
            if not seen[c]:
                seen[c] = True
                uniques[w] += 1

    return uniques, totals


def letter_counts(chars: np.ndarray, at_index: Optional[int] = None) -> np.ndarray:
    """Occurrences of each letter code, optionally at one position only."""
    column = chars.ravel() if at_index is None else chars[:, at_index]
    return np.bincount(column, minlength=ALPHABET_SIZE)


def counts_to_letters(counts: np.ndarray) -> Dict[str, int]:
    return {chr(ord('a') + i): int(n) for i, n in enumerate(counts) if n}


# ============================================================================
# SOLVER CLASS
# ============================================================================

class WordleSolver:
    """
    Stateful solver owning one candidate corpus and its guess history.

    Not meant to be shared between concurrent callers; give each session its
    own instance.
    """

    def __init__(self, corpus: Optional[Sequence[str]] = None,
                 starting_word: Optional[str] = None, logging: bool = False,
                 guess_length: int = GUESS_LENGTH):
        """
        Initialize solver.

        Args:
            corpus: candidate words (default: the packaged corpus)
            starting_word: first guess override (default: top-ranked word)
            logging: report filter steps at INFO rather than DEBUG level
            guess_length: letters per word
        """
        self.guess_length = guess_length
        self.logging = logging
        self.reset(corpus)
        self.sort()
        if starting_word is not None:
            self.starting_word = self._check_guess(starting_word)
        else:
            self.starting_word = self._corpus[0] if self._corpus else None

    # ------------------------------------------------------------------ state

    @property
    def corpus(self) -> Tuple[str, ...]:
        return self._corpus

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return self._history

    def reset(self, corpus: Optional[Sequence[str]] = None) -> "WordleSolver":
        """Start again from a fresh copy of CORPUS, forgetting all guesses."""
        words = default_corpus() if corpus is None else [w.lower() for w in corpus]
        bad = [w for w in words if not is_word(w, self.guess_length)]
        if bad:
            raise InvalidInput(
                f"Corpus words must be {self.guess_length} letters long: {', '.join(bad[:5])}")

        words = tuple(unique_words(words))
        self._replace(words, words_to_chars(words, self.guess_length))
        self._history: Tuple[GuessRecord, ...] = ()
        return self

    def _replace(self, words: Tuple[str, ...], chars: np.ndarray):
        self._corpus = words
        self._chars = chars

    def _keep(self, mask: np.ndarray, reason: str) -> "WordleSolver":
        kept = np.flatnonzero(mask)
        self._log("Dropped %d words with %s.", len(self._corpus) - len(kept), reason)
        self._replace(tuple(self._corpus[i] for i in kept), self._chars[kept])
        return self

    def _log(self, msg: str, *args):
        log.log(logging.INFO if self.logging else logging.DEBUG, msg, *args)

    def _check_guess(self, guess: str) -> str:
        if len(guess) != self.guess_length:
            raise InvalidInput(f"Guess must be {self.guess_length} letters long.")
        guess = guess.lower()
        if not is_word(guess, self.guess_length):
            raise InvalidInput(f"Guess {guess!r} must contain only letters a-z.")
        return guess

    # ---------------------------------------------------------------- guesses

    def get_best_guess(self) -> Optional[str]:
        """
        The starting word until feedback arrives, then the top-ranked
        candidate. None once no candidate fits all the feedback.
        """
        if not self._history:
            return self.starting_word
        solutions = self.get_solutions()
        return solutions[0] if solutions else None

    def get_solutions(self) -> List[str]:
        """Re-rank and return the remaining candidates, best first."""
        self.sort()
        return list(self._corpus)

    def get_second_guess(self) -> List[str]:
        """
        Candidates ranked for a follow-up guess that avoids re-testing any
        letter in a slot where the last guess did not hit.

        Leaves this solver's corpus and history untouched.
        """
        if not self._history:
            return list(self._corpus)

        prior_guess, prior_score = self._history[-1]
        words = [
            word for word in self._corpus
            if all(code == FeedbackCode.HIT or letter != prior_letter
                   for letter, prior_letter, code in zip(word, prior_guess, prior_score))
        ]
        solver = WordleSolver(words, logging=self.logging, guess_length=self.guess_length)
        return solver.get_solutions()

    # -------------------------------------------------------------- filtering

    def apply_feedback(self, guess: str, feedback: FeedbackLike) -> "WordleSolver":
        """
        Record GUESS with its FEEDBACK and drop every candidate inconsistent
        with it.

        Feedback is 'x' for hit, 'e' for excluded, 'i' for included, or a
        sequence of FeedbackCode. Raises InvalidInput before touching any
        state if either argument is malformed.
        """
        guess = self._check_guess(guess)
        codes = parse_feedback(feedback, self.guess_length)

        self._history = self._history + (GuessRecord(guess, codes),)

        duplicate_letters = {
            letter for i, letter in enumerate(guess) if letter in guess[i + 1:]
        }

        # A repeated letter may be absent here yet present elsewhere.
        misses = [
            letter for letter, code in zip(guess, codes)
            if code == FeedbackCode.ABSENT and letter not in duplicate_letters
        ]
        self.exclude_letters("".join(misses))

        for index, (letter, code) in enumerate(zip(guess, codes)):
            if code == FeedbackCode.HIT:
                self.keep_with_correct_letter(letter, index)
            elif code == FeedbackCode.PRESENT:
                self.keep_with_misplaced_letter(letter, index)
            else:
                self.exclude_with_letter(letter, index)

        return self.sort()

    def exclude_letters(self, letters: str) -> "WordleSolver":
        """Remove words that contain any of LETTERS."""
        codes = sorted({char_code(letter) for letter in letters})
        mask = ~np.isin(self._chars, codes).any(axis=1)
        return self._keep(mask, "excluded letters")

    def exclude_with_letter(self, letter: str, index: int) -> "WordleSolver":
        """Keep only words without LETTER at INDEX."""
        mask = self._chars[:, index] != char_code(letter)
        return self._keep(mask, "wrong letter")

    def keep_with_correct_letter(self, letter: str, index: int) -> "WordleSolver":
        """Keep only words with LETTER at INDEX."""
        mask = self._chars[:, index] == char_code(letter)
        return self._keep(mask, "correct letter")

    def keep_with_misplaced_letter(self, letter: str, index: int) -> "WordleSolver":
        """Keep only words with LETTER somewhere other than INDEX."""
        code = char_code(letter)
        mask = (self._chars[:, index] != code) & (self._chars == code).any(axis=1)
        return self._keep(mask, "misplaced letter")

    # ---------------------------------------------------------------- ranking

    def sort(self) -> "WordleSolver":
        """Sort candidates by the commonness of their letters amongst each other."""
        counts = letter_counts(self._chars)
        self._log("Most frequent letters: %s", self.best_letters(counts_to_letters(counts)))
        uniques, totals = rank_keys(self._chars, counts)
        # lexsort is stable and sorts on the last key first.
        order = np.lexsort((-totals, -uniques))
        self._replace(tuple(self._corpus[i] for i in order), self._chars[order])
        return self

    def letter_frequency(self, at_index: Optional[int] = None) -> Dict[str, int]:
        """
        Letter occurrence counts over the current candidates.

        If AT_INDEX is given, counts only letters at that position.
        """
        letter_freq = counts_to_letters(letter_counts(self._chars, at_index))
        self._log("Most frequent letters: %s", self.best_letters(letter_freq))
        return letter_freq

    def best_letters(self, frequency_map: Optional[Dict[str, int]] = None) -> str:
        """Letters by descending frequency; ties alphabetical."""
        letter_freq = self.letter_frequency() if frequency_map is None else frequency_map
        ordered = sorted(letter_freq.items(), key=lambda item: (-item[1], item[0]))
        return "".join(letter for letter, _ in ordered)

    def letter_frequency_score(self, word: str) -> int:
        """Sum of current letter frequencies over the letters of WORD."""
        letter_freq = self.letter_frequency()
        return sum(letter_freq.get(letter, 0) for letter in word.lower())

    def best_letter_positions(self) -> List[str]:
        """Best letters for each position, of the remaining candidates."""
        self.sort()
        return [self.best_letters(self.letter_frequency(index))
                for index in range(self.guess_length)]
