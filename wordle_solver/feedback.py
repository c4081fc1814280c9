"""
Feedback and scoring
====================

Feedback is one code per letter position:

- ``x`` HIT      letter correct and in the correct position
- ``i`` PRESENT  letter occurs in the target, but not here
- ``e`` ABSENT   letter excluded

The scorer uses the simplified duplicate-letter rule: a non-matching letter is
PRESENT whenever the target contains it anywhere, however many times it was
guessed. The real game caps PRESENT marks at the number of unmatched copies in
the target (guessing "speed" against "abide" marks only one "e"). The
constraint filter in ``solver.py`` is built on the simplified rule.
"""

import numpy as np
from numba import jit
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple, Union

from .words import GUESS_LENGTH, is_word, words_to_chars


class InvalidInput(ValueError):
    """A guess, feedback or corpus word that the solver cannot accept."""


# ============================================================================
# FEEDBACK CODES
# ============================================================================

class FeedbackCode(IntEnum):
    ABSENT = 0
    PRESENT = 1
    HIT = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {FeedbackCode.HIT: "x", FeedbackCode.PRESENT: "i", FeedbackCode.ABSENT: "e"}
_CODES = {s: code for code, s in _SYMBOLS.items()}
_SQUARES = {FeedbackCode.HIT: "🟩", FeedbackCode.PRESENT: "🟨", FeedbackCode.ABSENT: "⬛"}

Feedback = Tuple[FeedbackCode, ...]
FeedbackLike = Union[str, Sequence[FeedbackCode]]


def parse_feedback(feedback: FeedbackLike, length: int = GUESS_LENGTH) -> Feedback:
    """
    Normalise a feedback string like 'eexii' (any case) or a sequence of
    FeedbackCode into a tuple of codes.

    Raises InvalidInput on a length mismatch or an unknown code.
    """
    if len(feedback) != length:
        raise InvalidInput(f"Score must be {length} letters long.")

    if isinstance(feedback, str):
        lowered = feedback.lower()
        invalid = [ch for ch in lowered if ch not in _CODES]
        if invalid:
            raise InvalidInput(f"Invalid score letters: {', '.join(invalid)}")
        return tuple(_CODES[ch] for ch in lowered)

    invalid = [code for code in feedback if not isinstance(code, FeedbackCode)]
    if invalid:
        raise InvalidInput(f"Invalid score letters: {', '.join(map(repr, invalid))}")
    return tuple(feedback)


def feedback_to_string(feedback: Iterable[FeedbackCode]) -> str:
    """Convert codes to the 'x'/'i'/'e' string form."""
    return "".join(FeedbackCode(code).symbol for code in feedback)


def is_solved(feedback: FeedbackLike) -> bool:
    """True if every position is a HIT."""
    return all(code == FeedbackCode.HIT for code in parse_feedback(feedback, len(feedback)))


# ============================================================================
# SCORER
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> np.ndarray:
    """
    Compute per-position feedback for a guess against an answer.

    Args:
        guess: shape (n,) array of char codes (0-25 for a-z)
        answer: shape (n,) array of char codes

    Returns:
        shape (n,) array of codes: 0 absent, 1 present, 2 hit
    """
    n = guess.shape[0]
    feedback = np.zeros(n, dtype=np.int32)

    for i in range(n):
        if guess[i] == answer[i]:
            feedback[i] = 2  # HIT
            continue
        for j in range(n):
            if answer[j] == guess[i]:
                feedback[i] = 1  # PRESENT
                break

    return feedback


def score_guess(guess: str, target: str) -> Feedback:
    """
    Score the guess, given the target word.

    Pure: same inputs, same feedback. Used for simulation, where the target is
    known; a live player types the feedback in instead.
    """
    if len(guess) != len(target) or not is_word(guess, len(guess)) \
            or not is_word(target, len(target)):
        raise InvalidInput(f"Cannot score {guess!r} against {target!r}.")
    chars = words_to_chars([guess, target], len(guess))
    return tuple(FeedbackCode(int(code)) for code in compute_feedback(chars[0], chars[1]))


# ============================================================================
# PRETTY PRINTING
# ============================================================================

def scores_in_colors(scores: Iterable[FeedbackLike]) -> str:
    """Render each score as a row of colored squares, one row per line."""
    rows: List[str] = []
    for score in scores:
        codes = parse_feedback(score, len(score))
        rows.append("".join(_SQUARES[code] for code in codes))
    return "\n".join(rows)
