"""
Wordle Solver - Letter-Frequency Heuristic
==========================================

Narrows a fixed corpus of candidate words from guess feedback and proposes
the candidate whose letters are most common amongst the rest.
"""

__version__ = "1.0.0"

from .feedback import FeedbackCode, InvalidInput, parse_feedback, feedback_to_string, \
    score_guess, scores_in_colors
from .solver import GuessRecord, WordleSolver
from .simulate import play_round, benchmark, print_results, optimal_starting_word
from .words import GUESS_LENGTH, default_corpus, load_words
