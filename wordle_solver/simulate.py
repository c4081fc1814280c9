"""
Simulation
==========

Plays the solver against known target words, scoring each guess with the
simulated scorer, and benchmarks it across a whole corpus.

    $ python -m wordle_solver.simulate                  # whole corpus
    $ python -m wordle_solver.simulate --target cigar --verbose
"""

import argparse
import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence
import time

from .feedback import InvalidInput, feedback_to_string, is_solved, score_guess, \
    scores_in_colors
from .solver import WordleSolver
from .words import default_corpus, is_word, load_words

log = logging.getLogger(__name__)

WORST_CASES = 9


def play_round(target_word: str, starting_word: Optional[str] = None,
               logging: bool = False, corpus: Optional[Sequence[str]] = None) -> Dict:
    """
    Play a wordle until the target is found.

    Returns:
        dict with attempts, target_word, first_guess, guesses and scores

    Raises:
        RuntimeError if the solver runs out of candidates first
    """
    solver = WordleSolver(corpus, starting_word, logging)
    target_word = target_word.lower()
    if not is_word(target_word, solver.guess_length):
        raise InvalidInput(f"Target must be {solver.guess_length} letters long.")

    guesses: List[str] = []
    scores: List[str] = []
    prior_guess = None

    while True:
        guess = solver.get_best_guess()
        if guess is None:
            raise RuntimeError(
                f"No more guesses after {prior_guess} for target {target_word}")

        feedback = score_guess(guess, target_word)
        guesses.append(guess)
        scores.append(feedback_to_string(feedback))
        if is_solved(feedback):
            break

        solver.apply_feedback(guess, feedback)
        prior_guess = guess

    if logging:
        log.info("Found %s in %d attempts.", target_word, len(guesses))
    return {
        'attempts': len(guesses),
        'target_word': target_word,
        'first_guess': guesses[0],
        'guesses': guesses,
        'scores': scores,
    }


def benchmark(starting_word: Optional[str] = None, corpus: Optional[Sequence[str]] = None,
              logging: bool = False, verbose: bool = False) -> Dict:
    """
    Benchmark the solver by running it through every word in the corpus.

    Args:
        starting_word: first guess override for every round
        corpus: words to play (default: the packaged corpus)
        logging: log each round
        verbose: print progress

    Returns:
        Dict with results
    """
    words = list(default_corpus() if corpus is None else corpus)

    plays = []
    failures = []
    start = time.time()
    for i, word in enumerate(words):
        if verbose and i % 500 == 0:
            print(f"[{i}/{len(words)}] {time.time() - start:.1f}s")
        try:
            plays.append(play_round(word, starting_word, logging, words))
        except RuntimeError as e:
            print(f"Error: {word}: {e}")
            failures.append(word)

    plays.sort(key=lambda play: play['attempts'])
    all_attempts = [play['attempts'] for play in plays]

    worst_attempts = [
        play_round(play['target_word'], starting_word, True, words)
        for play in reversed(plays[-WORST_CASES:])
    ]

    return {
        'total': len(words),
        'average_attempts': sum(all_attempts) / len(all_attempts) if all_attempts else 0.0,
        'min_attempts': min(all_attempts, default=0),
        'max_attempts': max(all_attempts, default=0),
        'distribution': dict(sorted(Counter(all_attempts).items())),
        'worst_attempts': worst_attempts,
        'failures': failures,
        'time': time.time() - start,
    }


def print_results(results: Dict):
    """Pretty print benchmark results."""
    total = results['total'] or 1
    print("\n" + "=" * 50)
    print("BENCHMARK RESULTS")
    print("=" * 50)
    print(f"Words tested: {results['total']}")
    print(f"Average attempts: {results['average_attempts']:.4f}")
    print(f"Min / max attempts: {results['min_attempts']} / {results['max_attempts']}")
    print(f"Failures: {len(results['failures'])}")
    print(f"Time: {results['time']:.1f}s")
    print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / total
        bar = "█" * int(pct / 2)
        print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['worst_attempts']:
        print("\nWorst rounds:")
        for play in results['worst_attempts']:
            print(f"  {play['target_word']} in {play['attempts']}: {' '.join(play['guesses'])}")
    if results['failures']:
        print(f"\nFailed words: {results['failures'][:20]}")
    print("=" * 50)


def optimal_starting_word(corpus: Optional[Sequence[str]] = None,
                          candidates: Optional[Sequence[str]] = None) -> List[Dict]:
    """
    Benchmark every candidate starting word; best average first.

    Each entry is a benchmark result with its 'starting_word' added.
    """
    words = list(default_corpus() if corpus is None else corpus)
    results = []
    for starting_word in (words if candidates is None else candidates):
        print(f"Perf check, starting with {starting_word}")
        result = benchmark(starting_word, words)
        result['starting_word'] = starting_word
        results.append(result)
    results.sort(key=lambda result: result['average_attempts'])
    return results


# ============================================================================
# MAIN
# ============================================================================

def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="Play the letter-frequency solver against known words.")
    ap.add_argument("--start", metavar="WORD", help="starting guess override")
    ap.add_argument("--target", metavar="WORD", help="play a single round against WORD")
    ap.add_argument("--words", metavar="FILE", help="word list, one word per line")
    ap.add_argument("--verbose", action="store_true", help="log every filter step")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(message)s")
    corpus = load_words(args.words) if args.words else None

    if args.target:
        try:
            result = play_round(args.target, args.start, args.verbose, corpus)
        except RuntimeError as e:
            print(f"Error: {args.target}: {e}")
            return
        print(f"Solved {result['target_word']} in {result['attempts']} attempts: "
              f"{' '.join(result['guesses'])}")
        print(scores_in_colors(result['scores']))
    else:
        print_results(benchmark(args.start, corpus, verbose=args.verbose))


if __name__ == "__main__":
    main()
