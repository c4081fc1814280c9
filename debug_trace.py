"""Debug script for tracing solver behavior."""

from wordle_solver.feedback import feedback_to_string, is_solved, score_guess, scores_in_colors
from wordle_solver.solver import WordleSolver


def trace_solve(answer, starting_word=None, corpus=None, max_guesses=20):
    solver = WordleSolver(corpus, starting_word=starting_word)

    print(f"\n=== Tracing solve for: {answer} ===\n")

    for i in range(max_guesses):
        cands = solver.get_solutions()
        print(f"Turn {i+1}: {len(cands)} candidates")
        if len(cands) <= 10:
            print(f"  Candidates: {cands}")
            for c in cands:
                print(f"    score({c}) = {solver.letter_frequency_score(c)}")
        print(f"  Best letters by position: {solver.best_letter_positions()}")

        guess = solver.get_best_guess()
        if guess is None:
            print(f"  ERROR: no candidates left for {answer}!")
            break

        fb = score_guess(guess, answer)
        print(f"  Guess: {guess} -> {feedback_to_string(fb)} {scores_in_colors([fb])}")

        if is_solved(fb):
            print(f"\n✓ Solved in {i+1} guesses!")
            return i + 1

        solver.apply_feedback(guess, fb)

        # Also show what a second-guess list would look like
        second = solver.get_second_guess()
        print(f"  Second-guess list: {second[:5]}")

        if answer not in solver.corpus:
            print(f"  ERROR: {answer} not in remaining candidates!")
            print(f"  Remaining: {list(solver.corpus)[:20]}")
            break

    print(f"\n✗ Failed to solve in {max_guesses} guesses")
    return max_guesses + 1


if __name__ == "__main__":
    # Test problematic words
    for word in ["night", "share"]:
        trace_solve(word)
