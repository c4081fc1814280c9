import pytest

from debug_trace import trace_solve
from wordle_solver.feedback import InvalidInput
from wordle_solver.simulate import benchmark, main, optimal_starting_word, play_round, \
    print_results
from wordle_solver.words import default_corpus


def test_play_round(small_corpus):
    result = play_round("cider", corpus=small_corpus)
    assert result == {
        'attempts': 2,
        'target_word': 'cider',
        'first_guess': 'tiger',
        'guesses': ['tiger', 'cider'],
        'scores': ['exexx', 'xxxxx'],
    }


def test_play_round_first_guess_wins(small_corpus):
    result = play_round("tiger", corpus=small_corpus)
    assert result['attempts'] == 1
    assert result['scores'] == ['xxxxx']


def test_play_round_with_starting_word(small_corpus):
    result = play_round("tiger", starting_word="cider", corpus=small_corpus)
    assert result['guesses'] == ['cider', 'tiger']


def test_play_round_reports_stuck_solver(small_corpus):
    with pytest.raises(RuntimeError, match="No more guesses after tiger for target eager"):
        play_round("eager", corpus=small_corpus)


def test_play_round_rejects_bad_target(small_corpus):
    with pytest.raises(InvalidInput):
        play_round("cat", corpus=small_corpus)


def test_benchmark_small_corpus(small_corpus):
    results = benchmark(corpus=small_corpus)
    assert results['average_attempts'] == 1.75
    assert results['min_attempts'] == 1
    assert results['max_attempts'] == 2
    assert results['distribution'] == {1: 1, 2: 3}
    assert results['failures'] == []
    assert [play['target_word'] for play in results['worst_attempts']] == \
        ['cider', 'otter', 'eerie', 'tiger']


def test_benchmark_terminates_for_every_default_word():
    results = benchmark()
    assert results['failures'] == []
    assert results['total'] == len(default_corpus())
    assert results['min_attempts'] >= 1
    for play in results['worst_attempts']:
        assert play['guesses'][-1] == play['target_word']
        assert play['scores'][-1] == 'xxxxx'


def test_print_results(small_corpus, capsys):
    print_results(benchmark(corpus=small_corpus))
    out = capsys.readouterr().out
    assert "Average attempts: 1.7500" in out
    assert "cider in 2: tiger cider" in out


def test_optimal_starting_word(small_corpus):
    results = optimal_starting_word(small_corpus, ["tiger", "cider"])
    assert [r['starting_word'] for r in results] == ["tiger", "cider"]
    assert all(r['average_attempts'] == 1.75 for r in results)


def test_main_single_round(capsys):
    main(["--target", "night"])
    out = capsys.readouterr().out
    assert "Solved night in" in out
    assert "🟩🟩🟩🟩🟩" in out


def test_trace_solve(small_corpus, capsys):
    assert trace_solve("cider", corpus=small_corpus) == 2
    assert "Solved in 2 guesses" in capsys.readouterr().out


def test_main_reports_stuck_solver(small_corpus, tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(small_corpus))
    main(["--target", "eager", "--words", str(path)])
    out = capsys.readouterr().out
    assert "Error: eager: No more guesses after tiger for target eager" in out
    assert "Solved" not in out
