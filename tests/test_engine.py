"""
Testing the pure scoring function.
"""

from itertools import product

from mastermind.engine import evaluate, feedback_message
from mastermind.schemas import Code
from mastermind.types import CODE_SIZE, Color

K, W, Y, B, R, G = Color.BLACK, Color.WHITE, Color.YELLOW, Color.BLUE, Color.RED, Color.GREEN


def test_identical_codes_are_all_good():
    code = Code.of(R, Y, R, G)
    assert evaluate(code, code) == (4, 0)


def test_no_shared_colors():
    assert evaluate(Code.of(K, W, Y, B), Code.of(R, G, R, G)) == (0, 0)


def test_duplicates_without_overlap():
    assert evaluate(Code.of(W, W, W, W), Code.of(K, K, K, K)) == (0, 0)


def test_full_displacement():
    assert evaluate(Code.of(W, B, G, K), Code.of(K, W, B, G)) == (0, 4)


def test_some_position_matches():
    # Only the first position matches; nothing else overlaps
    assert evaluate(Code.of(K, W, B, R), Code.of(K, Y, G, G)) == (1, 0)


def test_exact_match_is_not_counted_again_as_bad():
    # One red in the secret, already matched exactly; the other red gets nothing
    assert evaluate(Code.of(R, K, K, K), Code.of(R, R, W, W)) == (1, 0)


def test_extra_copies_in_guess_score_once():
    # Two reds guessed against a single misplaced red
    assert evaluate(Code.of(R, K, K, K), Code.of(W, R, R, W)) == (0, 1)


def test_duplicates_on_both_sides():
    source = Code.of(Y, Y, G, G)
    guess = Code.of(Y, G, Y, G)
    # First and last positions match; the middle pair is swapped
    assert evaluate(source, guess) == (2, 2)


def test_good_plus_bad_never_exceeds_code_size():
    # Every guess against a handful of secrets, duplicates included
    secrets = [Code.of(K, K, K, K), Code.of(W, B, G, K), Code.of(R, R, Y, Y)]
    for source in secrets:
        for colors in product([K, W, Y, R], repeat=CODE_SIZE):
            good, bad = evaluate(source, Code(colors=colors))
            assert good + bad <= CODE_SIZE


def test_feedback_message():
    assert feedback_message(0, 0) == "all incorrect"
    assert feedback_message(2, 1) == "2 good and 1 bad"
