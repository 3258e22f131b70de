import pytest
from ezwordle.engine import (Feedback, FormatError, Outcome, Word, contains_letter,
                             format_feedback, generate_feedback, is_winning,
                             parse_feedback, parse_word)

G, Y, X = Outcome.GREEN, Outcome.YELLOW, Outcome.GRAY


# --- feedback rule golden tests ('.' green, '/' yellow, 'x' gray) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("aedcb", "abcde", ".////"),
    ("crane", "crane", "....."),
    ("raise", "crane", "//xx."),
    ("level", "lemon", "..xxx"),
    ("belle", "level", "x.///"),
    ("stare", "crane", "xx./."),
    ("fghij", "abcde", "xxxxx"),
])
def test_feedback_golden(guess, secret, expected):
    assert format_feedback(generate_feedback(Word(guess), Word(secret))) == expected


def test_feedback_worked_example():
    fb = generate_feedback(Word("AEDCB"), Word("ABCDE"))
    assert fb == Feedback([G, Y, Y, Y, Y])


# Secret letters are not used up by earlier yellows.
@pytest.mark.parametrize("guess,secret,expected", [
    ("eerie", "cheek", "//xx/"),   # three yellow e's from two e's
    ("sassy", "bless", "/x/.x"),   # one spare s marks two positions
])
def test_feedback_does_not_consume_letters(guess, secret, expected):
    assert format_feedback(Word(guess).check(Word(secret))) == expected


def test_green_secret_position_does_not_make_yellow():
    # the only 'l' in the secret is already green at position 0
    fb = Word("lolly").check(Word("lemon"))
    assert fb[0] is G
    assert fb[2] is X and fb[3] is X
    assert format_feedback(Word("aaaaa").check(Word("abcde"))) == ".xxxx"


@pytest.mark.parametrize("w", ["crane", "eerie", "aaaaa", "level", "abcde"])
def test_self_feedback_is_winning(w):
    word = Word(w)
    assert is_winning(word.check(word))


def test_word_shape_and_display():
    w = Word("Crane")
    assert str(w) == "crane"
    assert w == Word("crane")
    assert hash(w) == hash(Word("crane"))
    assert len(w) == 5 and w[4] == "e"
    with pytest.raises(FormatError):
        Word("cran")
    with pytest.raises(ValueError):
        Word("cranes")


def test_contains_letter():
    w = Word("crane")
    assert contains_letter(w, "a")
    assert "r" in w
    assert not contains_letter(w, "z")


# --- text encodings ---
def test_parse_feedback_symbols():
    res = parse_feedback("x/.xx")
    assert res.ok
    assert res.value == Feedback([X, Y, G, X, X])
    assert format_feedback(res.value) == "x/.xx"


@pytest.mark.parametrize("text", ["xx", "x?xxx", "", "xxxxxx", "XXXXX"])
def test_parse_feedback_rejects(text):
    res = parse_feedback(text)
    assert not res.ok
    assert res.value is None and res.error
    with pytest.raises(FormatError):
        res.unwrap()


def test_parse_word():
    res = parse_word("  CRANE\n")
    assert res.ok and res.unwrap() == Word("crane")
    for bad in ["cran", "cranes", "   "]:
        assert not parse_word(bad).ok
