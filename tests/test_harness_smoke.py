import csv
import json
import pytest
from ezwordle.engine import Feedback, Word, Wordlist, parse_feedback
from ezwordle.harness import run_case, run_batch, summarize, write_csv, write_manifest

ANSWERS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone"]


def test_run_case_smoke():
    wl = Wordlist.from_corpus(ANSWERS)
    # every wrong guess removes itself, so len(ANSWERS) turns always suffice
    r = run_case(Word("crane"), candidates=wl, max_turns=len(ANSWERS))
    assert r["success"] is True
    assert r["secret"] == "crane"
    assert r["history"][-1] == (Word("crane"), Feedback.winning())
    assert r["guesses"] == len(r["history"])


def test_run_case_first_guess_is_used():
    wl = Wordlist.from_corpus(ANSWERS)
    r = run_case(Word("alone"), candidates=wl, max_turns=len(ANSWERS), first_guess=Word("adieu"))
    assert r["history"][0][0] == Word("adieu")
    assert r["success"] is True


def test_run_case_out_of_turns():
    wl = Wordlist.from_corpus(["abcde", "fghij"])
    # the first recommendation is "abcde" (tie goes to the first word)
    r = run_case(Word("fghij"), candidates=wl, max_turns=1)
    assert r["success"] is False
    assert r["history"] == [(Word("abcde"), parse_feedback("xxxxx").unwrap())]


def test_run_case_rejects_unknown_secret():
    wl = Wordlist.from_corpus(ANSWERS)
    with pytest.raises(ValueError):
        run_case(Word("zzzzz"), candidates=wl)


def test_run_batch_all_solved():
    wl = Wordlist.from_corpus(ANSWERS)
    seen = []
    results = run_batch(list(wl), candidates=wl, max_turns=len(ANSWERS), on_result=seen.append)
    assert len(results) == len(ANSWERS) == len(seen)
    assert all(r["success"] for r in results)
    # the opening is shared by every game
    assert len({r["history"][0][0] for r in results}) == 1


def test_summarize():
    results = [
        {"secret": "crane", "success": True, "guesses": 2, "time_ms": 1.0, "history": []},
        {"secret": "raise", "success": True, "guesses": 3, "time_ms": 3.0, "history": []},
        {"secret": "stare", "success": False, "guesses": 6, "time_ms": 2.0, "history": []},
    ]
    s = summarize(results)
    assert s["num_cases"] == 3
    assert s["wins"] == 2
    assert s["win_rate"] == pytest.approx(2 / 3)
    assert s["mean_guesses"] == pytest.approx(2.5)
    assert s["max_guesses"] == 3
    assert s["mean_time_ms"] == pytest.approx(2.0)
    assert s["distribution"] == {1: 0, 2: 1, 3: 1, 4: 0, 5: 0, 6: 0}
    assert summarize([])["num_cases"] == 0


def test_run_batch_rejects_zero_turns():
    wl = Wordlist.from_corpus(ANSWERS)
    with pytest.raises(ValueError):
        run_batch(list(wl), candidates=wl, max_turns=0)


def test_write_csv_columns(tmp_path):
    results = [{
        "secret": "crane", "success": True, "guesses": 2, "time_ms": 1.23456,
        "history": [(Word("raise"), parse_feedback("//xx.").unwrap()),
                    (Word("crane"), Feedback.winning())],
    }]
    csv_path = write_csv(results, tmp_path / "out" / "run.csv", max_turns=3)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    row = rows[0]
    assert row["secret"] == "crane" and row["time_ms"] == "1.235"
    assert row["guess_1"] == "raise"
    assert row["feedback_1"] == "//xx."
    assert row["code_1"] == str(parse_feedback("//xx.").unwrap().code)
    assert row["feedback_2"] == "....." and row["code_2"] == "0"
    assert row["guess_3"] == "" and row["code_3"] == ""


def test_write_manifest(tmp_path):
    wl = Wordlist.from_corpus(ANSWERS)
    results = run_batch([Word("trace")], candidates=wl, max_turns=len(ANSWERS))
    m_path = write_manifest(tmp_path / "m.json", run_id="20250101T000000Z",
                            config={"seed": 1}, corpus={"passed": True},
                            summary=summarize(results))
    data = json.loads(open(m_path, encoding="utf-8").read())
    assert data["run_id"] == "20250101T000000Z"
    assert data["summary"]["wins"] == 1
    assert data["config"] == {"seed": 1}
    assert "git_commit" in data
