from pathlib import Path

from apps.cli import assist
from wordle_helper.engine import CandidateEngine


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_session_narrows_and_reports_exhaustion(monkeypatch, capsys):
    engine = CandidateEngine(5, ["hello", "early", "asset", "bound", "heard", "spice"])
    # bad length and bad digits are re-prompted, not fatal
    _feed(monkeypatch, ["bound", "000", "00000", "toolong", "spice", "10001",
                        "asset", "00000"])
    assert assist.run_session(engine) == 0
    out = capsys.readouterr()
    assert "There are 6 words remaining." in out.out
    assert "invalid length" in out.err
    assert "invalid word length" in out.err
    assert "No candidates" in out.out


def test_main_with_dict_path(monkeypatch, capsys, tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("hello\nearly\nasset\ndog\n", encoding="utf-8")
    _feed(monkeypatch, ["hello", "00000"])
    assert assist.main(["-d", str(p)]) == 0
    out = capsys.readouterr().out
    assert "N=5" in out
    assert "There are 3 words remaining." in out


def test_main_missing_dictionary(capsys, tmp_path: Path):
    assert assist.main(["-d", str(tmp_path / "missing.txt")]) == 1
    assert "not found" in capsys.readouterr().err


def test_simulate_main(capsys, tmp_path: Path):
    from apps.cli import simulate

    p = tmp_path / "words.txt"
    p.write_text("crane\nraise\nstare\ntrace\ncared\nadieu\nalone\nslate\ndog\n", encoding="utf-8")
    assert simulate.main(["-d", str(p), "--no-progress", "--sample", "4"]) == 0
    out = capsys.readouterr().out
    assert "cases=4" in out


def test_session_all_exact_reports_solved(monkeypatch, capsys):
    engine = CandidateEngine(5, ["hello", "early", "asset"])
    _feed(monkeypatch, ["hello", "22222"])
    assert assist.run_session(engine) == 0
    out = capsys.readouterr().out
    assert "Solved: HELLO" in out
    assert "No candidates" not in out
