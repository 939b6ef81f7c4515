import runpy
import sys
from pathlib import Path

import pytest

from speller.spellcheck.dictionary import Dictionary
from speller.spellcheck.loader import write_model

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "correct_words.py"

GENERAL = Dictionary({"the": 100, "lazy": 40, "dog": 95, "angel": 500, "ankle": 100})
MEDICAL = Dictionary({"ankle": 1})


def _run_script(monkeypatch, *args: str) -> None:
    monkeypatch.delenv("SPELLING_MODEL_NAME", raising=False)
    monkeypatch.delenv("SPELLING_INDUSTRY_MODEL_NAME", raising=False)
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *args])
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_script_prints_each_correction(tmp_path: Path, monkeypatch, capsys) -> None:
    model = write_model(GENERAL, tmp_path / "general.model.gz")

    _run_script(monkeypatch, "teh", "lazyz", "ankel", "--model", str(model))

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["'teh' - 'the'", "'lazyz' - 'lazy'", "'ankel' - 'angel'"]


def test_script_consults_industry_model_first(tmp_path: Path, monkeypatch, capsys) -> None:
    model = write_model(GENERAL, tmp_path / "general.model.gz")
    industry = write_model(MEDICAL, tmp_path / "medical.model.gz")

    _run_script(monkeypatch, "ankel", "dogg", "--model", str(model), "--industry-model", str(industry))

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["'ankel' - 'ankle'", "'dogg' - 'dog'"]


def test_script_exits_with_error_for_bad_model(tmp_path: Path, monkeypatch, capsys) -> None:
    broken = tmp_path / "broken.model.gz"
    broken.write_bytes(b"not a gzip stream")

    with pytest.raises(SystemExit) as excinfo:
        _run_script(monkeypatch, "teh", "--model", str(broken))

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")
