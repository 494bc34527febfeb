# tests/test_main.py
from pathlib import Path

from patient_monitor.main import main


def test_main_success(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "patient_data.csv").write_text("72,98\n", encoding="utf-8")

    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("--- BME3323 FIRMWARE SIMULATION: STARTING ---")
    assert "Time: 0.000 s | BPM: 72 | SpO2: 98" in out


def test_main_missing_file(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main() == 1
    assert "is missing" in capsys.readouterr().out
