"""Smoke tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from humangenes.__main__ import main


def test_main_prints_population(capsys: pytest.CaptureFixture[str]) -> None:
    main(["-n", "3", "--seed", "5"])
    out = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in out[:3]] == ["[0]", "[1]", "[2]"]
    assert "gender:" in out[0]
    assert sum("best match" in line for line in out) == 3


def test_main_is_deterministic(capsys: pytest.CaptureFixture[str]) -> None:
    main(["-n", "4", "--seed", "11"])
    first = capsys.readouterr().out
    main(["-n", "4", "--seed", "11"])
    assert capsys.readouterr().out == first


def test_main_reads_config(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("seed: 1\npopulation: 2\nshow_affinity: false\n")
    main(["-c", str(cfg)])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert not any("best match" in line for line in out)
