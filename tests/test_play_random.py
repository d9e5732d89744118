"""Smoke test for the random-round script."""
from president.play_random import run_random_round


def test_run_random_round_prints_summary(capsys):
    run_random_round(3, seed=1)
    out = capsys.readouterr().out
    assert out.startswith("players=3, tricks=")
    assert "PRESIDENT" in out
    assert "ASSHOLE" in out
