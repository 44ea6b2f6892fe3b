import json

import pytest

from cellarena.headless import main, run_headless


def test_run_headless_keeps_populations():
    service = run_headless(120, seed=11, split_every=30)

    assert service.ticks == 120
    assert len(service.world.food) == service.config.food_count
    assert len(service.world.ai_players) == service.config.ai_count
    assert 1 <= len(service.world.player_cells) <= service.config.max_player_cells


def test_run_headless_is_reproducible():
    first = run_headless(60, seed=4, split_every=20).get_snapshot()
    second = run_headless(60, seed=4, split_every=20).get_snapshot()

    assert first == second


def test_main_prints_leaderboard(capsys):
    main(["--ticks", "10", "--seed", "3", "--log-level", "WARNING"])

    board = json.loads(capsys.readouterr().out)
    assert len(board) == 11
    assert sum(entry["isPlayer"] for entry in board) == 1
    scores = [entry["score"] for entry in board]
    assert scores == sorted(scores, reverse=True)


def test_main_rejects_negative_ticks():
    with pytest.raises(SystemExit):
        main(["--ticks", "-1"])


def test_main_accepts_lowercase_log_level(capsys):
    main(["--ticks", "1", "--seed", "3", "--log-level", "warning"])

    assert json.loads(capsys.readouterr().out)


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        main(["--ticks", "1", "--log-level", "LOUD"])
