import io

import pytest

from dominion.playdom import main, play_game


@pytest.mark.parametrize("seed", [1, 2, 42])
def test_play_game_reports_final_scores(seed):
    out = io.StringIO()
    score0, score1 = play_game(seed, out)
    text = out.getvalue()
    assert text.startswith("Starting game.\n")
    assert text.endswith(f"Finished game.\nPlayer 0: {score0}\nPlayer 1: {score1}\n")


def test_play_game_is_deterministic():
    first, second = io.StringIO(), io.StringIO()
    assert play_game(5, first) == play_game(5, second)
    assert first.getvalue() == second.getvalue()


def test_play_game_alternates_players():
    out = io.StringIO()
    play_game(3, out)
    ends = [line for line in out.getvalue().splitlines() if "end" in line.lower()]
    assert ends[0] == "0: end turn"
    assert all(
        a != b for a, b in zip(ends, ends[1:])
    )


def test_main_plays_game(capsys):
    assert main(["2"]) == 0
    assert "Finished game." in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["seed"]])
def test_main_rejects_missing_seed(argv, capsys):
    assert main(argv) == 1
    assert "usage" in capsys.readouterr().err