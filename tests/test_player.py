import io

import pytest

from dominion.cards import Card
from dominion.player import USAGE, Console, main


def make_console(seed=1):
    out = io.StringIO()
    return Console(seed, out), out


def test_whos_reports_current_player():
    console, out = make_console()
    console.run(["whos"])
    assert "Player 0's turn\n" in out.getvalue()


def test_exit_stops_processing():
    console, out = make_console()
    console.run(["exit", "whos"])
    assert "turn\n" not in out.getvalue()


def test_num_counts_initial_hand():
    console, out = make_console()
    console.run(["num"])
    assert "There are 5 cards in your hand." in out.getvalue()


def test_end_before_init_does_nothing():
    console, out = make_console()
    console.run(["end"])
    assert console.state.whose_turn == 0
    assert console.game_started is False


def test_init_then_end_passes_turn():
    console, out = make_console()
    console.run(["init 2 0", "end"])
    assert console.game_started is True
    assert console.state.whose_turn == 1
    assert "Player 1's turn number 0" in out.getvalue()


def test_init_with_invalid_players_keeps_game_unstarted():
    console, out = make_console()
    console.run(["init 7 0"])
    assert console.game_started is False
    assert console.state.num_players == 2


def test_bot_turn_runs_automatically():
    console, out = make_console()
    console.run(["init 2 1", "end"])
    text = out.getvalue()
    assert "Executing Bot Player 1" in text
    assert console.turn_num == 1
    assert console.state.whose_turn == 0


def test_buy_copper_succeeds():
    console, out = make_console()
    console.run(["buy 4"])
    assert "Player 0 buys card 4, Copper" in out.getvalue()
    assert Card.COPPER in console.state.discards[0]


def test_buy_province_without_money_fails():
    console, out = make_console()
    console.run(["buy 3"])
    assert "Player 0 cannot buy card 3, Province" in out.getvalue()
    assert console.state.discards[0] == []


def test_add_and_play_smithy():
    console, out = make_console()
    console.run(["add 13", "play 5"])
    text = out.getvalue()
    assert "Player 0 adds Smithy to their hand" in text
    assert "Player 0 plays Smithy" in text
    assert Card.SMITHY in console.state.played_cards


def test_play_non_action_fails():
    console, out = make_console()
    console.run(["play 0"])
    assert "Player 0 cannot play card 0" in out.getvalue()


def test_help_and_supply_output():
    console, out = make_console()
    console.run(["help", "supply"])
    text = out.getvalue()
    assert "Commands are:" in text
    assert "#   Card          Cost   Copies" in text


def test_resign_prints_scores_and_stops():
    console, out = make_console()
    console.run(["resign", "whos"])
    text = out.getvalue()
    assert "Player 0 has a score of" in text
    assert "Player 1 has a score of" in text
    assert "turn\n" not in text


def test_game_over_reports_winners():
    console, out = make_console()
    console.run(["init 2 0"])
    console.state.supply[Card.PROVINCE] = 0
    console.run(["whos"])
    text = out.getvalue()
    assert "winner(s) are:" in text
    assert "Player 1's deck:" in text
    assert "Player 0's turn\n" not in text


@pytest.mark.parametrize("argv", [[], ["0"], ["-3"], ["abc"], ["1", "2"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == USAGE + "\n"


def test_main_reads_commands(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("whos\nexit\n"))
    assert main(["3"]) == 0
    text = capsys.readouterr().out
    assert 'Please enter a command or "help" for commands' in text
    assert "Player 0's turn" in text