"""Interactive command console for playing a game with humans and bots."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from dominion.cards import MAX_PLAYERS, Card, card_name
from dominion.effects import play_card
from dominion.game import GameError, initialize_game
from dominion.interface import (
    add_card_to_hand,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
)

DEFAULT_KINGDOM = (
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
USAGE = "Usage: player [integer random number seed]"
UNUSED = -1


def _matches(command: str, keyword: str) -> bool:
    """Commands are recognised by their first four characters."""
    if len(keyword) >= 4:
        return command[:4] == keyword[:4]
    return command == keyword


def _parse(line: str) -> tuple[str, list[int]]:
    tokens = line.split()
    command = tokens[0] if tokens else ""
    args = [UNUSED] * 4
    for i, token in enumerate(tokens[1:5]):
        try:
            args[i] = int(token)
        except ValueError:
            break
    return command, args


class Console:
    """Reads commands and drives a game, playing bot turns in between."""

    def __init__(self, seed: int, out: TextIO | None = None) -> None:
        self.seed = seed
        self.out = sys.stdout if out is None else out
        self.kingdom = list(DEFAULT_KINGDOM)
        self.state = initialize_game(2, self.kingdom, seed)
        self.is_bot = [False] * MAX_PLAYERS
        self.game_started = False
        self.turn_num = 0

    def _write(self, text: str) -> None:
        self.out.write(text)

    def run(self, lines: Iterable[str]) -> None:
        """Process command lines until exit, resignation, game end or no input."""
        commands = iter(lines)
        while True:
            current = self.state.whose_turn
            if self.game_started and self.state.is_game_over():
                self._report_end()
                return
            if self.is_bot[current]:
                self.turn_num = execute_bot_turn(
                    self.state, current, self.turn_num, self.out
                )
                continue
            self._write("$ ")
            line = next(commands, None)
            if line is None:
                return
            if not self._dispatch(line, current):
                return

    def _report_end(self) -> None:
        state = self.state
        self._write(format_scores(state))
        self._write(f"After {self.turn_num} turns, the winner(s) are:\n")
        for winner in state.get_winners():
            self._write(f"Player {winner}\n")
        for p in range(state.num_players):
            self._write(format_hand(state, p))
            self._write(format_played(state, p))
            self._write(format_discard(state, p))
            self._write(format_deck(state, p))

    def _dispatch(self, line: str, current: int) -> bool:
        command, (arg0, arg1, arg2, arg3) = _parse(line)
        state = self.state

        if _matches(command, "add"):
            try:
                add_card_to_hand(state, current, arg0)
            except GameError:
                pass
            self._write(f"Player {current} adds {card_name(arg0)} to their hand\n\n")
        elif _matches(command, "buy"):
            try:
                state.buy_card(arg0)
            except GameError:
                self._write(
                    f"Player {current} cannot buy card {arg0}, {card_name(arg0)}\n\n"
                )
            else:
                self._write(f"Player {current} buys card {arg0}, {card_name(arg0)}\n\n")
        elif _matches(command, "end"):
            if self.game_started:
                if current == state.num_players - 1:
                    self.turn_num += 1
                state.end_turn()
                self._write(
                    f"Player {state.whose_turn}'s turn number {self.turn_num}\n\n"
                )
        elif _matches(command, "exit"):
            return False
        elif _matches(command, "help"):
            self._write(help_text())
        elif _matches(command, "init"):
            self._init(arg0, arg1)
        elif _matches(command, "num"):
            self._write(f"There are {state.num_hand_cards()} cards in your hand.\n")
        elif _matches(command, "play"):
            try:
                card = state.hand_card(arg0)
            except GameError:
                card = UNUSED
            try:
                play_card(state, arg0, arg1, arg2, arg3)
            except GameError:
                self._write(f"Player {current} cannot play card {arg0}\n\n")
            else:
                self._write(f"Player {current} plays {card_name(card)}\n\n")
        elif _matches(command, "resign"):
            state.end_turn()
            self._write(format_scores(state))
            return False
        elif _matches(command, "show"):
            if self.game_started:
                self._write(format_hand(state, current))
                self._write(format_played(state, current))
        elif _matches(command, "stat"):
            if self.game_started:
                self._write(format_state(state))
        elif _matches(command, "supply"):
            self._write(format_supply(state))
        elif _matches(command, "whos"):
            self._write(f"Player {state.whose_turn}'s turn\n")
        return True

    def _init(self, num_players: int, num_bots: int) -> None:
        try:
            state = initialize_game(num_players, self.kingdom, self.seed)
        except GameError:
            self._write("\n")
            return
        for p in range(max(num_players - num_bots, 0), min(num_players, MAX_PLAYERS)):
            self.is_bot[p] = True
        self.state = state
        self._write("\n")
        self.game_started = True
        self._write(f"Player {state.whose_turn}'s turn number {self.turn_num}\n\n")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game from a positive random seed."""
    args = sys.argv[1:] if argv is None else list(argv)
    seed = None
    if len(args) == 1:
        try:
            seed = int(args[0])
        except ValueError:
            seed = None
    if seed is None or seed <= 0:
        print(USAGE)
        return 0
    console = Console(seed)
    print('Please enter a command or "help" for commands')
    console.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())