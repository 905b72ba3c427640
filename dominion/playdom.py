"""A scripted two-player game: a smithy player against an adventurer player."""

from __future__ import annotations

import sys
from typing import TextIO

from dominion.cards import Card
from dominion.effects import play_card
from dominion.game import GameError, GameState, initialize_game

KINGDOM = (
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
_COIN = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}


def _try_play(state: GameState, hand_pos: int) -> None:
    try:
        play_card(state, hand_pos, -1, -1, -1)
    except GameError:
        pass


def _try_buy(state: GameState, card: Card) -> None:
    try:
        state.buy_card(card)
    except GameError:
        pass


def _play_treasures(state: GameState) -> int:
    money = 0
    i = 0
    while i < state.num_hand_cards():
        card = state.hand_card(i)
        if card in _COIN:
            _try_play(state, i)
            money += _COIN[card]
        i += 1
    return money


def play_game(seed: int, out: TextIO | None = None) -> tuple[int, int]:
    """Play a full scripted game and return the two players' scores."""
    out = sys.stdout if out is None else out
    out.write("Starting game.\n")
    state = initialize_game(2, list(KINGDOM), seed)
    num_smithies = 0
    num_adventurers = 0

    while not state.is_game_over():
        money = 0
        smithy_pos = -1
        adventurer_pos = -1
        for i, card in enumerate(state.hands[state.whose_turn]):
            if card in _COIN:
                money += _COIN[card]
            elif card == Card.SMITHY:
                smithy_pos = i
            elif card == Card.ADVENTURER:
                adventurer_pos = i

        if state.whose_turn == 0:
            if smithy_pos != -1:
                out.write(f"0: smithy played from position {smithy_pos}\n")
                _try_play(state, smithy_pos)
                out.write("smithy played.\n")
                money = _play_treasures(state)

            if money >= 8:
                out.write("0: bought province\n")
                _try_buy(state, Card.PROVINCE)
            elif money >= 6:
                out.write("0: bought gold\n")
                _try_buy(state, Card.GOLD)
            elif money >= 4 and num_smithies < 2:
                out.write("0: bought smithy\n")
                _try_buy(state, Card.SMITHY)
                num_smithies += 1
            elif money >= 3:
                out.write("0: bought silver\n")
                _try_buy(state, Card.SILVER)

            out.write("0: end turn\n")
        else:
            if adventurer_pos != -1:
                out.write(f"1: adventurer played from position {adventurer_pos}\n")
                _try_play(state, adventurer_pos)
                money = _play_treasures(state)

            if money >= 8:
                out.write("1: bought province\n")
                _try_buy(state, Card.PROVINCE)
            elif money >= 6 and num_adventurers < 2:
                out.write("1: bought adventurer\n")
                _try_buy(state, Card.ADVENTURER)
                num_adventurers += 1
            elif money >= 6:
                out.write("1: bought gold\n")
                _try_buy(state, Card.GOLD)
            elif money >= 3:
                out.write("1: bought silver\n")
                _try_buy(state, Card.SILVER)

            out.write("1: endTurn\n")
        state.end_turn()

    scores = (state.score_for(0), state.score_for(1))
    out.write("Finished game.\n")
    out.write(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")
    return scores


def main(argv: list[str] | None = None) -> int:
    """Play the scripted game with the seed given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        seed = int(args[0])
    except (IndexError, ValueError):
        print("usage: playdom SEED", file=sys.stderr)
        return 1
    play_game(seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())