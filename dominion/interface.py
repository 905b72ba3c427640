"""Text views of a game and the simple money-playing bot."""

from __future__ import annotations

import math
import sys
from typing import TextIO

from dominion.cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    SILVER_VALUE,
    Card,
    card_name,
    get_card_cost,
    phase_name,
)
from dominion.game import GameError, GameState
from dominion.rngs import RandomStreams

_COIN_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_HELP = (
    "Commands are: \n"
    "  add [Supply Card Number] \t\t\t- add any card to your hand (teh hacks)\n"
    "  buy [Supply Card Number] \t\t\t- buy a card at supply position\n"
    "  end \t\t\t      \t\t\t- end your turn\n"
    "  init [Number of Players] [Number of Bots] \t- initialize the game\n"
    "  num \t\t\t      \t\t\t- print number of cards in your hand\n"
    "  play [Hand Index] [Choice] [Choice] [Choice]\t- play a card from your hand\n"
    "  resign\t\t\t\t\t- end the game showing the current scores\n"
    "  show \t\t\t\t\t\t- show your current hand\n"
    "  stat \t\t\t\t\t\t- show your turn's status\n"
    "  supp \t\t\t\t\t\t- show the supply\n"
    "  whos \t\t\t      \t\t\t- whos turn\n"
    "  exit \t\t\t      \t\t\t- exit the interface"
    "\n\n"
)


def _format_pile(title: str, cards: list[int], row_end: str) -> str:
    parts = [title]
    if cards:
        parts.append("#  Card\n")
    parts.extend(f"{i:<2} {card_name(card):<13}{row_end}" for i, card in enumerate(cards))
    parts.append("\n")
    return "".join(parts)


def format_hand(state: GameState, player: int) -> str:
    """Numbered listing of a player's hand."""
    return _format_pile(f"Player {player}'s hand:\n", state.hands[player], "\n")


def format_deck(state: GameState, player: int) -> str:
    """Numbered listing of a player's deck."""
    return _format_pile(f"Player {player}'s deck: \n", state.decks[player], "\n")


def format_discard(state: GameState, player: int) -> str:
    """Numbered listing of a player's discard pile."""
    return _format_pile(f"Player {player}'s discard: \n", state.discards[player], " \n")


def format_played(state: GameState, player: int) -> str:
    """Numbered listing of the cards played this turn."""
    return _format_pile(f"Player {player}'s played cards: \n", state.played_cards, " \n")


def format_supply(state: GameState) -> str:
    """Table of the supply piles in the game with cost and copies left."""
    parts = ["#   Card          Cost   Copies\n"]
    for card in Card:
        count = state.supply[card]
        if count == -1:
            continue
        parts.append(
            f"{int(card):<2}  {card_name(card):<13} {get_card_cost(card):<5}  {count:<5}\n"
        )
    parts.append("\n")
    return "".join(parts)


def format_state(state: GameState) -> str:
    """Summary of the current player's turn."""
    return (
        f"Player {state.whose_turn}:\n"
        f"{phase_name(state.phase)} phase\n"
        f"{state.num_actions} actions\n"
        f"{state.coins} coins\n"
        f"{state.num_buys} buys\n\n"
    )


def format_scores(state: GameState) -> str:
    """One line per player with their current score."""
    return "".join(
        f"Player {p} has a score of {state.score_for(p)}\n"
        for p in range(state.num_players)
    )


def help_text() -> str:
    """The list of console commands."""
    return _HELP


def add_card_to_hand(state: GameState, player: int, card: int) -> None:
    """Put a kingdom card straight into a player's hand."""
    if not Card.ADVENTURER <= card < NUM_TOTAL_K_CARDS:
        raise GameError(f"card {card} is not a kingdom card")
    state.hands[player].append(Card(card))


def select_kingdom_cards(random_seed: int) -> list[Card]:
    """Pick ten different kingdom cards at random from ``random_seed``."""
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(random_seed)
    chosen: list[Card] = []
    while len(chosen) < NUM_K_CARDS:
        card = math.floor(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(Card(card))
    return chosen


def count_hand_coins(state: GameState, player: int) -> int:
    """Treasure value of the cards in a player's hand."""
    return sum(_COIN_VALUES.get(card, 0) for card in state.hands[player])


def execute_bot_turn(
    state: GameState, player: int, turn_num: int, out: TextIO | None = None
) -> int:
    """Play one turn for a bot that buys only money and victory cards.

    Returns the turn number after the turn.
    """
    out = sys.stdout if out is None else out
    coins = count_hand_coins(state, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(format_supply(state))

    provinces = state.supply_count(Card.PROVINCE)
    if coins >= get_card_cost(Card.PROVINCE) and provinces > 0:
        choice = Card.PROVINCE
    elif provinces == 0 and coins >= get_card_cost(Card.DUCHY):
        choice = Card.DUCHY
    elif coins >= get_card_cost(Card.GOLD) and state.supply_count(Card.GOLD) > 0:
        choice = Card.GOLD
    elif coins >= get_card_cost(Card.SILVER) and state.supply_count(Card.SILVER) > 0:
        choice = Card.SILVER
    else:
        choice = None

    if choice is not None:
        try:
            state.buy_card(choice)
        except GameError:
            pass
        out.write(f"Player {player} buys card {card_name(choice)}\n\n")

    if player == state.num_players - 1:
        turn_num += 1
    state.end_turn()
    if not state.is_game_over():
        out.write(f"Player {state.whose_turn}'s turn number {turn_num}\n\n")
    return turn_num