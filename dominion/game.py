"""Game state and the core rules: setup, drawing, buying, turns and scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from dominion.cards import (
    MAX_PLAYERS,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    Card,
    Phase,
    get_cost,
)
from dominion.rngs import RandomStreams

_DESTINATIONS = ("discard", "deck", "hand")
_SCORED_PILES = 25
_HAND_SIZE = 5


class GameError(Exception):
    """Raised when a move or a setup request breaks the rules."""


def _card_points(card: int, curse_count: int) -> int:
    if card == Card.CURSE:
        return -1
    if card in (Card.ESTATE, Card.GREAT_HALL):
        return 1
    if card == Card.DUCHY:
        return 3
    if card == Card.PROVINCE:
        return 6
    if card == Card.GARDENS:
        return curse_count // 10
    return 0


@dataclass
class GameState:
    """Everything that describes a game in progress."""

    num_players: int
    supply: list[int] = field(default_factory=lambda: [-1] * NUM_TOTAL_K_CARDS)
    embargo_tokens: list[int] = field(default_factory=lambda: [0] * NUM_TOTAL_K_CARDS)
    hands: list[list[int]] = field(default_factory=list)
    decks: list[list[int]] = field(default_factory=list)
    discards: list[list[int]] = field(default_factory=list)
    played_cards: list[int] = field(default_factory=list)
    outpost_played: int = 0
    outpost_turn: int = 0
    whose_turn: int = 0
    phase: Phase = Phase.ACTION
    num_actions: int = 1
    coins: int = 0
    num_buys: int = 1
    rng: RandomStreams = field(default_factory=RandomStreams)

    def __post_init__(self) -> None:
        for piles in (self.hands, self.decks, self.discards):
            while len(piles) < self.num_players:
                piles.append([])

    def shuffle(self, player: int) -> None:
        """Shuffle the player's deck deterministically from the game's generator."""
        deck = self.decks[player]
        if not deck:
            raise GameError(f"player {player} has no cards in the deck to shuffle")
        deck.sort()
        shuffled = []
        while deck:
            pos = math.floor(self.rng.random() * len(deck))
            shuffled.append(deck.pop(pos))
        deck.extend(shuffled)

    def draw_card(self, player: int) -> int | None:
        """Move the top deck card to the player's hand.

        An empty deck is first refilled from the shuffled discard pile.
        Returns the card drawn, or None when there is nothing left to draw.
        """
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                return None
            self.shuffle(player)
        card = deck.pop()
        self.hands[player].append(card)
        return card

    def discard_card(self, hand_pos: int, player: int, trash: bool = False) -> None:
        """Remove a card from the hand; unless trashed it goes to the played pile.

        The last card of the hand takes the freed position.
        """
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        card = hand[hand_pos]
        if not trash:
            self.played_cards.append(card)
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(self, card: int, player: int, to: str = "discard") -> None:
        """Take a card from the supply into the player's discard, deck or hand."""
        if to not in _DESTINATIONS:
            raise ValueError(f"unknown destination {to!r}")
        if self.supply_count(card) < 1:
            raise GameError(f"no {card} left in the supply")
        if to == "deck":
            self.decks[player].append(card)
        elif to == "hand":
            self.hands[player].append(card)
        else:
            self.discards[player].append(card)
        self.supply[card] -= 1

    def update_coins(self, player: int, bonus: int = 0) -> None:
        """Set coins to the treasure in the player's hand plus ``bonus``."""
        values = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}
        self.coins = sum(values.get(card, 0) for card in self.hands[player]) + bonus

    def buy_card(self, card: int) -> None:
        """Buy ``card`` for the current player into their discard pile."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(card) < 1:
            raise GameError(f"no {card} left in the supply")
        cost = get_cost(card)
        if self.coins < cost:
            raise GameError(f"not enough coins: have {self.coins}, need {cost}")
        self.phase = Phase.BUY
        self.gain_card(card, self.whose_turn)
        self.coins -= cost
        self.num_buys -= 1

    def end_turn(self) -> None:
        """Discard the current hand and hand the turn to the next player."""
        current = self.whose_turn
        self.discards[current].extend(self.hands[current])
        self.hands[current].clear()

        self.whose_turn = current + 1 if current < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.whose_turn].clear()

        for _ in range(_HAND_SIZE):
            self.draw_card(self.whose_turn)
        self.update_coins(self.whose_turn)

    def is_game_over(self) -> bool:
        """True once provinces run out or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_SCORED_PILES] if count == 0)
        return empty >= 3

    def score_for(self, player: int) -> int:
        """Victory points held by ``player``.

        Only as many deck cards are counted as there are cards in the discard pile.
        """
        curses = self.full_deck_count(player, Card.CURSE)
        discard = self.discards[player]
        counted = self.hands[player] + discard + self.decks[player][: len(discard)]
        return sum(_card_points(card, curses) for card in counted)

    def get_winners(self) -> list[int]:
        """Indices of the winning players; players who had fewer turns win ties."""
        scores = [self.score_for(p) for p in range(self.num_players)]
        high = max(scores)
        scores = [
            score + 1 if score == high and p > self.whose_turn else score
            for p, score in enumerate(scores)
        ]
        high = max(scores)
        return [p for p, score in enumerate(scores) if score == high]

    def full_deck_count(self, player: int, card: int) -> int:
        """Copies of ``card`` in the player's deck, hand and discard pile."""
        return sum(
            pile.count(card)
            for pile in (self.decks[player], self.hands[player], self.discards[player])
        )

    def hand_card(self, hand_pos: int) -> int:
        """Card at ``hand_pos`` in the current player's hand."""
        hand = self.hands[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.whose_turn])

    def supply_count(self, card: int) -> int:
        """Cards of this kind left in the supply; -1 if it is not in the game."""
        if not 0 <= card < len(self.supply):
            return -1
        return self.supply[card]


def initialize_game(
    num_players: int, kingdom_cards: list[int], random_seed: int
) -> GameState:
    """Set up supplies, shuffled starting decks and the first player's hand."""
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(random_seed)

    if num_players > MAX_PLAYERS or num_players < 2:
        raise GameError(f"a game needs 2 to {MAX_PLAYERS} players, not {num_players}")
    kingdom = list(kingdom_cards)
    if len(kingdom) != NUM_K_CARDS:
        raise GameError(f"exactly {NUM_K_CARDS} kingdom cards are needed")
    if len(set(kingdom)) != len(kingdom):
        raise GameError("kingdom cards must all be different")

    state = GameState(num_players=num_players, rng=rng)
    supply = state.supply

    supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
    victory = 8 if num_players == 2 else 12
    for card in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
        supply[card] = victory
    supply[Card.COPPER] = 60 - 7 * num_players
    supply[Card.SILVER] = 40
    supply[Card.GOLD] = 30

    for card in Card:
        if card < Card.ADVENTURER:
            continue
        if card not in kingdom:
            supply[card] = -1
        elif card in (Card.GREAT_HALL, Card.GARDENS):
            supply[card] = victory
        else:
            supply[card] = 10

    for player in range(num_players):
        state.decks[player] = [Card.ESTATE] * 3 + [Card.COPPER] * 7
    for player in range(num_players):
        state.shuffle(player)

    for _ in range(_HAND_SIZE):
        state.draw_card(state.whose_turn)
    state.update_coins(state.whose_turn)
    return state