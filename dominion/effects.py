"""Action card effects and playing a card from the hand."""

from __future__ import annotations

from typing import Callable

from dominion.cards import Card, Phase, get_cost
from dominion.game import GameError, GameState

NO_CARD = -1
_FEAST_ALLOWANCE = 5

_TREASURES = frozenset({Card.COPPER, Card.SILVER, Card.GOLD})
_VICTORY = frozenset(
    {Card.ESTATE, Card.DUCHY, Card.PROVINCE, Card.GARDENS, Card.GREAT_HALL}
)


def _hand_at(state: GameState, player: int, pos: int) -> int:
    hand = state.hands[player]
    if not 0 <= pos < len(hand):
        raise GameError(f"no card at hand position {pos}")
    return hand[pos]


def _try_gain(state: GameState, card: int, player: int, to: str = "discard") -> bool:
    """Gain a card if the supply allows it; an empty pile is silently skipped."""
    try:
        state.gain_card(card, player, to)
    except GameError:
        return False
    return True


def _draw(state: GameState, player: int, times: int) -> None:
    for _ in range(times):
        state.draw_card(player)


def _others(state: GameState, player: int):
    return (p for p in range(state.num_players) if p != player)


def _discard_first(state: GameState, player: int, card: int, trash: bool = False) -> None:
    hand = state.hands[player]
    if card in hand:
        state.discard_card(hand.index(card), player, trash)


def _discard_hand(state: GameState, player: int) -> None:
    hand = state.hands[player]
    while hand:
        state.discard_card(len(hand) - 1, player)


def _adventurer(state, player, choice1, choice2, choice3, hand_pos):
    treasures = 0
    set_aside = []
    while treasures < 2:
        card = state.draw_card(player)
        if card is None:
            break
        if card in _TREASURES:
            treasures += 1
        else:
            state.hands[player].pop()
            set_aside.append(card)
    state.discards[player].extend(reversed(set_aside))


def _council_room(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player, 4)
    state.num_buys += 1
    for other in _others(state, player):
        state.draw_card(other)
    state.discard_card(hand_pos, player)


def _feast(state, player, choice1, choice2, choice3, hand_pos):
    state.coins = _FEAST_ALLOWANCE
    if state.supply_count(choice1) <= 0:
        raise GameError(f"no {choice1} left in the supply")
    cost = get_cost(choice1)
    if state.coins < cost:
        raise GameError("that card is too expensive")
    state.gain_card(choice1, player)


def _gardens(state, player, choice1, choice2, choice3, hand_pos):
    raise GameError("gardens cannot be played")


def _mine(state, player, choice1, choice2, choice3, hand_pos):
    trashed = _hand_at(state, player, choice1)
    if trashed not in _TREASURES:
        raise GameError("mine needs a treasure to trash")
    if not Card.CURSE <= choice2 <= Card.TREASURE_MAP:
        raise GameError(f"unknown card {choice2}")
    if get_cost(trashed) + 3 > get_cost(choice2):
        raise GameError("the new treasure costs too much")
    _try_gain(state, choice2, player, "hand")
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _remodel(state, player, choice1, choice2, choice3, hand_pos):
    trashed = _hand_at(state, player, choice1)
    if get_cost(trashed) + 2 > get_cost(choice2):
        raise GameError("the new card costs too much")
    _try_gain(state, choice2, player)
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _smithy(state, player, choice1, choice2, choice3, hand_pos):
    _draw(state, player, 3)
    state.discard_card(hand_pos, player)


def _village(state, player, choice1, choice2, choice3, hand_pos):
    state.draw_card(player)
    state.num_actions += 2
    state.discard_card(hand_pos, player)


def _gain_estate(state: GameState, player: int) -> None:
    if state.supply_count(Card.ESTATE) > 0:
        state.gain_card(Card.ESTATE, player)
        state.supply[Card.ESTATE] -= 1


def _baron(state, player, choice1, choice2, choice3, hand_pos):
    state.num_buys += 1
    hand = state.hands[player]
    if choice1 > 0 and Card.ESTATE in hand:
        hand.remove(Card.ESTATE)
        state.coins += 4
        state.discards[player].append(Card.ESTATE)
        return
    _gain_estate(state, player)


def _great_hall(state, player, choice1, choice2, choice3, hand_pos):
    state.draw_card(player)
    state.num_actions += 1
    state.discard_card(hand_pos, player)


def _minion(state, player, choice1, choice2, choice3, hand_pos):
    state.num_actions += 1
    state.discard_card(hand_pos, player)
    if choice1:
        state.coins += 2
    elif choice2:
        _discard_hand(state, player)
        _draw(state, player, 4)
        for other in _others(state, player):
            if len(state.hands[other]) > 4:
                _discard_hand(state, other)
                _draw(state, other, 4)


def _steward(state, player, choice1, choice2, choice3, hand_pos):
    if choice1 == 1:
        _draw(state, player, 2)
    elif choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(choice2, player, trash=True)
        state.discard_card(choice3, player, trash=True)
    state.discard_card(hand_pos, player)


def _tribute(state, player, choice1, choice2, choice3, hand_pos):
    next_player = (player + 1) % state.num_players
    deck = state.decks[next_player]
    discard = state.discards[next_player]
    revealed = [NO_CARD, NO_CARD]

    if len(deck) + len(discard) <= 1:
        if deck:
            revealed[0] = deck.pop()
        elif discard:
            revealed[0] = discard.pop()
    else:
        if not deck:
            moved = (len(discard) + 1) // 2
            deck.extend(discard[:moved])
            del discard[:moved]
            state.shuffle(next_player)
        revealed[0] = deck[-1]
        del deck[-2:]
        if deck:
            revealed[1] = deck[-1]
        del deck[-2:]

    if revealed[0] == revealed[1] and revealed[1] != NO_CARD:
        state.played_cards.append(revealed[1])
        revealed[1] = NO_CARD

    for card in revealed:
        if card in _TREASURES:
            state.coins += 2
        elif card in _VICTORY:
            _draw(state, player, 2)
        else:
            state.num_actions += 2


def _ambassador(state, player, choice1, choice2, choice3, hand_pos):
    if choice2 > 2 or choice2 < 0:
        raise GameError("ambassador returns 0 to 2 cards")
    if choice1 == hand_pos:
        raise GameError("ambassador cannot reveal itself")
    hand = state.hands[player]
    revealed = _hand_at(state, player, choice1)
    copies = int(0 <= revealed < len(hand) and revealed not in (hand_pos, choice1))
    if copies < choice2:
        raise GameError("not enough copies to return")

    state.supply[revealed] += choice2
    for other in _others(state, player):
        _try_gain(state, revealed, other)
    state.discard_card(hand_pos, player)

    for _ in range(choice2):
        hand = state.hands[player]
        if choice1 >= len(hand):
            break
        state.discard_card(hand.index(hand[choice1]), player, trash=True)


def _cutpurse(state, player, choice1, choice2, choice3, hand_pos):
    state.update_coins(player, 2)
    for other in _others(state, player):
        _discard_first(state, other, Card.COPPER)
    state.discard_card(hand_pos, player)


def _embargo(state, player, choice1, choice2, choice3, hand_pos):
    state.coins += 2
    if state.supply_count(choice1) == -1:
        raise GameError(f"card {choice1} is not in this game")
    state.embargo_tokens[choice1] += 1
    state.discard_card(hand_pos, player, trash=True)


def _outpost(state, player, choice1, choice2, choice3, hand_pos):
    state.outpost_played += 1
    state.discard_card(hand_pos, player)


def _salvager(state, player, choice1, choice2, choice3, hand_pos):
    state.num_buys += 1
    if choice1:
        state.coins += get_cost(state.hand_card(choice1))
        state.discard_card(choice1, player, trash=True)
    state.discard_card(hand_pos, player)


def _sea_hag(state, player, choice1, choice2, choice3, hand_pos):
    for other in _others(state, player):
        deck = state.decks[other]
        if deck:
            state.discards[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(state, player, choice1, choice2, choice3, hand_pos):
    hand = state.hands[player]
    index = next(
        (i for i, card in enumerate(hand) if card == Card.TREASURE_MAP and i != hand_pos),
        None,
    )
    if index is None:
        raise GameError("no second treasure map in hand")
    for pos in sorted((hand_pos, index), reverse=True):
        state.discard_card(pos, player, trash=True)
    for _ in range(4):
        _try_gain(state, Card.GOLD, player, "deck")


_Handler = Callable[[GameState, int, int, int, int, int], None]

_EFFECTS: dict[Card, _Handler] = {
    Card.ADVENTURER: _adventurer,
    Card.COUNCIL_ROOM: _council_room,
    Card.FEAST: _feast,
    Card.GARDENS: _gardens,
    Card.MINE: _mine,
    Card.REMODEL: _remodel,
    Card.SMITHY: _smithy,
    Card.VILLAGE: _village,
    Card.BARON: _baron,
    Card.GREAT_HALL: _great_hall,
    Card.MINION: _minion,
    Card.STEWARD: _steward,
    Card.TRIBUTE: _tribute,
    Card.AMBASSADOR: _ambassador,
    Card.CUTPURSE: _cutpurse,
    Card.EMBARGO: _embargo,
    Card.OUTPOST: _outpost,
    Card.SALVAGER: _salvager,
    Card.SEA_HAG: _sea_hag,
    Card.TREASURE_MAP: _treasure_map,
}


def card_effect(
    state: GameState,
    card: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
    hand_pos: int = 0,
) -> None:
    """Carry out the effect of ``card`` for the current player.

    Raises GameError when the card cannot be played with these choices.
    """
    try:
        effect = _EFFECTS[Card(card)]
    except (ValueError, KeyError):
        raise GameError(f"card {card} has no action effect") from None
    effect(state, state.whose_turn, choice1, choice2, choice3, hand_pos)


def play_card(
    state: GameState,
    hand_pos: int,
    choice1: int = 0,
    choice2: int = 0,
    choice3: int = 0,
) -> None:
    """Play the action card at ``hand_pos`` of the current player's hand."""
    if state.phase != Phase.ACTION:
        raise GameError("actions can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if not Card.ADVENTURER <= card <= Card.TREASURE_MAP:
        raise GameError(f"card {card} is not an action card")
    card_effect(state, card, choice1, choice2, choice3, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.whose_turn, 0)