import pytest

from dominion.cards import (
    NUM_TOTAL_K_CARDS,
    UNKNOWN_CARD_COST,
    Card,
    Phase,
    card_name,
    get_card_cost,
    get_cost,
    phase_name,
)


def test_card_enum_is_contiguous_from_curse():
    assert [int(c) for c in Card] == list(range(NUM_TOTAL_K_CARDS))
    assert card_name(0) == "Curse"
    assert card_name(NUM_TOTAL_K_CARDS - 1) == "Treasure Map"
    assert all(get_cost(n) >= 0 for n in range(NUM_TOTAL_K_CARDS))
    assert get_cost(NUM_TOTAL_K_CARDS) == -1


@pytest.mark.parametrize(
    "card, cost",
    [
        (Card.PROVINCE, 8),
        (Card.GOLD, 6),
        (Card.ADVENTURER, 6),
        (Card.EMBARGO, 2),
        (Card.COPPER, 0),
    ],
)
def test_get_cost_known_cards(card, cost):
    assert get_cost(card) == cost


@pytest.mark.parametrize("card", [-1, NUM_TOTAL_K_CARDS, 500])
def test_get_cost_unknown_card(card):
    assert get_cost(card) == -1


@pytest.mark.parametrize("card", [-1, NUM_TOTAL_K_CARDS])
def test_get_card_cost_unknown_card(card):
    assert get_card_cost(card) == UNKNOWN_CARD_COST


def test_display_cost_matches_game_cost_for_every_card():
    assert all(get_card_cost(c) == get_cost(c) for c in Card)


def test_get_cost_accepts_plain_ints():
    assert get_cost(int(Card.DUCHY)) == get_cost(Card.DUCHY)


@pytest.mark.parametrize(
    "card, name",
    [
        (Card.CURSE, "Curse"),
        (Card.COUNCIL_ROOM, "Council Room"),
        (Card.GREAT_HALL, "Great Hall"),
        (Card.SEA_HAG, "Sea Hag"),
        (Card.TREASURE_MAP, "Treasure Map"),
    ],
)
def test_card_name(card, name):
    assert card_name(card) == name


@pytest.mark.parametrize("card", [-1, NUM_TOTAL_K_CARDS, 1000])
def test_card_name_unknown(card):
    assert card_name(card) == "?"


def test_every_card_has_a_distinct_name():
    names = [card_name(c) for c in Card]
    assert "?" not in names
    assert len(set(names)) == len(names)


@pytest.mark.parametrize(
    "phase, name",
    [(Phase.ACTION, "Action"), (Phase.BUY, "Buy"), (Phase.CLEANUP, "Cleanup")],
)
def test_phase_name(phase, name):
    assert phase_name(phase) == name


def test_phase_name_unknown_raises():
    with pytest.raises(ValueError):
        phase_name(len(Phase))