# dominion

A rules engine for the Dominion deck-building card game. It comes with an
interactive console for playing at the terminal and an automated match
between two scripted players.

Shuffling is driven by a seeded multi-stream Lehmer random number
generator, so a game started with the same seed always plays out the same
way.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Interactive console

```
dominion-player 7
```

The single argument must be a positive integer random seed; otherwise a
usage line is printed and the command exits. The console starts a
two-player game with a default set of kingdom cards and reads commands
from standard input until `exit`, `resign`, the end of the game or the end
of input. Commands of four or more letters are recognised by their first
four letters (`supp` for `supply`, `resi` for `resign`); `add`, `buy`,
`end` and `num` must be typed exactly.

| Command | Meaning |
| --- | --- |
| `init <players> <bots>` | start a game; the last `<bots>` seats are played by the computer |
| `show` | show your hand and the cards played this turn |
| `stat` | show phase, actions, coins and buys |
| `supply` | show the supply piles |
| `play <hand index> <choice> <choice> <choice>` | play a card from your hand |
| `buy <supply card number>` | buy a card from the supply |
| `add <supply card number>` | put a kingdom card straight into your hand |
| `num` | number of cards in your hand |
| `whos` | whose turn it is |
| `end` | end your turn (once a game has been started with `init`) |
| `resign` | end the turn, show the scores and leave |
| `help` | list the commands |
| `exit` | leave the console |

`show` and `stat` do nothing until `init` has started a game. When a
started game is over the console prints the scores, the winners and every
player's hand, played cards, discard pile and deck.

### Automated match

```
dominion-playdom 42
```

Two scripted players, one favouring Smithy and one favouring Adventurer,
play a full game from the given seed. Every action is printed, followed
by both final scores.

## Library use

```python
from dominion.cards import Card, card_name, get_cost
from dominion.game import GameError, initialize_game
from dominion.effects import play_card

kingdom = [
    Card.ADVENTURER, Card.COUNCIL_ROOM, Card.FEAST, Card.GARDENS, Card.MINE,
    Card.REMODEL, Card.SMITHY, Card.VILLAGE, Card.BARON, Card.GREAT_HALL,
]

state = initialize_game(2, kingdom, 1)
print(state.supply_count(Card.ADVENTURER))   # 10
print([card_name(state.hand_card(i)) for i in range(state.num_hand_cards())])

try:
    state.buy_card(Card.SILVER)
except GameError as exc:
    print("cannot buy:", exc)

state.end_turn()
print(state.is_game_over(), state.score_for(0), state.get_winners())
```

`initialize_game` raises `GameError` when the number of players is not
between two and four, when there are not exactly ten kingdom cards or
when they repeat. The `GameState` methods (`draw_card`, `gain_card`,
`discard_card`, `shuffle`, `update_coins`, `buy_card`, `end_turn`,
`is_game_over`, `score_for`, `get_winners`, `full_deck_count`,
`hand_card`, `num_hand_cards`, `supply_count`) work on the state in place
and raise `GameError` when a move breaks the rules. `play_card` and
`card_effect` from `dominion.effects` carry out the action cards.

`dominion.cards` holds the `Card` and `Phase` enumerations together with
`get_cost`, `get_card_cost`, `card_name` and `phase_name`.

`dominion.interface` holds the text views used by the console:
`format_hand`, `format_deck`, `format_discard`, `format_played`,
`format_supply`, `format_state`, `format_scores` and `help_text`, along
with `select_kingdom_cards`, `count_hand_coins`, `add_card_to_hand` and
`execute_bot_turn`.

`dominion.playdom.play_game(seed, out)` runs the automated match and
returns the two scores.

### Random numbers

```python
from dominion.rngs import RandomStreams, find_target

rng = RandomStreams()
rng.select_stream(1)
rng.put_seed(42)
print(rng.random())       # a float strictly between 0 and 1
print(rng.self_test())    # True when the generator checks out
```

`find_target(seed, target)` draws numbers in the range 0 to 999,999,999
from stream 1 seeded with `seed` until `target` comes up and returns how
many draws it took; a target outside that range raises `ValueError`.

## Limits

Games live only in memory: there is no saving or loading of a game, and
the console offers no way to change the kingdom cards it plays with.