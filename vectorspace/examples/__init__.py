from vectorspace.examples.dice import create_die, two_dice_sum  # NOQA
from vectorspace.examples.monty_hall import (  # NOQA
    create_games,
    switching_strategy_win_probability,
    win_probability_when_deciding_on_the_spot,
)
