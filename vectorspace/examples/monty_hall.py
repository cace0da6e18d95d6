"""Compute the probability of winning the prize in the Monty Hall problem.

The computations are written such that they read like a description of the game:
the prize is behind one of the doors, the contestant picks one of the doors,
the quiz master opens one of the doors that has neither the prize nor the pick,
and finally the contestant either switches or sticks.
"""

from dataclasses import dataclass, replace

import logging

from vectorspace.probability import uniform, without
from vectorspace.vector import Vector

logger = logging.getLogger("vectorspace.examples.monty_hall")

DOORS = [1, 2, 3]


@dataclass(frozen=True)
class Game:
    """The doors involved in a single game."""

    door_with_prize: int
    door_picked_by_contestant: int
    door_opened_by_quiz_master: int | None = None

    def door_contestant_could_switch_to(self, doors: list[int]) -> int:
        return without(
            doors, self.door_picked_by_contestant, self.door_opened_by_quiz_master
        )[0]


def create_games(doors: list[int] = DOORS) -> Vector[Game]:
    """The distribution over all games, up to the moment the quiz master has opened a door."""
    picked = uniform(doors).flat_map(
        lambda door_with_prize: uniform(doors),
        lambda door_with_prize, door_picked: Game(door_with_prize, door_picked),
    )
    return picked.flat_map(
        lambda game: uniform(
            without(doors, game.door_with_prize, game.door_picked_by_contestant)
        ),
        lambda game, door_opened: replace(game, door_opened_by_quiz_master=door_opened),
    )


def switching_strategy_win_probability(doors: list[int] = DOORS) -> Vector[bool]:
    """The distribution over winning (True) and losing (False) if the contestant always switches."""
    return create_games(doors).map(
        lambda game: game.door_contestant_could_switch_to(doors) == game.door_with_prize
    )


def win_probability_when_deciding_on_the_spot(doors: list[int] = DOORS) -> Vector[bool]:
    """The distribution over winning (True) and losing (False) if the contestant flips a coin to decide."""

    def final_door(game: Game, contestant_is_going_to_switch: bool) -> int:
        if contestant_is_going_to_switch:
            return game.door_contestant_could_switch_to(doors)
        return game.door_picked_by_contestant

    return create_games(doors).flat_map(
        lambda game: uniform([False, True]),
        lambda game, switch: final_door(game, switch) == game.door_with_prize,
    )


def main() -> int:
    logging.basicConfig(level=logging.WARNING)
    logger.debug("Playing Monty Hall with doors %s", DOORS)

    # Switching wins with probability 2/3.
    print(
        f"switching_strategy_win_probability:\n\t{switching_strategy_win_probability()}"
    )

    # Deciding on the spot whether to switch brings it back to 1/2.
    print(
        "win_probability_when_deciding_on_the_spot:\n\t"
        f"{win_probability_when_deciding_on_the_spot()}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
