from vectorspace.probability import uniform
from vectorspace.vector import Vector


def create_die(sides: int = 6) -> Vector[int]:
    """A fair die with the given number of sides."""
    return uniform(range(1, sides + 1))


def two_dice_sum(sides: int = 6) -> Vector[int]:
    """The distribution over the sum of two fair dice."""
    return create_die(sides).flat_map(
        lambda first: create_die(sides), lambda first, second: first + second
    )


if __name__ == "__main__":
    print(two_dice_sum().to_string())
