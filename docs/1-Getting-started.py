# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.17.2
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # Getting started
# A **vector** over a basis $B$ is a finite linear combination $\sum_i a_i b_i$ of basis elements $b_i \in B$ with scalars $a_i \in \mathbb{R}$.
# Any hashable Python object can be a basis element, including other vectors.
# When the scalars are non-negative and sum to 1, a vector is a discrete probability distribution over $B$.

# %%
from vectorspace import *

coin = Vector([(0.5, "heads"), (0.5, "tails")])
print(coin)
print(coin + Vector("heads"))
print(2 * coin - Vector("tails"))

# %% [markdown]
# Elements that were never set have weight zero, and the zero vector is shared by everyone, so it cannot be changed.

# %%
print(coin["edge"])
try:
    Vector.zero()["heads"] = 1
except ImmutableVectorError as e:
    print(e)

# %% [markdown]
# ## Composing distributions
# `map` projects every basis element and adds up the weights of elements that end up the same.
# `flat_map` picks a new distribution for every basis element and multiplies the weights, which is exactly what happens for a sequence of random choices.
# Here we throw two dice and look at their sum.

# %%
die = uniform(range(1, 7))
two_dice = die.flat_map(lambda first: die, lambda first, second: first + second)
show(two_dice)

# %%
print(two_dice.map(lambda total: total >= 10).to_string())

# %% [markdown]
# ## Monty Hall
# The prize is behind one of three doors. The contestant picks a door, after which the quiz master opens a different door that does not have the prize.
# Should the contestant switch?

# %%
doors = [1, 2, 3]

switching = uniform(doors).flat_map(
    lambda prize: uniform(doors), lambda prize, picked: (prize, picked)
).flat_map(
    lambda game: uniform(without(doors, *game)), lambda game, opened: (*game, opened)
).map(
    lambda game: without(doors, game[1], game[2])[0] == game[0]
)
print(switching.to_string())

# %% [markdown]
# Switching wins with probability 2/3. The same computation is available as `vectorspace.examples.switching_strategy_win_probability`, and the `monty-hall` command prints it.
