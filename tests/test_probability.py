import pytest

from vectorspace import (
    Vector,
    is_stochastic,
    probability_of,
    sample,
    uniform,
    without,
)


def test_uniform():
    assert uniform([1, 2, 3]) == Vector([(1 / 3, 1), (1 / 3, 2), (1 / 3, 3)])
    assert uniform(x for x in "ab") == Vector([(0.5, "a"), (0.5, "b")])


def test_uniform_over_nothing():
    with pytest.raises(ValueError):
        uniform([])


def test_uniform_duplicates_overwrite():
    # equal items share a single basis element; the last 1/N wins
    with pytest.warns(UserWarning):
        v = uniform([1, 1, 2])
    assert v[1] == pytest.approx(1 / 3)
    assert v[2] == pytest.approx(1 / 3)
    assert not is_stochastic(v)


def test_uniform_duplicates_without_warning(recwarn):
    uniform(["a", "a"], warn_duplicates=False)
    assert len(recwarn) == 0


def test_without():
    assert without([1, 2, 3], 2) == [1, 3]
    assert without([1, 2, 3], 1, 3) == [2]
    assert without([1, 2, 3], 1, 1) == [2, 3]
    assert without([1, 2, 3]) == [1, 2, 3]
    assert without([1, 2, 3], 1, 2, 3) == []


def test_probability_of():
    v = Vector([(0.25, False), (0.75, True)])
    assert probability_of(v) == 0.75
    assert probability_of(v, False) == 0.25
    assert probability_of(v, "missing") == 0.0


def test_is_stochastic():
    assert is_stochastic(uniform(range(10)))
    assert not is_stochastic(Vector([(0.5, "a")]))
    assert not is_stochastic(Vector([(1.5, "a"), (-0.5, "b")]))
    assert not is_stochastic(Vector())


def test_sample():
    v = Vector([(0.0, "never"), (-1.0, "negative"), (1.0, "always")])
    assert sample(v, seed=3) == "always"
    assert sample(v) == "always"


def test_sample_is_reproducible():
    v = uniform(range(100))
    assert sample(v, seed=1) == sample(v, seed=1)


def test_sample_without_mass():
    with pytest.raises(ValueError):
        sample(Vector([(0.0, "a")]))
