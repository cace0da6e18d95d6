import itertools
import math

import pytest

from vectorspace import Vector, ZERO

VECTORS = [
    Vector(),
    Vector(False),
    Vector(True),
    Vector([(1.0, False), (1.0, True)]),
    Vector([(0.0, False), (-3.0, True)]),
]

SCALARS = [0.0, 1.0, -1.0, 5.0]


@pytest.mark.parametrize("u,v", itertools.product(VECTORS, repeat=2))
def test_commutative_addition(u, v):
    assert u + v == v + u


@pytest.mark.parametrize("u,v,w", itertools.product(VECTORS, repeat=3))
def test_associative_addition(u, v, w):
    assert (u + v) + w == u + (v + w)


@pytest.mark.parametrize("u", VECTORS)
def test_additive_identity(u):
    assert u + ZERO == u
    assert ZERO + u == u
    assert u - u == ZERO


@pytest.mark.parametrize("a,b,v", itertools.product(SCALARS, SCALARS, VECTORS))
def test_associative_scaling(a, b, v):
    assert a * (b * v) == (a * b) * v


@pytest.mark.parametrize("a,u,v", itertools.product(SCALARS, VECTORS, VECTORS))
def test_distributive_scaling(a, u, v):
    assert a * u + a * v == a * (u + v)


@pytest.mark.parametrize("v", VECTORS)
def test_scaling_by_zero(v):
    assert 0 * v == ZERO
    assert v * 0.0 == ZERO


def test_scaling_keeps_keys():
    v = 0 * Vector([(1.0, "a"), (2.0, "b")])
    assert len(v) == 2
    assert v["a"] == 0.0


def test_operands_are_not_mutated():
    u = Vector([(1.0, "a")])
    v = Vector([(2.0, "a"), (3.0, "b")])
    u + v
    u - v
    2 * u
    u / 2
    -v
    assert u == Vector([(1.0, "a")])
    assert v == Vector([(2.0, "a"), (3.0, "b")])


def test_addition():
    u = Vector([(1.0, "a"), (2.0, "b")])
    v = Vector([(3.0, "b"), (4.0, "c")])
    assert u + v == Vector([(1.0, "a"), (5.0, "b"), (4.0, "c")])


def test_subtraction_and_negation():
    u = Vector([(1.0, "a"), (2.0, "b")])
    v = Vector([(3.0, "b")])
    assert u - v == Vector([(1.0, "a"), (-1.0, "b")])
    assert -u == (-1) * u
    assert u - v == u + (-1) * v


def test_division():
    v = Vector([(1.0, "a"), (3.0, "b")])
    assert v / 2 == Vector([(0.5, "a"), (1.5, "b")])
    assert v / 4 == 0.25 * v


def test_division_by_zero():
    v = Vector([(1.0, "a"), (-2.0, "b"), (0.0, "c")]) / 0.0
    assert v["a"] == math.inf
    assert v["b"] == -math.inf
    assert math.isnan(v["c"])
    assert (Vector("a") / -0.0)["a"] == -math.inf


def test_unsupported_operands():
    with pytest.raises(TypeError):
        Vector("a") + 1
    with pytest.raises(TypeError):
        Vector("a") * Vector("a")
    with pytest.raises(TypeError):
        Vector("a") / "2"
