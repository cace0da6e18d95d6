"""A sparse vector over an arbitrary basis."""

from typing import Callable, Iterator, overload

import math

from deprecated import deprecated

from vectorspace.vector.component import Component
from vectorspace.vector.scalar import Number, scalar_to_string


class ImmutableVectorError(RuntimeError):
    """Raised when assigning into a frozen vector, such as the zero vector."""


class Vector[BasisType]:
    """A vector, i.e., an element of the vector space with a particular basis.
        The scalars are floats. A basis element that has not been set has weight zero,
        and a stored zero is indistinguishable from an absent element for equality and hashing.
        Stored zeros are never pruned.

        Vectors are hashable so that they can be used as basis elements of other vectors.
        Do not mutate a vector while it is used as a basis element.

    Args:
        Nothing for the zero vector, a single basis element for a basis vector,
        or a list of (scalar, basis element) tuples for a linear combination.
        In a linear combination, later tuples override earlier tuples for the same basis element.
    """

    _bag: dict[BasisType, float]
    _frozen: bool

    def __init__(self, *args):
        self._frozen = False
        self._bag = dict()
        if len(args) == 0:
            return
        elif len(args) == 1 and isinstance(args[0], list):
            for scalar, basis in args[0]:
                self[basis] = scalar
        elif len(args) == 1:
            self[args[0]] = 1.0
        else:
            raise TypeError(
                "expects either nothing, a basis element, or a list of (scalar, basis) tuples"
            )

    @classmethod
    def zero(cls) -> "Vector":
        """Returns the shared, immutable zero vector."""
        return ZERO

    def freeze(self) -> "Vector[BasisType]":
        """Disallow any further assignments into this vector. Returns the vector itself."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        """Whether this vector rejects assignments."""
        return self._frozen

    @property
    def support(self) -> set[BasisType]:
        """Returns the basis elements with a non-zero weight."""
        return set(basis for basis, scalar in self._bag.items() if scalar != 0.0)

    def copy(self) -> "Vector[BasisType]":
        """Returns a mutable copy of this vector, including its stored zeros."""
        result = Vector()
        result._bag = dict(self._bag)
        return result

    def __getitem__(self, basis: BasisType) -> float:
        return self._bag.get(basis, 0.0)

    def __setitem__(self, basis: BasisType, scalar: Number):
        if self._frozen:
            raise ImmutableVectorError("An immutable vector cannot be mutated.")
        self._bag[basis] = float(scalar)

    def __iter__(self) -> Iterator[Component[BasisType]]:
        return self.components()

    def components(self) -> Iterator[Component[BasisType]]:
        """Iterates over the stored components in storage order."""
        for basis, scalar in self._bag.items():
            yield Component(scalar, basis)

    def __len__(self) -> int:
        """The number of stored components, stored zeros included."""
        return len(self._bag)

    def __bool__(self) -> bool:
        return any(scalar != 0.0 for scalar in self._bag.values())

    # Arithmetic. None of these mutate their operands.

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        for basis, scalar in other._bag.items():
            result[basis] = self[basis] + scalar
        return result

    def scale(self, factor: Number) -> "Vector[BasisType]":
        """Multiply every component by factor. Components that become zero are kept."""
        result = Vector()
        for basis, scalar in self._bag.items():
            result[basis] = factor * scalar
        return result

    def __mul__(self, factor):
        if not isinstance(factor, Number):
            return NotImplemented
        return self.scale(factor)

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def __truediv__(self, divisor):
        if not isinstance(divisor, Number):
            return NotImplemented
        # dividing by zero gives infinities, and nan for stored zeros
        if divisor == 0:
            return self.scale(math.copysign(math.inf, divisor))
        return self.scale(1 / divisor)

    def __neg__(self):
        return self.scale(-1)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self + other.scale(-1)

    # Equality

    def __eq__(self, other):
        """Two vectors are equal if their components for each basis element are equal."""
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        keys = self._bag.keys() | other._bag.keys()
        return all(self[key] == other[key] for key in keys)

    def __hash__(self):
        result = 0
        for basis, scalar in self._bag.items():
            if scalar != 0.0:
                result ^= hash((basis, scalar))
        return result

    def __str__(self):
        return "{" + ", ".join(f"{basis}: {scalar}" for basis, scalar in self._bag.items()) + "}"

    def __repr__(self):
        return f"Vector({self._bag!r})"

    def to_string(
        self, use_fractions: bool = True, round_digits: int = 4, denom_limit: int = 1000
    ) -> str:
        """Like str(), but the scalars are formatted as (approximate) fractions or rounded decimals."""
        parts = []
        for basis, scalar in self._bag.items():
            parts.append(
                f"{basis}: {scalar_to_string(scalar, use_fractions, round_digits, denom_limit)}"
            )
        return "{" + ", ".join(parts) + "}"

    # Norms

    def norm(self, p: int = 2) -> float:
        """Returns the p-norm of this vector. The 1-norm is the total (absolute) mass."""
        if p < 1:
            raise ValueError(f"The norm is only defined for p >= 1, got p={p}")
        return sum(abs(scalar) ** p for scalar in self._bag.values()) ** (1 / p)

    def normalized(self, p: int = 2) -> "Vector[BasisType]":
        """Returns this vector scaled such that its p-norm is 1."""
        length = self.norm(p)
        if length == 0:
            raise ValueError("Cannot normalize a vector with norm zero")
        return self / length

    # Monadic operations

    def map[ResultType](
        self, selector: Callable[[BasisType], ResultType]
    ) -> "Vector[ResultType]":
        """Project every basis element through selector.
        Scalars of elements that are projected onto the same result are summed."""
        result: Vector[ResultType] = Vector()
        for scalar, basis in self:
            key = selector(basis)
            result[key] += scalar
        return result

    def flatten(self) -> "Vector":
        """Collapse a vector of vectors into a single vector. See flatten()."""
        return flatten(self)

    @overload
    def flat_map[ResultType](
        self, selector: "Callable[[BasisType], Vector[ResultType]]"
    ) -> "Vector[ResultType]": ...

    @overload
    def flat_map[InnerType, ResultType](
        self,
        selector: "Callable[[BasisType], Vector[InnerType]]",
        result_selector: Callable[[BasisType, InnerType], ResultType],
    ) -> "Vector[ResultType]": ...

    def flat_map(self, selector, result_selector=None):
        """Map every basis element to a vector and flatten the result.
        If result_selector is given, it combines the original basis element with
        each basis element of the selected vector."""
        if result_selector is None:
            return flatten(self.map(selector))
        return self.flat_map(
            lambda outer: selector(outer).map(lambda inner: result_selector(outer, inner))
        )

    def filter(self, predicate: Callable[[BasisType], bool]) -> "Vector[BasisType]":
        """Keep only the components whose basis element satisfies predicate."""
        return self.flat_map(lambda basis: Vector(basis) if predicate(basis) else ZERO)

    @deprecated(version="0.2.0", reason="use map instead.")
    def select(self, selector):
        return self.map(selector)

    @deprecated(version="0.2.0", reason="use flat_map instead.")
    def select_many(self, selector, result_selector=None):
        return self.flat_map(selector, result_selector)

    @deprecated(version="0.2.0", reason="use filter instead.")
    def where(self, predicate):
        return self.filter(predicate)


def flatten[BasisType](vectors: "Vector[Vector[BasisType]]") -> "Vector[BasisType]":
    """Collapse a vector of vectors into a single vector (the monadic join).
    Every inner scalar is multiplied by the scalar of its outer vector, and the
    products are summed per basis element."""
    result: Vector[BasisType] = Vector()
    for outer_scalar, inner in vectors:
        if not isinstance(inner, Vector):
            raise TypeError("Can only flatten a vector whose basis elements are vectors")
        for inner_scalar, basis in inner:
            result[basis] += outer_scalar * inner_scalar
    return result


# The zero vector. Shared by everyone, so it may never be mutated.
ZERO: Vector = Vector().freeze()
