"""A vector component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Component[BasisType]:
    """A scalar/element pair used for iterating over the components of a vector.
        Components are produced on demand and never stored by the vector itself.

    Args:
        scalar: The scalar component.
        element: The basis element.
    """

    scalar: float
    element: BasisType

    def __iter__(self):
        return iter((self.scalar, self.element))

    def __str__(self):
        return f"{self.element}: {self.scalar}"
