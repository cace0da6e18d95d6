# ruff: noqa: F403
"""The vector space."""

from vectorspace.vector.component import *
from vectorspace.vector.scalar import *
from vectorspace.vector.vector import *
