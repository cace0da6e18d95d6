"""The vectorspace package"""

from vectorspace.vector import (  # NOQA
    Component,
    ImmutableVectorError,
    Number,
    Vector,
    ZERO,
    flatten,
    scalar_to_string,
)
from vectorspace.probability import (  # NOQA
    uniform,
    without,
    probability_of,
    is_stochastic,
    sample,
)
from vectorspace.show import show, to_html  # NOQA
from vectorspace import examples  # NOQA
