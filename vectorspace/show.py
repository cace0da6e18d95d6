"""Shorter api for showing a vector in a notebook."""

import html

from vectorspace.vector import Vector, scalar_to_string


def to_html(
    vector: Vector,
    use_fractions: bool = True,
    round_digits: int = 4,
    denom_limit: int = 1000,
) -> str:
    """Render the stored components of a vector as an html table, in storage order."""
    rows = []
    for scalar, element in vector:
        value = scalar_to_string(scalar, use_fractions, round_digits, denom_limit)
        rows.append(
            f"<tr><td>{html.escape(str(element))}</td><td>{html.escape(value)}</td></tr>"
        )
    return (
        "<table><thead><tr><th>element</th><th>weight</th></tr></thead><tbody>"
        + "".join(rows)
        + "</tbody></table>"
    )


def show(
    vector: Vector,
    use_fractions: bool = True,
    round_digits: int = 4,
    denom_limit: int = 1000,
    do_display: bool = True,
) -> str:
    """Display a vector as a table of elements and weights.

    Args:
        vector (Vector): The vector to be displayed.
        use_fractions (bool): Show the weights as fractions instead of decimals.
        round_digits (int): The number of decimals, if use_fractions is False.
        denom_limit (int): The largest denominator, if use_fractions is True.
        do_display (bool): Display the table using IPython. If False, the html is only returned.
    Returns: The generated html.
    """
    table = to_html(vector, use_fractions, round_digits, denom_limit)
    if do_display:
        import IPython.display as ipd

        ipd.display(ipd.HTML(table))
    return table
