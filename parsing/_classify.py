"""Predicates deciding what a position in a page's token list starts.

Both functions look only at fixed neighbours of ``index``. A neighbour that
falls outside the token list means "no match".
"""

import re

from ._layout import get_default_layout
from ._timing import is_clock_time, is_lap_time

LAP_NUMBER_PATTERN = re.compile(r'^\d+$')


def _is_name_like(value, layout):
    # racer number + name pairs come out as "<first> <last>"
    parts = value.split(' ')
    return len(parts) == 2 and all(parts) and parts[0] != layout.sector_label


def is_lap_number_token(tokens, index, layout=None):
    layout = layout or get_default_layout()

    if index <= 0 or index >= len(tokens):
        return False

    if not LAP_NUMBER_PATTERN.match(tokens[index]):
        return False

    if index + 1 < len(tokens) and _is_name_like(tokens[index + 1], layout):
        return False

    prev = tokens[index - 1]
    return is_lap_time(prev) or is_clock_time(prev) or prev == layout.time_label


def is_racer_header_token(tokens, index, layout=None):
    layout = layout or get_default_layout()

    if index < 0 or index + 1 >= len(tokens):
        return False

    return _is_name_like(tokens[index + 1], layout)
