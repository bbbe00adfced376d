"""
Human readable sizes.
"""
from enum import Enum


class Unit(Enum):
    """Binary size units, valued by their divisor."""
    B = 1
    KB = 1 << 10
    MB = 1 << 20
    GB = 1 << 30
    TB = 1 << 40

    @property
    def divisor(self):
        return self.value


def select_unit(total):
    """Return the largest unit not greater than total (B for anything under 1 KB)."""
    unit = Unit.B
    for candidate in Unit:
        if total >= candidate.divisor:
            unit = candidate
    return unit


def format_size(total):
    """Format a byte count as '<value> <unit>' with two decimals."""
    unit = select_unit(total)
    if unit is Unit.B:
        return f"{float(total):.2f} {unit.name}"
    return f"{total / unit.divisor:.2f} {unit.name}"
