from collections.abc import Iterable
from typing import Optional

Symbol = str
Score = int

GAP: Symbol = "-"


def normalize_symbol(value: Optional[Symbol]) -> Symbol:
    """Maps an absent symbol to the gap symbol, leaving anything else untouched."""
    return GAP if value is None else value


def as_symbols(seq: Iterable[Optional[Symbol]]) -> tuple[Symbol, ...]:
    """
    Converts a sequence into a tuple of symbols.

    Args:
        seq: A string, or any iterable of single-character strings. ``None``
            entries become gaps.

    Returns:
        tuple[str, ...]: The normalized symbols, in order.
    """
    return tuple(normalize_symbol(value) for value in seq)
