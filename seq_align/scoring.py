import dataclasses
from collections.abc import Sequence

from .symbols import GAP, Score, Symbol


class ScoringConfigError(TypeError):
    """Raised when a scoring weight is not an integer."""


@dataclasses.dataclass(frozen=True)
class ScoringConfig:
    """
    Linear scoring scheme shared by the global and local aligners.

    Weights are added along an alignment path as they are, so a "penalty" is
    simply a negative weight.

    Attributes:
        match_weight (int): Added for a pair of identical symbols.
        mismatch_weight (int): Added for a pair of different symbols.
        gap_weight (int): Added for every symbol aligned against a gap.
    """

    match_weight: Score = 1
    mismatch_weight: Score = -1
    gap_weight: Score = -2

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ScoringConfigError(f"{field.name} must be an integer, got {value!r}")

    def substitution(self, a: Symbol, b: Symbol) -> Score:
        """Weight of aligning two symbols against each other (no gap)."""
        return self.match_weight if a == b else self.mismatch_weight

    def pair_weight(self, a: Symbol, b: Symbol) -> Score:
        """Weight of one alignment column, which may contain a gap."""
        if a == GAP or b == GAP:
            return self.gap_weight
        return self.substitution(a, b)

    def score_alignment(self, aligned_row: Sequence[Symbol], aligned_col: Sequence[Symbol]) -> Score:
        """
        Recomputes the score of an alignment column by column.

        Args:
            aligned_row (Sequence[str]): Aligned row side, gaps included.
            aligned_col (Sequence[str]): Aligned column side, gaps included.

        Returns:
            int: The summed weights.

        Raises:
            ValueError: If both sides are not the same length.
        """
        if len(aligned_row) != len(aligned_col):
            raise ValueError("Aligned sequences must have the same length.")
        return sum(self.pair_weight(a, b) for a, b in zip(aligned_row, aligned_col))
