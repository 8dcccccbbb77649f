import dataclasses
import logging
from collections.abc import Sequence
from typing import Optional

from .matrix import AlignmentMatrix
from .scoring import ScoringConfig
from .symbols import GAP, Score, Symbol, as_symbols

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class AlignedSegment:
    """
    One side of a local alignment.

    Attributes:
        start (int): First index of the window in the original sequence.
        end (int): One past the last index of the window.
        data (str): Symbols of the window with internal gaps inserted.
    """

    start: int
    end: int
    data: str

    def __len__(self) -> int:
        return len(self.data)


@dataclasses.dataclass(frozen=True)
class LocalAlignment:
    """Result of one local (Smith-Waterman) traceback."""

    row: AlignedSegment
    col: AlignedSegment
    score: Score
    identity_numerator: int
    identity_denominator: int

    @property
    def identity(self) -> float:
        return self.identity_numerator / self.identity_denominator


def smith_waterman(
    row_seq: Sequence[Optional[Symbol]],
    col_seq: Sequence[Optional[Symbol]],
    config: ScoringConfig = ScoringConfig(),
) -> list[LocalAlignment]:
    """
    Finds every local alignment tied for the best score.

    One traceback is run from each cell holding the matrix-wide maximum, in
    row-major order of those cells. When the maximum is 0 no region scores
    positively and an empty list is returned.

    Args:
        row_seq (Sequence[str]): Sequence laid along the matrix rows.
        col_seq (Sequence[str]): Sequence laid along the matrix columns.
        config (ScoringConfig): Match, mismatch and gap weights.

    Returns:
        list[LocalAlignment]: The best local alignments.
    """
    row_seq = as_symbols(row_seq)
    col_seq = as_symbols(col_seq)
    matrix = compute_sw_matrix(row_seq, col_seq, config)

    best = matrix.max()
    if best == 0:
        logger.debug("No positive-scoring local region; returning no alignments")
        return []

    ends = matrix.argmax_all()
    logger.debug("Best local score %d reached at %d cell(s)", best, len(ends))
    return [traceback_sw_alignment(row_seq, col_seq, config, matrix, end) for end in ends]


def compute_sw_matrix(
    row_seq: Sequence[Symbol],
    col_seq: Sequence[Symbol],
    config: ScoringConfig,
) -> AlignmentMatrix:
    """Builds and fills the local alignment matrix; borders stay 0 and no cell goes negative."""
    matrix = AlignmentMatrix(len(row_seq) + 1, len(col_seq) + 1)
    logger.debug("Filling local alignment matrix of shape %s", matrix.shape)
    gap = config.gap_weight

    for i, row_symbol in enumerate(row_seq):
        for j, col_symbol in enumerate(col_seq):
            diag = matrix[i, j] + config.substitution(row_symbol, col_symbol)
            best_gap = max(matrix[i, j + 1], matrix[i + 1, j]) + gap
            matrix[i + 1, j + 1] = max(diag, best_gap, 0)
    return matrix


def traceback_sw_alignment(
    row_seq: Sequence[Symbol],
    col_seq: Sequence[Symbol],
    config: ScoringConfig,
    matrix: AlignmentMatrix,
    end: tuple[int, int],
) -> LocalAlignment:
    """
    Walks a filled local matrix back from ``end`` until a zero-score cell.

    Moves are chosen as in the global traceback: up, then left, then
    diagonal. A nonzero cell never lies on row 0 or column 0, so its
    neighbours can be read without a bounds check.

    Args:
        row_seq (Sequence[str]): Row sequence the matrix was filled from.
        col_seq (Sequence[str]): Column sequence the matrix was filled from.
        config (ScoringConfig): Weights the matrix was filled with.
        matrix (AlignmentMatrix): Output of ``compute_sw_matrix``.
        end (tuple[int, int]): Cell the alignment ends at.

    Returns:
        LocalAlignment: The alignment ending at ``end``.
    """
    gap = config.gap_weight
    end_i, end_j = end
    score = matrix[end_i, end_j]
    aligned_row: list[Symbol] = []
    aligned_col: list[Symbol] = []
    identical = 0
    diagonal = 0

    i, j = end_i, end_j
    while (current := matrix[i, j]) != 0:
        if current == matrix[i - 1, j] + gap:
            i -= 1
            aligned_row.append(row_seq[i])
            aligned_col.append(GAP)
        elif current == matrix[i, j - 1] + gap:
            j -= 1
            aligned_row.append(GAP)
            aligned_col.append(col_seq[j])
        else:
            i -= 1
            j -= 1
            aligned_row.append(row_seq[i])
            aligned_col.append(col_seq[j])
            diagonal += 1
            if row_seq[i] == col_seq[j]:
                identical += 1

    aligned_row.reverse()
    aligned_col.reverse()
    return LocalAlignment(
        row=AlignedSegment(start=i, end=end_i, data="".join(aligned_row)),
        col=AlignedSegment(start=j, end=end_j, data="".join(aligned_col)),
        score=score,
        identity_numerator=identical,
        identity_denominator=max(diagonal, 1),
    )
