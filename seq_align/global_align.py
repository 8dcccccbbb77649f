import dataclasses
import logging
from collections.abc import Sequence
from typing import Optional

from .matrix import AlignmentMatrix
from .scoring import ScoringConfig
from .symbols import GAP, Score, Symbol, as_symbols

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GlobalAlignment:
    """
    Result of a global (Needleman-Wunsch) alignment.

    Attributes:
        aligned_row (str): Row sequence with gaps inserted.
        aligned_col (str): Column sequence with gaps inserted, same length as ``aligned_row``.
        score (int): Score of the alignment.
        identity_numerator (int): Diagonal steps pairing identical symbols.
        identity_denominator (int): Diagonal steps, at least 1.
    """

    aligned_row: str
    aligned_col: str
    score: Score
    identity_numerator: int
    identity_denominator: int

    @property
    def identity(self) -> float:
        return self.identity_numerator / self.identity_denominator

    def __len__(self) -> int:
        return len(self.aligned_row)


def needleman_wunsch(
    row_seq: Sequence[Optional[Symbol]],
    col_seq: Sequence[Optional[Symbol]],
    config: ScoringConfig = ScoringConfig(),
) -> GlobalAlignment:
    """
    Aligns two sequences end to end.

    Args:
        row_seq (Sequence[str]): Sequence laid along the matrix rows.
        col_seq (Sequence[str]): Sequence laid along the matrix columns.
        config (ScoringConfig): Match, mismatch and gap weights.

    Returns:
        GlobalAlignment: The single alignment selected by the traceback.
    """
    row_seq = as_symbols(row_seq)
    col_seq = as_symbols(col_seq)
    matrix = compute_nw_matrix(row_seq, col_seq, config)
    return traceback_nw_alignment(row_seq, col_seq, config, matrix)


def compute_nw_matrix(
    row_seq: Sequence[Symbol],
    col_seq: Sequence[Symbol],
    config: ScoringConfig,
) -> AlignmentMatrix:
    """Builds and fills the global alignment matrix, prefix-gap borders included."""
    matrix = AlignmentMatrix(len(row_seq) + 1, len(col_seq) + 1)
    logger.debug("Filling global alignment matrix of shape %s", matrix.shape)
    gap = config.gap_weight

    for j in range(1, matrix.width):
        matrix[0, j] = j * gap
    for i in range(1, matrix.height):
        matrix[i, 0] = i * gap

    for i, row_symbol in enumerate(row_seq):
        for j, col_symbol in enumerate(col_seq):
            diag = matrix[i, j] + config.substitution(row_symbol, col_symbol)
            best_gap = max(matrix[i, j + 1], matrix[i + 1, j]) + gap
            matrix[i + 1, j + 1] = max(diag, best_gap)
    return matrix


def traceback_nw_alignment(
    row_seq: Sequence[Symbol],
    col_seq: Sequence[Symbol],
    config: ScoringConfig,
    matrix: AlignmentMatrix,
) -> GlobalAlignment:
    """
    Walks a filled global matrix from the bottom-right cell back to the origin.

    At each cell the first move that reproduces the current score wins, tried
    in the order up, left, diagonal.

    Args:
        row_seq (Sequence[str]): Row sequence the matrix was filled from.
        col_seq (Sequence[str]): Column sequence the matrix was filled from.
        config (ScoringConfig): Weights the matrix was filled with.
        matrix (AlignmentMatrix): Output of ``compute_nw_matrix``.

    Returns:
        GlobalAlignment: The reconstructed alignment.
    """
    gap = config.gap_weight
    aligned_row: list[Symbol] = []
    aligned_col: list[Symbol] = []
    identical = 0
    diagonal = 0

    i, j = matrix.height - 1, matrix.width - 1
    while i > 0 or j > 0:
        current = matrix[i, j]
        if i > 0 and current == matrix[i - 1, j] + gap:
            i -= 1
            aligned_row.append(row_seq[i])
            aligned_col.append(GAP)
        elif j > 0 and current == matrix[i, j - 1] + gap:
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
    score = matrix[matrix.height - 1, matrix.width - 1]
    logger.debug("Global alignment score %d over %d columns", score, len(aligned_row))
    return GlobalAlignment(
        aligned_row="".join(aligned_row),
        aligned_col="".join(aligned_col),
        score=score,
        identity_numerator=identical,
        identity_denominator=max(diagonal, 1),
    )
