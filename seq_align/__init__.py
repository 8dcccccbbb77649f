from .formatting import format_global_alignment, format_local_alignments, match_line
from .global_align import GlobalAlignment, compute_nw_matrix, needleman_wunsch, traceback_nw_alignment
from .local_align import AlignedSegment, LocalAlignment, compute_sw_matrix, smith_waterman, traceback_sw_alignment
from .matrix import AlignmentMatrix, MatrixIndexError
from .scoring import ScoringConfig, ScoringConfigError
from .symbols import GAP, Score, Symbol, as_symbols, normalize_symbol

__all__ = [
    "GAP",
    "AlignedSegment",
    "AlignmentMatrix",
    "GlobalAlignment",
    "LocalAlignment",
    "MatrixIndexError",
    "Score",
    "ScoringConfig",
    "ScoringConfigError",
    "Symbol",
    "as_symbols",
    "compute_nw_matrix",
    "compute_sw_matrix",
    "format_global_alignment",
    "format_local_alignments",
    "match_line",
    "needleman_wunsch",
    "normalize_symbol",
    "smith_waterman",
    "traceback_nw_alignment",
    "traceback_sw_alignment",
]
