from collections.abc import Sequence

from .global_align import GlobalAlignment
from .local_align import LocalAlignment
from .symbols import GAP

MATCH_MARK = "|"
MISMATCH_MARK = "."
GAP_MARK = " "


def match_line(aligned_row: str, aligned_col: str) -> str:
    """
    Builds the marker line shown between the two sides of an alignment.

    Args:
        aligned_row (str): Aligned row side.
        aligned_col (str): Aligned column side.

    Returns:
        str: ``|`` for identical symbols, ``.`` for a mismatch and a space
        wherever either side has a gap.
    """
    marks = []
    for a, b in zip(aligned_row, aligned_col):
        if a == GAP or b == GAP:
            marks.append(GAP_MARK)
        elif a == b:
            marks.append(MATCH_MARK)
        else:
            marks.append(MISMATCH_MARK)
    return "".join(marks)


def _format_blocks(
    aligned_row: str,
    aligned_col: str,
    row_offset: int,
    col_offset: int,
    width: int,
) -> list[str]:
    # Each side is labelled with the 1-based position of its next symbol.
    if width < 1:
        raise ValueError(f"Block width must be positive, got {width}.")
    label_width = len(str(max(row_offset, col_offset) + len(aligned_row) + 1))
    markers = match_line(aligned_row, aligned_col)
    row_pos, col_pos = row_offset + 1, col_offset + 1

    lines = []
    for start in range(0, len(aligned_row), width):
        row_block = aligned_row[start : start + width]
        col_block = aligned_col[start : start + width]
        lines.append(f"{row_pos:>{label_width}} {row_block}")
        lines.append(f"{'':>{label_width}} {markers[start : start + width]}")
        lines.append(f"{col_pos:>{label_width}} {col_block}")
        lines.append("")
        row_pos += len(row_block) - row_block.count(GAP)
        col_pos += len(col_block) - col_block.count(GAP)
    return lines


def format_global_alignment(
    result: GlobalAlignment,
    row_name: str = "row",
    col_name: str = "column",
    width: int = 80,
) -> str:
    """
    Renders a global alignment as a text report.

    Args:
        result (GlobalAlignment): Alignment to render.
        row_name (str): Label for the row sequence.
        col_name (str): Label for the column sequence.
        width (int): Maximum number of alignment columns per block.

    Returns:
        str: A header with score and identity followed by fixed-width blocks.
    """
    lines = [
        f"Global alignment: {row_name} vs {col_name}",
        f"Score: {result.score}",
        f"Identity: {result.identity_numerator}/{result.identity_denominator} ({result.identity:.2%})",
        "",
    ]
    lines.extend(_format_blocks(result.aligned_row, result.aligned_col, 0, 0, width))
    return "\n".join(lines).rstrip("\n")


def format_local_alignments(
    results: Sequence[LocalAlignment],
    row_name: str = "row",
    col_name: str = "column",
    width: int = 80,
) -> str:
    """
    Renders every local alignment of a ``smith_waterman`` call as one report.

    Block positions refer to the original sequences, so they start at each
    window's start.
    """
    if width < 1:
        raise ValueError(f"Block width must be positive, got {width}.")
    if not results:
        return f"No local alignment between {row_name} and {col_name}"

    sections = []
    for number, result in enumerate(results, start=1):
        lines = [
            f"Local alignment {number} of {len(results)}: {row_name} vs {col_name}",
            f"{row_name} window: [{result.row.start}, {result.row.end})",
            f"{col_name} window: [{result.col.start}, {result.col.end})",
            f"Score: {result.score}",
            f"Identity: {result.identity_numerator}/{result.identity_denominator} ({result.identity:.2%})",
            "",
        ]
        lines.extend(_format_blocks(result.row.data, result.col.data, result.row.start, result.col.start, width))
        sections.append("\n".join(lines).rstrip("\n"))
    return "\n\n".join(sections)
