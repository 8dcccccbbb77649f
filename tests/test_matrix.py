import numpy as np
import pytest
from seq_align import AlignmentMatrix, MatrixIndexError, ScoringConfig, compute_nw_matrix, compute_sw_matrix


class TestAlignmentMatrixInit:
    def test_zero_filled(self):
        m = AlignmentMatrix(3, 4)
        assert m.shape == (3, 4)
        assert m.height == 3
        assert m.width == 4
        np.testing.assert_array_equal(m.to_numpy(), np.zeros((3, 4)))

    @pytest.mark.parametrize(("height", "width"), [(0, 3), (3, 0), (-1, 2)])
    def test_invalid_dimensions(self, height, width):
        with pytest.raises(ValueError, match="positive"):
            AlignmentMatrix(height, width)

    def test_repr(self):
        assert repr(AlignmentMatrix(2, 5)) == "AlignmentMatrix(2, 5)"


class TestAlignmentMatrixAccess:
    def test_checked_get_set(self):
        m = AlignmentMatrix(2, 3)
        assert m.set(1, 2, -7)
        assert m.get(1, 2) == -7
        assert isinstance(m.get(1, 2), int)

    @pytest.mark.parametrize(("i", "j"), [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_checked_out_of_range(self, i, j):
        m = AlignmentMatrix(2, 3)
        assert m.get(i, j) is None
        assert m.set(i, j, 1) is False
        np.testing.assert_array_equal(m.to_numpy(), np.zeros((2, 3)))

    def test_fast_path(self):
        m = AlignmentMatrix(2, 2)
        m[1, 0] = 2**40
        assert m[1, 0] == 2**40

    @pytest.mark.parametrize(("i", "j"), [(2, 0), (0, 2), (-1, 1), (1, -1)])
    def test_fast_path_invalid(self, i, j):
        m = AlignmentMatrix(2, 2)
        with pytest.raises(MatrixIndexError, match="invalid index"):
            m[i, j]
        with pytest.raises(IndexError):
            m[i, j] = 0

    def test_numpy_view_is_read_only(self):
        m = AlignmentMatrix(2, 2)
        view = m.to_numpy()
        with pytest.raises(ValueError):
            view[0, 0] = 1


class TestAlignmentMatrixAggregates:
    def test_max_negative(self):
        m = AlignmentMatrix(1, 3)
        m[0, 0] = -5
        m[0, 1] = -2
        m[0, 2] = -9
        assert m.max() == -2

    def test_argmax_all_row_major(self):
        m = AlignmentMatrix(3, 3)
        m[2, 0] = 4
        m[0, 2] = 4
        m[1, 1] = 4
        m[1, 2] = 3
        assert m.max() == 4
        assert m.argmax_all() == [(0, 2), (1, 1), (2, 0)]

    def test_argmax_all_zero_matrix(self):
        m = AlignmentMatrix(2, 2)
        assert m.argmax_all() == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_nw_matrix_borders():
    config = ScoringConfig(gap_weight=-3)
    matrix = compute_nw_matrix("ACG", "AC", config)
    scores = matrix.to_numpy()

    assert matrix.shape == (4, 3)
    np.testing.assert_array_equal(scores[0], [0, -3, -6])
    np.testing.assert_array_equal(scores[:, 0], [0, -3, -6, -9])


def test_nw_matrix_what_why():
    matrix = compute_nw_matrix("WHAT", "WHY", ScoringConfig(match_weight=1, mismatch_weight=-1, gap_weight=-2))

    np.testing.assert_array_equal(
        matrix.to_numpy(),
        [
            [0, -2, -4, -6],
            [-2, 1, -1, -3],
            [-4, -1, 2, 0],
            [-6, -3, 0, 1],
            [-8, -5, -2, -1],
        ],
    )


def test_sw_matrix_is_non_negative():
    matrix = compute_sw_matrix("GGTTGACTA", "TGTTACGG", ScoringConfig(match_weight=3, mismatch_weight=-3, gap_weight=-2))
    scores = matrix.to_numpy()

    assert scores.min() == 0
    assert not scores[0].any()
    assert not scores[:, 0].any()
    assert matrix.max() == 13
    assert matrix.argmax_all() == [(7, 6)]
