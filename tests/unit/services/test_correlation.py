"""Tests for the Pearson correlation engine."""

import math

import pytest

from statsctl.models.dataset import Dataset
from statsctl.models.statistics_models import CorrelationMatrix
from statsctl.services.correlation import (
    correlation_matrix,
    high_correlations,
    pearson_correlation,
)


class TestPearsonCorrelation:
    """Tests for pearson_correlation."""

    def test_identical_sequences(self) -> None:
        """Test a sequence correlates perfectly with itself."""
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        assert pearson_correlation(x, x) == pytest.approx(1.0)

    def test_inverted_sequences(self) -> None:
        """Test a reversed sequence gives -1."""
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        y = [5.0, 4.0, 3.0, 2.0, 1.0]
        assert pearson_correlation(x, y) == pytest.approx(-1.0)

    def test_constant_column_is_nan(self) -> None:
        """Test zero variance gives NaN."""
        assert math.isnan(pearson_correlation([1.0, 2.0, 3.0], [4.0, 4.0, 4.0]))

    def test_pairwise_complete_filtering(self) -> None:
        """Test rows with a missing side are dropped."""
        x = [1.0, None, 3.0, 4.0, 5.0]
        y = [2.0, 4.0, None, 8.0, 10.0]
        assert pearson_correlation(x, y) == pytest.approx(1.0)

    def test_fewer_than_two_pairs_is_nan(self) -> None:
        """Test fewer than two complete pairs gives NaN."""
        assert math.isnan(pearson_correlation([1.0, None, 3.0], [None, 2.0, None]))
        assert math.isnan(pearson_correlation([1.0, 2.0], [3.0, None]))

    def test_constant_within_complete_pairs_is_nan(self) -> None:
        """Test variance is measured over complete pairs only."""
        x = [1.0, 2.0, 3.0]
        y = [5.0, 5.0, None]
        assert math.isnan(pearson_correlation(x, y))

    def test_known_value(self) -> None:
        """Test a hand-computed coefficient."""
        x = [1.0, 2.0, 3.0, 4.0]
        y = [2.0, 1.0, 4.0, 3.0]
        assert pearson_correlation(x, y) == pytest.approx(0.6)


@pytest.fixture
def corr_dataset() -> Dataset:
    """Dataset with correlated, anti-correlated, text and constant columns."""
    return Dataset(
        ["a", "b", "c", "label", "flat"],
        [
            ["1", "2", "9", "x", "3"],
            ["2", "4", "7", "y", "3"],
            ["3", "6", "8", "x", "3"],
            ["4", "8", "2", "y", "3"],
            ["5", "10", "1", "x", "3"],
        ],
    )


class TestCorrelationMatrix:
    """Tests for correlation_matrix."""

    def test_uses_numeric_columns(self, corr_dataset: Dataset) -> None:
        """Test the default column set is the Numeric columns."""
        cm = correlation_matrix(corr_dataset)
        assert cm.columns == ["a", "b", "c", "flat"]

    def test_symmetric_with_unit_diagonal(self, corr_dataset: Dataset) -> None:
        """Test the matrix is symmetric with a unit diagonal."""
        cm = correlation_matrix(corr_dataset)
        n = len(cm.columns)
        for i in range(n):
            assert cm.matrix[i][i] == 1.0
            for j in range(n):
                a, b = cm.matrix[i][j], cm.matrix[j][i]
                assert (math.isnan(a) and math.isnan(b)) or a == b

    def test_constant_column_diagonal_still_one(self, corr_dataset: Dataset) -> None:
        """Test a constant column keeps 1.0 on the diagonal."""
        cm = correlation_matrix(corr_dataset)
        assert cm.columns[3] == "flat"
        assert cm.matrix[3][3] == 1.0
        assert math.isnan(cm.matrix[3][0])

    def test_undefined_coefficients_serialize_as_null(self, corr_dataset: Dataset) -> None:
        """Test NaN coefficients serialize as null."""
        cm = correlation_matrix(corr_dataset, ["a", "flat"])
        assert cm.model_dump(mode="json")["matrix"] == [[1.0, None], [None, 1.0]]

    def test_explicit_columns_filtered_to_present(self, corr_dataset: Dataset) -> None:
        """Test explicit names keep order and drop unknown columns."""
        cm = correlation_matrix(corr_dataset, ["b", "ghost", "a"])
        assert cm.columns == ["b", "a"]
        assert cm.matrix[0][1] == pytest.approx(1.0)

    def test_empty_dataset(self) -> None:
        """Test a dataset without rows or numeric columns."""
        cm = correlation_matrix(Dataset(["x"], []))
        assert cm.columns == []
        assert cm.matrix == []


class TestHighCorrelations:
    """Tests for high_correlations."""

    def test_threshold_and_order(self, corr_dataset: Dataset) -> None:
        """Test high correlations respect the threshold."""
        cm = correlation_matrix(corr_dataset)
        pairs = high_correlations(cm, 0.5)
        assert (pairs[0].column_a, pairs[0].column_b) == ("a", "b")
        assert pairs[0].r == pytest.approx(1.0)
        assert all(abs(p.r) >= 0.5 for p in pairs)
        assert all(p.column_a != "flat" and p.column_b != "flat" for p in pairs)

    @pytest.mark.parametrize("threshold", [0.0, 0.3, 0.5, 0.9, 1.0])
    def test_sorted_by_descending_magnitude(self, corr_dataset: Dataset, threshold: float) -> None:
        """Test pairs are sorted by descending magnitude."""
        pairs = high_correlations(correlation_matrix(corr_dataset), threshold)
        magnitudes = [abs(p.r) for p in pairs]
        assert magnitudes == sorted(magnitudes, reverse=True)

    def test_ties_keep_upper_triangle_order(self) -> None:
        """Test equal magnitudes keep upper-triangle order."""
        cm = CorrelationMatrix(
            columns=["p", "q", "r"],
            matrix=[[1.0, 0.8, -0.8], [0.8, 1.0, 0.9], [-0.8, 0.9, 1.0]],
        )
        pairs = high_correlations(cm, 0.5)
        assert [(p.column_a, p.column_b) for p in pairs] == [("q", "r"), ("p", "q"), ("p", "r")]

    def test_nothing_above_threshold(self) -> None:
        """Test an empty result when nothing reaches the threshold."""
        cm = CorrelationMatrix(columns=["p", "q"], matrix=[[1.0, 0.1], [0.1, 1.0]])
        assert high_correlations(cm, 0.5) == []
