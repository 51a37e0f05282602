"""Pytest configuration for statsctl tests."""

from collections.abc import Generator

import pytest

from statsctl.core.settings import reset_settings
from statsctl.models.dataset import Dataset


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_csv_data() -> str:
    """Provide sample CSV data for testing."""
    return """name,age,salary,department
Alice,30,60000,Engineering
Bob,25,50000,Marketing
Charlie,35,70000,Engineering
Diana,28,55000,Sales"""


@pytest.fixture
def sparse_csv_data() -> str:
    """Provide CSV data with missing values scattered across columns."""
    return """id,value1,value2,value3,category
1,10.5,,20.0,A
2,,15.0,25.0,B
3,12.0,18.0,,A
4,14.5,,30.0,C
5,,20.0,35.0,B
6,16.0,22.0,40.0,A"""


@pytest.fixture
def sample_dataset() -> Dataset:
    """Dataset with numeric, boolean and categorical columns."""
    return Dataset(
        ["name", "age", "score", "active", "city"],
        [
            ["Alice", "25", "85.5", "true", "Bogota"],
            ["Bob", "34", "72.0", "false", "Lima"],
            ["Carol", "NA", "91.0", "yes", "Bogota"],
            ["Dave", "41", "", "no", "Quito"],
            ["Eve", "29", "66.5", "true", "NA"],
        ],
    )


@pytest.fixture
def sparse_dataset() -> Dataset:
    """Dataset with missing values for pattern analysis."""
    return Dataset(
        ["id", "value1", "value2", "value3", "category"],
        [
            ["1", "10.5", "", "20.0", "A"],
            ["2", "", "15.0", "25.0", "B"],
            ["3", "12.0", "18.0", "", "A"],
            ["4", "14.5", "", "30.0", "C"],
            ["5", "", "20.0", "35.0", "B"],
            ["6", "16.0", "22.0", "40.0", "A"],
        ],
    )
