"""Shared fixtures for the scoring tests."""
import copy

import pytest
import yaml
from fastapi.testclient import TestClient

from powerscore.config.settings import DEFAULT_STANDARDS_PATH
from powerscore.scoring import StandardsLoader, StandardsRow


INCREASING_VALUES = [20, 28, 33, 37, 41, 45, 49, 53, 58, 64, 72]
DECREASING_VALUES = [6.20, 5.60, 5.30, 5.10, 4.95, 4.80, 4.68, 4.56, 4.44, 4.30, 4.10]

MINIMAL_DOCUMENT = {
    "metadata": {"version": "test-1", "description": "Minimal standards"},
    "dots": {
        "male": {"a": -0.000001093, "b": 0.0007391293, "c": -0.1918759221, "d": 24.0900756, "e": -307.75076},
        "female": {"a": -0.0000010706, "b": 0.0005158568, "c": -0.1126655495, "d": 13.6175032, "e": -57.96288,
                   "max_bodyweight": 150},
    },
    "anchor_dots": {"bench_press": 110.0},
    "metrics": {
        "vertical_jump": {
            "orientation": "increasing",
            "unit": "cm",
            "male": [
                {"ages": [12, 20], "values": INCREASING_VALUES},
                {"ages": [21, None], "values": INCREASING_VALUES},
            ],
            "female": [{"ages": [12, 80], "values": INCREASING_VALUES}],
        },
    },
}


@pytest.fixture(scope="session")
def catalog():
    """Catalog loaded from the packaged standards file."""
    return StandardsLoader(DEFAULT_STANDARDS_PATH).get_catalog()


@pytest.fixture
def increasing_row():
    return StandardsRow.from_values(INCREASING_VALUES)


@pytest.fixture
def decreasing_row():
    return StandardsRow.from_values(DECREASING_VALUES)


@pytest.fixture
def standards_document():
    """A fresh, valid standards document that tests may mutate."""
    return copy.deepcopy(MINIMAL_DOCUMENT)


@pytest.fixture
def write_standards(tmp_path):
    """Write a document to a temporary YAML file and return its path."""
    def _write(document, name="standards.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(document, allow_unicode=True), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def client():
    from powerscore.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
