"""
Filter Criteria - Test Configuration and Fixtures
"""
from __future__ import annotations

import pytest


# =============================================================================
# Sample Data
# =============================================================================

@pytest.fixture
def sample_records() -> list[dict]:
    """Three user records exercising every criteria type."""
    return [
        {
            "active": True,
            "age": 25,
            "createdAt": "2023-01-01T00:00:00Z",
            "id": 1,
            "location": {"lat": 40.7128, "lng": -74.006},
            "map": {"key-1": "value-1"},
            "name": "John Doe",
            "tags": ["developer", "javascript"],
            "tagsSet": {"developer", "javascript"},
        },
        {
            "active": False,
            "age": 30,
            "createdAt": "2023-03-01T00:00:00Z",
            "id": 2,
            "location": {"lat": 34.0522, "lng": -118.2437},
            "map": {"key-2": "value-2"},
            "name": "Jane Smith",
            "tags": ["designer", "ui"],
            "tagsSet": {"designer", "ui"},
        },
        {
            "active": True,
            "age": 35,
            "createdAt": "2023-06-01T00:00:00Z",
            "id": 3,
            "location": {"lat": 51.5074, "lng": -0.1278},
            "map": {"key-3": "value-3"},
            "name": "John Smith",
            "tags": ["developer", "python"],
            "tagsSet": {"developer", "python"},
        },
    ]


@pytest.fixture
def nested_record() -> dict:
    """Record with arrays of objects for array-branching paths."""
    return {
        "id": 10,
        "orders": [
            {"items": [{"sku": "a-1", "qty": 2}, {"sku": "b-2", "qty": 5}]},
            {"items": [{"sku": "c-3", "qty": 1}]},
            {"note": "no items"},
        ],
    }


# =============================================================================
# Engine
# =============================================================================

@pytest.fixture
def engine():
    """Fresh engine with its own alias registry and predicates."""
    from filter_criteria import FilterEngine

    return FilterEngine()


def ids(records: list[dict]) -> list[int]:
    return sorted(record["id"] for record in records)


@pytest.fixture
def record_ids():
    """Sorted ids of a filtered collection."""
    return ids
