"""Pytest configuration and fixtures."""

import json

import pytest

from brickset.models.lego_set import Dimensions, LegoSet


def make_set(number, pieces, theme, name=None, subtheme=None, tags=None, dimensions=None, **extra):
    """Build a LegoSet with only the fields a test cares about."""
    return LegoSet(
        number=number,
        name=name,
        pieces=pieces,
        theme=theme,
        subtheme=subtheme,
        tags=tuple(tags) if tags is not None else None,
        dimensions=dimensions,
        **extra,
    )


@pytest.fixture
def sample_dataset():
    """A small dataset covering null names, subthemes, tags and dimensions."""
    boxed = Dimensions(height=30.0, width=40.0, depth=8.0, weight=1.2)
    return (
        make_set("60337-1", 764, "City", name="Express Passenger Train", subtheme="Trains",
                 tags=["Train", "Railway"]),
        make_set("42125-1", 1677, "Technic", name="Ferrari 488 GTE", subtheme="Ferrari",
                 tags=["Ferrari", "Car"]),
        make_set("30638-1", 40, "City", name=None, subtheme=None, tags=None),
        make_set("76914-1", 261, "Speed Champions", name="Ferrari 812 Competizione", subtheme="Ferrari",
                 tags=["Ferrari", "Car"], dimensions=boxed),
        make_set("60316-1", 668, "City", name="Police Station", subtheme="Police",
                 tags=["Police", "Railway"]),
        make_set("10497-1", 1254, "Icons", name="Galaxy Explorer", subtheme="Space", dimensions=boxed),
        make_set("60338-1", 500, "City", name="Police Station", subtheme="Police"),
    )


@pytest.fixture
def three_set_dataset():
    """Three records: 100/City, 500/City, 300/Space."""
    return (
        make_set("1", 100, "City"),
        make_set("2", 500, "City"),
        make_set("3", 300, "Space"),
    )


@pytest.fixture
def dataset_file(tmp_path):
    """Write a JSON dataset to a temporary file and return its path."""
    records = [
        {
            "number": "75192-1",
            "name": "Millennium Falcon",
            "theme": "Star Wars",
            "subtheme": "Ultimate Collector Series",
            "pieces": 7541,
            "tags": ["Starship", "UCS"],
            "dimensions": {"height": 59.6, "width": 47.8, "depth": 32.6, "weight": 15.7},
            "packagingType": "Box",
            "year": 2017,
        },
        {
            "number": "76914-1",
            "name": "Ferrari 812 Competizione",
            "theme": "Speed Champions",
            "subtheme": "Ferrari",
            "pieces": 261,
            "tags": ["Ferrari", "Car"],
            "dimensions": None,
        },
        {
            "number": "30638-1",
            "name": None,
            "theme": "City",
            "subtheme": None,
            "pieces": 40,
            "tags": None,
            "dimensions": None,
        },
    ]
    path = tmp_path / "brickset.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path
