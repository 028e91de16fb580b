"""LEGO sets API: pure query and aggregation functions over a dataset."""

from collections import Counter
from typing import Dict, List, Optional, Set

from ..errors import EmptyDatasetError
from ..models.lego_set import Dataset

DEFAULT_BELOW_THRESHOLD = 450


def names_limited(dataset: Dataset, n: int) -> List[Optional[str]]:
    """
    Return the first ``n`` set names in dataset order.

    Args:
        dataset: Loaded LEGO sets
        n: Maximum number of names (must be >= 0)

    Returns:
        Up to ``n`` names; null names are kept as None
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return [lego_set.name for lego_set in dataset[:n]]


def count_above_pieces(dataset: Dataset, threshold: int) -> int:
    """Count sets whose piece count is strictly greater than ``threshold``."""
    return sum(1 for lego_set in dataset if lego_set.pieces > threshold)


def average_pieces(dataset: Dataset) -> float:
    """
    Arithmetic mean of the piece counts.

    Raises:
        EmptyDatasetError: If the dataset has no records
    """
    if not dataset:
        raise EmptyDatasetError("Average pieces is undefined for an empty dataset")
    return sum_pieces(dataset) / len(dataset)


def names_descending(dataset: Dataset) -> List[Optional[str]]:
    """
    Every set name in reverse lexicographic order.

    Null names sort last regardless of direction.
    """
    present = sorted((s.name for s in dataset if s.name is not None), reverse=True)
    missing = [None for s in dataset if s.name is None]
    return present + missing


def names_by_subtheme(dataset: Dataset, substring: str) -> List[Optional[str]]:
    """Names of sets whose subtheme contains ``substring``, in dataset order."""
    return [
        lego_set.name
        for lego_set in dataset
        if lego_set.subtheme is not None and substring in lego_set.subtheme
    ]


def any_below_piece_threshold(dataset: Dataset, threshold: int = DEFAULT_BELOW_THRESHOLD) -> bool:
    """True if at least one set has strictly fewer than ``threshold`` pieces."""
    return any(lego_set.pieces < threshold for lego_set in dataset)


def sum_pieces(dataset: Dataset) -> int:
    """Total piece count across the dataset (0 when empty)."""
    return sum(lego_set.pieces for lego_set in dataset)


def distinct_tags_without_dimensions(dataset: Dataset) -> Set[str]:
    """Distinct tags of the sets that have tags but no dimensions."""
    return {
        tag
        for lego_set in dataset
        if lego_set.dimensions is None and lego_set.tags is not None
        for tag in lego_set.tags
    }


def count_by_theme(dataset: Dataset) -> Dict[str, int]:
    """Number of sets per theme."""
    return dict(Counter(lego_set.theme for lego_set in dataset))


def names_by_theme(dataset: Dataset) -> Dict[str, Set[str]]:
    """
    Distinct non-null names per theme.

    A theme is present even when none of its sets has a name; it then maps
    to an empty set.
    """
    result: Dict[str, Set[str]] = {}
    for lego_set in dataset:
        names = result.setdefault(lego_set.theme, set())
        if lego_set.name is not None:
            names.add(lego_set.name)
    return result
