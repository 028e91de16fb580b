from .lego_set import Dataset, Dimensions, LegoSet

__all__ = [
    "Dataset",
    "Dimensions",
    "LegoSet",
]
