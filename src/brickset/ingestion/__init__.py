from .dataset_loader import (
    load_dataset,
    parse_records,
)

__all__ = [
    "load_dataset",
    "parse_records",
]
