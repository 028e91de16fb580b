"""Exception types raised by the brickset package."""

from typing import Optional


class BricksetError(Exception):
    """Base exception for brickset errors."""


class EmptyDatasetError(BricksetError):
    """Raised when an operation has no defined result on an empty dataset."""


class MalformedRecordError(BricksetError):
    """Raised by the loader when the data file violates the record schema."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index  # position of the offending record, None for document-level problems
