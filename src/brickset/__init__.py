"""Query and aggregation toolkit for Brickset LEGO set data."""

__version__ = "0.1.0"
