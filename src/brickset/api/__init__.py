"""API layer: the query surface over a loaded dataset.

Key rules:

1. Every function takes the dataset as its first argument
2. No function mutates the dataset or prints
3. Errors propagate unchanged; only EmptyDatasetError originates here
"""
