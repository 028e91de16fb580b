from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = Path("brickset.config.yaml")
DEFAULT_DATASET_PATH = Path("data/brickset.json")

# Default query parameters for the report and CLI
DEFAULT_QUERIES: Dict[str, Any] = {
    "names_limit": 10,
    "pieces_threshold": 230,
    "subtheme": "Ferrari",
    "below_threshold": 450,
}


def _validate_queries(queries: Dict[str, Any]) -> None:
    for key in ("names_limit", "pieces_threshold", "below_threshold"):
        value = queries[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Config 'queries.{key}' must be an integer")
    if queries["names_limit"] < 0:
        raise ValueError("Config 'queries.names_limit' must be >= 0")
    if not isinstance(queries["subtheme"], str):
        raise ValueError("Config 'queries.subtheme' must be a string")


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load brickset configuration from YAML file.

    Missing sections and keys are filled with defaults:
    - dataset.path: data/brickset.json
    - queries.names_limit: 10
    - queries.pieces_threshold: 230
    - queries.subtheme: Ferrari
    - queries.below_threshold: 450

    Args:
        path: Optional path to config file. Defaults to brickset.config.yaml

    Returns:
        Dictionary with configuration, defaults applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")

    dataset = config.setdefault("dataset", {})
    if not isinstance(dataset, dict):
        raise ValueError("Config 'dataset' must be a dictionary")
    dataset.setdefault("path", str(DEFAULT_DATASET_PATH))

    queries = config.setdefault("queries", {})
    if not isinstance(queries, dict):
        raise ValueError("Config 'queries' must be a dictionary")
    for key, value in DEFAULT_QUERIES.items():
        queries.setdefault(key, value)
    _validate_queries(queries)

    return config


def default_config() -> Dict[str, Any]:
    """Configuration used when no config file is present."""
    return {
        "dataset": {"path": str(DEFAULT_DATASET_PATH)},
        "queries": deepcopy(DEFAULT_QUERIES),
    }


def get_dataset_path(config: Dict[str, Any]) -> Path:
    """Get the dataset file path from config."""
    return Path(config.get("dataset", {}).get("path", DEFAULT_DATASET_PATH))


def resolve_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load config from an explicit path, else the default file, else defaults.

    An explicit path that does not exist is still an error.
    """
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()
