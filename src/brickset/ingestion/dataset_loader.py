import json
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from ..errors import MalformedRecordError
from ..models.lego_set import Dataset, LegoSet
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "$"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_records(raw: Any) -> Dataset:
    """
    Validate already-decoded JSON into a dataset.

    Args:
        raw: Decoded JSON document, expected to be a list of objects

    Returns:
        Tuple of LegoSet records in document order

    Raises:
        MalformedRecordError: If the document is not a list of valid records
    """
    if not isinstance(raw, list):
        raise MalformedRecordError(
            f"Dataset must be a JSON array of records, got {type(raw).__name__}"
        )

    records: List[LegoSet] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise MalformedRecordError(
                f"Record {index} must be an object, got {type(entry).__name__}",
                index=index,
            )
        try:
            records.append(LegoSet.model_validate(entry))
        except ValidationError as exc:
            raise MalformedRecordError(
                f"Record {index} is malformed: {_format_validation_error(exc)}",
                index=index,
            ) from exc

    return tuple(records)


def load_dataset(path: Path) -> Dataset:
    """
    Load the LEGO set dataset from a JSON file.

    Expected document: a JSON array of objects with number, name, pieces,
    theme, subtheme, tags and dimensions fields.
    """
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedRecordError(f"Dataset file {path} is not valid JSON: {exc}") from exc

    dataset = parse_records(raw)
    logger.info(f"Loaded {len(dataset)} LEGO sets from {path}")
    return dataset
