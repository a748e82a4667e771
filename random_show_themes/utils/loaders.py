"""JSON loaders for the show catalog and the candidate list."""

import logging
from pathlib import Path
from typing import Annotated, Dict, List, Union

from pydantic import NonNegativeInt, Strict, TypeAdapter, ValidationError

from ..models.show import Show

logger = logging.getLogger(__name__)

CATALOG_ADAPTER = TypeAdapter(Dict[NonNegativeInt, Show])
# Ids must be JSON integers; "1" or 2.0 are rejected
CANDIDATES_ADAPTER = TypeAdapter(List[Annotated[NonNegativeInt, Strict()]])


class LoadError(Exception):
    """Raised when an input file cannot be read or does not have the expected shape."""


def _read_json_file(path: Union[str, Path], adapter: TypeAdapter, expected: str):
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise LoadError(f"couldn't read {path}: {exc.strerror or exc}") from exc

    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        raise LoadError(f"couldn't parse {path} into {expected}: {exc}") from exc


def load_catalog(path: Union[str, Path]) -> Dict[int, Show]:
    """
    Load the show catalog.

    The file holds a JSON object mapping show ids to show objects.
    Unknown fields are ignored and missing theme lists default to empty.

    Args:
        path: Path to the catalog JSON file

    Returns:
        Mapping of show id to Show (may be empty)

    Raises:
        LoadError: If the file is missing, unreadable or malformed
    """
    catalog = _read_json_file(path, CATALOG_ADAPTER, "a mapping of show id to show")
    logger.debug("Loaded %d shows from %s", len(catalog), path)
    return catalog


def load_candidates(path: Union[str, Path]) -> List[int]:
    """
    Load the candidate list, a JSON array of non-negative show ids.

    Raises:
        LoadError: If the file is missing, unreadable or malformed
    """
    candidates = _read_json_file(path, CANDIDATES_ADAPTER, "a list of show ids")
    logger.debug("Loaded %d candidates from %s", len(candidates), path)
    return candidates
