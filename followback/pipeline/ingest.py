"""
Export Ingestion

Parses pasted or exported JSON text and unwraps the account-data export
wrapper objects.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

FOLLOWING_KEY = "relationships_following"
FOLLOWERS_KEY = "relationships_followers"


class EmptyInput(BaseModel):
    """Marker for blank input. Callers abort without reporting an error."""
    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return False


EMPTY_INPUT = EmptyInput()


class ParseFailure(BaseModel):
    """Input text that is not valid JSON."""
    model_config = ConfigDict(frozen=True)

    message: str = Field(min_length=1)

    def __bool__(self) -> bool:
        return False


ParseOutcome = Union[EmptyInput, ParseFailure, Any]


def parse_input(text: Optional[str]) -> ParseOutcome:
    """Parse JSON text without validating its shape.

    Args:
        text: Raw JSON text

    Returns:
        EMPTY_INPUT for blank text, ParseFailure for malformed JSON,
        otherwise the parsed value
    """
    if text is None or not text.strip():
        return EMPTY_INPUT

    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow
        logger.warning(f"JSON parsing error: {e}")
        return ParseFailure(message=str(e) or type(e).__name__)


def unwrap_export(root: Any, key: str) -> Any:
    """Return the list stored under ``key``, or ``root`` itself.

    Full export files wrap the entries in an object, while pasted data is
    often the bare list.
    """
    if isinstance(root, dict) and key in root:
        return root[key]
    return root


def merge_exports(roots: list[Any], key: str) -> list:
    """Concatenate the entry lists of several exports of the same kind.

    Large accounts get followers_1.json, followers_2.json, ... in one
    export. Values that do not unwrap to a list contribute nothing.
    """
    merged = []
    for root in roots:
        entries = unwrap_export(root, key)
        if isinstance(entries, list):
            merged.extend(entries)
        else:
            logger.warning(f"Ignoring export part that is not a list of entries ({type(entries).__name__})")
    return merged


def load_export_file(filepath: str | Path) -> ParseOutcome:
    """Load and parse an exported JSON file.

    Args:
        filepath: Path to following.json or followers_*.json

    Returns:
        Same outcomes as parse_input

    Raises:
        FileNotFoundError: If the file does not exist
    """
    filepath = Path(filepath)

    if not filepath.is_file():
        raise FileNotFoundError(f"Export file not found: {filepath}")

    # utf-8-sig strips the BOM some editors add when saving pasted exports
    text = filepath.read_text(encoding="utf-8-sig")
    logger.debug(f"Read {len(text)} characters from {filepath.name}")

    return parse_input(text)
