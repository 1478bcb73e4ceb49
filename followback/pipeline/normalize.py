"""
Entry Normalization

Converts raw export entries into canonical contact records.
"""

import logging
from typing import Any, Optional

from followback.models.entities import ContactRecord

logger = logging.getLogger(__name__)


def _text_field(data: Any, key: str) -> str:
    """Read a string field, treating anything else as missing."""
    if not isinstance(data, dict):
        return ""
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _first_string_item(entry: dict) -> Optional[dict]:
    """Return the first item of string_list_data, if there is one."""
    items = entry.get("string_list_data")
    if isinstance(items, list) and items:
        return items[0]
    return None


def decode_entry(entry: Any) -> Optional[ContactRecord]:
    """Decode one export entry.

    Username comes from ``string_list_data[0].value``, falling back to the
    entry ``title``. Href comes from ``string_list_data[0].href``.

    Returns:
        ContactRecord, or None when no username can be derived
    """
    if not isinstance(entry, dict):
        return None

    item = _first_string_item(entry)

    username = _text_field(item, "value") or _text_field(entry, "title")
    if not username:
        return None

    return ContactRecord(username=username, href=_text_field(item, "href"))


def extract_usernames(data: Any) -> list[ContactRecord]:
    """Extract contact records from a list of export entries.

    Args:
        data: Parsed export list (anything else yields an empty list)

    Returns:
        Records in input order, without entries lacking a username
    """
    if not isinstance(data, list):
        logger.debug(f"Expected a list of entries, got {type(data).__name__}")
        return []

    records = []
    for entry in data:
        record = decode_entry(entry)
        if record is None:
            logger.debug(f"Skipping entry without username: {entry!r:.80}")
            continue
        records.append(record)

    if len(records) < len(data):
        logger.info(f"Skipped {len(data) - len(records)} of {len(data)} entries without a username")

    return records
