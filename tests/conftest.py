"""
Pytest Configuration and Shared Fixtures
"""

import json

import pytest
from pathlib import Path

from followback.models.entities import ContactRecord


def make_entry(value: str, href: str = "", timestamp: int = 1700000000) -> dict:
    """Build an export entry the way the account data export writes them."""
    return {
        "title": "",
        "media_list_data": [],
        "string_list_data": [
            {"href": href, "value": value, "timestamp": timestamp},
        ],
    }


@pytest.fixture
def entry_factory():
    """Return the export entry builder."""
    return make_entry


@pytest.fixture
def following_entries() -> list[dict]:
    """Raw entries of a following.json export."""
    return [
        make_entry("Alice", "https://www.instagram.com/alice"),
        make_entry("bob", "https://www.instagram.com/bob"),
        make_entry("carol_x", "https://www.instagram.com/carol_x"),
        {"title": "dave", "string_list_data": []},
    ]


@pytest.fixture
def followers_entries() -> list[dict]:
    """Raw entries of a followers_1.json export."""
    return [
        make_entry("alice", "https://www.instagram.com/alice"),
        make_entry("DAVE", "https://www.instagram.com/dave"),
        make_entry("erin", "https://www.instagram.com/erin"),
    ]


@pytest.fixture
def following_export(following_entries) -> dict:
    """following.json as downloaded, wrapped in its top-level object."""
    return {"relationships_following": following_entries}


@pytest.fixture
def followers_export(followers_entries) -> list[dict]:
    """followers_1.json as downloaded (a bare list)."""
    return followers_entries


@pytest.fixture
def sample_records() -> list[ContactRecord]:
    """Canonical records for analyzer tests."""
    return [
        ContactRecord(username="a", href="u/a"),
        ContactRecord(username="b", href="u/b"),
    ]


@pytest.fixture
def export_files(tmp_path, following_export, followers_export) -> tuple[Path, Path]:
    """Write both exports to disk and return (following, followers) paths."""
    following_path = tmp_path / "following.json"
    followers_path = tmp_path / "followers_1.json"

    following_path.write_text(json.dumps(following_export), encoding="utf-8")
    followers_path.write_text(json.dumps(followers_export), encoding="utf-8")

    return following_path, followers_path
