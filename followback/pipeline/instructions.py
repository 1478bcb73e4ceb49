"""
Instructions Loader

Loads the static "how to export your data" document from disk or a URL.
"""

import logging
from pathlib import Path
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_INSTRUCTIONS_PATH = Path(__file__).parent.parent / "instructions.md"

FALLBACK_TEMPLATE = """# Instructions unavailable

Could not load the instructions from {source}.
Make sure the file exists and is accessible.

Error: {error}
"""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch(url: str, timeout: float, client: Optional[httpx.Client]) -> str:
    if client is None:
        with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
            response = own_client.get(url)
            response.raise_for_status()
            return response.text

    response = client.get(url)
    response.raise_for_status()
    return response.text


def load_instructions(
    source: str | Path | None = None,
    timeout: float = 10.0,
    client: Optional[httpx.Client] = None,
) -> str:
    """Load the instructions document.

    Never raises: on failure a fallback text describing the error is
    returned instead.

    Args:
        source: Local path or http(s) URL (default: bundled instructions.md)
        timeout: Request timeout in seconds for URLs
        client: Optional preconfigured HTTP client

    Returns:
        Instructions text
    """
    source = str(source or DEFAULT_INSTRUCTIONS_PATH)

    try:
        if _is_url(source):
            text = _fetch(source, timeout, client)
        else:
            text = Path(source).read_text(encoding="utf-8")
    except (httpx.HTTPError, OSError) as e:
        logger.error(f"Error loading instructions from {source}: {e}")
        return FALLBACK_TEMPLATE.format(source=source, error=e)

    logger.debug(f"Instructions loaded from {source}")
    return text
