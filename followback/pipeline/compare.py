"""
Follow-Back Analysis

Entry points that run parse -> unwrap -> normalize -> compare.
"""

import logging
from typing import Any, Optional, Union

from followback.models.entities import AnalysisResult
from followback.models.reciprocity import build_result
from followback.pipeline.ingest import (
    EMPTY_INPUT,
    FOLLOWERS_KEY,
    FOLLOWING_KEY,
    EmptyInput,
    ParseFailure,
    parse_input,
    unwrap_export,
)
from followback.pipeline.normalize import extract_usernames

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Unexpected failure while analyzing otherwise valid JSON."""

    def __init__(self, message: str = "Analysis failed. Check the format of the exported data."):
        super().__init__(message)


def analyze(following_raw: Any, followers_raw: Any) -> AnalysisResult:
    """Compare two parsed exports.

    Args:
        following_raw: Parsed following.json (wrapper object or bare list)
        followers_raw: Parsed followers_1.json (wrapper object or bare list)

    Returns:
        AnalysisResult with both normalized lists and the accounts
        that do not follow back
    """
    following = extract_usernames(unwrap_export(following_raw, FOLLOWING_KEY))
    followers = extract_usernames(unwrap_export(followers_raw, FOLLOWERS_KEY))

    return build_result(following, followers)


def analyze_text(
    following_text: Optional[str],
    followers_text: Optional[str],
) -> Union[AnalysisResult, EmptyInput, ParseFailure]:
    """Parse and compare two pasted exports.

    Returns:
        The first ParseFailure if either text is malformed, EMPTY_INPUT if
        either text is blank, otherwise the AnalysisResult

    Raises:
        AnalysisError: If the comparison fails unexpectedly
    """
    following_raw = parse_input(following_text)
    followers_raw = parse_input(followers_text)

    for outcome in (following_raw, followers_raw):
        if isinstance(outcome, ParseFailure):
            return outcome

    if isinstance(following_raw, EmptyInput) or isinstance(followers_raw, EmptyInput):
        logger.debug("Blank input, nothing to analyze")
        return EMPTY_INPUT

    try:
        return analyze(following_raw, followers_raw)
    except Exception as e:
        logger.error(f"Analysis error: {e}", exc_info=True)
        raise AnalysisError() from e
