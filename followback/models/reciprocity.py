"""
Reciprocity Analysis

Finds followed accounts that do not follow back.
"""

import logging

from followback.models.entities import AnalysisResult, ContactRecord

logger = logging.getLogger(__name__)


def find_not_following_back(
    following: list[ContactRecord],
    followers: list[ContactRecord],
) -> list[ContactRecord]:
    """Return the followed accounts missing from the followers list.

    Usernames are compared case-insensitively. The returned records are the
    ones from ``following``, in their original order, with their original
    casing and href.

    Args:
        following: Accounts you follow
        followers: Accounts that follow you

    Returns:
        Subset of ``following`` not present in ``followers``
    """
    followers_set = {record.folded_username for record in followers}

    return [
        record for record in following
        if record.folded_username not in followers_set
    ]


def build_result(
    following: list[ContactRecord],
    followers: list[ContactRecord],
) -> AnalysisResult:
    """Compute the full analysis result for two canonical lists."""
    not_following_back = find_not_following_back(following, followers)

    logger.info(
        f"Compared {len(following)} following against {len(followers)} followers: "
        f"{len(not_following_back)} not following back"
    )

    return AnalysisResult(
        following=list(following),
        followers=list(followers),
        not_following_back=not_following_back,
    )


def summarize(result: AnalysisResult) -> dict:
    """Get summary statistics for an analysis result.

    Args:
        result: Analysis result to summarize

    Returns:
        Summary statistics dictionary
    """
    if result.following_count == 0:
        follow_back_ratio = 0.0
    else:
        follow_back_ratio = result.mutual_count / result.following_count

    return {
        "following": result.following_count,
        "followers": result.followers_count,
        "not_following_back": result.not_following_back_count,
        "mutual": result.mutual_count,
        "follow_back_ratio": follow_back_ratio,
    }
