"""
Data Models and Analytical Components

Pydantic models for contact records and the reciprocity computation.
"""

from followback.models.entities import AnalysisResult, ContactRecord
from followback.models.reciprocity import build_result, find_not_following_back, summarize

__all__ = [
    "ContactRecord",
    "AnalysisResult",
    "find_not_following_back",
    "build_result",
    "summarize",
]
