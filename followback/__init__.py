"""
Follow-Back Analyzer

Compares exported following/followers lists and finds the accounts that
do not follow back.
"""

from followback.models import AnalysisResult, ContactRecord
from followback.pipeline import (
    EMPTY_INPUT,
    AnalysisError,
    EmptyInput,
    ParseFailure,
    analyze,
    analyze_text,
    extract_usernames,
    load_export_file,
    parse_input,
    unwrap_export,
)

__version__ = "0.1.0"

__all__ = [
    "ContactRecord",
    "AnalysisResult",
    "EMPTY_INPUT",
    "EmptyInput",
    "ParseFailure",
    "AnalysisError",
    "parse_input",
    "unwrap_export",
    "load_export_file",
    "extract_usernames",
    "analyze",
    "analyze_text",
    "__version__",
]
