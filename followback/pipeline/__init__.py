"""
Data Processing Pipeline

Components for parsing, normalizing, analyzing, and outputting export data.
"""

from followback.pipeline.ingest import (
    EMPTY_INPUT,
    EmptyInput,
    ParseFailure,
    load_export_file,
    merge_exports,
    parse_input,
    unwrap_export,
)
from followback.pipeline.normalize import decode_entry, extract_usernames
from followback.pipeline.compare import AnalysisError, analyze, analyze_text
from followback.pipeline.outputs import generate_outputs, OutputGenerator
from followback.pipeline.instructions import load_instructions

__all__ = [
    "EMPTY_INPUT",
    "EmptyInput",
    "ParseFailure",
    "parse_input",
    "unwrap_export",
    "merge_exports",
    "load_export_file",
    "decode_entry",
    "extract_usernames",
    "AnalysisError",
    "analyze",
    "analyze_text",
    "generate_outputs",
    "OutputGenerator",
    "load_instructions",
]
