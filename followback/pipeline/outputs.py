"""
Output Generation

Generates CSV, Markdown, and JSON reports from an analysis result.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import pandas as pd

from followback.models.entities import AnalysisResult, ContactRecord
from followback.models.reciprocity import summarize

logger = logging.getLogger(__name__)

SECTIONS = [
    ("following", "Following"),
    ("followers", "Followers"),
    ("not_following_back", "Not Following Back"),
]


class OutputGenerator:
    """Generates report files for an analysis result."""

    def __init__(
        self,
        output_dir: str | Path = "./outputs",
        formats: Optional[list[str]] = None,
        timestamp_filenames: bool = True,
        base_name: str = "followback_report",
    ):
        """Initialize output generator.

        Args:
            output_dir: Directory for output files
            formats: List of formats to generate (csv, markdown, json)
            timestamp_filenames: Whether to include timestamp in filenames
            base_name: File name stem shared by all formats
        """
        self.output_dir = Path(output_dir)
        self.formats = formats or ["csv", "markdown", "json"]
        self.timestamp_filenames = timestamp_filenames
        self.base_name = base_name

        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _get_filename(self, extension: str) -> Path:
        """Generate output filename."""
        if self.timestamp_filenames:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{self.base_name}_{timestamp}.{extension}"
        else:
            filename = f"{self.base_name}.{extension}"
        return self.output_dir / filename

    def _result_to_frame(self, result: AnalysisResult) -> pd.DataFrame:
        """Flatten the three lists into one table."""
        rows = [
            {"section": key, "username": record.username, "href": record.href}
            for key, _ in SECTIONS
            for record in getattr(result, key)
        ]
        return pd.DataFrame(rows, columns=["section", "username", "href"])

    def _section_md(self, title: str, records: list[ContactRecord]) -> list[str]:
        lines = [f"\n## {title} ({len(records)})\n"]

        if not records:
            lines.append("*No data*")
            return lines

        lines.extend([
            "| Username | Link |",
            "|----------|------|",
        ])
        for record in records:
            lines.append(f"| {record.username} | {record.display_href} |")

        return lines

    def _generate_report_md(self, result: AnalysisResult) -> str:
        """Generate the markdown report."""
        summary = summarize(result)

        lines = [
            "# Follow-Back Report\n",
            f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}*\n",
            "\n## Summary\n",
            f"- **Following**: {summary['following']}",
            f"- **Followers**: {summary['followers']}",
            f"- **Not following back**: {summary['not_following_back']}",
            f"- **Follow-back ratio**: {summary['follow_back_ratio']:.0%}",
        ]

        for key, title in SECTIONS:
            lines.extend(self._section_md(title, getattr(result, key)))

        return "\n".join(lines)

    def generate_report(self, result: AnalysisResult) -> dict[str, Path]:
        """Generate report files.

        Returns:
            Dictionary of format -> filepath
        """
        generated = {}

        if "csv" in self.formats:
            filepath = self._get_filename("csv")
            self._result_to_frame(result).to_csv(filepath, index=False)
            generated["csv"] = filepath

        if "markdown" in self.formats:
            filepath = self._get_filename("md")
            filepath.write_text(self._generate_report_md(result), encoding="utf-8")
            generated["markdown"] = filepath

        if "json" in self.formats:
            json_data = {
                "generated_at": datetime.now().isoformat(),
                "summary": summarize(result),
                **result.model_dump(),
            }
            filepath = self._get_filename("json")
            filepath.write_text(
                json.dumps(json_data, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
            generated["json"] = filepath

        logger.info(f"Generated follow-back reports: {list(generated.keys())}")
        return generated


def generate_outputs(
    result: AnalysisResult,
    output_dir: str | Path = "./outputs",
    formats: Optional[list[str]] = None,
    timestamp_filenames: bool = True,
) -> dict[str, Path]:
    """Convenience function to generate all outputs.

    Args:
        result: Analysis result to write
        output_dir: Output directory
        formats: Formats to generate
        timestamp_filenames: Whether to include timestamp in filenames

    Returns:
        Dictionary of format -> filepath
    """
    generator = OutputGenerator(
        output_dir=output_dir,
        formats=formats or ["csv", "markdown", "json"],
        timestamp_filenames=timestamp_filenames,
    )
    return generator.generate_report(result)
