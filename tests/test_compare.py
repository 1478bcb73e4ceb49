"""
Tests for the Follow-Back Analysis Entry Points
"""

import json

import pytest

from followback.models.entities import AnalysisResult, ContactRecord
from followback.pipeline import compare as compare_module
from followback.pipeline.compare import AnalysisError, analyze, analyze_text
from followback.pipeline.ingest import EMPTY_INPUT, ParseFailure


class TestAnalyze:
    """Tests for analyze on parsed values."""

    def test_wrapped_and_bare_inputs(self, following_export, followers_export):
        """Test a wrapped following export against a bare followers list."""
        result = analyze(following_export, followers_export)

        assert [r.username for r in result.following] == ["Alice", "bob", "carol_x", "dave"]
        assert [r.username for r in result.followers] == ["alice", "DAVE", "erin"]
        assert [r.username for r in result.not_following_back] == ["bob", "carol_x"]

    def test_wrapped_followers(self, following_entries, followers_entries):
        """Test a followers export wrapped in relationships_followers."""
        result = analyze(following_entries, {"relationships_followers": followers_entries})

        assert [r.username for r in result.not_following_back] == ["bob", "carol_x"]

    def test_shape_mismatch_degrades(self):
        """Test that unexpected shapes give empty results instead of errors."""
        result = analyze({"unexpected": True}, "text")

        assert result == AnalysisResult()

    def test_following_key_not_used_for_followers(self, following_entries):
        """Test that each side is unwrapped only with its own key."""
        result = analyze(following_entries, {"relationships_following": following_entries})

        assert result.followers == []
        assert result.not_following_back_count == 4

    def test_idempotent(self, following_export, followers_export):
        """Test that analyzing twice yields the same result."""
        assert analyze(following_export, followers_export) == analyze(following_export, followers_export)


class TestAnalyzeText:
    """Tests for analyze_text on raw JSON text."""

    def test_analyze_text(self, following_export, followers_export):
        """Test the full text pipeline."""
        result = analyze_text(json.dumps(following_export), json.dumps(followers_export))

        assert isinstance(result, AnalysisResult)
        assert result.not_following_back == [
            ContactRecord(username="bob", href="https://www.instagram.com/bob"),
            ContactRecord(username="carol_x", href="https://www.instagram.com/carol_x"),
        ]

    @pytest.mark.parametrize("following_text,followers_text", [
        ("   ", "[]"),
        ("[]", ""),
        (None, None),
    ])
    def test_blank_input(self, following_text, followers_text):
        """Test that blank input aborts silently."""
        assert analyze_text(following_text, followers_text) is EMPTY_INPUT

    def test_malformed_following(self):
        """Test that malformed JSON is reported."""
        result = analyze_text("{bad", "[]")

        assert isinstance(result, ParseFailure)
        assert result.message

    def test_too_deeply_nested(self):
        """Test that runaway nesting is reported as malformed input."""
        assert isinstance(analyze_text("[" * 100000, "[]"), ParseFailure)

    def test_malformed_reported_before_blank(self):
        """Test that a parse failure is reported even if the other side is blank."""
        assert isinstance(analyze_text("", "{bad"), ParseFailure)

    def test_first_failure_wins(self):
        """Test that the following failure is returned first."""
        result = analyze_text("{bad", "[1,")

        assert result.message.startswith("Expecting property name")

    def test_unexpected_failure(self, monkeypatch):
        """Test that unexpected errors become AnalysisError."""
        def boom(following, followers):
            raise RuntimeError("boom")

        monkeypatch.setattr(compare_module, "build_result", boom)

        with pytest.raises(AnalysisError) as exc_info:
            analyze_text("[]", "[]")

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "Analysis failed" in str(exc_info.value)
