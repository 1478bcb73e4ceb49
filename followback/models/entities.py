"""
Core Data Models

Pydantic models for canonical contact records and analysis results.
"""

from pydantic import BaseModel, ConfigDict, Field


class ContactRecord(BaseModel):
    """A single account from a following/followers export."""
    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1, description="Username as it appears in the export")
    href: str = Field(default="", description="Profile link, empty when the export has none")

    @property
    def folded_username(self) -> str:
        """Lowercased username used only for comparison."""
        return self.username.lower()

    @property
    def display_href(self) -> str:
        """Profile link for display, '-' when missing."""
        return self.href or "-"


class AnalysisResult(BaseModel):
    """Outcome of comparing a following list against a followers list."""
    following: list[ContactRecord] = Field(default_factory=list)
    followers: list[ContactRecord] = Field(default_factory=list)
    not_following_back: list[ContactRecord] = Field(default_factory=list)

    @property
    def following_count(self) -> int:
        return len(self.following)

    @property
    def followers_count(self) -> int:
        return len(self.followers)

    @property
    def not_following_back_count(self) -> int:
        return len(self.not_following_back)

    @property
    def mutual_count(self) -> int:
        """Followed accounts that do follow back."""
        return self.following_count - self.not_following_back_count
