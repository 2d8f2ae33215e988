"""
Configuration data model for minigrep.

This module defines the single value that drives a search run: what to look
for, where to look, and whether letter case matters.
"""

from typing import Dict, Any
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field


class SearchConfig(BaseModel):
    """
    Validated configuration for one search run.

    Built once per invocation from the argument list and an environment
    snapshot, then only read. Instances are frozen, so assigning to any
    field raises a ValidationError.

    Attributes:
        query: Substring to look for in each line
        source_path: Path of the file to search
        case_sensitive: False when the search should ignore letter case
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, description="Substring to search for")
    source_path: str = Field(..., min_length=1, description="Path to the file to read")
    case_sensitive: bool = Field(True, description="Whether matching respects letter case")

    def get_source_path(self) -> Path:
        """Get the source path as a Path object."""
        return Path(self.source_path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchConfig':
        """Create a SearchConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        mode = "case-sensitive" if self.case_sensitive else "case-insensitive"
        return f"Query: '{self.query}' | File: {self.source_path} | Mode: {mode}"
