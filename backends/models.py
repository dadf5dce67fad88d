"""Backend models for the document corpus, search results and resources."""

from dataclasses import dataclass, field
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Corpus:
    """Static text document held in memory for the process lifetime."""

    text: str
    source: str = ""
    lines: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.text.split("\n")))


@dataclass(frozen=True)
class MatchSet:
    """Ordered lines of a corpus matching a query."""

    query: str
    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Newline-joined payload returned to callers."""
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class ResourceDescriptor:
    """Identifies the whole corpus as one URI-addressed resource."""

    uri: str
    title: str
    mime_type: str = "text/plain"
    name: str = ""
    description: str = ""


class SearchRequest(BaseModel):
    """Input contract of the search tool."""

    model_config = ConfigDict(strict=True, extra="forbid")

    query: str = Field(..., description="term to look for, matched case-insensitively")
