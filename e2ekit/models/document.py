"""Page and document models for raw extractor output."""
from pydantic import BaseModel, ConfigDict, Field


class Page(BaseModel):
    """One extracted page: raw text lines in top-to-bottom reading order."""
    model_config = ConfigDict(frozen=True)

    lines: list[str] = Field(default_factory=list)


class Document(BaseModel):
    """Ordered pages of a PDF, indexed from 0."""
    model_config = ConfigDict(frozen=True)

    pages: list[Page] = Field(default_factory=list)
    source: str | None = None  # file the pages were read from, if any

    @classmethod
    def from_lines(cls, pages: list[list[str]], source: str | None = None) -> "Document":
        """Build a document from nested line lists (one list per page)."""
        return cls(pages=[Page(lines=list(lines)) for lines in pages], source=source)

    def __len__(self) -> int:
        return len(self.pages)
