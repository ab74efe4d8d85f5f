from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .. import constants
from .base import Collection


class Page(BaseModel):
    """
        Class represents a page, loaded from a content file or created by a generator.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str
    type: str = constants.PAGE_TYPE_PAGE
    file: Optional[Path] = None
    virtual: bool = False
    language: str = "en"
    raw: str = ""
    content: str = ""
    html: str = ""
    variables: Dict[str, Any] = Field(default_factory=dict)
    layout: Optional[str] = None
    output_format: str = "html"
    rendered: Optional[str] = None

    @property
    def path(self) -> str:
        """Output path without extension; the homepage is the empty path."""
        if self.id == constants.INDEX_BASENAME:
            return ""
        if self.id.endswith("/" + constants.INDEX_BASENAME):
            return self.id[: -len(constants.INDEX_BASENAME) - 1]
        return self.id

    @property
    def output_file(self) -> str:
        if self.output_format == "html":
            return f"{self.path}/index.html" if self.path else "index.html"
        return f"{self.path or constants.INDEX_BASENAME}.{self.output_format}"

    @property
    def url(self) -> str:
        if self.output_format == "html":
            return f"/{self.path}/" if self.path else "/"
        return f"/{self.output_file}"

    @property
    def title(self) -> str:
        return str(self.variables.get("title") or self.id)

    @property
    def is_draft(self) -> bool:
        return bool(self.variables.get("draft", False))

    @property
    def weight(self) -> int:
        return int(self.variables.get("weight", 0) or 0)


class PageCollection(Collection[Page]):
    """The pages of one build."""

    def __init__(self, id: str = "pages", items=None):
        super().__init__(id, items)

    def by_type(self, type: str) -> "PageCollection":
        return self.filter(lambda page: page.type == type)

    def by_language(self, language: str) -> "PageCollection":
        return self.filter(lambda page: page.language == language)

    def renderable(self) -> "PageCollection":
        """Pages that produce an output file."""
        return self.filter(lambda page: not page.variables.get("exclude", False))
