from pathlib import Path

from pydantic import BaseModel


class StaticFile(BaseModel):
    """
        Class represents a static file to copy as is into the output directory.
    """
    source: Path
    path: str  # output-relative, posix separators
    size: int = 0
