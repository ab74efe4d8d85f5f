"""
Front matter and body conversion for content files.
"""

import re
from typing import Any, Dict, Tuple

import markdown
import yaml

from .exceptions import FrontMatterError

_front_matter = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)", re.S)

MARKDOWN_EXTENSIONS = ("md", "markdown")
MARKDOWN_PLUGINS = ["extra", "toc", "sane_lists"]


def split_front_matter(raw: str) -> Tuple[str, str]:
    """
    Split a content file into its front matter block and its body.
    A file without a leading `---` block has an empty front matter.
    """
    match = _front_matter.match(raw)
    if not match:
        return "", raw
    return match.group(1), raw[match.end():]


def parse_front_matter(front_matter: str) -> Dict[str, Any]:
    if not front_matter.strip():
        return {}
    try:
        variables = yaml.safe_load(front_matter)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML front matter: {e}") from e
    if variables is None:
        return {}
    if not isinstance(variables, dict):
        raise FrontMatterError("Front matter must be a mapping.")
    return variables


def convert_body(body: str, extension: str) -> str:
    """Markdown files are converted to HTML, anything else is kept as is."""
    if extension.lower().lstrip(".") in MARKDOWN_EXTENSIONS:
        return markdown.markdown(body, extensions=MARKDOWN_PLUGINS)
    return body
