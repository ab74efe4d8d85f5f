import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from ..abstractions import Renderer
from ..exceptions import LayoutNotFoundError, RenderError

logger = logging.getLogger(__name__)


class JinjaRenderer(Renderer):
    """
    Renders layouts with Jinja2. Layouts are looked up in the given
    directories first (site, then themes), then in the layouts shipped
    with sitesmith.
    """

    def __init__(self, layouts: Sequence[Union[str, Path]], baseurl: str = ""):
        self.baseurl = baseurl.rstrip("/")
        dirs: List[str] = [str(path) for path in layouts if Path(path).is_dir()]
        logger.debug(f"[Renderer] Layouts directories: {dirs}")
        self.env = Environment(
            loader=ChoiceLoader([
                FileSystemLoader(dirs),
                PackageLoader("sitesmith", "layouts"),
            ]),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals["url"] = self.url

    def url(self, path: str = "/") -> str:
        """Absolute URL of a site path, prefixed with the base URL."""
        path = str(path)
        if "://" in path:
            return path
        return f"{self.baseurl}/{path.lstrip('/')}"

    def has_template(self, name: str) -> bool:
        try:
            self.env.get_template(name)
        except TemplateNotFound:
            return False
        return True

    def add_global(self, name: str, value: Any) -> None:
        self.env.globals[name] = value

    def render(self, template: str, variables: Dict[str, Any]) -> str:
        try:
            return self.env.get_template(template).render(variables)
        except TemplateNotFound as e:
            raise LayoutNotFoundError(f"Layout '{e.name}' not found.") from e
        except TemplateError as e:
            raise RenderError(f"Error rendering '{template}': {e}") from e
