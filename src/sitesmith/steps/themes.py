import logging

from ..abstractions import Step
from ..exceptions import ThemeNotFoundError

logger = logging.getLogger(__name__)


class Import(Step):
    """Resolves the configured themes; their config was merged when the config loaded."""

    name = "Importing themes"

    def can_process(self) -> bool:
        return self.config.has_theme()

    def process(self) -> None:
        themes = []
        for theme in self.config.themes:
            theme_path = self.config.theme_path(theme)
            if not self.fs.is_dir(theme_path):
                raise ThemeNotFoundError(f"Theme '{theme}' not found in '{theme_path.parent}'.")
            logger.debug(f"[Themes] Using theme '{theme}' from '{theme_path}'")
            themes.append(theme_path)
        self.context.themes = themes
