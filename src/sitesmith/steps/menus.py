import logging
from typing import Any, Dict

from ..abstractions import Step
from ..collection import MenuCollection, MenuEntry

logger = logging.getLogger(__name__)


class Create(Step):
    """
    Builds one menu collection per language from the `menus` config and the
    pages' `menu` variable. Entries from pages replace config entries with
    the same id.
    """

    name = "Creating menus"

    def process(self) -> None:
        menus: Dict[str, MenuCollection] = {}
        for language in self.config.languages:
            collection = MenuCollection(language)
            for name, entries in self.config.model.menus.items():
                menu = collection.get_or_create(name)
                for entry in entries:
                    menu.replace(entry.id, MenuEntry(**entry.model_dump()))

            for page in self.builder.pages.by_language(language):
                for name, options in self._normalize(page.variables.get("menu")).items():
                    entry = MenuEntry(
                        id=page.id,
                        name=str(options.get("name", page.title)),
                        url=page.url,
                        weight=int(options.get("weight", page.weight)),
                        page_id=page.id,
                    )
                    collection.get_or_create(name).replace(entry.id, entry)
            menus[language] = collection

        self.builder.menus = menus
        logger.debug(f"[Menus] Menus built for {list(menus)}")

    @staticmethod
    def _normalize(value: Any) -> Dict[str, Dict[str, Any]]:
        """`menu: main`, `menu: [main, footer]` and `menu: {main: {weight: 1}}` are all accepted."""
        if not value:
            return {}
        if isinstance(value, str):
            return {value: {}}
        if isinstance(value, list):
            return {str(name): {} for name in value}
        if isinstance(value, dict):
            return {str(name): (options if isinstance(options, dict) else {}) for name, options in value.items()}
        logger.warning(f"[Menus] Ignoring invalid menu value: {value!r}")
        return {}
