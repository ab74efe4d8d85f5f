from typing import List, Optional

from pydantic import BaseModel

from .base import Collection


class MenuEntry(BaseModel):
    """
        Class represents one entry of a menu. `page_id` references a page of
        the pages collection, never a copy of it.
    """
    id: str
    name: str
    url: str = ""
    weight: int = 0
    page_id: Optional[str] = None


class Menu(Collection[MenuEntry]):
    """A named menu."""

    def sorted(self) -> List[MenuEntry]:
        return sorted(self, key=lambda entry: (entry.weight, entry.name))


class MenuCollection(Collection[Menu]):
    """All the menus of one language."""

    def __init__(self, id: str, items=None):
        super().__init__(id, items)

    def get_or_create(self, name: str) -> Menu:
        if not self.has(name):
            self.add(Menu(name))
        return self.get(name)
