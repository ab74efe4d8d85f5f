from typing import List

from .base import Collection
from .page import Page, PageCollection


class Term:
    """
    A taxonomy term. It keeps page ids only; pages are resolved against the
    current pages collection so that removed pages are never reachable.
    """

    def __init__(self, id: str, name: str):
        self.id = id
        self.name = name
        self.page_ids: List[str] = []

    def attach(self, page_id: str) -> None:
        if page_id not in self.page_ids:
            self.page_ids.append(page_id)

    def pages(self, pages: PageCollection) -> List[Page]:
        return [pages.get(page_id) for page_id in self.page_ids if pages.has(page_id)]

    def __repr__(self) -> str:
        return f"Term(id={self.id!r}, pages={len(self.page_ids)})"


class Vocabulary(Collection[Term]):
    """A taxonomy vocabulary, e.g. `tags` whose singular is `tag`."""

    def __init__(self, id: str, singular: str, items=None):
        self.singular = singular
        super().__init__(id, items)

    def get_or_create(self, term_id: str, name: str) -> Term:
        if not self.has(term_id):
            self.add(Term(term_id, name))
        return self.get(term_id)


class TaxonomyCollection(Collection[Vocabulary]):
    """All vocabularies of the site."""

    def __init__(self, id: str = "taxonomies", items=None):
        super().__init__(id, items)
