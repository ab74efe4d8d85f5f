"""
sitesmith Collections

- Collection: ordered, id-keyed base collection
- Page, PageCollection: the pages of a build
- MenuEntry, Menu, MenuCollection: menus, one collection per language
- Term, Vocabulary, TaxonomyCollection: taxonomies referencing pages by id
"""

from .base import Collection
from .page import Page, PageCollection
from .menu import MenuEntry, Menu, MenuCollection
from .taxonomy import Term, Vocabulary, TaxonomyCollection

__all__ = [
    'Collection',
    'Page',
    'PageCollection',
    'MenuEntry',
    'Menu',
    'MenuCollection',
    'Term',
    'Vocabulary',
    'TaxonomyCollection',
]
