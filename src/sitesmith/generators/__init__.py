"""
sitesmith Generators

- GeneratorManager: runs the configured generators in order
- TaxonomyGenerator: vocabulary and term pages
- AliasGenerator: redirect pages for page aliases
- SitemapGenerator: sitemap.xml
"""

from .manager import GeneratorManager
from .taxonomy import TaxonomyGenerator
from .alias import AliasGenerator
from .sitemap import SitemapGenerator

__all__ = [
    'GeneratorManager',
    'TaxonomyGenerator',
    'AliasGenerator',
    'SitemapGenerator',
]
