"""
sitesmith Renderer

- JinjaRenderer: Jinja2 templates from the site, its themes and the built-in layouts
"""

from .jinja import JinjaRenderer

__all__ = [
    'JinjaRenderer',
]
