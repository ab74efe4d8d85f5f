"""
sitesmith Builder Module

- Builder: runs the step catalogue against the shared build context

Usage:
    from sitesmith.builder import Builder
    from sitesmith.config import Config

    config = Config.from_file("sitesmith.yml")
    Builder(config).build({"drafts": True})
"""

from .build import Builder

__all__ = [
    'Builder',
]
