"""
sitesmith Steps

The catalogue below is the build pipeline. Its order encodes the data
dependencies between steps: themes before content, content before
generated pages, taxonomies and menus before rendering, rendering before
saving, saving before optimizing the written files. New steps are added by
inserting their class at the right place.
"""

from . import themes, pages, data, static, taxonomies, menus, optimize

STEPS = [
    themes.Import,
    pages.Load,
    data.Load,
    static.Load,
    pages.Create,
    pages.Convert,
    taxonomies.Create,
    pages.Generate,
    menus.Create,
    static.Copy,
    pages.Render,
    pages.Save,
    optimize.Html,
    optimize.Css,
    optimize.Js,
    optimize.Images,
]

__all__ = ['STEPS']
