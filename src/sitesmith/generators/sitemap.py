from ..abstractions import Generator
from ..collection import Page, PageCollection
from .. import constants


class SitemapGenerator(Generator):
    """The `sitemap.xml` page; its template lists the pages."""

    name = "sitemap"

    def generate(self) -> PageCollection:
        return PageCollection("sitemap", [Page(
            id="sitemap",
            virtual=True,
            language=self.builder.config.language,
            layout=constants.SITEMAP_LAYOUT,
            output_format="xml",
            variables={"title": "Sitemap", "sitemap": False},
        )])
