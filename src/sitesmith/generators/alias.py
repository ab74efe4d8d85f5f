from ..abstractions import Generator
from ..collection import Page, PageCollection
from ..utils import slugify
from .. import constants


class AliasGenerator(Generator):
    """Redirect pages for the `aliases` listed in a page's front matter."""

    name = "alias"

    def generate(self) -> PageCollection:
        generated = PageCollection("alias")
        for page in self.builder.pages:
            aliases = page.variables.get("aliases") or []
            if isinstance(aliases, str):
                aliases = [aliases]
            for alias in aliases:
                alias_id = slugify(str(alias))
                if not alias_id or generated.has(alias_id):
                    continue
                generated.add(Page(
                    id=alias_id,
                    virtual=True,
                    language=page.language,
                    layout=constants.REDIRECT_LAYOUT,
                    variables={"title": page.title, "redirect": page.url, "sitemap": False},
                ))
        return generated
