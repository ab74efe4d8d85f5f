from ..abstractions import Generator
from ..collection import Page, PageCollection
from .. import constants


class TaxonomyGenerator(Generator):
    """One page per vocabulary, and one list page per term."""

    name = "taxonomy"

    def generate(self) -> PageCollection:
        generated = PageCollection("taxonomy")
        taxonomies = self.builder.taxonomies
        if taxonomies is None:
            return generated
        for vocabulary in taxonomies:
            generated.add(Page(
                id=vocabulary.id,
                type=constants.PAGE_TYPE_VOCABULARY,
                virtual=True,
                language=self.builder.config.language,
                variables={"title": vocabulary.id.capitalize(), "vocabulary": vocabulary.id},
            ))
            for term in vocabulary:
                generated.add(Page(
                    id=f"{vocabulary.id}/{term.id}",
                    type=constants.PAGE_TYPE_TERM,
                    virtual=True,
                    language=self.builder.config.language,
                    variables={"title": term.name, "vocabulary": vocabulary.id, "term": term.id},
                ))
        return generated
