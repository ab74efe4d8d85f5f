import logging

from ..abstractions import Step
from ..collection import TaxonomyCollection, Vocabulary
from ..utils import slugify

logger = logging.getLogger(__name__)


class Create(Step):
    """Rebuilds the vocabularies from the pages' variables."""

    name = "Creating taxonomies"

    def can_process(self) -> bool:
        return bool(self.config.model.taxonomies)

    def process(self) -> None:
        taxonomies = TaxonomyCollection()
        for plural, singular in self.config.model.taxonomies.items():
            taxonomies.add(Vocabulary(plural, singular))

        for page in self.builder.pages:
            for vocabulary in taxonomies:
                terms = page.variables.get(vocabulary.id)
                if not terms:
                    continue
                if isinstance(terms, str):
                    terms = [terms]
                for name in terms:
                    term_id = slugify(str(name))
                    if term_id:
                        vocabulary.get_or_create(term_id, str(name)).attach(page.id)

        self.builder.taxonomies = taxonomies
        for vocabulary in taxonomies:
            logger.debug(f"[Taxonomies] '{vocabulary.id}': {len(vocabulary)} term(s)")
