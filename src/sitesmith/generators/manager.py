import logging
from typing import Dict, List, Optional, Type, TYPE_CHECKING

from ..abstractions import Generator
from ..collection import PageCollection
from ..exceptions import GeneratorNotFoundError
from .taxonomy import TaxonomyGenerator
from .alias import AliasGenerator
from .sitemap import SitemapGenerator

if TYPE_CHECKING:
    from ..builder import Builder

logger = logging.getLogger(__name__)


class GeneratorManager:
    """
    Registry of virtual pages generators. The generators named in the
    config run in that order; later generators win on id conflicts.
    """

    builtins: Dict[str, Type[Generator]] = {
        TaxonomyGenerator.name: TaxonomyGenerator,
        AliasGenerator.name: AliasGenerator,
        SitemapGenerator.name: SitemapGenerator,
    }

    def __init__(self, builder: "Builder", names: Optional[List[str]] = None):
        self.builder = builder
        self._registry: Dict[str, Type[Generator]] = dict(self.builtins)
        self._names = list(names) if names is not None else None
        logger.debug(f"Initialized {self.__class__.__name__}")

    def register(self, name: str, generator: Type[Generator]) -> "GeneratorManager":
        self._registry[name] = generator
        logger.debug(f"Registered in {self.__class__.__name__}: {name} -> {generator.__name__}")
        return self

    @property
    def registry(self) -> Dict[str, Type[Generator]]:
        return self._registry

    @property
    def names(self) -> List[str]:
        if self._names is not None:
            return self._names
        return list(self.builder.config.model.generators)

    def generate(self) -> PageCollection:
        generated = PageCollection("generated")
        for name in self.names:
            generator_cls = self._registry.get(name)
            if generator_cls is None:
                raise GeneratorNotFoundError(
                    f"Unknown generator '{name}', must be one of {sorted(self._registry)}."
                )
            pages = generator_cls(self.builder).generate()
            for page in pages:
                generated.replace(page.id, page)
            logger.debug(f"[Generators] '{name}' generated {len(pages)} page(s)")
        return generated
