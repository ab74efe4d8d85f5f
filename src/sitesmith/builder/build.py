import logging
import string
import time
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, Union

from .. import constants
from ..abstractions import Step
from ..collection import PageCollection, MenuCollection, TaxonomyCollection
from ..config import Config
from ..datacls import BuildContext, BuildOptions, StaticFile
from ..exceptions import ConfigurationError, StepError
from ..io import FileSystem, create_fs
from ..protocols import RendererProtocol, GeneratorRegistryProtocol
from ..utils import convert_memory, memory_usage
from .. import version


class Builder:
    """
    Runs the build pipeline: every step of the catalogue is created and
    initialized, the applicable ones are processed one after the other,
    in catalogue order, against the one shared BuildContext.
    """

    def __init__(
        self,
        config: Union[Config, Dict[str, Any], None] = None,
        logger: Optional[logging.Logger] = None,
        fs: Optional[FileSystem] = None,
        steps: Optional[Sequence[Type[Step]]] = None,
    ):
        if steps is None:
            from ..steps import STEPS
            steps = STEPS
        self.steps: List[Type[Step]] = list(steps)
        self._built = False
        fs = fs or (config.fs if isinstance(config, Config) else create_fs())
        if not isinstance(config, Config):
            config = Config(config, fs)
        self.context = BuildContext(
            config=config,
            logger=logger or logging.getLogger("sitesmith"),
            fs=fs,
        )
        self.options = BuildOptions()
        self.context.logger.debug(f"[Builder] Initialized with {len(self.steps)} steps. Debug mode: {self.context.debug}")

    @classmethod
    def create(cls, *args, **kwargs) -> "Builder":
        """Creates a new Builder instance."""
        return cls(*args, **kwargs)

    def build(self, options: Optional[Mapping[str, Any]] = None) -> "Builder":
        """
        Builds the site.

        Raises:
            StepError: when a step fails to initialize or to process; later
            steps are not run and earlier mutations are kept.
        """
        log = self.context.logger
        start_time = time.perf_counter()
        start_memory = memory_usage()
        self._built = True

        # baseurl is required in production
        baseurl = self.config.baseurl
        if not baseurl.strip(string.whitespace + "/"):
            log.error(
                f'The current `baseurl` ("{baseurl}") is not valid for production '
                f'(should be something like "baseurl: https://example.com/").'
            )

        self.options = BuildOptions.resolve(options)

        # init...
        steps: List[Step] = []
        for step_cls in self.steps:
            step = self._init_step(step_cls)
            if step.can_process():
                steps.append(step)
            else:
                log.debug(f"[Builder] Skipping step '{step.name}'")

        # ...and process!
        steps_total = len(steps)
        for step_number, step in enumerate(steps, start=1):
            log.log(constants.NOTICE, step.name, extra={"step": (step_number, steps_total)})
            try:
                step.process()
            except Exception as e:
                raise StepError(step.name, e) from e

        message = (
            f"Built in {round(time.perf_counter() - start_time, 2)} s "
            f"({convert_memory(memory_usage() - start_memory)})"
        )
        log.log(constants.NOTICE, message)

        return self

    def _init_step(self, step_cls: Type[Step]) -> Step:
        step_name = step_cls.__name__
        try:
            step = step_cls(self)
            step_name = step.name
            step.init(self.options)
        except Exception as e:
            raise StepError(step_name, e) from e
        return step

    # --- configuration ---

    @property
    def config(self) -> Config:
        return self.context.config

    def set_config(self, config: Union[Config, Dict[str, Any], None]) -> "Builder":
        """Replace the configuration; only allowed before the first build."""
        if self._built:
            raise ConfigurationError("The configuration can't be changed once a build has run.")
        if not isinstance(config, Config):
            config = Config(config, self.context.fs)
        if self.context.config is not config:
            self.context.config = config
        return self

    def set_source_dir(self, source_dir: Union[str, Path, None] = None) -> "Builder":
        """Config.set_source_dir() alias."""
        self.config.set_source_dir(source_dir)
        return self

    def set_destination_dir(self, destination_dir: Union[str, Path, None] = None) -> "Builder":
        """Config.set_destination_dir() alias."""
        self.config.set_destination_dir(destination_dir)
        return self

    @property
    def logger(self) -> logging.Logger:
        return self.context.logger

    @property
    def fs(self) -> FileSystem:
        return self.context.fs

    def is_debug(self) -> bool:
        return self.context.debug

    @staticmethod
    def get_version() -> str:
        return version.get_version()

    # --- collections ---

    @property
    def source_files(self) -> List[Path]:
        return self.context.source_files

    @source_files.setter
    def source_files(self, files: List[Path]) -> None:
        self.context.source_files = files

    @property
    def data(self) -> Dict[str, Any]:
        return self.context.data

    @data.setter
    def data(self, data: Dict[str, Any]) -> None:
        self.context.data = data

    @property
    def static_files(self) -> Dict[str, StaticFile]:
        return self.context.static_files

    @static_files.setter
    def static_files(self, static_files: Dict[str, StaticFile]) -> None:
        self.context.static_files = static_files

    @property
    def pages(self) -> PageCollection:
        return self.context.pages

    @pages.setter
    def pages(self, pages: PageCollection) -> None:
        self.context.pages = pages

    @property
    def menus(self) -> Dict[str, MenuCollection]:
        return self.context.menus

    @menus.setter
    def menus(self, menus: Dict[str, MenuCollection]) -> None:
        self.context.menus = menus

    def get_menus(self, language: str) -> MenuCollection:
        """Returns all menus, for a language."""
        return self.context.menus[language]

    @property
    def taxonomies(self) -> Optional[TaxonomyCollection]:
        return self.context.taxonomies

    @taxonomies.setter
    def taxonomies(self, taxonomies: TaxonomyCollection) -> None:
        self.context.taxonomies = taxonomies

    @property
    def renderer(self) -> Optional[RendererProtocol]:
        return self.context.renderer

    @renderer.setter
    def renderer(self, renderer: RendererProtocol) -> None:
        self.context.renderer = renderer

    @property
    def generators(self) -> Optional[GeneratorRegistryProtocol]:
        return self.context.generators

    @generators.setter
    def generators(self, generators: GeneratorRegistryProtocol) -> None:
        self.context.generators = generators
