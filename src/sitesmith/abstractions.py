"""
sitesmith Abstract Base Classes

This module contains the abstract base classes (ABCs) for the sitesmith framework.

Dependencies:
- protocols.py: Protocol definitions (structural types)
- datacls/: Build options and context
- collection/: Pages collection returned by generators
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, TYPE_CHECKING
import logging

from .collection import PageCollection
from .config import Config
from .datacls import BuildOptions, BuildContext
from .io import FileSystem

if TYPE_CHECKING:
    from .builder import Builder

logger = logging.getLogger(__name__)


# ============================================================================
# Step
# ============================================================================

class Step(ABC):
    """
    Abstract Class for a unit of the build pipeline.

    A step is created by the Builder for one build only. `init()` receives
    the resolved options and must not touch the context; `can_process()`
    tells whether the step applies; `process()` does the work.

    Every `can_process()` is called before the first `process()` of a build,
    so it sees the context as the previous build left it. Base it on config
    and options only; a step with nothing to do returns early from `process()`.
    """

    def __init__(self, builder: "Builder"):
        self.builder = builder
        self.options = BuildOptions()

    def init(self, options: BuildOptions) -> None:
        """
        Stores the build options. Subclasses may record more init-time state.

        Args:
            options: The resolved build options.
        """
        self.options = options

    def can_process(self) -> bool:
        return True

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable label used in progress messages."""
        pass

    @abstractmethod
    def process(self) -> None:
        """
        Performs the step's work, mutating the build context.
        """
        pass

    @property
    def context(self) -> BuildContext:
        return self.builder.context

    @property
    def config(self) -> Config:
        return self.builder.config

    @property
    def fs(self) -> FileSystem:
        return self.builder.context.fs

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


# ============================================================================
# Generator
# ============================================================================

class Generator(ABC):
    """
    Abstract Class for a virtual pages generator.
    Generators read the build context and return new pages; they never add
    them to the pages collection themselves.
    """

    name: str = ""

    def __init__(self, builder: "Builder"):
        self.builder = builder

    @abstractmethod
    def generate(self) -> PageCollection:
        """
        Creates virtual pages.

        Returns:
            A collection of the generated pages.
        """
        pass


# ============================================================================
# Renderer
# ============================================================================

class Renderer(ABC):
    """
    Abstract Class for a template rendering engine.
    """

    @abstractmethod
    def has_template(self, name: str) -> bool:
        pass

    @abstractmethod
    def render(self, template: str, variables: Dict[str, Any]) -> str:
        """
        Renders a template.

        Args:
            template: Template name relative to the layouts directories.
            variables: Variables exposed to the template.
        Returns:
            The rendered text.
        """
        pass

    @abstractmethod
    def add_global(self, name: str, value: Any) -> None:
        """Expose a value to every template."""
        pass
