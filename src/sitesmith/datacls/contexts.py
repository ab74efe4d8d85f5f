"""
sitesmith Build Context

This module contains the BuildContext, the single mutable state shared by
every step of a build. It uses Protocol types for the renderer and the
generator registry to avoid circular dependencies.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .. import constants
from ..collection import PageCollection, MenuCollection, TaxonomyCollection
from ..config import Config
from ..io import FileSystem, DiskFileSystem
from ..protocols import RendererProtocol, GeneratorRegistryProtocol
from .files import StaticFile


class BuildContext(BaseModel):
    """
    Holds the shared state of the builds run by one Builder.

    `config` and `debug` are read-only for steps; every other field is
    produced by one step and consumed by later ones. The context never
    resets its collections itself.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: Config
    logger: logging.Logger
    fs: FileSystem = Field(default_factory=DiskFileSystem)
    debug: bool = Field(default=False, frozen=True)

    source_files: List[Path] = Field(default_factory=list)
    data: Dict[str, Any] = Field(default_factory=dict)
    static_files: Dict[str, StaticFile] = Field(default_factory=dict)
    pages: PageCollection = Field(default_factory=PageCollection)
    menus: Dict[str, MenuCollection] = Field(default_factory=dict)
    taxonomies: Optional[TaxonomyCollection] = None
    themes: List[Path] = Field(default_factory=list)
    renderer: Optional[RendererProtocol] = None
    generators: Optional[GeneratorRegistryProtocol] = None

    @model_validator(mode="after")
    def resolve_debug(self) -> "BuildContext":
        """Debug mode comes from the environment override or the config"""
        debug = os.environ.get(constants.DEBUG_ENV, "").lower() == "true" or bool(self.config.debug)
        object.__setattr__(self, "debug", debug)
        return self
