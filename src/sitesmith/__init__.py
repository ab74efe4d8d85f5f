"""
sitesmith - static website builder

Builds a website from content pages, data files, static files and layouts,
by running an ordered pipeline of steps against one shared build context.

Main modules:
- builder: The build orchestrator
- steps: The default pipeline steps
- config: Configuration loading and validation
- collection: Pages, menus and taxonomies collections
- generators: Virtual pages generators
- renderer: Jinja2 layouts rendering
- datacls: Build options and build context
- io: File system abstraction
- version: Application version lookup
- utils: Utility functions

Quick start example:
```python
from sitesmith import Builder, Config

config = Config.from_file("site/sitesmith.yml")
Builder(config).build({"drafts": True})
```
"""

from .protocols import StepProtocol, RendererProtocol, GeneratorRegistryProtocol
from .abstractions import Step, Generator, Renderer
from .config import Config, ConfigModel
from .builder import Builder
from .datacls import BuildOptions, BuildContext, StaticFile
from .io import FileSystem, DiskFileSystem, create_fs
from .steps import STEPS
from .version import get_version
from .exceptions import (
    SitesmithError,
    ConfigurationError,
    ConfigValidationError,
    DefinitionError,
    BuildError,
    StepError,
)

__version__ = get_version()

__all__ = [
    # Version
    '__version__',
    'get_version',
    # Protocols
    'StepProtocol',
    'RendererProtocol',
    'GeneratorRegistryProtocol',
    # Abstractions
    'Step',
    'Generator',
    'Renderer',
    # Config
    'Config',
    'ConfigModel',
    # Builder
    'Builder',
    'STEPS',
    # Data classes
    'BuildOptions',
    'BuildContext',
    'StaticFile',
    # IO
    'FileSystem',
    'DiskFileSystem',
    'create_fs',
    # Exceptions
    'SitesmithError',
    'ConfigurationError',
    'ConfigValidationError',
    'DefinitionError',
    'BuildError',
    'StepError',
]
