import yaml
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator, ConfigDict

from . import constants
from .io import FileSystem, create_fs
from .utils import deep_merge
from .exceptions import (
    ConfigurationError,
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
    PathNotFoundError,
)


logger = logging.getLogger(__name__)


class DirModel(BaseModel):
    """
        Class Config-Validation Model for a directory-backed section
    """
    dir: str
    model_config = ConfigDict(extra="allow")


class PagesModel(DirModel):
    dir: str = "pages"
    ext: List[str] = Field(default_factory=lambda: ["md", "markdown", "html"])


class DataModel(DirModel):
    dir: str = "data"
    ext: List[str] = Field(default_factory=lambda: ["yaml", "yml", "json"])
    load: bool = True


class StaticModel(DirModel):
    dir: str = "static"
    exclude: List[str] = Field(default_factory=lambda: [".DS_Store", "Thumbs.db"])
    load: bool = True


class MenuEntryModel(BaseModel):
    """
        Class Config-Validation Model describe an entry of `menus.<name>`
    """
    id: str
    name: str
    url: str = ""
    weight: int = 0


class OptimizeTypeModel(BaseModel):
    enabled: bool = True
    ext: List[str] = Field(default_factory=list)


class OptimizeModel(BaseModel):
    """
        Class Config-Validation Model describe `optimize`
    """
    enabled: bool = False
    gzip: bool = False
    html: OptimizeTypeModel = Field(default_factory=lambda: OptimizeTypeModel(ext=["html", "htm"]))
    css: OptimizeTypeModel = Field(default_factory=lambda: OptimizeTypeModel(ext=["css"]))
    js: OptimizeTypeModel = Field(default_factory=lambda: OptimizeTypeModel(ext=["js"]))
    images: OptimizeTypeModel = Field(default_factory=lambda: OptimizeTypeModel(ext=["jpg", "jpeg", "png", "webp"]))


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model describe top-level of config
    """
    title: str = ""
    baseurl: str = ""
    debug: bool = False
    language: str = "en"
    languages: List[str] = Field(default_factory=lambda: ["en"])
    theme: List[str] = Field(default_factory=list)
    pages: PagesModel = Field(default_factory=PagesModel)
    data: DataModel = Field(default_factory=DataModel)
    static: StaticModel = Field(default_factory=StaticModel)
    layouts: DirModel = Field(default_factory=lambda: DirModel(dir="layouts"))
    themes: DirModel = Field(default_factory=lambda: DirModel(dir="themes"))
    output: DirModel = Field(default_factory=lambda: DirModel(dir="_site"))
    taxonomies: Dict[str, str] = Field(default_factory=lambda: {"tags": "tag", "categories": "category"})
    menus: Dict[str, List[MenuEntryModel]] = Field(default_factory=dict)
    generators: List[str] = Field(default_factory=lambda: ["taxonomy", "alias", "sitemap"])
    optimize: OptimizeModel = Field(default_factory=OptimizeModel)
    # other keys are site variables, we won't check
    model_config = ConfigDict(extra="allow")

    @field_validator("theme", mode="before")
    @classmethod
    def normalize_theme(cls, value: Union[str, List[str], None]) -> List[str]:
        """A single theme may be given as a plain string"""
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value else []
        return value

    @field_validator("baseurl", mode="before")
    @classmethod
    def normalize_baseurl(cls, value: Optional[str]) -> str:
        return "" if value is None else str(value)

    @model_validator(mode="after")
    def validate_language(self) -> "ConfigModel":
        """Ensure the default language is one of `languages`"""
        if self.language not in self.languages:
            raise ConfigValidationError(
                f"Default language '{self.language}' is not listed in 'languages' {self.languages}."
            )
        return self


class Config:
    """
    Holds the validated site configuration plus the source and destination
    directories. Any key not known to the model is kept and readable
    through `get()`.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, fs: Optional[FileSystem] = None):
        self.fs = fs or create_fs()
        self.path: Optional[Path] = None
        self._raw: Dict[str, Any] = dict(data or {})
        self._themes_data: Dict[str, Any] = {}
        self.model = self._validate(self._raw)
        self._source_dir = Path.cwd()
        self._destination_dir = self._source_dir

    @classmethod
    def from_file(cls, config_path: Union[str, Path], fs: Optional[FileSystem] = None) -> "Config":
        """Load a YAML config file; its directory becomes the source directory."""
        fs = fs or create_fs()
        config_path = Path(config_path)
        logger.info(f"Loading configuration from '{config_path}'...")
        try:
            content = fs.read_text(config_path)
        except PathNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {config_path}")
        try:
            raw_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")
        if raw_data is None:
            raw_data = {}
        if not isinstance(raw_data, dict):
            raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{config_path}'.")

        config = cls(raw_data, fs)
        config.path = config_path
        config.set_source_dir(config_path.parent)
        config.set_destination_dir(None)
        config.import_themes()
        return config

    @staticmethod
    def _validate(data: Dict[str, Any]) -> ConfigModel:
        try:
            return ConfigModel.model_validate(data)
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}")

    def import_themes(self) -> None:
        """
        Merge each configured theme's own config file under the site
        config: values set by the site always win.
        """
        themes_data: Dict[str, Any] = {}
        for theme in self.model.theme:
            theme_config = self.theme_path(theme) / constants.THEME_CONFIG_FILENAME
            if not self.fs.is_file(theme_config):
                continue
            try:
                data = yaml.safe_load(self.fs.read_text(theme_config)) or {}
            except yaml.YAMLError as e:
                raise ConfigParsingError(f"Error parsing theme config '{theme_config}': {e}")
            if not isinstance(data, dict):
                raise ConfigParsingError(f"Theme config '{theme_config}' must contain a dictionary.")
            logger.debug(f"[Config] Importing config of theme '{theme}'")
            themes_data = deep_merge(themes_data, data)
        self._themes_data = themes_data
        self.model = self._validate(deep_merge(themes_data, self._raw))

    def get(self, key: str, default: Any = None) -> Any:
        """Read a value by dotted key, e.g. `optimize.html.enabled`."""
        node: Any = self.model.model_dump()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def as_dict(self) -> Dict[str, Any]:
        return self.model.model_dump()

    # --- directories ---

    @property
    def source_dir(self) -> Path:
        return self._source_dir

    def set_source_dir(self, source_dir: Union[str, Path, None]) -> "Config":
        """Set the site source directory; None means the working directory."""
        path = Path.cwd() if source_dir is None else Path(source_dir).absolute()
        if not self.fs.is_dir(path):
            raise ConfigurationError(f"The directory '{path}' is not a valid source directory.")
        self._source_dir = path
        return self

    @property
    def destination_dir(self) -> Path:
        return self._destination_dir

    def set_destination_dir(self, destination_dir: Union[str, Path, None]) -> "Config":
        """Set the build destination directory; None means the source directory."""
        path = self._source_dir if destination_dir is None else Path(destination_dir).absolute()
        self._destination_dir = path
        return self

    @property
    def pages_path(self) -> Path:
        return self._source_dir / self.model.pages.dir

    @property
    def data_path(self) -> Path:
        return self._source_dir / self.model.data.dir

    @property
    def static_path(self) -> Path:
        return self._source_dir / self.model.static.dir

    @property
    def layouts_path(self) -> Path:
        return self._source_dir / self.model.layouts.dir

    @property
    def output_path(self) -> Path:
        return self._destination_dir / self.model.output.dir

    def theme_path(self, theme: str) -> Path:
        return self._source_dir / self.model.themes.dir / theme

    # --- shortcuts ---

    @property
    def themes(self) -> List[str]:
        return list(self.model.theme)

    def has_theme(self) -> bool:
        return bool(self.model.theme)

    @property
    def baseurl(self) -> str:
        return self.model.baseurl

    @property
    def language(self) -> str:
        return self.model.language

    @property
    def languages(self) -> List[str]:
        return list(self.model.languages)

    @property
    def debug(self) -> bool:
        return self.model.debug

    def is_optimize_enabled(self, kind: str) -> bool:
        """Whether optimization of `kind` (html, css, js, images) is turned on."""
        optimize = self.model.optimize
        return optimize.enabled and getattr(optimize, kind).enabled
