class SitesmithError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to loading and parsing the configuration file ---
class ConfigurationError(SitesmithError):
    """Base class for errors encountered while finding, reading, or parsing config files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the main configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration fails structural validation (e.g., Pydantic)."""

    pass


# --- 2. Errors related to definitions referenced by the config ---
class DefinitionError(SitesmithError):
    """Base class for errors in the logical definitions and references within the config."""

    pass


class ThemeNotFoundError(DefinitionError):
    """Raised when a configured theme directory does not exist."""

    pass


class LayoutNotFoundError(DefinitionError):
    """Raised when no template can be found for a page."""

    pass


class GeneratorNotFoundError(DefinitionError):
    """Raised when a configured generator name is not registered."""

    pass


# --- 3. Errors that occur while the pipeline runs ---
class BuildError(SitesmithError):
    """Base class for errors that occur during a build."""

    pass


class StepError(BuildError):
    """Raised when a pipeline step fails; carries the failing step's name."""

    def __init__(self, step_name: str, cause: BaseException):
        self.step_name = step_name
        self.cause = cause
        super().__init__(f"Step '{step_name}' failed: {cause}")


class PageNotFoundError(BuildError):
    """Raised when the requested single page cannot be found."""

    pass


class FrontMatterError(BuildError):
    """Raised when a page front matter is not a valid YAML mapping."""

    pass


class RenderError(BuildError):
    """Raised when a template fails to render."""

    pass


class DuplicateItemError(BuildError):
    """Raised when an item id is added twice to the same collection."""

    pass


# --- 4. Errors related to IO operations ---
class SitesmithIOError(SitesmithError):
    """Base class for IO-related errors."""

    pass


class PathExistsError(SitesmithIOError):
    """Raised when a file or directory already exists."""

    pass


class PathNotFoundError(SitesmithIOError):
    """Raised when a file or directory is not found."""

    pass


class NotAFileError(SitesmithIOError):
    """Raised when a file is expected, but a directory is found."""

    pass


class NotADirError(SitesmithIOError):
    """Raised when a directory is expected, but a file is found."""

    pass
