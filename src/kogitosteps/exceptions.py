class KogitoStepsError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to loading and parsing the configuration file ---
class ConfigurationError(KogitoStepsError):
    """Base class for errors encountered while finding, reading, or parsing config files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration fails structural validation (e.g., Pydantic)."""

    pass


# --- 2. Errors in scenario input and build definitions ---
class DefinitionError(KogitoStepsError):
    """Base class for errors in scenario input and the objects built from it."""

    pass


class TableMappingError(DefinitionError):
    """Base class for errors raised while mapping a scenario table onto a build."""

    pass


class UnrecognizedCategoryError(TableMappingError):
    """Raised when the first column of a table row is not a known category."""

    pass


class UnrecognizedOptionError(TableMappingError):
    """Raised when a known category is used with an unknown subkey or value."""

    pass


class TableFormatError(TableMappingError):
    """Raised when a table row does not have exactly three cells."""

    pass


class BuildDefinitionError(DefinitionError):
    """Raised for inconsistent build definitions, like a binary build with a git source."""

    pass


class StepDefinitionError(DefinitionError):
    """Raised when a scenario step is registered twice or with an invalid pattern."""

    pass


class StepNotFoundError(DefinitionError):
    """Raised when no registered scenario step matches a phrase."""

    pass


# --- 3. Errors while resolving a build ---
class ResolutionError(KogitoStepsError):
    """
    Raised when a build holder cannot be resolved from its scenario table.

    The partially built holder is kept on ``holder``; callers must discard it.
    """

    def __init__(self, message: str, holder=None):
        super().__init__(message)
        self.holder = holder


# --- 4. Errors returned by the cluster ---
class ClusterError(KogitoStepsError):
    """Base class for errors raised while talking to the cluster."""

    pass


class DispatchError(ClusterError):
    """Raised when a build or its runtime cannot be submitted to the cluster."""

    pass


class InstallError(ClusterError):
    """Raised when the operator cannot be installed."""

    pass


class ImageStreamError(ClusterError):
    """Raised when a required image stream cannot be looked up or created."""

    pass
