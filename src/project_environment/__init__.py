from .errors import (
    ProjectEnvironmentError, MustSubclassError,
    RootNotFoundError, EnvironmentUndeterminedError)
from .get_root import DEFAULT_ROOT_FILES, find_root, locate_root
from .get_env import (
    DEFAULT_ENVIRONMENT_VARIABLE, DEFAULT_ENVIRONMENT_FILENAME,
    read_environment_file, resolve_environment)
from .settings import EnvironmentSettings, get_settings, reload_settings
from .environment import ProjectEnvironment
__version__ = "1.0.0"
__all__ = ["ProjectEnvironment",
           "DEFAULT_ROOT_FILES", "find_root", "locate_root",
           "DEFAULT_ENVIRONMENT_VARIABLE", "DEFAULT_ENVIRONMENT_FILENAME",
           "read_environment_file", "resolve_environment",
           "EnvironmentSettings", "get_settings", "reload_settings",
           "ProjectEnvironmentError", "MustSubclassError",
           "RootNotFoundError", "EnvironmentUndeterminedError"]
