from __future__ import annotations


class ProjectEnvironmentError(Exception):
    """Base class for everything raised by project_environment."""


class MustSubclassError(ProjectEnvironmentError, TypeError):
    """ProjectEnvironment was used directly instead of through a subclass."""


class RootNotFoundError(ProjectEnvironmentError, FileNotFoundError):
    """No marker file was found walking up to the filesystem root."""


class EnvironmentUndeterminedError(ProjectEnvironmentError, LookupError):
    """Neither the variable, the environment file nor a default gave a value."""


__all__ = [
    "ProjectEnvironmentError", "MustSubclassError",
    "RootNotFoundError", "EnvironmentUndeterminedError"]
