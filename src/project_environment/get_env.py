from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Final, Mapping
from .errors import EnvironmentUndeterminedError

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT_VARIABLE: Final = "PROJECT_ENVIRONMENT"
DEFAULT_ENVIRONMENT_FILENAME: Final = ".environment"

def read_environment_file(path: Path) -> str | None:
    """
    Read the environment name stored in `path`.
    Read with universal newlines, so CRLF arrives as LF. One trailing line
    terminator is dropped, the rest is returned verbatim.
    A missing or blank file gives None.
    """
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return None
    if not text.strip():
        return None
    if text.endswith("\n"):
        return text[:-1]
    return text

def resolve_environment(
    root: Path,
    file_name: str = DEFAULT_ENVIRONMENT_FILENAME,
    env_var_name: str = DEFAULT_ENVIRONMENT_VARIABLE,
    default: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> str:
    """
    Determine the environment name, first match wins:
      1. the `env_var_name` process variable, when set and non-empty
      2. the `file_name` file directly inside `root`
      3. `default`
    """
    environ = os.environ if environ is None else environ

    value = environ.get(env_var_name)
    if value:
        logger.debug("environment %r taken from $%s", value, env_var_name)
        return value

    env_path = Path(root) / file_name
    value = read_environment_file(env_path)
    if value is not None:
        logger.debug("environment %r read from %s", value, env_path)
        return value
    if env_path.exists():
        logger.debug("environment file %s is blank, ignoring it", env_path)

    if default is not None:
        logger.debug("environment %r taken from the default", default)
        return default

    raise EnvironmentUndeterminedError(
        f"Cannot find environment file at {env_path} "
        f"and no default environment is set.")

__all__ = [
    "DEFAULT_ENVIRONMENT_VARIABLE", "DEFAULT_ENVIRONMENT_FILENAME",
    "read_environment_file", "resolve_environment"]
