"""
The consumer-facing descriptor.

Define one subclass for your application, somewhere inside the project tree:

    .
    |-- .environment        (contains e.g. "develop")
    |-- pyproject.toml
    |-- src/myapp/environment.py

    class MyAppEnvironment(ProjectEnvironment):
        default_environment: str | None = "development"

and ask for the shared instance wherever the environment matters:

    if MyAppEnvironment.instance() == "production":
        ...

The project root is found by walking up from the file that defines the
subclass, which is why ProjectEnvironment itself cannot be instantiated.
"""
from __future__ import annotations
import logging
import sys
import threading
from functools import cached_property
from pathlib import Path
from typing import Any, ClassVar
from pydantic import BaseModel, ConfigDict, Field
from .errors import MustSubclassError
from .get_env import (
    DEFAULT_ENVIRONMENT_FILENAME, DEFAULT_ENVIRONMENT_VARIABLE, resolve_environment)
from .get_root import DEFAULT_ROOT_FILES, locate_root
from .settings import get_settings

logger = logging.getLogger(__name__)

_instances: dict[type, "ProjectEnvironment"] = {}
_instances_lock = threading.RLock()


class ProjectEnvironment(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment_filename: str = DEFAULT_ENVIRONMENT_FILENAME
    environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE
    default_environment: str | None = None
    extra_root_files: tuple[str, ...] = ()   # checked before DEFAULT_ROOT_FILES
    start_dir: Path | None = None
    root_dir: Path | None = None

    default_root_files: ClassVar[tuple[str, ...]] = DEFAULT_ROOT_FILES

    def __init__(self, **data: Any) -> None:
        self._require_subclass()
        super().__init__(**data)

    def _require_subclass(self) -> None:
        if type(self) is ProjectEnvironment:
            raise MustSubclassError(
                "ProjectEnvironment must be subclassed, the project root is "
                "located from the module that defines the subclass.")

    # --- flyweight ---

    @classmethod
    def instance(cls, **data: Any) -> "ProjectEnvironment":
        """
        Shared instance for `cls`. The first call constructs it with `data`;
        later calls return the same object and ignore their arguments.
        """
        with _instances_lock:
            obj = _instances.get(cls)
            if obj is None:
                obj = cls(**data)
                _instances[cls] = obj
            return obj

    @classmethod
    def clear_instances(cls) -> None:
        """Forget every shared instance, for all subclasses."""
        with _instances_lock:
            _instances.clear()

    # --- root ---

    @cached_property
    def project_root_files(self) -> tuple[str, ...]:
        return (*self.extra_root_files, *self.default_root_files)

    @cached_property
    def project_root(self) -> Path:
        self._require_subclass()
        if self.root_dir is not None:
            return Path(self.root_dir).resolve()
        configured = get_settings().root
        if configured is not None:
            return Path(configured).resolve()
        return locate_root(self._start_dir(), self.project_root_files)

    def _start_dir(self) -> Path:
        if self.start_dir is not None:
            return Path(self.start_dir)
        module = sys.modules.get(type(self).__module__)
        filename = getattr(module, "__file__", None)
        if not filename:
            logger.debug("%s has no source file, starting from cwd", type(self).__name__)
            return Path.cwd()
        return Path(filename).resolve().parent

    # --- environment ---

    @cached_property
    def environment_path(self) -> Path:
        return self.project_root / self.environment_filename

    @property
    def has_default_environment(self) -> bool:
        return self.default_environment is not None

    @cached_property
    def project_environment(self) -> str:
        """
        Resolved once per instance: $environment_variable, then the
        environment file in project_root, then default_environment.
        """
        return resolve_environment(
            self.project_root,
            self.environment_filename,
            self.environment_variable,
            self.default_environment,
        )

    @property
    def environment(self) -> str:
        return self.project_environment

    @property
    def env(self) -> str:
        return self.project_environment

    def __str__(self) -> str:
        return self.project_environment

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.project_environment == other
        if isinstance(other, ProjectEnvironment):
            return (type(self) is type(other)
                    and self.project_environment == other.project_environment)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.project_environment)


__all__ = ["ProjectEnvironment"]
