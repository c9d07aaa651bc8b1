"""Sawmill configuration.

SawmillConfig is the central configuration object, frozen after creation.
It is passed explicitly to ``new_event``, ``Filter.from_config`` and
``Logger``; there is no process-wide mutable setting.
"""

from dataclasses import dataclass, field
from pathlib import Path

from sawmill.event.levels import Level


def _package_root() -> Path:
    """Directory holding the installed ``sawmill`` package."""
    return Path(__file__).resolve().parent


@dataclass(frozen=True, slots=True)
class SawmillConfig:
    """Configuration for event construction and filtering.

    Attributes:
        repo_path: Library source tree. Captured stacks skip every leading
            frame whose file lies under this directory. Always resolved to an
            absolute path on construction.
        stack_max_depth: Maximum number of frames recorded per event.
        flatten_max_depth: Nesting depth past which field values are
            stringified instead of walked.
        level_min: Inclusive lower level bound applied by ``Filter.from_config``.
        level_max: Inclusive upper level bound applied by ``Filter.from_config``.
        dedup: Enable duplicate suppression in ``Filter.from_config``.
        stack_min_level: ``Logger`` captures a stack for events at or above
            this level (``None`` disables capture).

    """

    repo_path: Path = field(default_factory=_package_root)
    stack_max_depth: int = 100
    flatten_max_depth: int = 32
    level_min: Level | None = None
    level_max: Level | None = None
    dedup: bool = False
    stack_min_level: Level | None = None

    def __post_init__(self) -> None:
        # Frame filenames are compared with Path.is_relative_to(), so the
        # root has to be absolute and free of symlinks.
        object.__setattr__(self, "repo_path", Path(self.repo_path).resolve())
        if self.stack_max_depth < 0:
            msg = f"stack_max_depth must be >= 0, got {self.stack_max_depth}"
            raise ValueError(msg)
        if self.flatten_max_depth < 1:
            msg = f"flatten_max_depth must be >= 1, got {self.flatten_max_depth}"
            raise ValueError(msg)


DEFAULT_CONFIG = SawmillConfig()
