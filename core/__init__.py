"""
core: 共用核心

統一匯出例外體系，方便外部 import。

用法：
    from core import ScaffoldError, TemplateError, VersionControlError
"""

from core.exceptions import (
    ConfigError,
    ConfigValidationError,
    FileWriteError,
    GitCommandError,
    GitNotFoundError,
    InvalidModuleError,
    ScaffoldError,
    ScheduleError,
    TemplateError,
    UnknownArtifactKindError,
    VersionControlError,
)

__all__ = [
    "ScaffoldError",
    "TemplateError",
    "UnknownArtifactKindError",
    "InvalidModuleError",
    "FileWriteError",
    "VersionControlError",
    "GitNotFoundError",
    "GitCommandError",
    "ScheduleError",
    "ConfigError",
    "ConfigValidationError",
]
