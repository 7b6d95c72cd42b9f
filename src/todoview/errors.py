"""Custom exception hierarchy for todoview."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class UsageError(ValueError, AppError):
    """Unrecognized view options or malformed command lines."""


class ConfigError(ValueError, AppError):
    """Environment/flag configuration errors."""


class SourceFileError(AppError):
    """Todo file missing or unreadable."""


class DateParseError(ValueError, AppError):
    """Malformed date tags or date calculations out of range."""


class HookError(AppError):
    """External sort/filter hook failures."""


class EditorError(AppError):
    """Editor launch failures."""
