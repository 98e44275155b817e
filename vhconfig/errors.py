from __future__ import annotations


class VhConfigError(Exception):
    """Error shown to the user before the process ends."""

    exit_code = 1

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class MissingRootError(VhConfigError):
    """The web-server configuration root does not exist."""


class UsageError(VhConfigError):
    exit_code = 2


class ValidationError(VhConfigError):
    """The working directory does not look like a project."""


class ConflictError(VhConfigError):
    """A config file for the project already exists."""


class PromptError(VhConfigError):
    """The interactive picker was cancelled or could not run."""

    exit_code = 0


class SettingsError(VhConfigError):
    """The settings file could not be read."""
