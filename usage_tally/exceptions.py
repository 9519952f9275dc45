"""
Custom exception hierarchy for usage_tally.
Provides structured errors for configuration and log file access problems.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"


class UsageTallyError(Exception):
    """Base exception for all usage_tally errors."""

    def __init__(self, message: str, details: str = "") -> None:
        self.message = message
        self.details = details
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(UsageTallyError):
    """Raised when a configuration value is missing or invalid."""

    def __init__(self, message: str, config_key: str = "") -> None:
        self.config_key = config_key
        details = f"Configuration key: {config_key}" if config_key else ""
        super().__init__(message, details)


class FileOperationError(UsageTallyError):
    """Raised when a log file or directory cannot be accessed."""

    def __init__(self, message: str, file_path: str = "", operation: str = "") -> None:
        self.file_path = file_path
        self.operation = operation
        parts = []
        if operation:
            parts.append(f"Operation: {operation}")
        if file_path:
            parts.append(f"File: {file_path}")
        super().__init__(message, "; ".join(parts))
