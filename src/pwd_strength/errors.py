"""
Exceptions raised by the password strength engine.

None of these ever carry the evaluated password.
"""

from pathlib import Path
from typing import Optional


class PasswordStrengthError(Exception):
    """Base class for all password strength errors."""
    pass


class BlacklistError(PasswordStrengthError):
    """Base class for blacklist loading and lookup failures."""
    pass


class BlacklistNotFoundError(BlacklistError):
    """Raised when the configured blacklist file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Blacklist file not found: {path}")


class BlacklistReadError(BlacklistError):
    """Raised when the blacklist file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to read blacklist file {path}: {reason}")


class BlacklistEmptyError(BlacklistError):
    """Raised when the blacklist file contains no entries."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Blacklist file is empty: {path}")


class BlacklistAlreadyInitializedError(BlacklistError):
    """Raised when initialization is requested from a different source."""

    def __init__(self, current: Optional[Path], requested: Path):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Blacklist already initialized from {current}, refusing to load {requested}"
        )


class BlacklistNotInitializedError(BlacklistError):
    """Raised when the blacklist is queried before a successful initialization."""

    def __init__(self) -> None:
        super().__init__(
            "Blacklist is not initialized; call initialize_blacklist() at startup"
        )


class EvaluationCancelled(PasswordStrengthError):
    """Raised when an evaluation is cancelled before scoring starts."""
    pass
