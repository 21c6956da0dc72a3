"""
Common password blacklist storage.

The blacklist is loaded once per process and published as an immutable
``frozenset``. Initialization is serialized by a lock; lookups read the
published set without locking.
"""

import asyncio
import logging
import threading
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional, Union

from ..config import get_config
from ..errors import (
    BlacklistAlreadyInitializedError,
    BlacklistEmptyError,
    BlacklistNotFoundError,
    BlacklistNotInitializedError,
    BlacklistReadError,
    EvaluationCancelled,
)
from ..models import CancellationToken

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class StoreState(str, Enum):
    """Initialization state of the blacklist store."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def get_blacklist_path() -> Path:
    """
    Get the blacklist file path.

    Priority order:
    1. PWD_BLACKLIST_PATH environment variable
    2. Default fallback (./assets/blacklist.txt)

    Returns:
        Path: The configured blacklist location
    """
    return Path(get_config().blacklist_path)


def load_entries(path: Path) -> FrozenSet[str]:
    """
    Read and normalize a blacklist file.

    Lines are stripped and lower-cased; empty lines are skipped.

    Args:
        path: Blacklist file

    Returns:
        Normalized entries
    """
    if not path.exists():
        raise BlacklistNotFoundError(path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BlacklistReadError(path, str(e)) from e

    entries = frozenset(
        line.strip().lower() for line in content.split("\n") if line.strip()
    )
    if not entries:
        raise BlacklistEmptyError(path)

    return entries


class BlacklistStore:
    """
    Write-once, read-many set of common passwords.

    Usage:
        store = BlacklistStore()
        store.initialize("/etc/myapp/blacklist.txt")
        store.contains("Password")  # True
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Optional[FrozenSet[str]] = None
        self._source: Optional[Path] = None
        self._state = StoreState.UNINITIALIZED

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def source(self) -> Optional[Path]:
        """Resolved path the blacklist was loaded from."""
        return self._source

    def is_ready(self) -> bool:
        return self._entries is not None

    def __len__(self) -> int:
        entries = self._entries
        return len(entries) if entries is not None else 0

    def initialize(
        self,
        source_path: Optional[PathLike] = None,
        token: Optional[CancellationToken] = None,
    ) -> int:
        """
        Load the blacklist if it is not loaded yet.

        Calling again with the same source is a no-op.

        Args:
            source_path: Blacklist file. Defaults to the configured path.
            token: Cancellation token checked before publishing.

        Returns:
            Number of distinct entries in the blacklist

        Raises:
            BlacklistNotFoundError: The file does not exist
            BlacklistReadError: The file could not be read
            BlacklistEmptyError: The file has no entries
            BlacklistAlreadyInitializedError: Already loaded from another file
            EvaluationCancelled: The token fired before the set was published
        """
        path = Path(source_path) if source_path is not None else get_blacklist_path()
        resolved = path.resolve()

        with self._lock:
            if self._entries is not None:
                if resolved != self._source:
                    raise BlacklistAlreadyInitializedError(self._source, resolved)
                return len(self._entries)

            if token is not None and token.is_cancelled():
                raise EvaluationCancelled("Blacklist initialization cancelled")

            self._state = StoreState.LOADING
            try:
                entries = load_entries(path)
            except Exception as e:
                self._state = StoreState.FAILED
                logger.error(f"Blacklist initialization failed: {e}")
                raise

            if token is not None and token.is_cancelled():
                self._state = StoreState.UNINITIALIZED
                logger.warning(f"Blacklist initialization from {path} cancelled")
                raise EvaluationCancelled("Blacklist initialization cancelled")

            self._source = resolved
            self._entries = entries
            self._state = StoreState.READY

        logger.info(f"Blacklist initialized: {len(entries)} passwords from {path}")
        return len(entries)

    async def initialize_async(
        self,
        source_path: Optional[PathLike] = None,
        token: Optional[CancellationToken] = None,
    ) -> int:
        """
        Load the blacklist in a worker thread.

        The worker gets its own token linked to ``token``. If the awaiting
        task is cancelled, only that linked token is tripped, so the worker
        discards what it read and the store stays uninitialized while the
        caller's token is left alone.
        """
        worker_token = CancellationToken(parent=token)

        try:
            return await asyncio.to_thread(self.initialize, source_path, worker_token)
        except asyncio.CancelledError:
            worker_token.cancel()
            raise

    def contains(self, candidate: str) -> bool:
        """
        Check whether a password is in the blacklist (case-insensitive).

        Raises:
            BlacklistNotInitializedError: The blacklist was never loaded
        """
        entries = self._entries
        if entries is None:
            raise BlacklistNotInitializedError()
        return candidate.lower() in entries

    def entries(self) -> FrozenSet[str]:
        """Return the loaded entries."""
        entries = self._entries
        if entries is None:
            raise BlacklistNotInitializedError()
        return entries

    def reset(self) -> None:
        """Drop the loaded blacklist. Only meant for tests."""
        with self._lock:
            self._entries = None
            self._source = None
            self._state = StoreState.UNINITIALIZED


# Process-wide store
_store = BlacklistStore()


def get_store() -> BlacklistStore:
    """Get the process-wide blacklist store."""
    return _store


def initialize_blacklist(source_path: Optional[PathLike] = None) -> int:
    """
    Initialize the process-wide blacklist. Call once at startup.

    Args:
        source_path: Blacklist file. Defaults to PWD_BLACKLIST_PATH or
            ./assets/blacklist.txt.

    Returns:
        Number of distinct entries loaded
    """
    return _store.initialize(source_path)


async def initialize_blacklist_async(
    source_path: Optional[PathLike] = None,
    token: Optional[CancellationToken] = None,
) -> int:
    """Async variant of initialize_blacklist()."""
    return await _store.initialize_async(source_path, token)


def is_blacklisted(password: str) -> bool:
    """Check a password against the process-wide blacklist."""
    return _store.contains(password)


def get_blacklist() -> FrozenSet[str]:
    """Return the process-wide blacklist entries."""
    return _store.entries()


def reset_blacklist_for_testing() -> None:
    """Reset the process-wide blacklist."""
    _store.reset()
