"""
Common password blacklist.

Loads a newline-delimited corpus of weak passwords once per process and
answers case-insensitive membership queries.
"""

from .store import (
    BlacklistStore,
    StoreState,
    get_blacklist,
    get_blacklist_path,
    get_store,
    initialize_blacklist,
    initialize_blacklist_async,
    is_blacklisted,
    reset_blacklist_for_testing,
)

__all__ = [
    "BlacklistStore",
    "StoreState",
    "get_blacklist",
    "get_blacklist_path",
    "get_store",
    "initialize_blacklist",
    "initialize_blacklist_async",
    "is_blacklisted",
    "reset_blacklist_for_testing",
]
