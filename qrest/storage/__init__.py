from .allocator import IdAllocator
from .database import Database
from .guard import ReadWriteLock
from .record_store import RecordStore
from .scheduler import FlushScheduler, install_signal_handlers

__all__ = [
    "Database",
    "FlushScheduler",
    "IdAllocator",
    "ReadWriteLock",
    "RecordStore",
    "install_signal_handlers",
]
