from .base_storage import BaseStorage
from .fs_storage import FsStorage
from .memory_storage import MemoryStorage

__all__ = [
    "BaseStorage",
    "FsStorage",
    "MemoryStorage",
]
