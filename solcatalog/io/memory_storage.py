from pathlib import Path

from .base_storage import BaseStorage


class MemoryStorage(BaseStorage):
    """
    Keeps catalog text in a process-wide dictionary.

    The dictionary is shared by all instances; each instance namespaces its keys with its own name.
    """

    _memory: dict[Path, str] = {}

    def __init__(self, name: str = "default"):
        self._mem_key = Path(f"/memory/{name}")

    @classmethod
    def clear(cls):
        cls._memory.clear()

    @property
    def root_path(self) -> Path:
        return self._mem_key

    def _get_prefixed_key(self, name: str) -> Path:
        """Create a key with instance name prefix"""
        return (self._mem_key / name).with_suffix(".txt")

    def exists(self, name: str) -> bool:
        return self._get_prefixed_key(name) in self._memory

    def read_text(self, name: str) -> str:
        key = self._get_prefixed_key(name)
        if key not in self._memory:
            raise ValueError(f"Data with key '{key}' does not exist.")
        return self._memory[key]

    def write_text(self, text: str, name: str, override: bool = False):
        key = self._get_prefixed_key(name)
        if key in self._memory and not override:
            raise ValueError(f"Data with key '{key}' already exists. Use override=True to overwrite.")
        self._memory[key] = text
