from pathlib import Path

from .base_storage import BaseStorage


class FsStorage(BaseStorage):
    """Stores catalog text as files under a root folder."""

    def __init__(self, root_path: Path, suffix: str = ".txt"):
        self._root_path = Path(root_path)
        self._suffix = suffix

    @property
    def root_path(self) -> Path:
        return self._root_path

    def _get_path(self, name: str) -> Path:
        return (self._root_path / name).with_suffix(self._suffix)

    def exists(self, name: str) -> bool:
        return self._get_path(name).exists()

    def read_text(self, name: str) -> str:
        data_path = self._get_path(name)
        if not data_path.exists():
            raise ValueError(f"File {name} does not exist in {self._root_path}.")

        with open(data_path, "r", encoding="utf-8") as f:
            return f.read()

    def write_text(self, text: str, name: str, override: bool = False):
        data_path = self._get_path(name)
        if data_path.exists() and not override:
            raise ValueError(f"File {name} already exists in {self._root_path}. Use override=True to overwrite.")

        data_path.parent.mkdir(parents=True, exist_ok=True)
        with open(data_path, "w", encoding="utf-8") as f:
            f.write(text)
