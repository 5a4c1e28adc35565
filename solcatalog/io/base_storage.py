import abc
from pathlib import Path


class BaseStorage(abc.ABC):
    @property
    @abc.abstractmethod
    def root_path(self) -> Path:
        pass

    @abc.abstractmethod
    def exists(self, name: str) -> bool:
        pass

    @abc.abstractmethod
    def read_text(self, name: str) -> str:
        pass

    @abc.abstractmethod
    def write_text(self, text: str, name: str, override: bool = False):
        pass
