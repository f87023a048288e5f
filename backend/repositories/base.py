"""Store interface and errors shared by persistence implementations."""

from pathlib import Path
from typing import Protocol, runtime_checkable


class StoreError(Exception):
    """Base class for persistence failures that are not plain I/O errors."""


class StoreParseError(StoreError):
    """The backing file exists and is readable but does not hold a JSON array."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot parse {self.path}: {reason}")


@runtime_checkable
class StoreProtocol(Protocol):
    """What the API layer needs from a record collection store."""

    @property
    def path(self) -> Path:
        ...

    def load(self) -> list[dict]:
        ...

    def save(self, collection: list[dict]) -> None:
        ...
