"""Upload storage port - temporary files for uploaded documents."""

from pathlib import Path
from typing import Protocol


class UploadStorage(Protocol):
    """Port for holding an uploaded file for the duration of one run."""

    async def save(self, data: bytes, filename: str) -> Path: ...

    async def read(self, path: Path) -> bytes: ...

    async def cleanup(self, path: Path) -> None:
        """Delete the file. Never raises."""
        ...
