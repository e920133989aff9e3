"""Upload storage on local disk."""

import asyncio
import re
import time
from pathlib import Path
from uuid import uuid4

import structlog

logger = structlog.get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")
_MAX_FILENAME_LENGTH = 255


def sanitize_filename(filename: str) -> str:
    """Drop path components, replace unsafe characters, cap the length."""
    name = re.sub(r"^.*[\\/]", "", filename)
    return _UNSAFE_CHARS.sub("_", name)[:_MAX_FILENAME_LENGTH]


class DiskUploadStorage:
    """Keeps each upload in its own uniquely named file under upload_dir."""

    def __init__(self, upload_dir: Path | str) -> None:
        self._upload_dir = Path(upload_dir)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def _unique_path(self, filename: str) -> Path:
        p = Path(sanitize_filename(filename) or "upload")
        suffix = f"{int(time.time() * 1000)}-{uuid4().hex[:12]}"
        return self._upload_dir / f"{p.stem}-{suffix}{p.suffix}"

    async def save(self, data: bytes, filename: str) -> Path:
        """Write upload bytes to a new file and return its path."""
        path = self._unique_path(filename)

        def _write() -> None:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)

        await asyncio.to_thread(_write)
        logger.debug("upload_saved", path=str(path), size=len(data))
        return path

    async def read(self, path: Path) -> bytes:
        return await asyncio.to_thread(path.read_bytes)

    async def cleanup(self, path: Path) -> None:
        """Delete the file; failures are logged, never raised."""
        try:
            await asyncio.to_thread(path.unlink)
        except OSError as e:
            logger.warning("upload_cleanup_failed", path=str(path), error=str(e))
