"""Unit tests for DiskUploadStorage."""

from pathlib import Path

import pytest

from pdfingest.infrastructure.uploads.disk_upload_storage import (
    DiskUploadStorage,
    sanitize_filename,
)


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    def test_removes_path_components(self) -> None:
        assert sanitize_filename("../../etc/passwd") == "passwd"
        assert sanitize_filename("C:\\docs\\report.pdf") == "report.pdf"

    def test_replaces_special_characters(self) -> None:
        assert sanitize_filename("my report (final).pdf") == "my_report__final_.pdf"
        assert sanitize_filename("Документ.pdf") == "________.pdf"

    def test_limits_length(self) -> None:
        assert len(sanitize_filename("a" * 400 + ".pdf")) == 255


@pytest.mark.asyncio
async def test_save_writes_unique_files(upload_storage: DiskUploadStorage) -> None:
    first = await upload_storage.save(b"%PDF-1", "report.pdf")
    second = await upload_storage.save(b"%PDF-2", "report.pdf")
    assert first != second
    assert first.parent == upload_storage.upload_dir
    assert first.name.startswith("report-") and first.suffix == ".pdf"
    assert await upload_storage.read(first) == b"%PDF-1"
    assert await upload_storage.read(second) == b"%PDF-2"


@pytest.mark.asyncio
async def test_save_sanitizes_name(upload_storage: DiskUploadStorage) -> None:
    path = await upload_storage.save(b"x", "../secret dir/evil name.pdf")
    assert path.parent == upload_storage.upload_dir
    assert path.name.startswith("evil_name-")


@pytest.mark.asyncio
async def test_cleanup_deletes_file(upload_storage: DiskUploadStorage) -> None:
    path = await upload_storage.save(b"x", "a.pdf")
    await upload_storage.cleanup(path)
    assert not path.exists()


@pytest.mark.asyncio
async def test_cleanup_missing_file_does_not_raise(
    upload_storage: DiskUploadStorage, tmp_path: Path
) -> None:
    await upload_storage.cleanup(tmp_path / "never-written.pdf")
