# /attenote/services/media_cleaner.py

"""
Deletes note media files from persistent storage.

The cleaner is always invoked after the database transaction that dropped
the referencing rows has committed, so it reports every outcome as a
`MediaCleanupResult` instead of raising: a file system problem here must
never be mistaken for a data-layer failure by the caller.
"""

import logging
import os
from pathlib import Path
from typing import Protocol, Union

from fastapi import Depends

from ..models.delete_model import MediaCleanupResult, MediaCleanupStatus

logger = logging.getLogger(__name__)

# Root directory that relative `NoteMedia.file_path` values are resolved against.
NOTE_MEDIA_DIR = os.getenv("NOTE_MEDIA_DIR", "attenote/data/note_media")


def resolve_media_path(file_path: str, media_root: Union[str, Path]) -> Path:
    """
    Absolute paths are used verbatim; relative paths are joined onto the
    media root (which is itself made absolute).
    """
    explicit_path = Path(file_path)
    if explicit_path.is_absolute():
        return explicit_path
    return Path(media_root).absolute() / explicit_path


class MediaFileCleaner(Protocol):
    def delete(self, file_path: str) -> MediaCleanupResult:
        ...


class LocalMediaFileCleaner:
    """Removes media files from the local disk under `media_root`."""

    def __init__(self, media_root: Union[str, Path] = NOTE_MEDIA_DIR):
        self.media_root = Path(media_root)

    def delete(self, file_path: str) -> MediaCleanupResult:
        normalized_path = file_path.strip()
        if not normalized_path:
            return MediaCleanupResult(file_path=file_path, status=MediaCleanupStatus.MISSING)

        try:
            resolved_path = resolve_media_path(normalized_path, self.media_root)
            if not resolved_path.exists():
                return MediaCleanupResult(file_path=normalized_path, status=MediaCleanupStatus.MISSING)

            try:
                resolved_path.unlink()
            except FileNotFoundError:
                # Removed by someone else between the existence check and the unlink.
                pass

            if not resolved_path.exists():
                logger.debug("Deleted media file %s", resolved_path)
                return MediaCleanupResult(file_path=normalized_path, status=MediaCleanupStatus.DELETED)

            return MediaCleanupResult(
                file_path=normalized_path,
                status=MediaCleanupStatus.FAILED,
                error_message="Failed to delete media file",
            )
        except Exception as e:
            return MediaCleanupResult(
                file_path=normalized_path,
                status=MediaCleanupStatus.FAILED,
                error_message=str(e) or type(e).__name__,
            )


def get_media_root() -> str:
    """FastAPI dependency that provides the configured media root directory."""
    return NOTE_MEDIA_DIR


def get_media_cleaner(media_root: str = Depends(get_media_root)) -> MediaFileCleaner:
    """FastAPI dependency that provides the cleaner for the configured media root."""
    return LocalMediaFileCleaner(media_root)
