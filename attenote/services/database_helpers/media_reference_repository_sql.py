# /attenote/services/database_helpers/media_reference_repository_sql.py

"""
Read-side queries over the `note_media` table that decide whether a media
file is still in use.

Reference counts are global: every NoteMedia row counts, regardless of which
note or class owns it. Paths are compared as exact strings with no
normalization. Storage errors propagate to the caller; a failed query never
turns into a count of zero.
"""

from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from attenote.db.models.note_models import NoteMedia


class MediaReferenceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def count_references(self, file_path: str) -> int:
        """Counts the persisted NoteMedia rows whose `file_path` equals `file_path`."""
        return (
            self.db.query(func.count(NoteMedia.id))
            .filter(NoteMedia.file_path == file_path)
            .scalar()
        ) or 0

    def get_all_file_paths(self) -> List[str]:
        """Returns every distinct media path currently referenced by a NoteMedia row."""
        rows = self.db.query(NoteMedia.file_path).distinct().all()
        return [row.file_path for row in rows]
