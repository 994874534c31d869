# /attenote/db/models/note_models.py

"""
This module defines the SQLAlchemy ORM models for `Note` and `NoteMedia`.

A NoteMedia row names a file in persistent storage through `file_path`.
Several rows may cite the same path (shared attachments), so a row never
owns its file: the file lives for as long as at least one row references it.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Note(Base):
    id = Column(Integer, primary_key=True, index=True)
    # Notes may exist outside of any class (general daily notes).
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False, default="")
    date = Column(Date, nullable=False, index=True)
    updated_at = Column(Date, server_default=func.current_date())

    class_ = relationship("Class", viewonly=True)
    media = relationship("NoteMedia", viewonly=True)


class NoteMedia(Base):
    __tablename__ = "note_media"

    id = Column(Integer, primary_key=True, index=True)
    note_id = Column(Integer, ForeignKey("notes.id", ondelete="CASCADE"), nullable=False, index=True)
    # Either an absolute path or a path relative to the media root.
    file_path = Column(String, nullable=False, index=True)
    mime_type = Column(String, nullable=False, default="application/octet-stream")
    added_at = Column(Date, server_default=func.current_date())

    note = relationship("Note", viewonly=True)
