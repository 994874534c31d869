# /attenote/routers/notes_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..db.database import get_db
from ..models import delete_model
from ..models.repository_result import RepositoryError
from ..services import delete_service
from ..services.media_cleaner import MediaFileCleaner, get_media_cleaner

router = APIRouter()

# --- NOTE MEDIA SUB-RESOURCE ENDPOINTS (/api/notes/media/{media_id}) ---

@router.delete(
    "/media/{media_id}",
    response_model=delete_model.PermanentMediaDeleteResult,
    summary="Permanently Delete a Note Attachment",
    responses={404: {"description": "Media not found"}}
)
def delete_note_media(
    media_id: int,
    db: Session = Depends(get_db),
    cleaner: MediaFileCleaner = Depends(get_media_cleaner)
):
    result = delete_service.delete_note_media_permanently(db=db, media_id=media_id, cleaner=cleaner)
    if isinstance(result, RepositoryError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the media."
        )
    if not result.data.media_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Media with ID {media_id} not found")
    return result.data

# --- INDIVIDUAL NOTE RESOURCE ENDPOINTS (/api/notes/{note_id}) ---

@router.delete(
    "/{note_id}",
    response_model=delete_model.PermanentNoteDeleteResult,
    summary="Permanently Delete a Note",
    responses={404: {"description": "Note not found"}}
)
def delete_note(
    note_id: int,
    db: Session = Depends(get_db),
    cleaner: MediaFileCleaner = Depends(get_media_cleaner)
):
    result = delete_service.delete_note_permanently(db=db, note_id=note_id, cleaner=cleaner)
    if isinstance(result, RepositoryError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the note."
        )
    if not result.data.note_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Note with ID {note_id} not found")
    return result.data
