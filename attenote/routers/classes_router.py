# /attenote/routers/classes_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..db.database import get_db
from ..models import delete_model
from ..models.repository_result import RepositoryError
from ..services import delete_service
from ..services.media_cleaner import MediaFileCleaner, get_media_cleaner

router = APIRouter()

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.delete(
    "/{class_id}",
    response_model=delete_model.ClassCascadeDeleteResult,
    summary="Permanently Delete a Class",
    description="Deletes the class with its schedules, attendance, notes and unreferenced note media files.",
    responses={404: {"description": "Class not found"}}
)
def delete_class(
    class_id: int,
    db: Session = Depends(get_db),
    cleaner: MediaFileCleaner = Depends(get_media_cleaner)
):
    result = delete_service.delete_class_permanently(db=db, class_id=class_id, cleaner=cleaner)
    if isinstance(result, RepositoryError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the class."
        )
    if not result.data.class_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return result.data
